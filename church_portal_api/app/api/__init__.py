"""
API package containing the HTTP routes.

``router.py`` aggregates the per‑resource routers from ``endpoints``;
the application mounts it under ``/api``.  ``deps.py`` provides the
FastAPI dependencies that hand the services built at startup to the
route handlers.
"""
