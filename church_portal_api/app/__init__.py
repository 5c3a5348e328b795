"""
Application package initializer.

The backend is organised into small layers: ``core`` holds
configuration, logging, errors and database wiring; ``repositories``
persist records in MongoDB; ``services`` implement the record and
image lifecycle for each resource; ``api`` exposes the HTTP routes.
Each resource (registrations, blog posts, events) has its own schema,
repository, service and router module.

The ASGI application is built by :func:`church_portal_api.app.main.create_app`.
"""
