"""
Service layer abstraction.

Each service encapsulates the business logic for one resource.
Services are constructed once at application startup with their
repository (and, for resources with pictures, the shared
:class:`~.media_store.MediaStore`), then looked up by the API
handlers through FastAPI dependencies.
"""
