"""
Main entrypoint for the Church Portal API.

This module assembles the FastAPI application: it sets up logging,
CORS, error handlers, the ``/api`` routes and the static mounts for
uploaded images (and, optionally, the built frontend).  The
``create_app`` function builds the app; a module level ``app`` is
created for ASGI servers, e.g.::

    uvicorn church_portal_api.app.main:app --reload

Services are wired on startup from a single ``Settings`` instance.
Tests pass their own settings, database and HTTP client.
"""

import logging
from pathlib import Path
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings
from .core.db import create_client, get_database, init_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .repositories.event_repository import EventRepository
from .repositories.post_repository import PostRepository
from .repositories.registration_repository import RegistrationRepository
from .services.event_service import EventService
from .services.media_store import MediaStore
from .services.post_service import PostService
from .services.registration_service import RegistrationService
from .services.subscription_service import SubscriptionService


logger = logging.getLogger(__name__)


class SPAStaticFiles(StaticFiles):
    """Serve a built single‑page app, falling back to ``index.html``.

    Client‑side routes such as ``/blog/123`` have no file on disk; they
    get the app shell so the frontend router can take over.
    """

    async def get_response(self, path: str, scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404:
                raise
            return await super().get_response("index.html", scope)


def create_app(
    settings: Optional[Settings] = None,
    database=None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration; read from the environment when omitted.
    database : optional
        A motor (or API compatible) database handle.  When omitted a
        client is created from ``settings.mongodb_uri`` on startup and
        closed on shutdown.
    http_client : Optional[httpx.AsyncClient]
        Client used for Mailchimp calls.  When omitted one is created on
        startup.  Either way it is closed on shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or Settings()
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")

    media = MediaStore(settings.upload_dir, settings.uploads_url_path)
    # The directory is created on startup, so it may not exist yet here.
    app.mount(media.url_path, StaticFiles(directory=str(media.base_dir), check_dir=False), name="uploads")

    if settings.frontend_dist:
        dist = Path(settings.frontend_dist)
        if dist.is_dir():
            app.mount("/", SPAStaticFiles(directory=str(dist), html=True), name="frontend")
        else:
            logger.warning("Frontend directory %s does not exist; not serving it", dist)

    @app.on_event("startup")
    async def startup_event() -> None:
        media.ensure_directory()
        db = database
        if db is None:
            app.state.mongo_client = create_client(settings)
            db = get_database(app.state.mongo_client, settings)
        await init_db(db)

        app.state.database = db
        app.state.media_store = media
        app.state.registration_service = RegistrationService(RegistrationRepository(db))
        app.state.post_service = PostService(PostRepository(db), media, page_size=settings.default_page_size)
        app.state.event_service = EventService(EventRepository(db), media)
        app.state.http_client = http_client or httpx.AsyncClient(timeout=settings.mailchimp_timeout)
        app.state.subscription_service = SubscriptionService(settings, client=app.state.http_client)
        logger.info("%s started; uploads in %s", settings.project_name, media.base_dir)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        client = getattr(app.state, "mongo_client", None)
        if client is not None:
            client.close()
        http = getattr(app.state, "http_client", None)
        if http is not None:
            await http.aclose()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
