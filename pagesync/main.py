from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pagesync.api.health import router as health_router
from pagesync.api.pagination import router as pagination_router
from pagesync.api.root import router as root_router
from pagesync.core.config import Settings, settings as default_settings
from pagesync.core.logger import configure_logging
from pagesync.core.registry import StoreRegistry
from pagesync.db.session import make_engine, make_session_factory


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build an app from ``settings`` (the environment when omitted).

    Each app gets its own store registry and database engine. Logging is
    process-wide: every call reconfigures the root logger and replaces its
    handlers.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    registry = StoreRegistry()
    for resource in settings.RESOURCES:
        registry.get_or_create(resource, settings.page_size_for(resource))

    engine = make_engine(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        yield
        registry.dispose_all()
        engine.dispose()

    app = FastAPI(title="Pagination Sync", lifespan=lifespan)
    app.state.registry = registry
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(pagination_router)

    return app


app = create_app()
