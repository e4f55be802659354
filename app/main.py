# app/main.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.routing import APIRoute
from fastapi.responses import RedirectResponse
from app.core.config import Settings, get_settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import configure_logging
from app.db import build_engine, build_session_factory, create_tables
from app.routers import employees, reactive_employees, system

logger = logging.getLogger("app")

tags_metadata = [
    {"name": "Employee API (blocking)",
     "description": "CRUD operations for managing Employee resources (blocking). "
                    "Demonstrates RESTful design principles with safe (GET) and unsafe (POST, PUT, DELETE) operations."},
    {"name": "Employee API (reactive)",
     "description": "Non-blocking CRUD operations for Employee resources, awaiting the storage layer directly."},
    {"name": "System", "description": "Service health and metadata."},
]

@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables(app.state.engine)
    logger.info("storage_ready", extra={"database": app.state.settings.safe_database_url})
    yield
    await app.state.engine.dispose()

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=settings.APP_DESCRIPTION,
        license_info={"name": "Apache 2.0", "url": "https://www.apache.org/licenses/LICENSE-2.0.html"},
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    # Redirect "/" -> "/docs"
    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/docs")
    for router in (system.router, employees.router, reactive_employees.router):
        app.include_router(router, prefix=settings.API_PREFIX)
        for r in router.routes:
            if isinstance(r, APIRoute):
                logger.debug("route", extra={"path": settings.API_PREFIX + r.path, "methods": sorted(r.methods)})
    register_exception_handlers(app)
    return app

app = create_app()
