from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from envbind.models import LoggingSettings, ServiceSettings
from envbind.routers import health_router, settings_router
from envbind.services import load_settings
from envbind.utils import DotenvConfig, configure_logging, get_logger

TAGS_METADATA = [
    {
        "name": "Health",
        "description": "Liveness endpoints.",
    },
    {
        "name": "Settings",
        "description": "Service settings resolved from the environment and .env file.",
    },
]

DOTENV_PATH = Path(__file__).resolve().parent.parent / ".env"


@asynccontextmanager
async def lifespan(app: FastAPI):
    source = DotenvConfig(DOTENV_PATH)

    log_settings = load_settings(LoggingSettings, source)
    configure_logging(level=log_settings.log_level, fmt=log_settings.log_format, utc=log_settings.utc)
    log = get_logger("envbind.boot")

    settings = load_settings(ServiceSettings, source)
    app.state.config_source = source
    app.state.settings = settings
    log.info("starting app", extra={"service": settings.service_name, "environment": settings.environment})

    yield
    log.info("shutting down app")

app = FastAPI(
    title="envbind",
    description="Binds flat configuration schemas to environment variables and .env files.",
    version="1.0.0",
    license_info={"name": "MIT"},
    openapi_tags=TAGS_METADATA,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(settings_router)


@app.get("/", tags=["Health"], summary="API index")
def index():
    return {
        "name": "envbind",
        "docs": "/docs",
        "health": "/health",
        "settings": "/settings",
        "schema": "/settings/schema",
    }
