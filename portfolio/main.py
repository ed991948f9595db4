"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from portfolio.api import router as api_router
from portfolio.core.config import Settings, get_settings
from portfolio.core.env_config import EnvConfigStore
from portfolio.core.handlers import register_exception_handlers
from portfolio.services.uploads import UPLOAD_URL_PREFIX


def _cors_origins(settings: Settings) -> list[str]:
    if settings.APP_ENV == "dev":
        return ["*"]
    return [settings.FRONTEND_URL] if settings.FRONTEND_URL else []


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app; the env-config store is created here and shared through app.state."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Portfolio API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(settings),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    github_token = settings.GITHUB_TOKEN.get_secret_value() if settings.GITHUB_TOKEN else None
    app.state.env_store = EnvConfigStore(settings.ENV_FILE_PATH, github_token=github_token)

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    app.mount(
        UPLOAD_URL_PREFIX,
        StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
        name="uploads",
    )

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Portfolio API"}

    return app


app = create_app()
