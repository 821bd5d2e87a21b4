import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import router as api_router
from core.config import AppSettings
from core.rate_limit import RateLimitMiddleware
from core.seed import seed_storage
from core.storage import MemStorage, Storage

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Root handler on first call; the level follows LOG_LEVEL every time."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger().setLevel(level.upper())


def create_app(settings: Optional[AppSettings] = None, storage: Optional[Storage] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    The store is created (and seeded) here unless one is passed in.
    """
    if settings is None:
        # Load environment variables from project root .env before settings are instantiated
        project_root = Path(__file__).resolve().parent.parent
        load_dotenv(dotenv_path=project_root / ".env")
        settings = AppSettings()

    configure_logging(settings.log_level)

    if storage is None:
        storage = MemStorage()
        if settings.seed_demo_data:
            seed_storage(storage, settings)
        else:
            logger.info("Seeding disabled, starting with an empty store")

    app = FastAPI(title="Academy API", version="0.1.0")
    app.state.settings = settings
    app.state.storage = storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RateLimitMiddleware, settings=settings)

    app.include_router(api_router, prefix="/api")

    @app.get("/")
    def root():
        return {
            "message": "Academy API",
            "version": "0.1.0",
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
