"""FastAPI application factory / entrypoint.

This service exposes HTTP endpoints for:
- creating, listing, updating and deleting player performance records
- predicting player suitability with the trained classifier
- triggering a manual retrain and inspecting the installed model
- ranking, comparison, aggregate stats, threshold filter and trend analytics
- health checks

Operational notes:
- CORS origins come from settings (local Vite development by default).
- The classifier starts untrained; the first record write (or a manual
  retrain) installs a model.
"""

import logging
from contextlib import asynccontextmanager

from common.logging import configure_logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from . import db
from .classifier import ClassifierTrainer
from .inference import ClassifierHolder
from .routes import router
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    engine: Engine | None = None,
    trainer: ClassifierTrainer | None = None,
) -> FastAPI:
    """Build the API application.

    Args:
        settings: Service settings; defaults to `get_settings()`.
        engine: Database engine; defaults to the engine built from `DATABASE_URL`.
        trainer: Classifier trainer; defaults to one configured from settings.

    Returns:
        FastAPI: Application with its own classifier holder and session factory.
    """
    settings = settings or get_settings()
    engine = engine or db.engine

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db.Base.metadata.create_all(bind=engine)
        logger.info("player_performance schema ready (%s)", engine.url.render_as_string(hide_password=True))
        yield

    app = FastAPI(title="Player Performance AI", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.session_factory = sessionmaker(bind=engine)
    app.state.classifier_holder = ClassifierHolder()
    app.state.trainer = trainer or ClassifierTrainer.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.get("/health")
    def health():
        """Health check endpoint.

        Returns:
            dict: `{"status": "ok", "service": "api"}`.
        """
        return {"status": "ok", "service": "api"}

    return app


configure_logging(get_settings().log_level)
app = create_app()
