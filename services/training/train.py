"""Training job for the player suitability classifier.

Retrains the classifier on every record in `player_performance` (the same
procedure the API runs after each write) and writes the artifacts to
ARTIFACT_DIR:
    - `<MODEL_NAME>.joblib`: the fitted scikit-learn estimator
    - `<MODEL_NAME>.json`: metadata (feature columns, row and label counts,
      training accuracy, generation)

Environment variables:
    DATABASE_URL: SQLAlchemy connection string
    CLASSIFIER_KIND: "logistic" or "mlp"
    MODEL_NAME: Artifact base name (e.g., "suitability_v1")
    ARTIFACT_DIR: Output directory for model files
"""

import json
import logging
import sys

from common.logging import configure_logging
from player_ai import db
from player_ai.classifier import ClassifierTrainer
from player_ai.errors import TrainingError
from player_ai.inference import ClassifierHolder
from player_ai.model_loader import save_artifact
from player_ai.orchestrator import RetrainingOrchestrator
from player_ai.repository import PerformanceRepository
from player_ai.settings import get_settings

logger = logging.getLogger("train")


def main(engine=None) -> int:
    """Train the classifier from the database and write its artifacts.

    Args:
        engine: Optional SQLAlchemy engine; defaults to the one built from DATABASE_URL.

    Returns:
        int: Process exit code (0 = success, 1 = training failed).
    """
    settings = get_settings()
    engine = engine or db.engine
    db.Base.metadata.create_all(bind=engine)

    session = db.SessionLocal(bind=engine)
    try:
        orchestrator = RetrainingOrchestrator(
            PerformanceRepository(session),
            ClassifierHolder(),
            ClassifierTrainer.from_settings(settings),
        )
        try:
            installed = orchestrator.retrain()
        except TrainingError as exc:
            logger.error("training failed: %s", exc)
            return 1
    finally:
        session.close()

    meta = save_artifact(installed, settings.artifact_dir, settings.model_name)
    logger.info("TRAINING COMPLETE")
    logger.info(json.dumps(meta, indent=2))
    return 0


if __name__ == "__main__":
    configure_logging(get_settings().log_level)
    sys.exit(main())
