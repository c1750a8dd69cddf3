"""Model-related API routes.

These endpoints expose the manual retrain trigger and the status of the
installed classifier. Retraining runs synchronously inside the request, the
same way it does after every record write.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from ..deps import get_classifier_holder, get_orchestrator
from ..errors import TrainingError
from ..inference import ClassifierHolder
from ..orchestrator import RetrainingOrchestrator
from ..schemas import ModelStatus

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/train", response_class=PlainTextResponse)
def train_model(orchestrator: RetrainingOrchestrator = Depends(get_orchestrator)):
    """Retrain the classifier on every stored record.

    Useful when records were loaded out-of-band (e.g. by the ingestion job).

    Returns:
        PlainTextResponse: 200 with a confirmation, or 500 with
        `Failed to train the model.` if training failed.
    """
    try:
        installed = orchestrator.retrain()
    except TrainingError:
        logger.exception("manual retrain failed")
        return PlainTextResponse(
            "Failed to train the model.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return f"Model training completed successfully ({installed.model.train_rows} records, generation {installed.generation})."


@router.get("/model", response_model=ModelStatus)
def model_status(holder: ClassifierHolder = Depends(get_classifier_holder)):
    """Describe the installed classifier.

    Returns:
        dict: `trained` flag and `generation`; when trained, also the number of
        training rows, label counts, training accuracy and training time.
    """
    installed = holder.snapshot()
    if installed is None:
        return ModelStatus(trained=False, generation=holder.generation)

    meta = installed.model.metadata()
    return ModelStatus(
        trained=True,
        generation=installed.generation,
        train_rows=meta["train_rows"],
        label_counts=meta["label_counts"],
        training_accuracy=meta["training_accuracy"],
        trained_at=installed.model.trained_at,
    )
