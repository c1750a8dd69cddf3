"""Player performance and analytics API routes.

Responsibilities:
- record CRUD (`""`, `/{record_id}`); every write retrains the classifier
  before the response is returned
- classifier-backed endpoints: `/predict` and `/compare/{id1}/{id2}`
- classifier-independent analytics: `/top/{count}`, `/stats/average`,
  `/filter`, `/trend/{record_id}`
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from fastapi.responses import PlainTextResponse

from .. import analytics
from ..deps import get_classifier_holder, get_orchestrator, get_repository
from ..errors import FeatureValidationError, ModelNotTrainedError, RecordNotFoundError, TrainingError
from ..features import features_from_metrics
from ..inference import ClassifierHolder
from ..orchestrator import RetrainingOrchestrator
from ..repository import PerformanceRepository
from ..schemas import FilterCriteria, PerformanceIn, PerformanceOut

router = APIRouter()

NOT_FOUND_DETAIL = "Player performance not found"


def _retrain_failed(action: str, exc: TrainingError) -> HTTPException:
    """500 for a write that committed but whose retrain failed."""
    target = f"Player performance {exc.record_id}" if exc.record_id is not None else "Player performance"
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{target} was {action} but model retraining failed: {exc}",
    )


def _model_not_trained(exc: ModelNotTrainedError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))


@router.get("", response_model=list[PerformanceOut])
def list_performances(repository: PerformanceRepository = Depends(get_repository)):
    """List every stored performance record in id order."""
    return repository.find_all()


@router.post("", response_model=PerformanceOut)
def create_performance(
    payload: PerformanceIn,
    orchestrator: RetrainingOrchestrator = Depends(get_orchestrator),
):
    """Store a new performance record and retrain the classifier.

    Returns:
        The stored record including its assigned `id`.

    Raises:
        HTTPException: 500 if the record was stored but retraining failed.
    """
    try:
        record = orchestrator.create(payload.model_dump())
    except TrainingError as exc:
        raise _retrain_failed("saved", exc) from exc
    return record


@router.post("/predict")
def predict_player(
    metrics: dict[str, Any] = Body(...),
    holder: ClassifierHolder = Depends(get_classifier_holder),
) -> bool:
    """Predict whether a player with the given metrics is suitable.

    Example body:

        {"average": 50.5, "strikeRate": 140.0, "bowlingAverage": 20.0,
         "economyRate": 4.2, "fieldingStats": 15}

    Raises:
        HTTPException: 422 if a metric is missing or not a number;
            503 if no model has been trained yet.
    """
    try:
        vector = features_from_metrics(metrics)
    except FeatureValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.problems) from exc

    try:
        return analytics.predict_suitability(holder, vector)
    except ModelNotTrainedError as exc:
        raise _model_not_trained(exc) from exc


@router.get("/top/{count}", response_model=list[PerformanceOut])
def top_players(count: int, repository: PerformanceRepository = Depends(get_repository)):
    """Top `count` players by heuristic performance score, best first."""
    return analytics.top_players(repository, count)


@router.get("/compare/{id1}/{id2}", response_class=PlainTextResponse)
def compare_players(
    id1: int,
    id2: int,
    repository: PerformanceRepository = Depends(get_repository),
    holder: ClassifierHolder = Depends(get_classifier_holder),
):
    """Compare two players by predicted suitability; returns a sentence."""
    try:
        result = analytics.compare_players(repository, holder, id1, id2)
    except ModelNotTrainedError as exc:
        raise _model_not_trained(exc) from exc
    return result.message


@router.get("/stats/average")
def average_stats(repository: PerformanceRepository = Depends(get_repository)) -> dict[str, float]:
    """Dataset-wide metric means (empty object when there are no records)."""
    return analytics.average_stats(repository)


@router.post("/filter", response_model=list[PerformanceOut])
def filter_players(
    criteria: FilterCriteria | None = None,
    repository: PerformanceRepository = Depends(get_repository),
):
    """Players meeting every threshold (`minAverage`, `minStrikeRate`, `minFielding`)."""
    criteria = criteria or FilterCriteria()
    return analytics.filter_players(
        repository,
        min_average=criteria.min_average,
        min_strike_rate=criteria.min_strike_rate,
        min_fielding=criteria.min_fielding,
    )


@router.get("/trend/{record_id}")
def performance_trend(record_id: int, repository: PerformanceRepository = Depends(get_repository)) -> dict[str, float]:
    """Three-point synthetic trend; `{"error": -1.0}` for unknown ids."""
    return analytics.performance_trend(repository, record_id)


@router.get("/{record_id}", response_model=PerformanceOut)
def get_performance(record_id: int, repository: PerformanceRepository = Depends(get_repository)):
    record = repository.find_by_id(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)
    return record


@router.put("/{record_id}", response_model=PerformanceOut)
def update_performance(
    record_id: int,
    payload: PerformanceIn,
    orchestrator: RetrainingOrchestrator = Depends(get_orchestrator),
):
    """Replace every metric and the label of a record, then retrain.

    Raises:
        HTTPException: 404 if the record does not exist; 500 if the update was
            stored but retraining failed.
    """
    try:
        return orchestrator.update(record_id, payload.model_dump())
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL) from exc
    except TrainingError as exc:
        raise _retrain_failed("updated", exc) from exc


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_performance(
    record_id: int,
    orchestrator: RetrainingOrchestrator = Depends(get_orchestrator),
):
    """Delete a record, then retrain.

    Raises:
        HTTPException: 404 if the record does not exist; 500 if the delete was
            committed but retraining failed.
    """
    try:
        orchestrator.delete(record_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL) from exc
    except TrainingError as exc:
        raise _retrain_failed("deleted", exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
