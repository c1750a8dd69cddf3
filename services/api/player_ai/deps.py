"""FastAPI dependencies wiring the core components to a request.

The classifier holder and trainer live on `app.state` (one per application);
the repository and orchestrator are built per request around the
request-scoped session.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .classifier import ClassifierTrainer
from .db import get_db
from .inference import ClassifierHolder
from .orchestrator import RetrainingOrchestrator
from .repository import PerformanceRepository


def get_repository(db: Session = Depends(get_db)) -> PerformanceRepository:
    return PerformanceRepository(db)


def get_classifier_holder(request: Request) -> ClassifierHolder:
    return request.app.state.classifier_holder


def get_trainer(request: Request) -> ClassifierTrainer:
    return request.app.state.trainer


def get_orchestrator(
    repository: PerformanceRepository = Depends(get_repository),
    holder: ClassifierHolder = Depends(get_classifier_holder),
    trainer: ClassifierTrainer = Depends(get_trainer),
) -> RetrainingOrchestrator:
    return RetrainingOrchestrator(repository, holder, trainer)
