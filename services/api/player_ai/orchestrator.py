"""Keeps the installed classifier consistent with the stored dataset.

Every create, update or delete is followed by a full synchronous retrain over
all stored records before the call returns, so any predict/compare issued
after a mutation response reflects that mutation. There is no incremental
update and no deferred job.

Failure policy:
- the write is never rolled back when training fails;
- a failed retrain clears the holder and raises `TrainingError` to the caller,
  for both mutations and manual retrains;
- an implicit retrain over an empty dataset (the last record was deleted)
  clears the holder without raising. A manual retrain over an empty dataset
  raises.
"""

import logging
import time

from .classifier import ClassifierTrainer
from .errors import RecordNotFoundError, TrainingError
from .features import build_features
from .inference import ClassifierHolder, InstalledModel
from .models import PlayerPerformance
from .repository import PerformanceRepository

logger = logging.getLogger(__name__)

RECORD_FIELDS = ("average", "strike_rate", "bowling_average", "economy_rate", "fielding_stats", "label")


class RetrainingOrchestrator:
    def __init__(self, repository: PerformanceRepository, holder: ClassifierHolder, trainer: ClassifierTrainer):
        self.repository = repository
        self.holder = holder
        self.trainer = trainer

    def retrain(self) -> InstalledModel:
        """Manually retrain on the full dataset.

        Raises:
            TrainingError: If the dataset is empty or the classifier fails to fit.
        """
        with self.holder.retraining():
            return self._fit_and_install(self.repository.find_all())

    def create(self, fields: dict) -> PlayerPerformance:
        record = self.repository.save(PlayerPerformance(**_record_fields(fields)))
        logger.info("created player performance %s", record.id)
        self._retrain_after_write(record.id)
        return record

    def update(self, record_id: int, fields: dict) -> PlayerPerformance:
        """Overwrite every metric and the label of an existing record.

        Raises:
            RecordNotFoundError: If `record_id` does not exist. Nothing is retrained.
        """
        record = self.repository.find_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        for name, value in _record_fields(fields).items():
            setattr(record, name, value)
        record = self.repository.save(record)
        logger.info("updated player performance %s", record_id)
        self._retrain_after_write(record_id)
        return record

    def delete(self, record_id: int) -> None:
        """Delete a record.

        Raises:
            RecordNotFoundError: If `record_id` does not exist. Nothing is retrained.
        """
        if not self.repository.exists_by_id(record_id):
            raise RecordNotFoundError(record_id)
        self.repository.delete_by_id(record_id)
        logger.info("deleted player performance %s", record_id)
        self._retrain_after_write(record_id)

    def _retrain_after_write(self, record_id: int) -> None:
        """Retrain after a committed write; an empty dataset just clears the model.

        Raises:
            TrainingError: With `record_id` set to the written record.
        """
        with self.holder.retraining():
            records = self.repository.find_all()
            if not records:
                self.holder.clear()
                logger.info("dataset is empty; classifier cleared")
                return
            try:
                self._fit_and_install(records)
            except TrainingError as exc:
                exc.record_id = record_id
                raise

    def _fit_and_install(self, records: list[PlayerPerformance]) -> InstalledModel:
        # caller holds holder.retraining()
        started = time.perf_counter()
        samples = [(build_features(r), r.label) for r in records]
        try:
            model = self.trainer.fit(samples)
        except TrainingError as exc:
            self.holder.clear()
            logger.warning("retrain failed on %d rows; classifier cleared: %s", len(samples), exc)
            raise

        installed = self.holder.install(model)
        logger.info(
            "retrained classifier on %d rows (generation=%d, %.1f ms)",
            len(samples),
            installed.generation,
            (time.perf_counter() - started) * 1000.0,
        )
        return installed


def _record_fields(fields: dict) -> dict:
    return {name: fields[name] for name in RECORD_FIELDS if name in fields}
