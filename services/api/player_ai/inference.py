"""Ownership of the currently installed classifier.

`ClassifierHolder` is the single owner of classifier state for a process. It
is created once per application (see `main.create_app`) and injected into the
retraining orchestrator and the analytics layer.

Rules:
- readers take a snapshot of the installed model and use only that snapshot,
  so they never observe a model mid-update;
- writers install a fully fitted model by swapping the reference; installed
  models are never mutated in place;
- every install or clear bumps `generation`, so callers can tell which
  retrain a prediction came from.
"""

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone

from .errors import ModelNotTrainedError
from .features import FeatureVector


@dataclass(frozen=True)
class InstalledModel:
    model: object
    generation: int
    installed_at: datetime

    def predict(self, vector: FeatureVector) -> bool:
        return bool(self.model.predict(vector))


class ClassifierHolder:
    def __init__(self):
        self._lock = threading.Lock()
        self._retrain_lock = threading.Lock()
        self._current: InstalledModel | None = None
        self._generation = 0

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def snapshot(self) -> InstalledModel | None:
        """Return the installed model, or None when untrained."""
        with self._lock:
            return self._current

    def require(self) -> InstalledModel:
        """Return the installed model.

        Raises:
            ModelNotTrainedError: If no model is installed.
        """
        current = self.snapshot()
        if current is None:
            raise ModelNotTrainedError()
        return current

    def install(self, model) -> InstalledModel:
        """Atomically replace the installed model with `model`."""
        with self._lock:
            self._generation += 1
            self._current = InstalledModel(
                model=model,
                generation=self._generation,
                installed_at=datetime.now(timezone.utc),
            )
            return self._current

    def clear(self) -> None:
        """Drop the installed model; predictions fail until the next install."""
        with self._lock:
            self._generation += 1
            self._current = None

    def predict(self, vector: FeatureVector) -> bool:
        return self.require().predict(vector)

    @contextmanager
    def retraining(self):
        """Serialize the read-dataset / train / install sequence across threads."""
        with self._retrain_lock:
            yield
