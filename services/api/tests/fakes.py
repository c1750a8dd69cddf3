"""Deterministic classifier stand-ins for tests."""

import threading
import time
from datetime import datetime, timezone

from player_ai.errors import TrainingError


class ThresholdModel:
    """Suitable iff batting average (vector[0]) >= threshold."""

    def __init__(self, threshold: float, train_rows: int = 0):
        self.threshold = threshold
        self.train_rows = train_rows
        self.trained_at = datetime.now(timezone.utc)
        self.calls = []

    def predict(self, vector) -> bool:
        self.calls.append(tuple(vector))
        return vector[0] >= self.threshold

    def metadata(self) -> dict:
        return {
            "feature_cols": ["average", "strike_rate", "bowling_average", "economy_rate", "fielding_stats"],
            "train_rows": self.train_rows,
            "label_counts": {},
            "training_accuracy": 1.0,
            "trained_at": self.trained_at.isoformat(),
        }


class FakeTrainer:
    """Learns the lowest batting average among label-1 rows as its threshold.

    Records every dataset it was asked to fit; set `fail = True` to make the
    next fits raise `TrainingError`.
    """

    def __init__(self):
        self.fits = []
        self.fail = False

    def fit(self, samples):
        samples = list(samples)
        self.fits.append(samples)
        if self.fail:
            raise TrainingError("simulated classifier failure")
        if not samples:
            raise TrainingError("No performance records available to train on")
        positives = [vec[0] for vec, label in samples if label == 1]
        threshold = min(positives) if positives else float("inf")
        return ThresholdModel(threshold, train_rows=len(samples))


class SlowTrainer(FakeTrainer):
    """FakeTrainer that sleeps inside `fit` and tracks how many fits overlap."""

    def __init__(self, delay: float = 0.05):
        super().__init__()
        self.delay = delay
        self.active = 0
        self.max_active = 0
        self._lock = threading.Lock()

    def fit(self, samples):
        with self._lock:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        try:
            time.sleep(self.delay)
            return super().fit(samples)
        finally:
            with self._lock:
                self.active -= 1
