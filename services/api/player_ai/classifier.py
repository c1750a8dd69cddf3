"""Trainable suitability classifier.

`ClassifierTrainer.fit` turns a dataset of (feature vector, label) pairs into
a fitted `SuitabilityModel`. The trainer never mutates a model it has already
returned: every call builds a fresh scikit-learn pipeline, so a model can be
handed to concurrent readers while the next one is being trained.
"""

import logging
from datetime import datetime, timezone
from typing import Sequence

import pandas as pd
from sklearn.dummy import DummyClassifier
from sklearn.linear_model import LogisticRegression
from sklearn.metrics import accuracy_score
from sklearn.neural_network import MLPClassifier
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler

from .errors import TrainingError
from .features import FEATURE_COLS, FeatureVector

logger = logging.getLogger(__name__)

CLASSIFIER_KINDS = ("logistic", "mlp")


class SuitabilityModel:
    """A fitted estimator plus the metadata describing how it was trained."""

    def __init__(self, estimator, train_rows: int, label_counts: dict[int, int], training_accuracy: float):
        self.estimator = estimator
        self.feature_cols = list(FEATURE_COLS)
        self.train_rows = train_rows
        self.label_counts = label_counts
        self.training_accuracy = training_accuracy
        self.trained_at = datetime.now(timezone.utc)

    def predict(self, vector: FeatureVector) -> bool:
        """Return True if the player described by `vector` is predicted suitable."""
        X = pd.DataFrame([list(vector)], columns=self.feature_cols).astype(float)
        return int(self.estimator.predict(X)[0]) == 1

    def metadata(self) -> dict:
        return {
            "feature_cols": self.feature_cols,
            "train_rows": self.train_rows,
            "label_counts": {str(k): v for k, v in self.label_counts.items()},
            "training_accuracy": self.training_accuracy,
            "trained_at": self.trained_at.isoformat(),
        }


class ClassifierTrainer:
    """Builds and fits the scikit-learn pipeline behind the suitability verdict.

    Args:
        kind: "logistic" (StandardScaler + LogisticRegression) or
            "mlp" (StandardScaler + a small MLPClassifier).
        random_state: Seed passed to the estimator.
        max_iter: Iteration cap for the solver.
    """

    def __init__(self, kind: str = "logistic", random_state: int = 42, max_iter: int = 1000):
        if kind not in CLASSIFIER_KINDS:
            raise ValueError(f"Unknown classifier kind: {kind} (expected one of {CLASSIFIER_KINDS})")
        self.kind = kind
        self.random_state = random_state
        self.max_iter = max_iter

    @classmethod
    def from_settings(cls, settings) -> "ClassifierTrainer":
        return cls(kind=settings.classifier_kind, random_state=settings.random_state, max_iter=settings.max_iter)

    def _estimator(self):
        if self.kind == "mlp":
            return MLPClassifier(hidden_layer_sizes=(16, 8), max_iter=self.max_iter, random_state=self.random_state)
        return LogisticRegression(max_iter=self.max_iter, random_state=self.random_state)

    def fit(self, samples: Sequence[tuple[FeatureVector, int]]) -> SuitabilityModel:
        """Fit a new model on every sample.

        A dataset holding a single label value cannot separate classes; the
        resulting model predicts that label for every input.

        Raises:
            TrainingError: If there are no samples, a label is outside {0, 1},
                or the estimator fails to fit.
        """
        if not samples:
            raise TrainingError("No performance records available to train on")

        X = pd.DataFrame([list(vec) for vec, _ in samples], columns=FEATURE_COLS).astype(float)
        y = pd.Series([label for _, label in samples], dtype=int)

        bad_labels = sorted(set(y) - {0, 1})
        if bad_labels:
            raise TrainingError(f"Labels must be 0 or 1, found: {bad_labels}")

        if y.nunique() == 1:
            estimator = DummyClassifier(strategy="constant", constant=int(y.iloc[0]))
        else:
            estimator = Pipeline(
                steps=[
                    ("scaler", StandardScaler()),
                    ("model", self._estimator()),
                ]
            )

        try:
            estimator.fit(X, y)
        except (ValueError, ArithmeticError) as exc:
            raise TrainingError(f"Classifier training failed: {exc}") from exc

        accuracy = float(accuracy_score(y, estimator.predict(X)))
        label_counts = {int(k): int(v) for k, v in y.value_counts().sort_index().items()}
        logger.debug("fitted %s classifier on %d rows (accuracy=%.3f)", self.kind, len(y), accuracy)
        return SuitabilityModel(estimator, train_rows=len(y), label_counts=label_counts, training_accuracy=accuracy)
