"""Feature vector construction shared by training and prediction.

The classifier is trained and queried with vectors in `FEATURE_COLS` order.
Both code paths must go through this module; building a vector by hand with a
different order silently corrupts predictions.
"""

import math
from typing import Any, Mapping

from .errors import FeatureValidationError

FEATURE_COLS = ["average", "strike_rate", "bowling_average", "economy_rate", "fielding_stats"]

# camelCase names used by the HTTP payloads and CSV exports
METRIC_KEYS = {
    "average": "average",
    "strike_rate": "strikeRate",
    "bowling_average": "bowlingAverage",
    "economy_rate": "economyRate",
    "fielding_stats": "fieldingStats",
}

FeatureVector = tuple[float, float, float, float, float]


def build_features(record: Any) -> FeatureVector:
    """Build the feature vector for a performance record.

    Accepts anything exposing the five metric attributes (ORM rows, request
    schemas). The label is never part of the vector.
    """
    return tuple(float(getattr(record, col)) for col in FEATURE_COLS)


def features_from_metrics(metrics: Mapping[str, Any]) -> FeatureVector:
    """Validate a raw metrics mapping and build its feature vector.

    Keys may be camelCase (`strikeRate`) or snake_case (`strike_rate`).

    Raises:
        FeatureValidationError: If any metric is missing, non-numeric or not finite.
            Every problem is reported, not just the first.
    """
    values = []
    problems = []
    for col in FEATURE_COLS:
        key = METRIC_KEYS[col]
        raw = metrics.get(key, metrics.get(col))
        if raw is None:
            problems.append(f"missing metric '{key}'")
            continue
        if isinstance(raw, bool):
            problems.append(f"metric '{key}' must be a number")
            continue
        try:
            value = float(raw)
        except (TypeError, ValueError):
            problems.append(f"metric '{key}' must be a number")
            continue
        if not math.isfinite(value):
            problems.append(f"metric '{key}' must be finite")
            continue
        values.append(value)

    if problems:
        raise FeatureValidationError(problems)
    return tuple(values)
