"""Heuristic performance score used for ranking and trend projection.

The score is independent of the classifier so ranking stays defined when no
model is trained. Batting average and strike rate count positively; bowling
average and economy rate are "lower is better" and are inverted around a
ceiling of 100 before weighting.
"""

from typing import Any

WEIGHTS = {
    "average": 0.4,
    "strike_rate": 0.2,
    "bowling_average": 0.2,
    "economy_rate": 0.1,
    "fielding_stats": 0.1,
}
INVERSION_CEILING = 100.0


def performance_score(record: Any) -> float:
    """Weighted performance score of a single record."""
    return (
        WEIGHTS["average"] * record.average
        + WEIGHTS["strike_rate"] * record.strike_rate
        + WEIGHTS["bowling_average"] * (INVERSION_CEILING - record.bowling_average)
        + WEIGHTS["economy_rate"] * (INVERSION_CEILING - record.economy_rate)
        + WEIGHTS["fielding_stats"] * record.fielding_stats
    )
