"""Read-side analytics over stored performance records.

Ranking, aggregate stats, the threshold filter and the trend projection only
read stored records and the heuristic score. `compare_players` and
`predict_suitability` are the only operations that consult the classifier.
"""

from dataclasses import dataclass
from enum import Enum

import pandas as pd

from .features import FEATURE_COLS, FeatureVector, build_features
from .inference import ClassifierHolder
from .models import PlayerPerformance
from .repository import PerformanceRepository
from .scoring import performance_score

STAT_LABELS = {
    "average": "Average Batting",
    "strike_rate": "Strike Rate",
    "bowling_average": "Bowling Average",
    "economy_rate": "Economy Rate",
    "fielding_stats": "Fielding Stats",
}

TREND_POINTS = (
    ("Initial Score", 0.8),
    ("Mid Season", 0.9),
    ("Recent", 1.0),
)
TREND_NOT_FOUND = {"error": -1.0}


class Verdict(str, Enum):
    PLAYER_A = "A"
    PLAYER_B = "B"
    TIE = "TIE"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class ComparisonResult:
    verdict: Verdict
    winner_id: int | None = None

    @property
    def message(self) -> str:
        if self.verdict == Verdict.NOT_FOUND:
            return "One or both player IDs not found."
        if self.verdict == Verdict.TIE:
            return "Both players are equally suitable based on AI prediction."
        return f"{self.winner_id} is predicted to be more suitable."


def top_players(repository: PerformanceRepository, n: int) -> list[PlayerPerformance]:
    """Return up to `n` records, best score first.

    Equal scores keep storage order. `n <= 0` returns an empty list.
    """
    if n <= 0:
        return []
    ranked = sorted(repository.find_all(), key=performance_score, reverse=True)
    return ranked[:n]


def compare_players(
    repository: PerformanceRepository,
    holder: ClassifierHolder,
    id_a: int,
    id_b: int,
) -> ComparisonResult:
    """Compare two players by their classifier verdicts.

    A player wins only when it is predicted suitable and the other is not.
    Both suitable and both unsuitable are reported as a tie. If either id is
    missing the classifier is not consulted.

    Raises:
        ModelNotTrainedError: If both records exist but no model is installed.
    """
    player_a = repository.find_by_id(id_a)
    player_b = repository.find_by_id(id_b)
    if player_a is None or player_b is None:
        return ComparisonResult(Verdict.NOT_FOUND)

    # one snapshot so both verdicts come from the same model
    model = holder.require()
    a_suitable = model.predict(build_features(player_a))
    b_suitable = model.predict(build_features(player_b))

    if a_suitable and not b_suitable:
        return ComparisonResult(Verdict.PLAYER_A, player_a.id)
    if b_suitable and not a_suitable:
        return ComparisonResult(Verdict.PLAYER_B, player_b.id)
    return ComparisonResult(Verdict.TIE)


def average_stats(repository: PerformanceRepository) -> dict[str, float]:
    """Mean of each metric across all records; `{}` when there are none."""
    records = repository.find_all()
    if not records:
        return {}
    df = pd.DataFrame([build_features(r) for r in records], columns=FEATURE_COLS)
    means = df.mean()
    return {STAT_LABELS[col]: float(means[col]) for col in FEATURE_COLS}


def filter_players(
    repository: PerformanceRepository,
    min_average: float = 0.0,
    min_strike_rate: float = 0.0,
    min_fielding: int = 0,
) -> list[PlayerPerformance]:
    return [
        r
        for r in repository.find_all()
        if r.average >= min_average and r.strike_rate >= min_strike_rate and r.fielding_stats >= min_fielding
    ]


def performance_trend(repository: PerformanceRepository, record_id: int) -> dict[str, float]:
    """Synthetic three-point ramp ending at the player's current score.

    There is no time dimension in the stored data, so the earlier points are
    fixed fractions of the current score. Unknown ids get `{"error": -1.0}`.
    """
    record = repository.find_by_id(record_id)
    if record is None:
        return dict(TREND_NOT_FOUND)
    score = performance_score(record)
    return {label: score * factor for label, factor in TREND_POINTS}


def predict_suitability(holder: ClassifierHolder, vector: FeatureVector) -> bool:
    """Classifier verdict for an already validated feature vector.

    Raises:
        ModelNotTrainedError: If no model is installed.
    """
    return holder.predict(vector)
