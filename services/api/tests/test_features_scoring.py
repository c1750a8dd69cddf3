"""Feature vector construction and heuristic score."""

import math
from types import SimpleNamespace

import pytest

from player_ai.errors import FeatureValidationError
from player_ai.features import FEATURE_COLS, build_features, features_from_metrics
from player_ai.scoring import performance_score


def _record(**overrides):
    fields = dict(average=50.0, strike_rate=140.0, bowling_average=20.0, economy_rate=4.0, fielding_stats=15)
    fields.update(overrides)
    return SimpleNamespace(**fields)


def test_feature_order_is_fixed():
    assert FEATURE_COLS == ["average", "strike_rate", "bowling_average", "economy_rate", "fielding_stats"]


def test_build_features_excludes_label_and_keeps_order():
    record = _record(label=1, id=7)
    assert build_features(record) == (50.0, 140.0, 20.0, 4.0, 15.0)


def test_features_from_metrics_accepts_camel_case():
    metrics = {"average": 50.5, "strikeRate": 140, "bowlingAverage": "20", "economyRate": 4.2, "fieldingStats": 15}
    assert features_from_metrics(metrics) == (50.5, 140.0, 20.0, 4.2, 15.0)


def test_features_from_metrics_accepts_snake_case():
    metrics = {"average": 1, "strike_rate": 2, "bowling_average": 3, "economy_rate": 4, "fielding_stats": 5}
    assert features_from_metrics(metrics) == (1.0, 2.0, 3.0, 4.0, 5.0)


def test_features_from_metrics_reports_every_missing_metric():
    with pytest.raises(FeatureValidationError) as exc_info:
        features_from_metrics({"average": 50.0, "strikeRate": 140.0})
    problems = exc_info.value.problems
    assert len(problems) == 3
    assert any("bowlingAverage" in p for p in problems)
    assert any("economyRate" in p for p in problems)
    assert any("fieldingStats" in p for p in problems)


@pytest.mark.parametrize("bad", ["fast", None, True, math.nan, math.inf, [1]])
def test_features_from_metrics_rejects_bad_values(bad):
    metrics = {"average": bad, "strikeRate": 1, "bowlingAverage": 1, "economyRate": 1, "fieldingStats": 1}
    with pytest.raises(FeatureValidationError):
        features_from_metrics(metrics)


def test_score_example():
    # 20 + 28 + 16 + 9.6 + 1.5
    assert performance_score(_record()) == pytest.approx(75.1)


def test_score_inverts_bowling_metrics():
    better_bowler = _record(bowling_average=15.0, economy_rate=3.0)
    assert performance_score(better_bowler) > performance_score(_record())


def test_score_ignores_id_and_label():
    a = _record(id=1, label=0)
    b = _record(id=2, label=1)
    assert performance_score(a) == performance_score(b)
