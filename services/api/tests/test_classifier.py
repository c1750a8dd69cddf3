"""scikit-learn backed classifier trainer."""

import pytest

from player_ai.classifier import ClassifierTrainer, SuitabilityModel
from player_ai.errors import TrainingError

GOOD = [
    ((60.0, 150.0, 18.0, 4.0, 20.0), 1),
    ((55.0, 145.0, 20.0, 4.5, 18.0), 1),
    ((58.0, 160.0, 22.0, 5.0, 16.0), 1),
]
POOR = [
    ((12.0, 80.0, 55.0, 9.0, 2.0), 0),
    ((15.0, 85.0, 50.0, 8.5, 3.0), 0),
    ((10.0, 75.0, 60.0, 9.5, 1.0), 0),
]


def test_logistic_separates_clear_cases():
    model = ClassifierTrainer().fit(GOOD + POOR)

    assert isinstance(model, SuitabilityModel)
    assert model.predict((59.0, 155.0, 19.0, 4.2, 19.0)) is True
    assert model.predict((11.0, 78.0, 58.0, 9.2, 1.0)) is False
    assert model.train_rows == 6
    assert model.label_counts == {0: 3, 1: 3}
    assert model.training_accuracy == pytest.approx(1.0)


def test_mlp_kind_fits_and_returns_bool():
    model = ClassifierTrainer(kind="mlp", max_iter=2000).fit(GOOD + POOR)
    assert isinstance(model.predict(GOOD[0][0]), bool)


def test_single_label_dataset_predicts_that_label():
    model = ClassifierTrainer().fit(POOR)
    assert model.predict(GOOD[0][0]) is False

    model = ClassifierTrainer().fit(GOOD)
    assert model.predict(POOR[0][0]) is True


def test_empty_dataset_is_a_training_error():
    with pytest.raises(TrainingError):
        ClassifierTrainer().fit([])


def test_label_outside_binary_is_a_training_error():
    with pytest.raises(TrainingError, match="Labels must be 0 or 1"):
        ClassifierTrainer().fit(GOOD + [((1.0, 1.0, 1.0, 1.0, 1.0), 2)])


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError):
        ClassifierTrainer(kind="forest")


def test_each_fit_returns_a_new_model():
    trainer = ClassifierTrainer()
    first = trainer.fit(GOOD + POOR)
    second = trainer.fit(POOR)

    assert first is not second
    # the earlier model is untouched by the later fit
    assert first.predict(GOOD[0][0]) is True


def test_metadata_lists_feature_columns():
    meta = ClassifierTrainer().fit(GOOD + POOR).metadata()
    assert meta["feature_cols"] == ["average", "strike_rate", "bowling_average", "economy_rate", "fielding_stats"]
    assert meta["train_rows"] == 6
    assert meta["label_counts"] == {"0": 3, "1": 3}
