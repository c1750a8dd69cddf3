"""Classifier holder: atomic install, clear and generation tracking."""

import threading

import pytest
from fakes import ThresholdModel

from player_ai.errors import ModelNotTrainedError
from player_ai.inference import ClassifierHolder


def test_starts_untrained(holder):
    assert holder.snapshot() is None
    assert holder.generation == 0
    with pytest.raises(ModelNotTrainedError):
        holder.predict((1.0, 1.0, 1.0, 1.0, 1.0))


def test_install_bumps_generation_and_serves_predictions(holder):
    installed = holder.install(ThresholdModel(50.0))

    assert installed.generation == 1
    assert holder.generation == 1
    assert holder.predict((55.0, 0, 0, 0, 0)) is True
    assert holder.predict((45.0, 0, 0, 0, 0)) is False


def test_snapshot_is_not_affected_by_later_install(holder):
    holder.install(ThresholdModel(50.0))
    snapshot = holder.snapshot()

    holder.install(ThresholdModel(10.0))

    assert snapshot.generation == 1
    assert snapshot.predict((20.0, 0, 0, 0, 0)) is False
    assert holder.predict((20.0, 0, 0, 0, 0)) is True


def test_clear_drops_model_and_bumps_generation(holder):
    holder.install(ThresholdModel(50.0))
    holder.clear()

    assert holder.snapshot() is None
    assert holder.generation == 2
    with pytest.raises(ModelNotTrainedError):
        holder.require()


def test_concurrent_installs_keep_generations_unique():
    holder = ClassifierHolder()
    seen = []
    lock = threading.Lock()

    def worker():
        for _ in range(50):
            installed = holder.install(ThresholdModel(1.0))
            with lock:
                seen.append(installed.generation)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(seen) == list(range(1, 201))
    assert holder.generation == 200
