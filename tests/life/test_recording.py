import importlib
from pathlib import Path

import numpy as np
import pytest

from summarylib.eventlog import read_scalar
from summarylib.recording import parameter_histograms, record_training_step, record_validation
from summarylib.summary import TrainSummary, ValidationSummary
from summarylib.triggers import SeveralIteration


torch_spec = importlib.util.find_spec("torch")
torch = None if torch_spec is None else importlib.import_module("torch")


def test_record_training_step_respects_triggers(tmp_path: Path) -> None:
    with TrainSummary(str(tmp_path), "app") as s:
        s.set_summary_trigger("throughput", SeveralIteration(2))
        params = {"fc.weight": np.ones((2, 2))}
        for n in range(1, 5):
            written = record_training_step(
                s, {"neval": n, "epoch": 1}, {"loss": 1.0 / n, "throughput": 10.0 * n}, params
            )
            assert "fc/weight" not in written
        assert [e.step for e in s.read_scalar("loss")] == [1, 2, 3, 4]
        assert [e.step for e in s.read_scalar("throughput")] == [2, 4]
        assert s.read_scalar("learningRate") == []


def test_record_training_step_parameters_opt_in(tmp_path: Path) -> None:
    with TrainSummary(str(tmp_path), "app") as s:
        s.set_summary_trigger("parameters", SeveralIteration(3))
        params = {"fc1.weight": np.arange(6.0), "bias": [0.0, 1.0]}
        assert "fc1/weight" not in record_training_step(s, {"neval": 1}, {}, params)
        written = record_training_step(s, {"neval": 3}, {"loss": 0.5}, params)
        assert written == ["loss", "fc1/weight", "bias"]


def test_parameter_tags_from_mapping():
    tags = [t for t, _ in parameter_histograms({"encoder.layer1.weight": [1.0], "bias": [0.0]})]
    assert tags == ["encoder/layer1/weight", "bias"]


@pytest.mark.skipif(torch is None, reason="torch not installed")
def test_parameter_histograms_from_torch_module(tmp_path: Path) -> None:
    import torch as T

    model = T.nn.Linear(4, 2)
    model(T.randn(3, 4)).sum().backward()
    tags = [t for t, _ in parameter_histograms(model)]
    assert tags == ["weight", "gradWeight", "bias", "gradBias"]

    with TrainSummary(str(tmp_path), "app") as s:
        s.set_summary_trigger("parameters", SeveralIteration(1))
        written = record_training_step(s, {"neval": 1}, {}, model)
        assert written == tags


def test_record_validation(tmp_path: Path) -> None:
    with ValidationSummary(str(tmp_path), "app") as s:
        record_validation(s, 100, {"Top1Accuracy": 0.5, "Loss": 1.25})
        record_validation(s, 200, {"Top1Accuracy": 0.75, "Loss": 1.0})
    path = str(tmp_path / "app" / "validation")
    assert [(e.step, e.value) for e in read_scalar(path, "Top1Accuracy")] == [(100, 0.5), (200, 0.75)]
