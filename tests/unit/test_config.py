from pathlib import Path

from summarylib.config import load_config
from summarylib.triggers import SeveralIteration


def test_load_config_defaults(tmp_path: Path) -> None:
    cfg_path = tmp_path / "test.yaml"
    cfg_path.write_text("{}", encoding="utf-8")
    cfg = load_config(cfg_path)
    assert cfg.log_dir == "logs"
    assert cfg.writer.max_queue_size >= 1
    assert cfg.triggers.parameters is None
    assert set(cfg.triggers.build()) == {"learningRate", "loss", "throughput"}


def test_load_config_parameters_trigger(tmp_path: Path) -> None:
    cfg_path = tmp_path / "test.yaml"
    cfg_path.write_text(
        "app_name: mnist\ntriggers:\n  throughput: 10\n  parameters: 50\n", encoding="utf-8"
    )
    cfg = load_config(cfg_path)
    triggers = cfg.triggers.build()
    assert cfg.app_name == "mnist"
    assert isinstance(triggers["parameters"], SeveralIteration)
    assert triggers["parameters"].interval == 50
    assert triggers["throughput"].interval == 10
