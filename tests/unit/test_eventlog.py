from pathlib import Path

from summarylib.builders import histogram, scalar
from summarylib.eventlog import EventLogWriter, read_scalar


def test_append_and_read_back(tmp_path: Path) -> None:
    with EventLogWriter(str(tmp_path / "run")) as w:
        w.append(scalar("loss", 3.0), 1)
        w.append(scalar("loss", 2.0), 2)
        w.append(histogram("loss", [1.0, 2.0]), 3)
        w.append(scalar("lr", 0.5), 2)
    events = read_scalar(str(tmp_path / "run"), "loss")
    assert [(e.step, e.value) for e in events] == [(1, 3.0), (2, 2.0)]
    assert all(e.wall_time > 0 for e in events)
    # repeated scans are independent
    assert read_scalar(str(tmp_path / "run"), "loss") == events


def test_read_missing_tag_or_dir(tmp_path: Path) -> None:
    assert read_scalar(str(tmp_path / "nope"), "loss") == []
    with EventLogWriter(str(tmp_path / "run")) as w:
        w.append(scalar("loss", 1.0), 1)
    assert read_scalar(str(tmp_path / "run"), "throughput") == []
