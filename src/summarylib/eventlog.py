"""TensorBoard event-file persistence for summary records."""

from __future__ import annotations

import logging
import os
import time
from typing import List, NamedTuple, Optional

from tensorboard.backend.event_processing import event_accumulator
from tensorboard.compat.proto.event_pb2 import Event
from tensorboard.summary.writer.event_file_writer import EventFileWriter

from .config import WriterConfig
from .records import SummaryRecord, to_summary_proto

logger = logging.getLogger(__name__)


class ScalarEvent(NamedTuple):
    step: int
    value: float
    wall_time: float


class EventLogWriter:
    """Append-only writer for one log directory. Single writer per directory."""

    def __init__(self, log_dir: str, config: Optional[WriterConfig] = None) -> None:
        assert log_dir, "log_dir required"
        cfg = config or WriterConfig()
        self.log_dir = str(log_dir)
        self._writer = EventFileWriter(
            self.log_dir,
            max_queue_size=cfg.max_queue_size,
            flush_secs=cfg.flush_secs,
            filename_suffix=cfg.filename_suffix,
        )
        self._closed = False
        logger.info("event log opened at %s", self.log_dir)

    def append(self, record: SummaryRecord, step: int) -> None:
        event = Event(wall_time=time.time(), step=int(step), summary=to_summary_proto(record))
        self._writer.add_event(event)
        logger.debug("appended %s %s at step %d", record.kind, record.tag, step)

    def flush(self) -> None:
        self._writer.flush()

    def close(self) -> None:
        if self._closed:
            return
        self._writer.close()
        self._closed = True
        logger.info("event log closed at %s", self.log_dir)

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "EventLogWriter":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def read_scalar(path: str, tag: str) -> List[ScalarEvent]:
    """Scan every event file under `path` for scalar values of `tag`.

    Entries come back in log order. Histogram values sharing the tag are
    skipped; a missing directory or unknown tag yields an empty list.
    """
    if not os.path.isdir(path):
        return []
    acc = event_accumulator.EventAccumulator(
        path,
        size_guidance={event_accumulator.SCALARS: 0},
        purge_orphaned_data=False,
    )
    acc.Reload()
    if tag not in acc.Tags().get(event_accumulator.SCALARS, []):
        return []
    return [ScalarEvent(int(e.step), float(e.value), float(e.wall_time)) for e in acc.Scalars(tag)]
