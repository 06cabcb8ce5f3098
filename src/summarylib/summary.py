"""Training and validation summary loggers.

Each logger owns one event-log directory, ``<log_dir>/<app_name>/<kind>``,
and a recording policy mapping tags to triggers. Adding a scalar or a
histogram always writes; the policy only tells the training loop which
automatic metrics to sample on a given step.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Union

from .builders import histogram, scalar
from .config import SummaryConfig, WriterConfig
from .eventlog import EventLogWriter, ScalarEvent, read_scalar
from .policy import RecordingPolicy, TrainRecordingPolicy, TrainTag, TriggerLike

logger = logging.getLogger(__name__)


class Summary:
    """Base summary logger. Subclasses set `kind` and the default policy."""

    kind: str = ""

    def __init__(
        self,
        log_dir: str,
        app_name: str,
        *,
        writer_config: Optional[WriterConfig] = None,
        policy: Optional[RecordingPolicy] = None,
    ) -> None:
        assert self.kind, "use TrainSummary or ValidationSummary"
        assert log_dir, "log_dir required"
        assert app_name, "app_name required"
        self.app_name = app_name
        self.log_dir = os.path.join(str(log_dir), app_name, self.kind)
        self.policy = policy if policy is not None else self._default_policy()
        self.writer = EventLogWriter(self.log_dir, writer_config)

    def _default_policy(self) -> RecordingPolicy:
        return RecordingPolicy()

    @classmethod
    def from_config(cls, config: SummaryConfig):
        return cls(config.log_dir, config.app_name, writer_config=config.writer)

    def add_scalar(self, tag: str, value: Any, step: int) -> "Summary":
        """Append a scalar summary for `step`. Never suppressed by the policy."""
        self.writer.append(scalar(tag, value), step)
        return self

    def add_histogram(self, tag: str, values: Any, step: int) -> "Summary":
        """Append a histogram of `values` (tensor, array or sequence) for `step`."""
        self.writer.append(histogram(tag, values), step)
        return self

    def read_scalar(self, tag: str) -> List[ScalarEvent]:
        """Return (step, value, wall_time) triples for `tag`, in log order."""
        if not self.writer.closed:
            self.writer.flush()
        return read_scalar(self.log_dir, tag)

    def set_summary_trigger(self, tag: Union[str, TrainTag], trigger: TriggerLike) -> "Summary":
        self.policy.set_trigger(tag, trigger)
        return self

    def get_summary_trigger(self, tag: Union[str, TrainTag]) -> Optional[TriggerLike]:
        return self.policy.get_trigger(tag)

    def get_scalar_triggers(self) -> Dict[str, TriggerLike]:
        return self.policy.active_triggers()

    def flush(self) -> None:
        self.writer.flush()

    def close(self) -> None:
        self.writer.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class TrainSummary(Summary):
    """Logs to ``<log_dir>/<app_name>/train``.

    Supported trigger tags are learningRate, loss, throughput and parameters.
    learningRate, loss and throughput are recorded every iteration by
    default; parameters (weights, biases and their gradients) is off until a
    trigger is set, since collecting them is expensive for large models.
    """

    kind = "train"

    def _default_policy(self) -> RecordingPolicy:
        return TrainRecordingPolicy.default()

    @classmethod
    def from_config(cls, config: SummaryConfig) -> "TrainSummary":
        policy = TrainRecordingPolicy(config.triggers.build())
        return cls(config.log_dir, config.app_name, writer_config=config.writer, policy=policy)


class ValidationSummary(Summary):
    """Logs to ``<log_dir>/<app_name>/validation``; tags follow the validation methods in use."""

    kind = "validation"
