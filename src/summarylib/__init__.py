"""Summary logging for training runs.

Scalar and logarithmically bucketed histogram summaries written to
TensorBoard event logs, with per-tag recording triggers.
"""

from .buckets import HISTOGRAM_LIMITS, make_histogram_buckets, bisect_left, bucket_indices
from .builders import scalar, histogram, as_float64_array
from .config import SummaryConfig, WriterConfig, TriggerConfig, load_config
from .errors import SummaryError, InvalidTagError, InvalidInputError
from .eventlog import EventLogWriter, ScalarEvent, read_scalar
from .policy import TrainTag, RecordingPolicy, TrainRecordingPolicy
from .records import ScalarRecord, HistogramRecord, HistogramBucket, SummaryRecord, to_summary_proto
from .recording import record_training_step, record_validation, parameter_histograms
from .summary import Summary, TrainSummary, ValidationSummary
from .triggers import (
    Trigger,
    SeveralIteration,
    EveryEpoch,
    MaxIteration,
    MaxEpoch,
    MinLoss,
    MaxScore,
    AndTrigger,
    OrTrigger,
)

__all__ = [
    "HISTOGRAM_LIMITS",
    "make_histogram_buckets",
    "bisect_left",
    "bucket_indices",
    "scalar",
    "histogram",
    "as_float64_array",
    "SummaryConfig",
    "WriterConfig",
    "TriggerConfig",
    "load_config",
    "SummaryError",
    "InvalidTagError",
    "InvalidInputError",
    "EventLogWriter",
    "ScalarEvent",
    "read_scalar",
    "TrainTag",
    "RecordingPolicy",
    "TrainRecordingPolicy",
    "ScalarRecord",
    "HistogramRecord",
    "HistogramBucket",
    "SummaryRecord",
    "to_summary_proto",
    "record_training_step",
    "record_validation",
    "parameter_histograms",
    "Summary",
    "TrainSummary",
    "ValidationSummary",
    "Trigger",
    "SeveralIteration",
    "EveryEpoch",
    "MaxIteration",
    "MaxEpoch",
    "MinLoss",
    "MaxScore",
    "AndTrigger",
    "OrTrigger",
]
