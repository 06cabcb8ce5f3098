from __future__ import annotations

import math
from typing import Any, Literal, Tuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from tensorboard.compat.proto.summary_pb2 import HistogramProto, Summary as SummaryProto


class ScalarRecord(BaseModel):
    """One scalar summary value; stored with float32 precision."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    tag: str
    value: float

    @field_validator("value", mode="before")
    @classmethod
    def _to_float32(cls, v: Any) -> float:
        if hasattr(v, "item"):
            v = v.item()
        try:
            v = float(v)
        except OverflowError:
            # ints beyond float range saturate like float32 overflow does
            v = math.inf if v > 0 else -math.inf
        with np.errstate(over="ignore"):
            return float(np.float32(v))

    def to_proto(self) -> SummaryProto:
        return SummaryProto(value=[SummaryProto.Value(tag=self.tag, simple_value=self.value)])


class HistogramBucket(BaseModel):
    model_config = ConfigDict(frozen=True)

    limit: float
    count: int = Field(ge=1)


class HistogramRecord(BaseModel):
    """Histogram summary holding only non-empty buckets, ordered by right edge."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["histogram"] = "histogram"
    tag: str
    min: float
    max: float
    num: int = Field(ge=1)
    sum: float
    sum_squares: float = Field(ge=0.0)
    buckets: Tuple[HistogramBucket, ...]

    @model_validator(mode="after")
    def _check_buckets(self) -> "HistogramRecord":
        total = sum(b.count for b in self.buckets)
        assert total == self.num, f"bucket counts sum to {total}, expected {self.num}"
        limits = [b.limit for b in self.buckets]
        assert all(a < b for a, b in zip(limits, limits[1:])), "bucket limits must be strictly increasing"
        return self

    def to_proto(self) -> SummaryProto:
        histo = HistogramProto(
            min=self.min,
            max=self.max,
            num=self.num,
            sum=self.sum,
            sum_squares=self.sum_squares,
            bucket_limit=[b.limit for b in self.buckets],
            bucket=[float(b.count) for b in self.buckets],
        )
        return SummaryProto(value=[SummaryProto.Value(tag=self.tag, histo=histo)])


SummaryRecord = Union[ScalarRecord, HistogramRecord]


def to_summary_proto(record: SummaryRecord) -> SummaryProto:
    assert isinstance(record, (ScalarRecord, HistogramRecord)), f"not a summary record: {type(record)}"
    return record.to_proto()
