from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import BaseModel, Field, ConfigDict
import yaml

from .policy import TrainTag
from .triggers import SeveralIteration, Trigger


class WriterConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_queue_size: int = Field(ge=1, default=10, description="Events buffered before a forced flush")
    flush_secs: float = Field(gt=0.0, default=120.0)
    filename_suffix: str = Field(default="")


class TriggerConfig(BaseModel):
    """Per-tag recording intervals (in iterations) for the training summary."""

    model_config = ConfigDict(frozen=True)

    learning_rate: int = Field(ge=1, default=1)
    loss: int = Field(ge=1, default=1)
    throughput: int = Field(ge=1, default=1)
    parameters: Optional[int] = Field(ge=1, default=None, description="None keeps parameter histograms off")

    def build(self) -> Dict[str, Trigger]:
        triggers: Dict[str, Trigger] = {
            TrainTag.LEARNING_RATE.value: SeveralIteration(self.learning_rate),
            TrainTag.LOSS.value: SeveralIteration(self.loss),
            TrainTag.THROUGHPUT.value: SeveralIteration(self.throughput),
        }
        if self.parameters is not None:
            triggers[TrainTag.PARAMETERS.value] = SeveralIteration(self.parameters)
        return triggers


class SummaryConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_dir: str = Field(default="logs", min_length=1)
    app_name: str = Field(min_length=1)
    writer: WriterConfig = Field(default_factory=WriterConfig)
    triggers: TriggerConfig = Field(default_factory=TriggerConfig)

    def validate_config(self) -> None:
        assert "/" not in self.app_name and "\\" not in self.app_name, (
            f"app_name {self.app_name!r} must be a single path component"
        )


def load_config(path: Union[str, Path]) -> SummaryConfig:
    """Load and validate a summary configuration from a YAML file.

    Args:
        path: Path to a YAML configuration file.

    Returns:
        Immutable, validated `SummaryConfig`.
    """
    assert path is not None, "path required"
    path_obj = Path(path)
    assert path_obj.exists(), f"Config file not found: {path_obj}"
    with path_obj.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    entity = SummaryConfig(
        log_dir=raw.get("log_dir", "logs"),
        app_name=raw.get("app_name", "app"),
        writer=WriterConfig(**raw.get("writer", {})),
        triggers=TriggerConfig(**raw.get("triggers", {})),
    )
    entity.validate_config()
    return entity
