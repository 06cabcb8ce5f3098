from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, FrozenSet, Mapping, Optional, Union

from .errors import InvalidTagError
from .triggers import SeveralIteration, Trigger

logger = logging.getLogger(__name__)

TriggerLike = Union[Trigger, Callable]


class TrainTag(str, Enum):
    LEARNING_RATE = "learningRate"
    LOSS = "loss"
    THROUGHPUT = "throughput"
    # Full weight/gradient histograms; never enabled by default.
    PARAMETERS = "parameters"


def _tag_name(tag: Union[str, TrainTag]) -> str:
    return tag.value if isinstance(tag, TrainTag) else str(tag)


class RecordingPolicy:
    """Owned mapping of tag -> trigger.

    `allowed_tags` of None accepts any tag (validation metrics are open-ended).
    """

    allowed_tags: Optional[FrozenSet[str]] = None

    def __init__(self, triggers: Optional[Mapping[str, TriggerLike]] = None) -> None:
        self._triggers: Dict[str, TriggerLike] = {}
        for tag, trigger in (triggers or {}).items():
            self.set_trigger(tag, trigger)

    def set_trigger(self, tag: Union[str, TrainTag], trigger: TriggerLike) -> None:
        name = _tag_name(tag)
        if self.allowed_tags is not None and name not in self.allowed_tags:
            raise InvalidTagError(name, self.allowed_tags)
        assert callable(trigger), "trigger must be callable"
        self._triggers[name] = trigger
        logger.info("summary trigger for %s set to %r", name, trigger)

    def get_trigger(self, tag: Union[str, TrainTag]) -> Optional[TriggerLike]:
        return self._triggers.get(_tag_name(tag))

    def active_triggers(self) -> Dict[str, TriggerLike]:
        """Triggers for automatically sampled metrics ("parameters" excluded)."""
        return {t: trig for t, trig in self._triggers.items() if t != TrainTag.PARAMETERS.value}

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, (str, TrainTag)) and _tag_name(tag) in self._triggers


class TrainRecordingPolicy(RecordingPolicy):
    allowed_tags = frozenset(t.value for t in TrainTag)

    @classmethod
    def default(cls) -> "TrainRecordingPolicy":
        return cls(
            {
                TrainTag.LEARNING_RATE.value: SeveralIteration(1),
                TrainTag.LOSS.value: SeveralIteration(1),
                TrainTag.THROUGHPUT.value: SeveralIteration(1),
            }
        )
