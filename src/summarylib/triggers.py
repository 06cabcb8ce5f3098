"""Step-level triggers deciding whether a metric is recorded.

A trigger is evaluated against a mapping of training state. The keys read
here are ``neval`` (1-based iteration counter), ``epoch``, ``loss`` and
``score``.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .errors import InvalidInputError


class Trigger:
    def __call__(self, state: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def should_fire(self, step: int, history: Optional[Mapping[str, Any]] = None) -> bool:
        state = dict(history or {})
        state.setdefault("neval", step)
        return bool(self(state))

    def __and__(self, other: "Trigger") -> "AndTrigger":
        return AndTrigger(self, other)

    def __or__(self, other: "Trigger") -> "OrTrigger":
        return OrTrigger(self, other)


def _require(state: Mapping[str, Any], key: str) -> Any:
    assert key in state, f"trigger state missing {key!r}"
    return state[key]


class SeveralIteration(Trigger):
    """Fire every `interval` iterations."""

    def __init__(self, interval: int):
        if int(interval) < 1:
            raise InvalidInputError(f"interval must be >= 1, got {interval}")
        self.interval = int(interval)

    def __call__(self, state: Mapping[str, Any]) -> bool:
        return int(_require(state, "neval")) % self.interval == 0

    def __repr__(self) -> str:
        return f"SeveralIteration({self.interval})"


class EveryEpoch(Trigger):
    """Fire when the epoch counter changes; the first observation only primes it."""

    def __init__(self) -> None:
        self._last_epoch: Optional[int] = None

    def __call__(self, state: Mapping[str, Any]) -> bool:
        epoch = int(_require(state, "epoch"))
        if self._last_epoch is None:
            self._last_epoch = epoch
            return False
        if epoch == self._last_epoch:
            return False
        self._last_epoch = epoch
        return True

    def __repr__(self) -> str:
        return "EveryEpoch()"


class MaxIteration(Trigger):
    def __init__(self, max_iteration: int):
        if int(max_iteration) < 0:
            raise InvalidInputError(f"max_iteration must be >= 0, got {max_iteration}")
        self.max_iteration = int(max_iteration)

    def __call__(self, state: Mapping[str, Any]) -> bool:
        return int(_require(state, "neval")) > self.max_iteration


class MaxEpoch(Trigger):
    def __init__(self, max_epoch: int):
        if int(max_epoch) < 0:
            raise InvalidInputError(f"max_epoch must be >= 0, got {max_epoch}")
        self.max_epoch = int(max_epoch)

    def __call__(self, state: Mapping[str, Any]) -> bool:
        return int(_require(state, "epoch")) > self.max_epoch


class MinLoss(Trigger):
    def __init__(self, min_loss: float):
        self.min_loss = float(min_loss)

    def __call__(self, state: Mapping[str, Any]) -> bool:
        return float(_require(state, "loss")) < self.min_loss


class MaxScore(Trigger):
    def __init__(self, max_score: float):
        self.max_score = float(max_score)

    def __call__(self, state: Mapping[str, Any]) -> bool:
        return float(_require(state, "score")) > self.max_score


class AndTrigger(Trigger):
    def __init__(self, *triggers: Trigger):
        if not triggers:
            raise InvalidInputError("AndTrigger needs at least one trigger")
        self.triggers = triggers

    def __call__(self, state: Mapping[str, Any]) -> bool:
        # Evaluate all so stateful triggers see every step.
        results = [t(state) for t in self.triggers]
        return all(results)


class OrTrigger(Trigger):
    def __init__(self, *triggers: Trigger):
        if not triggers:
            raise InvalidInputError("OrTrigger needs at least one trigger")
        self.triggers = triggers

    def __call__(self, state: Mapping[str, Any]) -> bool:
        results = [t(state) for t in self.triggers]
        return any(results)
