"""Training-loop side of the recording policy."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple

from .policy import TrainTag
from .summary import Summary

logger = logging.getLogger(__name__)


def _param_tags(name: str) -> Tuple[str, str]:
    module, _, param = name.rpartition(".")
    grad = "grad" + param[:1].upper() + param[1:]
    if not module:
        return param, grad
    module = module.replace(".", "/")
    return f"{module}/{param}", f"{module}/{grad}"


def parameter_histograms(parameters: Any) -> Iterator[Tuple[str, Any]]:
    """Yield (tag, values) for each named parameter and, if present, its gradient.

    Accepts a torch-style module (anything with ``named_parameters()``) or a
    mapping of dotted name -> array-like. ``"fc1.weight"`` becomes the tags
    ``"fc1/weight"`` and ``"fc1/gradWeight"``.
    """
    if hasattr(parameters, "named_parameters"):
        items: Iterable[Tuple[str, Any]] = parameters.named_parameters()
    else:
        assert isinstance(parameters, Mapping), "parameters must be a module or a mapping"
        items = parameters.items()
    for name, values in items:
        value_tag, grad_tag = _param_tags(name)
        yield value_tag, values
        grad = getattr(values, "grad", None)
        if grad is not None:
            yield grad_tag, grad


def record_training_step(
    summary: Summary,
    state: Mapping[str, Any],
    metrics: Mapping[str, Any],
    parameters: Optional[Any] = None,
) -> List[str]:
    """Write the metrics whose triggers fire for `state`; returns written tags.

    `state` must carry ``neval``, used as the step. Parameter histograms are
    written only when a "parameters" trigger is set, fires, and `parameters`
    is given.
    """
    assert "neval" in state, "state must carry 'neval'"
    step = int(state["neval"])
    written: List[str] = []
    for tag, trigger in summary.get_scalar_triggers().items():
        if tag in metrics and trigger(state):
            summary.add_scalar(tag, metrics[tag], step)
            written.append(tag)

    param_trigger = summary.get_summary_trigger(TrainTag.PARAMETERS)
    if parameters is not None and param_trigger is not None and param_trigger(state):
        for tag, values in parameter_histograms(parameters):
            summary.add_histogram(tag, values, step)
            written.append(tag)
    logger.debug("step %d: recorded %s", step, written)
    return written


def record_validation(summary: Summary, step: int, results: Mapping[str, Any]) -> List[str]:
    """Write every validation result as a scalar at `step`."""
    for tag, value in results.items():
        summary.add_scalar(tag, value, step)
    return list(results.keys())
