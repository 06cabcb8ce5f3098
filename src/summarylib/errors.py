from __future__ import annotations


class SummaryError(Exception):
    """Base class for errors raised by summarylib."""


class InvalidTagError(SummaryError, ValueError):
    """A trigger was set for a tag the recording policy does not accept."""

    def __init__(self, tag: str, allowed=None):
        self.tag = tag
        self.allowed = tuple(sorted(allowed)) if allowed is not None else None
        msg = f"unsupported summary tag: {tag!r}"
        if self.allowed:
            msg += f" (supported: {', '.join(self.allowed)})"
        super().__init__(msg)


class InvalidInputError(SummaryError, ValueError):
    """Input that cannot be turned into a well-defined summary record."""
