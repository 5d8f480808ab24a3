"""Failure outcome shared by the outbound provider clients."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Failure:
    """A provider call that produced no usable result.

    Callers only distinguish success from failure; ``reason`` is kept for
    logging.
    """

    source: str
    reason: str
