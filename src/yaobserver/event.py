"""Change events handed to observer callbacks.

An event carries the newly sampled value, the time the change was detected
(the time update() ran, not necessarily when the value itself changed), and
a read-only history of earlier values, most recent first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class HistoryEntry(Generic[V]):
    """A prior value and the time its change was detected."""

    value: V
    change_time: datetime

    def __repr__(self) -> str:
        return f"HistoryEntry(value={self.value!r}, change_time={self.change_time!r})"


@dataclass(frozen=True)
class ObserverEvent(Generic[V]):
    """A detected change.

    history[0] is the value immediately preceding `value`, history[1] the one
    before that, and so on. It is a tuple, so callbacks cannot modify it.
    """

    value: V
    change_time: datetime
    history: tuple[HistoryEntry[V], ...] = field(default=())

    def __post_init__(self) -> None:
        if isinstance(self.history, list):
            object.__setattr__(self, "history", tuple(self.history))
        elif not isinstance(self.history, tuple):
            raise TypeError(f"history must be a tuple or list, got {type(self.history).__name__}")

    def __repr__(self) -> str:
        return (
            f"ObserverEvent(value={self.value!r}, change_time={self.change_time!r}, "
            f"history={list(self.history)!r})"
        )
