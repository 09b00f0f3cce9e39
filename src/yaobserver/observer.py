"""Observer — change detection over an arbitrary value accessor.

An Observer does not subscribe to anything. The host decides when to call
update() (typically once per redraw); each call samples get_value(), compares
the result with the last recorded snapshot, and invokes on_changed with an
ObserverEvent only when the value is considered changed.

Ordering: the new snapshot is committed before on_changed runs. A re-entrant
update() from inside the callback sees the committed value and will not fire
again for it. If on_changed raises, the snapshot stays committed.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

from yaobserver import clock
from yaobserver.event import HistoryEntry, ObserverEvent

logger = logging.getLogger("yaobserver.observer")

V = TypeVar("V")

ValueGetter = Callable[[], V]
ChangedCallback = Callable[[ObserverEvent[V]], None]
Comparator = Callable[[V, V], bool]


def _default_has_changed(previous, current) -> bool:
    return current != previous


class Observer(Generic[V]):
    """Tracks a single value and calls on_changed whenever it changes."""

    __slots__ = (
        "_get_value",
        "_on_changed",
        "_has_changed",
        "_fire_on_first_update",
        "_max_history_length",
        "_last_event",
    )

    def __init__(
        self,
        get_value: ValueGetter[V],
        *,
        on_changed: ChangedCallback[V],
        has_changed: Comparator[V] | None = None,
        update_immediately: bool = True,
        fire_on_first_update: bool = False,
        max_history_length: int = 0,
    ) -> None:
        """Create an observer that calls on_changed when get_value()'s result changes.

        has_changed(previous, current) decides whether a new sample counts as a
        change. The default is `current != previous`. Lists, dicts and other
        objects mutated in place need a comparator that looks at content (and
        get_value should return a copy), otherwise changes go unnoticed.

        update_immediately: sample get_value() now to seed the first snapshot.
        If False, nothing is sampled until the first update().

        fire_on_first_update: call on_changed for the very first sample. With
        both flags True, on_changed runs from inside the constructor. With both
        False, the first update() only seeds the snapshot and on_changed can
        fire from the second update() onward.

        max_history_length: how many previous values to carry in
        ObserverEvent.history. Zero keeps history empty.

        Usage:
            count = [0]
            seen = []
            obs = Observer(lambda: count[0], on_changed=lambda e: seen.append(e.value))

            count[0] = 1
            obs.update()  # seen == [1]
            obs.update()  # unchanged, seen == [1]
        """
        if max_history_length < 0:
            raise ValueError(f"max_history_length must be >= 0, got {max_history_length}")

        self._get_value = get_value
        self._on_changed = on_changed
        self._has_changed = has_changed if has_changed is not None else _default_has_changed
        self._fire_on_first_update = fire_on_first_update
        self._max_history_length = max_history_length
        self._last_event: ObserverEvent[V] | None = None

        if update_immediately:
            self.update()

    @property
    def get_value(self) -> ValueGetter[V]:
        return self._get_value

    @property
    def on_changed(self) -> ChangedCallback[V]:
        return self._on_changed

    @property
    def has_changed(self) -> Comparator[V]:
        return self._has_changed

    @property
    def max_history_length(self) -> int:
        return self._max_history_length

    @property
    def last_event(self) -> ObserverEvent[V] | None:
        """The last committed snapshot, or None if nothing was sampled yet."""
        return self._last_event

    def update(self) -> bool:
        """Sample the value and call on_changed if it changed.

        Returns True if a new snapshot was committed (including the silent
        first sample), False when the value was unchanged.
        Errors raised by get_value, has_changed or on_changed propagate.
        """
        value = self._get_value()
        previous = self._last_event

        if previous is not None and not self._has_changed(previous.value, value):
            return False

        event = ObserverEvent(value, clock.now(), self._next_history(previous))
        self._last_event = event

        if previous is None and not self._fire_on_first_update:
            logger.debug("Seeded %r with %r", self, value)
            return True

        logger.debug("Change detected by %r: %r", self, value)
        self._on_changed(event)
        return True

    def _next_history(self, previous: ObserverEvent[V] | None) -> tuple[HistoryEntry[V], ...]:
        """Prepend the previous snapshot to its history, capped at max_history_length."""
        if previous is None or self._max_history_length == 0:
            return ()
        entry = HistoryEntry(previous.value, previous.change_time)
        return (entry, *previous.history[: self._max_history_length - 1])

    def __repr__(self) -> str:
        name = getattr(self._get_value, "__name__", type(self._get_value).__name__)
        if self._last_event is None:
            return f"Observer({name}, unsampled)"
        return f"Observer({name}, value={self._last_event.value!r})"
