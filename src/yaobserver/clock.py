"""Time source used to stamp change events.

The clock is process-wide configuration. Install a replacement once, e.g.
in a test fixture or when the host framework has its own notion of time:
    yaobserver.set_clock(lambda: fixed_time)

set_clock(None) restores the default wall clock.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

_clock: Callable[[], datetime] | None = None


def set_clock(clock: Callable[[], datetime] | None) -> None:
    """Set the global time source for ObserverEvent.change_time."""
    global _clock
    _clock = clock


def now() -> datetime:
    """Current time according to the configured clock."""
    if _clock is not None:
        return _clock()
    return datetime.now()
