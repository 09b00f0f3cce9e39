"""yaobserver: detect changes in any value by sampling it on demand."""

from importlib.metadata import version as _version

__version__ = _version("yaobserver")

from yaobserver.clock import set_clock
from yaobserver.event import HistoryEntry, ObserverEvent
from yaobserver.observer import Observer
from yaobserver.manager import ObserverManager
# textual integration NOT auto-imported — opt-in only

__all__ = [
    "Observer",
    "ObserverEvent",
    "HistoryEntry",
    "ObserverManager",
    "set_clock",
]
