"""Textual integration for yaobserver. Opt-in — requires textual.

ObserverMixin gives a Widget or App its own ObserverManager for its lifetime.
The host calls update_observers() from wherever it redraws (render, a refresh
handler, a watch_ method); the manager is torn down when the host unmounts.
After that, update_observers() does nothing and observe() raises.
"""

from __future__ import annotations

import functools
from typing import Any, Hashable

from textual.css.query import NoMatches

from yaobserver.manager import ObserverManager
from yaobserver.observer import ChangedCallback, Comparator, Observer, ValueGetter


def _guarded(on_changed: ChangedCallback) -> ChangedCallback:
    """Wrap a callback so widget queries that miss do not break the update.

    The original callback stays reachable as `__wrapped__`.
    """

    @functools.wraps(on_changed)
    def _safe(event) -> None:
        try:
            on_changed(event)
        except NoMatches:
            pass

    return _safe


class ObserverMixin:
    """Mixin for Textual widgets/apps that own a set of observers.

    Usage:
        class Counter(ObserverMixin, Static):
            def on_mount(self) -> None:
                self.observe(lambda: state.count, on_changed=self._show)

            def render(self):
                self.update_observers()
                return super().render()
    """

    @property
    def observers_disposed(self) -> bool:
        """True once the host has unmounted and its observers were dropped."""
        return self.__dict__.get("_observers_disposed", False)

    @property
    def observer_manager(self) -> ObserverManager:
        if self.observers_disposed:
            raise RuntimeError(f"{type(self).__name__} is unmounted; its observers were disposed")
        manager = self.__dict__.get("_observer_manager")
        if manager is None:
            manager = self.__dict__["_observer_manager"] = ObserverManager()
        return manager

    def observe(
        self,
        get_value: ValueGetter,
        *,
        on_changed: ChangedCallback,
        tag: Hashable | None = None,
        has_changed: Comparator | None = None,
        update_immediately: bool = True,
        fire_on_first_update: bool = False,
        max_history_length: int = 0,
    ) -> Observer[Any]:
        """Add an observer to this host. See Observer for the options.

        NoMatches raised by on_changed is swallowed; other errors propagate.
        The returned Observer's on_changed is that guarding wrapper; the
        callback passed here is its `__wrapped__`.

        Raises RuntimeError once the host has unmounted.
        """
        return self.observer_manager.add(
            get_value,
            on_changed=_guarded(on_changed),
            tag=tag,
            has_changed=has_changed,
            update_immediately=update_immediately,
            fire_on_first_update=fire_on_first_update,
            max_history_length=max_history_length,
        )

    def update_observers(self) -> None:
        if self.observers_disposed:
            return
        self.observer_manager.update()

    def on_unmount(self) -> None:
        self.__dict__["_observers_disposed"] = True
        manager = self.__dict__.pop("_observer_manager", None)
        if manager is not None:
            manager.dispose()
