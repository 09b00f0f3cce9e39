"""ObserverManager — tagged collection of Observers updated together.

A manager only needs its entries to support update(); each Observer keeps
its own value type. Tags are arbitrary hashables except None, which means
"every entry" in remove() and update(). When no tag is given to add(), the
Observer itself is the tag, so equivalent accessors never collide.

The owner of a manager tears it down with remove() (or dispose(), or by
leaving a `with` block).
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterator, TypeVar

from yaobserver.observer import ChangedCallback, Comparator, Observer, ValueGetter

logger = logging.getLogger("yaobserver.manager")

V = TypeVar("V")


class ObserverManager:
    """Manages multiple Observers keyed by tag."""

    def __init__(self) -> None:
        self._observers: dict[Hashable, Observer[Any]] = {}

    def add(
        self,
        get_value: ValueGetter[V],
        *,
        on_changed: ChangedCallback[V],
        tag: Hashable | None = None,
        has_changed: Comparator[V] | None = None,
        update_immediately: bool = True,
        fire_on_first_update: bool = False,
        max_history_length: int = 0,
    ) -> Observer[V]:
        """Create an Observer and store it under tag. See Observer for the options.

        An existing entry under the same tag is replaced. Returns the new
        Observer, which can also be updated directly.
        """
        observer = Observer(
            get_value,
            on_changed=on_changed,
            has_changed=has_changed,
            update_immediately=update_immediately,
            fire_on_first_update=fire_on_first_update,
            max_history_length=max_history_length,
        )
        key = observer if tag is None else tag
        if key in self._observers:
            logger.debug("Replacing observer under tag %r", key)
        self._observers[key] = observer
        return observer

    def get(self, tag: Hashable) -> Observer[Any] | None:
        return self._observers.get(tag)

    def remove(self, tag: Hashable | None = None) -> None:
        """Remove the observer stored under tag, or all observers if tag is None.

        Unknown tags are ignored.
        """
        if tag is None:
            logger.debug("Removing all %d observers", len(self._observers))
            self._observers.clear()
        else:
            self._observers.pop(tag, None)

    def update(self, tag: Hashable | None = None) -> None:
        """Update the observer stored under tag, or all observers if tag is None.

        Unknown tags are ignored. During a bulk update, observers removed by an
        earlier callback are not updated. Errors from an observer propagate and
        stop the remaining updates of a bulk call.
        """
        if tag is None:
            for key, observer in list(self._observers.items()):
                # entries removed or replaced by an earlier callback are skipped
                if self._observers.get(key) is observer:
                    observer.update()
        else:
            observer = self._observers.get(tag)
            if observer is not None:
                observer.update()

    def dispose(self) -> None:
        """Tear down: drop every observer."""
        self.remove()

    def __enter__(self) -> ObserverManager:
        return self

    def __exit__(self, *exc_info) -> None:
        self.dispose()

    def __contains__(self, tag: Hashable) -> bool:
        return tag in self._observers

    def __len__(self) -> int:
        return len(self._observers)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._observers))

    def __repr__(self) -> str:
        return f"ObserverManager({len(self._observers)} observers)"
