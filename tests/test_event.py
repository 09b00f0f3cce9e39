"""Tests for ObserverEvent and HistoryEntry."""

import dataclasses
from datetime import datetime

import pytest

from yaobserver import HistoryEntry, ObserverEvent

T = datetime(2024, 3, 1, 9, 30)


class TestObserverEvent:
    def test_default_history_empty(self):
        e = ObserverEvent(1, T)
        assert e.history == ()

    def test_history_list_becomes_tuple(self):
        e = ObserverEvent(2, T, [HistoryEntry(1, T)])
        assert isinstance(e.history, tuple)
        with pytest.raises(AttributeError):
            e.history.append(HistoryEntry(0, T))

    def test_history_rejects_other_iterables(self):
        with pytest.raises(TypeError, match="history must be a tuple or list"):
            ObserverEvent("v", T, "ab")

    def test_frozen(self):
        e = ObserverEvent(1, T)
        with pytest.raises(dataclasses.FrozenInstanceError):
            e.value = 2

    def test_equality(self):
        assert ObserverEvent(1, T) == ObserverEvent(1, T)
        assert ObserverEvent(1, T) != ObserverEvent(2, T)

    def test_repr(self):
        e = ObserverEvent("b", T, (HistoryEntry("a", T),))
        text = repr(e)
        assert text.startswith("ObserverEvent(value='b'")
        assert "HistoryEntry(value='a'" in text


class TestHistoryEntry:
    def test_frozen(self):
        h = HistoryEntry(1, T)
        with pytest.raises(dataclasses.FrozenInstanceError):
            h.value = 5

    def test_fields(self):
        h = HistoryEntry([1, 2], T)
        assert h.value == [1, 2]
        assert h.change_time == T
