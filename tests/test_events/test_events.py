"""Tests for the event bus and event messages."""

from __future__ import annotations

import logging

from csstweaks.events import (
    EventBus,
    LedgerRolledBack,
    NothingToUndo,
    TweakApplied,
    TweaksCleared,
    TweakUndone,
)


class TestEventBus:
    def test_typed_and_global_listeners(self) -> None:
        bus = EventBus()
        seen: list[str] = []
        bus.subscribe(TweakUndone, lambda e: seen.append("typed"))
        bus.on_all(lambda e: seen.append("all"))
        bus.emit(TweakUndone(document_id="d", selector=".a"))
        bus.emit(NothingToUndo(document_id="d"))
        assert seen == ["all", "typed", "all"]

    def test_unsubscribe(self) -> None:
        bus = EventBus()
        seen: list = []
        bus.subscribe(NothingToUndo, seen.append)
        bus.unsubscribe(NothingToUndo, seen.append)
        bus.unsubscribe(TweakUndone, seen.append)
        bus.emit(NothingToUndo(document_id="d"))
        assert seen == []

    def test_failing_listener_does_not_stop_delivery(self, caplog) -> None:
        bus = EventBus()
        seen: list = []

        def broken(event) -> None:
            raise RuntimeError("boom")

        bus.on_all(broken)
        bus.on_all(seen.append)
        with caplog.at_level(logging.ERROR, logger="csstweaks.events"):
            bus.emit(NothingToUndo(document_id="d"))
        assert len(seen) == 1
        assert "NothingToUndo" in caplog.text


class TestMessages:
    def test_applied(self) -> None:
        event = TweakApplied(document_id="d", selector=".para", style="Main paragraph", promoted=False)
        assert event.message == "Main paragraph applied to .para"

    def test_applied_imported(self) -> None:
        event = TweakApplied(document_id="d", selector=".para", style=None, promoted=False)
        assert event.message == "CSS applied to .para"

    def test_undo_messages(self) -> None:
        assert TweakUndone(document_id="d", selector=".a").message == "Last tweak removed"
        assert TweaksCleared(document_id="d", count=3).message == "All tweaks removed"
        assert NothingToUndo(document_id="d").message == "No tweaks to undo"

    def test_rolled_back(self) -> None:
        assert "disk full" in LedgerRolledBack(document_id="d", error="disk full").message
