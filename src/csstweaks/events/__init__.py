"""Event system: bus and event types for tweak notifications."""

from csstweaks.events.bus import EventBus
from csstweaks.events.types import (
    LedgerRolledBack,
    NothingToUndo,
    SidecarCorrupt,
    TweakApplied,
    TweaksCleared,
    TweakUndone,
)

__all__ = [
    "EventBus",
    "LedgerRolledBack",
    "NothingToUndo",
    "SidecarCorrupt",
    "TweakApplied",
    "TweaksCleared",
    "TweakUndone",
]
