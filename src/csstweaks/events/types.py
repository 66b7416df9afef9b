"""Event types emitted by a tweak session."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TweakApplied:
    document_id: str
    selector: str
    style: str | None
    promoted: bool

    @property
    def message(self) -> str:
        return f"{self.style or 'CSS'} applied to {self.selector}"


@dataclass(frozen=True)
class TweakUndone:
    document_id: str
    selector: str

    @property
    def message(self) -> str:
        return "Last tweak removed"


@dataclass(frozen=True)
class TweaksCleared:
    document_id: str
    count: int

    @property
    def message(self) -> str:
        return "All tweaks removed"


@dataclass(frozen=True)
class NothingToUndo:
    document_id: str

    @property
    def message(self) -> str:
        return "No tweaks to undo"


@dataclass(frozen=True)
class LedgerRolledBack:
    document_id: str
    error: str

    @property
    def message(self) -> str:
        return f"Tweak not saved: {self.error}"


@dataclass(frozen=True)
class SidecarCorrupt:
    document_id: str
    path: str

    @property
    def message(self) -> str:
        return f"Ignoring unreadable tweaks file {self.path}"
