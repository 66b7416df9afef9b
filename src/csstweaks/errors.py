"""Error hierarchy for the tweak engine."""
from __future__ import annotations

from pathlib import Path


class TweakError(Exception):
    """Base error for all csstweaks errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


class UnresolvableSelection(TweakError):
    """The tapped location has no block-level ancestor to style."""


class NoClassAttribute(TweakError):
    """The chosen block element carries no class attribute."""

    def __init__(self, tag: str, **kwargs) -> None:
        super().__init__(f"<{tag}> has no class attribute", **kwargs)
        self.tag = tag


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class CatalogError(TweakError):
    """The style catalog configuration is invalid."""


class UnknownStyle(TweakError):
    """The requested style name is not in the catalog."""

    def __init__(self, name: str, **kwargs) -> None:
        super().__init__(f"Unknown style: {name!r}", **kwargs)
        self.name = name


# ---------------------------------------------------------------------------
# Ledger / persistence
# ---------------------------------------------------------------------------


class EmptyLedger(TweakError):
    """Undo was requested on a ledger with no records."""

    def __init__(self, message: str = "No tweaks to undo", **kwargs) -> None:
        super().__init__(message, **kwargs)


class PersistenceFailure(TweakError):
    """Writing a sidecar failed; the in-memory mutation was rolled back."""

    def __init__(self, message: str, *, path: Path | None = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.path = path


class CorruptStore(TweakError):
    """A sidecar exists but cannot be decoded."""

    def __init__(self, message: str, *, path: Path | None = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.path = path
