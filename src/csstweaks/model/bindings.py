"""Variable bindings: typographic values substituted into tweak declarations."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

DEFAULT_FONT_SIZE = 11.0
DEFAULT_LINE_HEIGHT = 1.2


class TextAlign(Enum):
    """Keyword values accepted for ``text-align``."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"

    @classmethod
    def parse(cls, raw: str) -> TextAlign:
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid text-align: {raw!r}") from None


DEFAULT_TEXT_ALIGN = TextAlign.LEFT


@dataclass(frozen=True)
class Bindings:
    """Snapshot of the three substitutable settings.

    A field left as ``None`` is unbound: tokens referring to it are kept
    verbatim by the substitution engine.
    """

    font_size: float | None = None  # points
    line_height: float | None = None  # em
    text_align: TextAlign | None = None

    @classmethod
    def defaults(cls) -> Bindings:
        """The reader's built-in default values."""
        return cls(
            font_size=DEFAULT_FONT_SIZE,
            line_height=DEFAULT_LINE_HEIGHT,
            text_align=DEFAULT_TEXT_ALIGN,
        )

    def value_for(self, token: str) -> float | TextAlign | None:
        """Return the value bound to an upper-case token name, if any."""
        if token == "FONTSIZE":
            return self.font_size
        if token == "LINEHEIGHT":
            return self.line_height
        if token == "TEXTALIGN":
            return self.text_align
        return None

    def overlay(self, other: Bindings) -> Bindings:
        """Return a copy with every bound field of *other* taking precedence."""
        updates = {
            name: value
            for name, value in (
                ("font_size", other.font_size),
                ("line_height", other.line_height),
                ("text_align", other.text_align),
            )
            if value is not None
        }
        return replace(self, **updates)
