"""Stylesheet model: a parsed rule of plain CSS text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CssRule:
    """A selector (as written) paired with its raw declaration block."""

    selector_text: str
    declaration_text: str
