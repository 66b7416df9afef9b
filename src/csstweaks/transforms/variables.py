"""Variable substitution: expands %TOKEN% placeholders in declaration text.

Token case selects the binding:
    %FONTSIZE%  -> static default value
    %fontsize%  -> live (current session) value
    %FontSize%  -> left untouched
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from csstweaks.model.bindings import Bindings, TextAlign

__all__ = ["Unit", "UNIT_TABLE", "TOKENS", "format_value", "resolve"]

# The closing "%" is a lookahead; resolve() consumes it only on substitution.
_TOKEN_RE = re.compile(r"%([A-Za-z]+)(?=%)")


@dataclass(frozen=True)
class Unit:
    """Canonical rendering for a numeric property."""

    suffix: str
    precision: int


# None marks a keyword property rendered without a unit.
UNIT_TABLE: dict[str, Unit | None] = {
    "FONTSIZE": Unit(suffix="pt", precision=1),
    "LINEHEIGHT": Unit(suffix="em", precision=3),
    "TEXTALIGN": None,
}

TOKENS = frozenset(UNIT_TABLE)


def format_value(token: str, value: float | TextAlign) -> str:
    """Render *value* for the upper-case *token* using ``UNIT_TABLE``."""
    unit = UNIT_TABLE[token]
    if isinstance(value, TextAlign):
        return value.value
    if unit is None:
        return str(value).lower()
    number = f"{float(value):.{unit.precision}f}"
    if "." in number:
        number = number.rstrip("0").rstrip(".")
    return f"{number}{unit.suffix}"


def _lookup(word: str, defaults: Bindings | None, live: Bindings | None) -> str | None:
    token = word.upper()
    if token not in TOKENS:
        return None
    if word.isupper():
        source = defaults
    elif word.islower():
        source = live
    else:
        return None
    if source is None:
        return None
    value = source.value_for(token)
    if value is None:
        return None
    return format_value(token, value)


def resolve(
    text: str,
    defaults: Bindings | None = None,
    live: Bindings | None = None,
) -> str:
    """Substitute every recognised token in *text*.

    Unknown names, mixed-case tokens and unbound values pass through
    unchanged. Tokens are scanned left to right; a substituted token
    consumes its closing ``%``. Pure: safe to call on every render.
    """
    out: list[str] = []
    pos = 0
    for m in _TOKEN_RE.finditer(text):
        if m.start() < pos:
            continue
        value = _lookup(m.group(1), defaults, live)
        if value is None:
            continue
        out.append(text[pos:m.start()])
        out.append(value)
        pos = m.end() + 1
    out.append(text[pos:])
    return "".join(out)
