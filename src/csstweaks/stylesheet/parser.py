"""Parser for flat extra-CSS text such as older readers stored per book.

Syntax example:
    .para { text-indent:1.5em; margin:0; }
    .chapter-open { margin:2em 0 0 0; }
"""

from __future__ import annotations

import logging
import re

from csstweaks.engine.ledger import Ledger
from csstweaks.model.selector import ClassSelector
from csstweaks.model.style import normalize_declarations
from csstweaks.stylesheet.model import CssRule

__all__ = ["parse_rules", "import_css"]

log = logging.getLogger("csstweaks.stylesheet")

# Matches a complete rule: selector { declarations }
_RULE_RE = re.compile(
    r"""
    (?P<selector>[^{}]+)    # everything before the opening brace
    \{                      # opening brace
    (?P<body>[^}]*)         # declarations
    \}                      # closing brace
    """,
    re.VERBOSE,
)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)


def parse_rules(source: str) -> list[CssRule]:
    """Parse *source* into rules in source order, skipping empty blocks."""
    source = _COMMENT_RE.sub("", source)
    rules: list[CssRule] = []
    for match in _RULE_RE.finditer(source):
        body = normalize_declarations(match.group("body"))
        if not body:
            continue
        rules.append(
            CssRule(
                selector_text=match.group("selector").strip(),
                declaration_text=body,
            )
        )
    return rules


def import_css(ledger: Ledger, source: str) -> Ledger:
    """Append every class-selector rule of *source* to *ledger*, in order.

    Imported records carry no style name; selectors other than a single
    ``.class`` are skipped.
    """
    for rule in parse_rules(source):
        if not rule.selector_text.startswith("."):
            log.warning("Skipping non-class selector %r", rule.selector_text)
            continue
        try:
            selector = ClassSelector.parse(rule.selector_text)
        except ValueError:
            log.warning("Skipping unsupported selector %r", rule.selector_text)
            continue
        ledger = ledger.apply(selector, None, rule.declaration_text)
    return ledger
