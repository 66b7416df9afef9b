"""Stylesheet synthesizer: renders a ledger as CSS for the renderer to merge."""

from __future__ import annotations

from csstweaks.engine.ledger import Ledger
from csstweaks.model.bindings import Bindings
from csstweaks.model.override import OverrideRecord
from csstweaks.transforms.variables import resolve

__all__ = ["build", "render_rule"]


def render_rule(
    record: OverrideRecord,
    defaults: Bindings | None = None,
    live: Bindings | None = None,
) -> str:
    """Render one record as ``.class { declarations }``."""
    body = resolve(record.declaration_text, defaults, live)
    return f"{record.selector} {{ {body} }}"


def build(
    ledger: Ledger,
    defaults: Bindings | None = None,
    live: Bindings | None = None,
) -> str:
    """Render every record in ledger order, one rule per line.

    The renderer appends the result after the document's own stylesheet and
    the global user stylesheet, so these rules win specificity ties against
    both and later rules win ties against earlier ones.
    """
    return "\n".join(render_rule(r, defaults, live) for r in ledger)
