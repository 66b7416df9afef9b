"""HTML inspection page listing a document's tweaks."""

from __future__ import annotations

from html import escape

from csstweaks.engine.ledger import Ledger
from csstweaks.engine.resolver import Proposal
from csstweaks.model.style import StyleCatalog
from csstweaks.stylesheet.synthesizer import render_rule

__all__ = ["render_report"]

_HEAD = (
    "<html><head><title>CSS tweaks</title>\n"
    '<link rel="stylesheet" type="text/css" href="css/css-tweaks.css"/>\n'
    "</head>\n<body>\n"
)


def render_report(
    ledger: Ledger,
    catalog: StyleCatalog,
    selection: Proposal | None = None,
) -> str:
    """Render the tweak inspection page.

    Sections, each omitted when empty: the selectors under the current
    selection, the applied rules in ledger order (unresolved, as stored),
    and the available catalog styles.
    """
    parts = [_HEAD]

    if selection is not None:
        nodes = " &gt; ".join(
            escape(str(c.node)) for c in reversed(selection.candidates)
        )
        selectors = ", ".join(selection.selectors()) or "(none)"
        parts.append(
            f"<p><strong>selector</strong>: {escape(selectors)}<br />\n"
            f"<strong>elements</strong>: {nodes}</p>\n"
        )

    if ledger:
        parts.append("<h3>Applied styles</h3>\n<ul>\n")
        for record in ledger:
            origin = f" <em>({escape(record.style)})</em>" if record.style else ""
            parts.append(f"<li><code>{escape(render_rule(record))}</code>{origin}</li>\n")
        parts.append("</ul>\n")

    if len(catalog):
        parts.append("<h3>Available styles</h3>\n<ul>\n")
        for style in catalog:
            parts.append(
                f"<li><strong>{escape(style.name)}</strong>: "
                f"<code>{escape(style.declaration_text)}</code></li>\n"
            )
        parts.append("</ul>\n")

    parts.append("\n</body></html>")
    return "".join(parts)
