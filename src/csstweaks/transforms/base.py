"""Protocol for the renderer-side merge point of synthesized CSS."""

from __future__ import annotations

from typing import Protocol


class StylesheetSink(Protocol):
    """Receives tweak CSS to merge after the document and user stylesheets."""

    def set_extra_css(self, css: str) -> None: ...
