"""Override record: one applied tweak in a document's ledger."""

from __future__ import annotations

from dataclasses import dataclass

from csstweaks.model.selector import ClassSelector


@dataclass(frozen=True)
class OverrideRecord:
    """A selector paired with a snapshot of declaration text.

    ``declaration_text`` is copied from the catalog when the tweak is
    applied and may still contain unresolved ``%TOKEN%`` placeholders.
    ``style`` names the catalog entry it came from, or is ``None`` for
    records imported from plain CSS.
    """

    selector: ClassSelector
    declaration_text: str
    style: str | None = None

    def same_tweak(self, selector: ClassSelector, style: str | None, declaration_text: str) -> bool:
        """Return True if re-applying (*selector*, *style*) should promote this record."""
        if self.selector != selector:
            return False
        if self.style is not None and style is not None:
            return self.style == style
        return self.declaration_text == declaration_text

    # --- serialisation --------------------------------------------------------

    def to_dict(self) -> dict[str, str]:
        data = {
            "selector": str(self.selector),
            "declarationText": self.declaration_text,
        }
        if self.style is not None:
            data["style"] = self.style
        return data

    @classmethod
    def from_dict(cls, data: dict) -> OverrideRecord:
        selector = data["selector"]
        text = data["declarationText"]
        style = data.get("style")
        if not isinstance(selector, str) or not isinstance(text, str):
            raise TypeError("selector and declarationText must be strings")
        if style is not None and not isinstance(style, str):
            raise TypeError("style must be a string")
        return cls(
            selector=ClassSelector.parse(selector),
            declaration_text=text,
            style=style,
        )
