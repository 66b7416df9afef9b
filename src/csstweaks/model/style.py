"""Style catalog: named declaration blocks users can apply as tweaks."""

from __future__ import annotations

import json
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping

from csstweaks.errors import CatalogError, UnknownStyle

log = logging.getLogger("csstweaks.catalog")


def normalize_declarations(text: str) -> str:
    """Strip whitespace and one level of wrapping braces from *text*."""
    text = text.strip()
    if text.startswith("{"):
        text = text[1:]
    if text.endswith("}"):
        text = text[:-1]
    return text.strip()


@dataclass(frozen=True)
class StyleDefinition:
    """A named block of ``property:value;`` declarations."""

    name: str
    declaration_text: str


DEFAULT_STYLES: tuple[StyleDefinition, ...] = (
    StyleDefinition(
        name="Main paragraph",
        declaration_text=(
            "margin:0; padding:0; text-indent:1.5em; text-align:%textalign%; "
            "font-size:%fontsize%; line-height:%lineheight%;"
        ),
    ),
    StyleDefinition(
        name="Opening paragraph",
        declaration_text=(
            "margin:2em 0 0 0; padding:0; text-indent:0; text-align:%textalign%; "
            "font-size:%fontsize%; line-height:%lineheight%;"
        ),
    ),
    StyleDefinition(
        name="Force preferences",
        declaration_text=(
            "font-family:serif; text-align:%textalign%; "
            "font-size:%fontsize%; line-height:%lineheight%;"
        ),
    ),
)


class StyleCatalog:
    """Immutable, ordered set of style definitions keyed by unique name."""

    def __init__(self, definitions: Iterable[StyleDefinition] = ()) -> None:
        self._styles: dict[str, StyleDefinition] = {}
        for d in definitions:
            if d.name in self._styles:
                raise CatalogError(f"Duplicate style name: {d.name!r}")
            self._styles[d.name] = d

    # --- factories ------------------------------------------------------------

    @classmethod
    def default(cls) -> StyleCatalog:
        return cls(DEFAULT_STYLES)

    @classmethod
    def from_entries(cls, entries: Iterable[Mapping[str, Any]]) -> StyleCatalog:
        """Build a catalog from ``{name, css}`` / ``{name, declarationText}`` mappings.

        Entries with blank declarations are skipped.
        """
        definitions: list[StyleDefinition] = []
        for i, entry in enumerate(entries):
            if not isinstance(entry, Mapping):
                raise CatalogError(f"Style entry {i} is not a table")
            name = entry.get("name")
            text = entry.get("declarationText", entry.get("css", ""))
            if not isinstance(name, str) or not name.strip():
                raise CatalogError(f"Style entry {i} has no name")
            if not isinstance(text, str):
                raise CatalogError(f"Style {name!r} has non-string declarations")
            text = normalize_declarations(text)
            if not text:
                log.warning("Skipping style %r: empty declarations", name)
                continue
            definitions.append(StyleDefinition(name=name.strip(), declaration_text=text))
        return cls(definitions)

    @classmethod
    def load(cls, path: Path) -> StyleCatalog:
        """Load a catalog from a ``.json`` or ``.toml`` file.

        Both accept either a top-level list of entries or a ``css-styles``
        array, matching the reader's settings file layout.
        """
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogError(f"Cannot read catalog {path}: {exc}", cause=exc) from exc
        try:
            if path.suffix.lower() == ".toml":
                data: Any = tomllib.loads(raw)
            else:
                data = json.loads(raw)
        except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
            raise CatalogError(f"Malformed catalog {path}: {exc}", cause=exc) from exc

        if isinstance(data, Mapping):
            data = data.get("css-styles", [])
        if not isinstance(data, list):
            raise CatalogError(f"Catalog {path} must hold a list of styles")
        catalog = cls.from_entries(data)
        log.info("Loaded %d style(s) from %s", len(catalog), path)
        return catalog

    # --- lookup ---------------------------------------------------------------

    def get(self, name: str) -> StyleDefinition:
        try:
            return self._styles[name]
        except KeyError:
            raise UnknownStyle(name) from None

    def names(self) -> list[str]:
        return list(self._styles)

    def __contains__(self, name: object) -> bool:
        return name in self._styles

    def __iter__(self) -> Iterator[StyleDefinition]:
        return iter(self._styles.values())

    def __len__(self) -> int:
        return len(self._styles)
