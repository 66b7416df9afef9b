"""Configuration for the tweak engine."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from csstweaks.engine.resolver import ClassTokenPolicy
from csstweaks.model.bindings import (
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_HEIGHT,
    DEFAULT_TEXT_ALIGN,
    Bindings,
    TextAlign,
)
from csstweaks.model.style import StyleCatalog

# Sidecar location: user-level, independent of where books live.
DEFAULT_HOME = Path.home() / ".csstweaks"


@dataclass(frozen=True)
class TweaksConfig:
    sidecar_dir: str = str(DEFAULT_HOME / "sidecars")
    catalog_path: str = ""  # empty means the built-in styles
    class_token_policy: ClassTokenPolicy = ClassTokenPolicy.FIRST
    font_size: float = DEFAULT_FONT_SIZE
    line_height: float = DEFAULT_LINE_HEIGHT
    text_align: TextAlign = DEFAULT_TEXT_ALIGN

    @classmethod
    def from_env(cls) -> TweaksConfig:
        """Build a config from ``CSSTWEAKS_*`` environment variables."""
        home = Path(os.getenv("CSSTWEAKS_HOME", str(DEFAULT_HOME)))
        policy = os.getenv("CSSTWEAKS_CLASS_TOKENS", ClassTokenPolicy.FIRST.value)
        return cls(
            sidecar_dir=str(home / "sidecars"),
            catalog_path=os.getenv("CSSTWEAKS_CATALOG", ""),
            class_token_policy=ClassTokenPolicy(policy.strip().lower()),
        )

    def default_bindings(self) -> Bindings:
        return Bindings(
            font_size=self.font_size,
            line_height=self.line_height,
            text_align=self.text_align,
        )

    def load_catalog(self) -> StyleCatalog:
        if not self.catalog_path:
            return StyleCatalog.default()
        return StyleCatalog.load(Path(self.catalog_path))
