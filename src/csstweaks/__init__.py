"""csstweaks: durable per-element CSS overrides for reflowable documents."""
from __future__ import annotations

__version__ = "0.1.0"

from csstweaks.engine.ledger import Ledger
from csstweaks.engine.session import TweakSession
from csstweaks.model.style import StyleCatalog, StyleDefinition
from csstweaks.stylesheet.synthesizer import build
from csstweaks.transforms.variables import resolve

__all__ = [
    "__version__",
    "Ledger",
    "TweakSession",
    "StyleCatalog",
    "StyleDefinition",
    "build",
    "resolve",
]
