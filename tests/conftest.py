from __future__ import annotations

import pytest

from csstweaks.engine.session import TweakSession
from csstweaks.events.bus import EventBus
from csstweaks.model.bindings import Bindings, TextAlign
from csstweaks.model.style import StyleCatalog, StyleDefinition
from csstweaks.store.sidecar import SidecarStore

DOC_ID = "3f2a9c0d5e7b4a1f"


@pytest.fixture
def doc_id() -> str:
    return DOC_ID


@pytest.fixture
def catalog() -> StyleCatalog:
    return StyleCatalog(
        [
            StyleDefinition(name="indent", declaration_text="text-indent:1.5em;margin:0;padding:0;"),
            StyleDefinition(name="left-align", declaration_text="text-align:left;"),
            StyleDefinition(name="sized", declaration_text="font-size:%fontsize%;line-height:%LINEHEIGHT%;"),
        ]
    )


@pytest.fixture
def store(tmp_path) -> SidecarStore:
    return SidecarStore(tmp_path / "sidecars")


@pytest.fixture
def defaults() -> Bindings:
    return Bindings(font_size=11.0, line_height=1.2, text_align=TextAlign.LEFT)


@pytest.fixture
def events() -> list:
    return []


@pytest.fixture
def session(store, catalog, defaults, events) -> TweakSession:
    bus = EventBus()
    bus.on_all(events.append)
    return TweakSession.open(DOC_ID, store, catalog, defaults, bus=bus)
