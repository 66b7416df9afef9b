"""Tests for environment-driven configuration."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from csstweaks.config import TweaksConfig
from csstweaks.engine.resolver import ClassTokenPolicy
from csstweaks.errors import CatalogError
from csstweaks.model.bindings import Bindings, TextAlign
from csstweaks.model.style import DEFAULT_STYLES


class TestTweaksConfig:
    def test_defaults(self, monkeypatch) -> None:
        for var in ("CSSTWEAKS_HOME", "CSSTWEAKS_CATALOG", "CSSTWEAKS_CLASS_TOKENS"):
            monkeypatch.delenv(var, raising=False)
        config = TweaksConfig.from_env()
        assert config.sidecar_dir == str(Path.home() / ".csstweaks" / "sidecars")
        assert config.class_token_policy is ClassTokenPolicy.FIRST
        assert config.default_bindings() == Bindings(11.0, 1.2, TextAlign.LEFT)
        assert tuple(config.load_catalog()) == DEFAULT_STYLES

    def test_from_env(self, monkeypatch, tmp_path) -> None:
        catalog = tmp_path / "styles.json"
        catalog.write_text(json.dumps([{"name": "flush", "css": "text-indent:0;"}]))
        monkeypatch.setenv("CSSTWEAKS_HOME", str(tmp_path / "home"))
        monkeypatch.setenv("CSSTWEAKS_CATALOG", str(catalog))
        monkeypatch.setenv("CSSTWEAKS_CLASS_TOKENS", "ALL")
        config = TweaksConfig.from_env()
        assert config.sidecar_dir == str(tmp_path / "home" / "sidecars")
        assert config.class_token_policy is ClassTokenPolicy.ALL
        assert config.load_catalog().names() == ["flush"]

    def test_bad_policy(self, monkeypatch) -> None:
        monkeypatch.setenv("CSSTWEAKS_CLASS_TOKENS", "some")
        with pytest.raises(ValueError):
            TweaksConfig.from_env()

    def test_missing_catalog_file(self, tmp_path) -> None:
        config = TweaksConfig(catalog_path=str(tmp_path / "nope.toml"))
        with pytest.raises(CatalogError):
            config.load_catalog()
