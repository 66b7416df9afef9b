"""Tests for selectors, node descriptors, override records and the catalog."""

from __future__ import annotations

import json

import pytest

from csstweaks.errors import CatalogError, UnknownStyle
from csstweaks.model.bindings import Bindings, TextAlign
from csstweaks.model.node import NodeDescriptor, parse_chain, parse_node
from csstweaks.model.override import OverrideRecord
from csstweaks.model.selector import ClassSelector
from csstweaks.model.style import DEFAULT_STYLES, StyleCatalog, StyleDefinition, normalize_declarations


# ---------------------------------------------------------------------------
# ClassSelector
# ---------------------------------------------------------------------------


class TestClassSelector:
    def test_str_is_class_qualified(self) -> None:
        assert str(ClassSelector("para")) == ".para"

    def test_parse_with_and_without_dot(self) -> None:
        assert ClassSelector.parse(".para") == ClassSelector("para")
        assert ClassSelector.parse("para") == ClassSelector("para")

    def test_kind_is_class(self) -> None:
        assert ClassSelector("x").kind == "class"

    @pytest.mark.parametrize("bad", ["", "a b", "a\tb"])
    def test_rejects_whitespace(self, bad: str) -> None:
        with pytest.raises(ValueError):
            ClassSelector(bad)

    @pytest.mark.parametrize(
        "name, rendered",
        [("md:outer", r".md\:outer"), ("w-1/2", r".w-1\/2"), ("2col", r".\32 col"), ("a.b", r".a\.b")],
    )
    def test_special_characters_escaped(self, name: str, rendered: str) -> None:
        assert str(ClassSelector(name)) == rendered
        assert ClassSelector.parse(rendered) == ClassSelector(name)

    @pytest.mark.parametrize("bad", [".a:hover", ".b .c", ".a.b", "#id", ".x > .y"])
    def test_parse_rejects_compound_selectors(self, bad: str) -> None:
        with pytest.raises(ValueError):
            ClassSelector.parse(bad)

    def test_is_frozen(self) -> None:
        sel = ClassSelector("para")
        with pytest.raises(AttributeError):
            sel.class_name = "other"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# NodeDescriptor
# ---------------------------------------------------------------------------


class TestNodeDescriptor:
    def test_block_tags(self) -> None:
        for tag in ("p", "h1", "h6", "div", "li", "blockquote"):
            assert NodeDescriptor(tag=tag).is_block

    def test_inline_tags(self) -> None:
        for tag in ("span", "a", "em", "strong"):
            assert not NodeDescriptor(tag=tag).is_block

    def test_from_attrs_splits_classes(self) -> None:
        n = NodeDescriptor.from_attrs("P", "  first  second ")
        assert n.tag == "p"
        assert n.classes == ("first", "second")
        assert n.class_attribute == "first second"

    def test_from_attrs_without_class(self) -> None:
        n = NodeDescriptor.from_attrs("div")
        assert n.classes == ()
        assert n.class_attribute is None

    def test_parse_node(self) -> None:
        assert parse_node("p.inner.lead") == NodeDescriptor(tag="p", classes=("inner", "lead"))
        assert str(parse_node("span")) == "span"

    def test_parse_node_invalid(self) -> None:
        with pytest.raises(ValueError):
            parse_node("p..x y")

    def test_parse_chain_root_to_leaf(self) -> None:
        chain = parse_chain("div.outer > span > p.inner")
        assert [str(n) for n in chain] == ["div.outer", "span", "p.inner"]

    def test_parse_chain_empty(self) -> None:
        with pytest.raises(ValueError):
            parse_chain("  > ")


# ---------------------------------------------------------------------------
# OverrideRecord
# ---------------------------------------------------------------------------


class TestOverrideRecord:
    def test_same_tweak_by_style(self) -> None:
        r = OverrideRecord(ClassSelector("para"), "margin:0;", style="indent")
        assert r.same_tweak(ClassSelector("para"), "indent", "margin:1em;")
        assert not r.same_tweak(ClassSelector("para"), "other", "margin:0;")
        assert not r.same_tweak(ClassSelector("other"), "indent", "margin:0;")

    def test_same_tweak_by_text_without_style(self) -> None:
        r = OverrideRecord(ClassSelector("para"), "margin:0;")
        assert r.same_tweak(ClassSelector("para"), "indent", "margin:0;")
        assert not r.same_tweak(ClassSelector("para"), "indent", "margin:1em;")

    def test_to_dict_shape(self) -> None:
        r = OverrideRecord(ClassSelector("para"), "margin:0;")
        assert r.to_dict() == {"selector": ".para", "declarationText": "margin:0;"}
        styled = OverrideRecord(ClassSelector("para"), "margin:0;", style="indent")
        assert styled.to_dict()["style"] == "indent"

    def test_from_dict(self) -> None:
        r = OverrideRecord.from_dict({"selector": ".para", "declarationText": "a:b;", "extra": 1})
        assert r == OverrideRecord(ClassSelector("para"), "a:b;")

    def test_from_dict_rejects_non_strings(self) -> None:
        with pytest.raises(TypeError):
            OverrideRecord.from_dict({"selector": 3, "declarationText": "a:b;"})


# ---------------------------------------------------------------------------
# Bindings
# ---------------------------------------------------------------------------


class TestBindings:
    def test_defaults(self) -> None:
        b = Bindings.defaults()
        assert b.font_size == 11.0
        assert b.line_height == 1.2
        assert b.text_align is TextAlign.LEFT

    def test_value_for(self) -> None:
        b = Bindings(font_size=12.0)
        assert b.value_for("FONTSIZE") == 12.0
        assert b.value_for("LINEHEIGHT") is None
        assert b.value_for("COLOR") is None

    def test_overlay_keeps_unbound_fields(self) -> None:
        merged = Bindings.defaults().overlay(Bindings(font_size=14.0))
        assert merged.font_size == 14.0
        assert merged.line_height == 1.2

    def test_text_align_parse(self) -> None:
        assert TextAlign.parse(" Justify ") is TextAlign.JUSTIFY
        with pytest.raises(ValueError):
            TextAlign.parse("middle")


# ---------------------------------------------------------------------------
# StyleCatalog
# ---------------------------------------------------------------------------


class TestStyleCatalog:
    def test_get_and_unknown(self) -> None:
        catalog = StyleCatalog([StyleDefinition("a", "margin:0;")])
        assert catalog.get("a").declaration_text == "margin:0;"
        with pytest.raises(UnknownStyle):
            catalog.get("b")

    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(CatalogError):
            StyleCatalog([StyleDefinition("a", "x:y;"), StyleDefinition("a", "z:w;")])

    def test_from_entries_preserves_order_and_skips_blank(self) -> None:
        catalog = StyleCatalog.from_entries(
            [
                {"name": "second", "css": "b:c;"},
                {"name": "empty", "css": "   "},
                {"name": "first", "declarationText": "{ a:b; }"},
            ]
        )
        assert catalog.names() == ["second", "first"]
        assert catalog.get("first").declaration_text == "a:b;"

    def test_from_entries_requires_name(self) -> None:
        with pytest.raises(CatalogError):
            StyleCatalog.from_entries([{"css": "a:b;"}])

    def test_default_catalog(self) -> None:
        catalog = StyleCatalog.default()
        assert catalog.names() == [s.name for s in DEFAULT_STYLES]
        assert "%fontsize%" in catalog.get("Main paragraph").declaration_text

    def test_load_json(self, tmp_path) -> None:
        path = tmp_path / "styles.json"
        path.write_text(json.dumps([{"name": "indent", "css": "text-indent:1em;"}]))
        assert StyleCatalog.load(path).names() == ["indent"]

    def test_load_toml(self, tmp_path) -> None:
        path = tmp_path / "Settings.toml"
        path.write_text(
            '[[css-styles]]\nname = "Main"\ncss = "margin:0;"\n\n'
            '[[css-styles]]\nname = "Open"\ncss = "margin:2em 0 0 0;"\n'
        )
        assert StyleCatalog.load(path).names() == ["Main", "Open"]

    def test_load_malformed(self, tmp_path) -> None:
        path = tmp_path / "styles.json"
        path.write_text("{not json")
        with pytest.raises(CatalogError):
            StyleCatalog.load(path)

    def test_load_missing(self, tmp_path) -> None:
        with pytest.raises(CatalogError):
            StyleCatalog.load(tmp_path / "absent.json")

    def test_normalize_declarations(self) -> None:
        assert normalize_declarations("  { margin:0; }  ") == "margin:0;"
        assert normalize_declarations("margin:0;") == "margin:0;"
