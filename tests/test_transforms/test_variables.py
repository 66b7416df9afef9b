"""Tests for %TOKEN% variable substitution."""

from __future__ import annotations

import pytest

from csstweaks.model.bindings import Bindings, TextAlign
from csstweaks.transforms.variables import UNIT_TABLE, format_value, resolve


class TestCaseSelectsBinding:
    def test_uppercase_uses_defaults(self) -> None:
        assert resolve("%FONTSIZE%", defaults=Bindings(font_size=14.5)) == "14.5pt"

    def test_lowercase_uses_live(self) -> None:
        assert resolve("%fontsize%", live=Bindings(font_size=12.0)) == "12pt"

    def test_mixed_case_untouched(self) -> None:
        b = Bindings(font_size=12.0)
        assert resolve("%FontSize%", defaults=b, live=b) == "%FontSize%"

    def test_both_namespaces_in_one_text(self) -> None:
        text = "font-size:%FONTSIZE%; line-height:%lineheight%;"
        out = resolve(text, defaults=Bindings(font_size=11.0), live=Bindings(line_height=1.5))
        assert out == "font-size:11pt; line-height:1.5em;"

    def test_uppercase_ignores_live(self) -> None:
        assert resolve("%FONTSIZE%", live=Bindings(font_size=12.0)) == "%FONTSIZE%"


class TestPassThrough:
    def test_unknown_token(self) -> None:
        assert resolve("%COLOR%", defaults=Bindings.defaults()) == "%COLOR%"

    def test_unbound_value(self) -> None:
        assert resolve("%lineheight%", live=Bindings(font_size=12.0)) == "%lineheight%"

    def test_no_tokens(self) -> None:
        assert resolve("margin:0;", Bindings.defaults(), Bindings.defaults()) == "margin:0;"

    def test_unknown_token_sharing_percent(self) -> None:
        live = Bindings(font_size=12.0)
        assert resolve("%x%fontsize%", live=live) == "%x12pt"

    def test_adjacent_tokens(self) -> None:
        defaults = Bindings.defaults()
        assert resolve("%FONTSIZE%%LINEHEIGHT%", defaults) == "11pt1.2em"
        assert resolve("%FONTSIZE%LINEHEIGHT%", defaults) == "11ptLINEHEIGHT%"

    def test_percent_values_survive(self) -> None:
        assert resolve("width:50%;", Bindings.defaults()) == "width:50%;"


class TestUnits:
    def test_table_is_explicit(self) -> None:
        assert UNIT_TABLE["FONTSIZE"].suffix == "pt"
        assert UNIT_TABLE["LINEHEIGHT"].suffix == "em"
        assert UNIT_TABLE["TEXTALIGN"] is None

    def test_line_height_in_em(self) -> None:
        assert resolve("%LINEHEIGHT%", defaults=Bindings(line_height=1.2)) == "1.2em"

    def test_line_height_precision(self) -> None:
        assert format_value("LINEHEIGHT", 1.23456) == "1.235em"

    def test_text_align_keyword(self) -> None:
        live = Bindings(text_align=TextAlign.JUSTIFY)
        assert resolve("text-align:%textalign%;", live=live) == "text-align:justify;"

    @pytest.mark.parametrize(
        "value,expected",
        [(12.0, "12pt"), (14.5, "14.5pt"), (9.25, "9.2pt"), (0.0, "0pt")],
    )
    def test_font_size_rendering(self, value: float, expected: str) -> None:
        assert format_value("FONTSIZE", value) == expected


class TestPurity:
    def test_repeated_calls_are_stable(self) -> None:
        text = "font-size:%fontsize%;"
        first = resolve(text, live=Bindings(font_size=10.0))
        second = resolve(text, live=Bindings(font_size=16.0))
        assert first == "font-size:10pt;"
        assert second == "font-size:16pt;"
        assert text == "font-size:%fontsize%;"
