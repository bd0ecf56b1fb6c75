"""Unit tests for tabstop marker rendering."""

import pytest

from ternexpand.core.models import MarkerStyle
from ternexpand.snippet.markers import (
    PRIMARY_CLOSE,
    PRIMARY_OPEN,
    SECONDARY,
    SYNTAXES,
    get_syntax,
    render_template,
)

TEMPLATE = f"({PRIMARY_OPEN}a{PRIMARY_CLOSE}, {PRIMARY_OPEN}function() {{{SECONDARY}}}{PRIMARY_CLOSE})"


class TestGetSyntax:
    """Tests for marker syntax lookup."""

    def test_every_style_registered(self) -> None:
        assert set(SYNTAXES) == set(MarkerStyle)

    def test_lookup_by_name(self) -> None:
        assert get_syntax("chocolat") is SYNTAXES[MarkerStyle.CHOCOLAT]

    def test_unknown_style(self) -> None:
        with pytest.raises(ValueError):
            get_syntax("vim")


class TestRenderTemplate:
    """Tests for numbering and escaping."""

    def test_textmate(self) -> None:
        rendered = render_template(TEMPLATE, MarkerStyle.TEXTMATE)
        assert rendered.text == "(${1:a}, ${2:function() {${3}\\}})"
        assert rendered.tabstops == 3

    def test_chocolat(self) -> None:
        rendered = render_template(TEMPLATE, MarkerStyle.CHOCOLAT)
        assert rendered.text == '(%{1="a"}, %{2="function() {%{3}}"})'

    def test_plain(self) -> None:
        rendered = render_template(TEMPLATE, MarkerStyle.PLAIN)
        assert rendered.text == "(a, function() {})"

    def test_secondary_before_primary(self) -> None:
        template = f"{SECONDARY} {PRIMARY_OPEN}x{PRIMARY_CLOSE}"
        assert render_template(template, "textmate").text == "${1} ${2:x}"

    def test_no_markers(self) -> None:
        rendered = render_template("()", MarkerStyle.TEXTMATE)
        assert rendered.text == "()"
        assert rendered.tabstops == 0

    def test_textmate_escapes_specials(self) -> None:
        template = f"{PRIMARY_OPEN}a$b}}c\\d{PRIMARY_CLOSE}"
        assert render_template(template, "textmate").text == "${1:a\\$b\\}c\\\\d}"

    def test_counter_is_per_call(self) -> None:
        first = render_template(TEMPLATE, MarkerStyle.TEXTMATE)
        second = render_template(TEMPLATE, MarkerStyle.TEXTMATE)
        assert first == second
