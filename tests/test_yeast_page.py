"""Tests for yeastview.page — page skeleton and stylesheet handling."""
from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from yeastview.errors import ConfigurationError, YeastIOError
from yeastview.interpreter import parse_lines
from yeastview.page import BUILTIN_STYLE, SCRIPT, PageOptions, assemble_page, style_region


class TestPageOptions:
    def test_defaults(self) -> None:
        options = PageOptions()
        assert options.tree_title == "Syntax Tree"
        assert options.text_title == "YAML Text"
        assert options.stylesheet is None
        assert options.link_stylesheet is False

    def test_link_without_stylesheet_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="requires a stylesheet"):
            PageOptions(link_stylesheet=True)


class TestStyleRegion:
    def test_builtin_style(self) -> None:
        region = style_region(PageOptions())
        assert region.startswith("<style>")
        assert BUILTIN_STYLE in region

    def test_embedded_stylesheet_is_verbatim(self, tmp_path: Path) -> None:
        css = tmp_path / "custom.css"
        css.write_text(".leaf { color: red; }\n", encoding="utf-8")
        region = style_region(PageOptions(stylesheet=css))
        assert ".leaf { color: red; }" in region
        assert BUILTIN_STYLE not in region

    def test_linked_stylesheet(self, tmp_path: Path) -> None:
        css = tmp_path / "custom.css"
        region = style_region(PageOptions(stylesheet=css, link_stylesheet=True))
        link = BeautifulSoup(region, "html.parser").find("link")
        assert link["rel"] == ["stylesheet"]
        assert link["href"] == css.as_posix()

    def test_missing_stylesheet(self, tmp_path: Path) -> None:
        with pytest.raises(YeastIOError, match="cannot read"):
            style_region(PageOptions(stylesheet=tmp_path / "missing.css"))


class TestAssemblePage:
    def test_page_has_both_panes(self) -> None:
        page = assemble_page(parse_lines(["Sfoo", "s"]))
        assert page.startswith("<!DOCTYPE html>")
        assert SCRIPT in page
        soup = BeautifulSoup(page, "html.parser")
        tree_pane = soup.find(id="tree-pane")
        text_pane = soup.find(id="text-pane")
        assert tree_pane.find("h2").get_text() == "Syntax Tree"
        assert text_pane.find("h2").get_text() == "YAML Text"
        assert tree_pane.find(id="tree-2") is not None
        assert text_pane.find(id="text-2").get_text() == "foo"

    def test_custom_titles_are_escaped(self) -> None:
        options = PageOptions(tree_title="Tree & Co", text_title="<Text>")
        page = assemble_page(parse_lines(["Tx"]), options)
        assert "Tree &amp; Co" in page
        assert "&lt;Text&gt;" in page

    def test_comment_only_input_gives_valid_page(self) -> None:
        page = assemble_page(parse_lines(["# only a comment"]))
        soup = BeautifulSoup(page, "html.parser")
        assert soup.find(id="text-pane").find("div", class_="text").find_all("span") == []
        assert soup.find(id="tree-0") is not None
        assert soup.find(id="tree-1") is None

    def test_assembly_is_repeatable(self) -> None:
        model = parse_lines(["M", "m"])
        assert assemble_page(model) == assemble_page(model)
