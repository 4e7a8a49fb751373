"""Tests for yeastview.render — tree and text panes and their correlation."""
from __future__ import annotations

from bs4 import BeautifulSoup

from yeastview.interpreter import parse_lines
from yeastview.render import LEGEND_ID, LEGEND_ROWS, render_text, render_tree


def _soup(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


class TestTreePass:
    def test_scalar_node_contains_text_leaf(self) -> None:
        tree = _soup(render_tree(parse_lines(["Sfoo", "s"])))
        node = tree.find(id="tree-1")
        assert node is not None
        assert "node" in node["class"]
        assert node.find("span", class_="label").get_text() == "Scalar"
        leaf = node.find(id="tree-2")
        assert leaf is not None
        assert "leaf" in leaf["class"]
        assert leaf["title"] == "foo"
        assert leaf.get_text() == "Text"
        assert tree.find(id="tree-3") is None

    def test_legend_comes_first(self) -> None:
        tree = _soup(render_tree(parse_lines(["Tfoo"])))
        items = tree.find("ul", class_="tree").find_all("li", recursive=False)
        assert items[0]["id"] == f"tree-{LEGEND_ID}"
        assert len(items[0].find_all("li", class_="legend-row")) == len(LEGEND_ROWS)
        assert items[1]["id"] == "tree-1"

    def test_bom_leaf_shows_encoding(self) -> None:
        tree = _soup(render_tree(parse_lines(["UTF-16LE"])))
        assert tree.find(id="tree-1").get_text() == "BOM (UTF-16LE)"

    def test_empty_marker_leaf(self) -> None:
        tree = _soup(render_tree(parse_lines(["M", "m"])))
        leaf = tree.find(id="tree-2")
        assert "empty" in leaf["class"]
        assert leaf.get_text() == "Empty"
        assert tree.find(id="tree-1").find(id="tree-2") is leaf

    def test_unterminated_nodes_are_closed(self) -> None:
        markup = render_tree(parse_lines(["M", "S", "Tfoo"]))
        assert markup.count("<ul") == markup.count("</ul>")
        assert markup.count("<li") == markup.count("</li>")
        tree = _soup(markup)
        assert tree.find(id="tree-1").find(id="tree-2").find(id="tree-3") is not None

    def test_siblings_after_close(self) -> None:
        tree = _soup(render_tree(parse_lines(["Q", "S", "Ta", "s", "S", "Tb", "s", "q"])))
        sequence = tree.find(id="tree-1")
        children = sequence.find("ul").find_all("li", recursive=False)
        assert [child["id"] for child in children] == ["tree-2", "tree-4"]


class TestTextPass:
    def test_scalar_text_span(self) -> None:
        text = _soup(render_text(parse_lines(["Sfoo", "s"])))
        span = text.find(id="text-2")
        assert span.get_text() == "foo"
        assert text.find(id="text-1") is None
        scope = text.find("span", class_="scope")
        assert scope.find(id="text-2") is span

    def test_bom_placeholder(self) -> None:
        text = _soup(render_text(parse_lines(["UTF-8", "Tx"])))
        assert text.find(id="text-1").get_text() == "⇔"

    def test_line_break_after_line_feed(self) -> None:
        markup = render_text(parse_lines(["Ta", "b\\n", "Tb"]))
        assert markup.count("<br/>") == 1
        assert markup.index("<br/>") < markup.index(">b<")

    def test_breaks_do_not_stack(self) -> None:
        markup = render_text(parse_lines(["b\\n", "b\\r", "Tx"]))
        assert markup.count("<br/>") == 2

    def test_break_after_combined_crlf(self) -> None:
        markup = render_text(parse_lines(["Ta", "b\\r\\n", "Tb"]))
        assert markup.count("<br/>") == 1
        assert markup.index("<br/>") < markup.index(">b<")

    def test_no_trailing_break(self) -> None:
        assert "<br/>" not in render_text(parse_lines(["Tx", "b\\n"]))

    def test_text_is_escaped(self) -> None:
        markup = render_text(parse_lines(["T<b>&"]))
        assert "&lt;b&gt;&amp;" in markup
        assert _soup(markup).find(id="text-1").get_text() == "<b>&"

    def test_unterminated_spans_are_closed(self) -> None:
        markup = render_text(parse_lines(["M", "S", "Tfoo"]))
        assert markup.count("<span") == markup.count("</span>")

    def test_empty_input(self) -> None:
        text = _soup(render_text(parse_lines(["# comment"])))
        assert text.find("div", class_="text").find_all("span") == []


class TestCorrelation:
    LINES = ["UTF-8", "O", "M", "X", "Sa", "s", "Ib", "x", "X", "x", "m", "o", "b\\n"]

    def test_every_text_span_has_tree_counterpart(self) -> None:
        model = parse_lines(self.LINES)
        tree = _soup(render_tree(model))
        text = _soup(render_text(model))
        spans = text.find_all(attrs={"data-cid": True})
        assert spans
        for span in spans:
            cid = span["data-cid"]
            peer = tree.find(id=f"tree-{cid}")
            assert peer is not None
            assert peer["data-cid"] == cid

    def test_ids_match_source_entries(self) -> None:
        model = parse_lines(self.LINES)
        tree = _soup(render_tree(model))
        text = _soup(render_text(model))
        for entry in model.entries:
            if entry.correlation_id is None:
                continue
            node = tree.find(id=f"tree-{entry.correlation_id}")
            assert node is not None
            span = text.find(id=f"text-{entry.correlation_id}")
            if entry.kind == "begin":
                assert span is None
            else:
                assert span is not None

    def test_rendering_is_idempotent(self) -> None:
        model = parse_lines(self.LINES)
        assert render_tree(model) == render_tree(model)
        assert render_text(model) == render_text(model)
