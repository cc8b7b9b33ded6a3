"""Tests for the markup loader and the node tree it builds."""

from __future__ import annotations

from pathlib import Path

import pytest

import i18ncheck.parser.loader as loader_module
from i18ncheck.markup.nodes import ROOT_TAG, Comment, Element, Text
from i18ncheck.markup.visitor import MarkupVisitor
from i18ncheck.parser.loader import MarkupLoader, MarkupSafetyError


class TestTreeShape:
    def test_root_element(self, loader: MarkupLoader) -> None:
        root = loader.load_string("<span>Hello!</span>")
        assert root.tag == ROOT_TAG
        assert root.is_root
        assert root.line == 1
        span = root.child_elements[0]
        assert span.tag == "span"
        assert span.texts == [Text(content="Hello!", line=1)]

    def test_children_keep_order(self, loader: MarkupLoader) -> None:
        root = loader.load_string("<p>a<!--c--><b>x</b>d</p>")
        kinds = [type(child) for child in root.child_elements[0].children]
        assert kinds == [Text, Comment, Element, Text]

    def test_comment_payload(self, loader: MarkupLoader) -> None:
        root = loader.load_string("<p><!-- i18ncheck:disable --></p>")
        assert root.child_elements[0].comments[0].content == " i18ncheck:disable "

    def test_attribute_values_are_strings(self, loader: MarkupLoader) -> None:
        root = loader.load_string('<p class="a b" i18n="Greeting:Hi" hidden>x</p>')
        p = root.child_elements[0]
        assert p.attrs == {"class": "a b", "i18n": "Greeting:Hi", "hidden": ""}
        assert p.has_attr("hidden")

    def test_entities_decoded(self, loader: MarkupLoader) -> None:
        root = loader.load_string("<p>&quot;Hi&quot;</p>")
        assert root.child_elements[0].texts[0].content == '"Hi"'

    def test_doctype_dropped(self, loader: MarkupLoader) -> None:
        root = loader.load_string("<!DOCTYPE html><p>x</p>")
        assert [type(child) for child in root.children] == [Element]

    def test_unclosed_markup_is_tolerated(self, loader: MarkupLoader) -> None:
        root = loader.load_string("<div><span>Open text")
        span = root.child_elements[0].child_elements[0]
        assert span.texts[0].content == "Open text"


class TestLineNumbers:
    def test_element_lines(self, loader: MarkupLoader) -> None:
        root = loader.load_string("<div>\n  <p>One</p>\n\n  <p>Two</p>\n</div>")
        div = root.child_elements[0]
        assert div.line == 1
        assert [p.line for p in div.child_elements] == [2, 4]

    def test_text_lines_follow_tags(self, loader: MarkupLoader) -> None:
        root = loader.load_string("<div>\nA\n<p>x</p>\nB<!-- c --></div>")
        div = root.child_elements[0]
        assert [text.line for text in div.texts] == [1, 3]
        assert div.comments[0].line == 4

    def test_multiline_start_tag(self, loader: MarkupLoader) -> None:
        root = loader.load_string('<div>\n<p\n  i18n="A:b">x</p></div>')
        assert root.child_elements[0].child_elements[0].line == 2


class TestLoadFile:
    def test_load_path(self, loader: MarkupLoader, tmp_path: Path) -> None:
        path = tmp_path / "page.html"
        path.write_text("<h1>\n  Titel\n</h1>", encoding="utf-8")
        root = loader.load(path)
        assert root.child_elements[0].tag == "h1"


class TestSafety:
    def test_document_size(
        self, loader: MarkupLoader, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(loader_module, "_MAX_DOCUMENT_SIZE", 10)
        with pytest.raises(MarkupSafetyError, match="maximum size"):
            loader.load_string("<p>way too long</p>")

    def test_depth(self, loader: MarkupLoader) -> None:
        markup = "<div>" * 300 + "x" + "</div>" * 300
        with pytest.raises(MarkupSafetyError, match="depth"):
            loader.load_string(markup)

    def test_node_count(self, loader: MarkupLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(loader_module, "_MAX_NODE_COUNT", 5)
        with pytest.raises(MarkupSafetyError, match="node count"):
            loader.load_string("<p>a</p>" * 10)


class TestVisitor:
    def test_default_visit_reaches_every_node(self, loader: MarkupLoader) -> None:
        seen: list[str] = []

        class Recorder(MarkupVisitor):
            def visit_element(self, node: Element) -> None:
                seen.append(node.tag)
                super().visit_element(node)

            def visit_text(self, node: Text) -> None:
                seen.append(node.content)

            def visit_comment(self, node: Comment) -> None:
                seen.append("#comment")

        Recorder().visit(loader.load_string("<p>a<b>c</b><!--x--></p>"))
        assert seen == [ROOT_TAG, "p", "a", "b", "c", "#comment"]
