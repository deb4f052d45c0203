"""Tests for the BeautifulSoup markup helpers."""

import pytest

from pepperdeals.core.exceptions import InvalidDocumentError
from pepperdeals.scrapers import markup


class TestParse:
    """Tests for parse()."""

    def test_parse_returns_document(self):
        doc = markup.parse("<html><body><p>hi</p></body></html>")
        assert isinstance(doc, markup.Document)
        assert markup.text(markup.query_first(doc, "p")) == "hi"

    def test_parse_tolerates_malformed_markup(self):
        """Unbalanced and stray tags still give a usable tree."""
        doc = markup.parse("<div><span class='a'>one<div><p>two</span></b></i>")
        assert markup.text(markup.query_first(doc, "span.a")).startswith("one")
        assert markup.query_first(doc, "p") is not None

    def test_parse_accepts_bytes(self):
        doc = markup.parse("<p>Cena: 9,99 €</p>".encode("utf-8"))
        assert "9,99" in markup.text(markup.query_first(doc, "p"))

    def test_parse_empty_string(self):
        doc = markup.parse("")
        assert markup.query_all(doc, "article") == []

    @pytest.mark.parametrize("value", [None, 42, ["<p>"], object()])
    def test_parse_rejects_non_text(self, value):
        with pytest.raises(InvalidDocumentError):
            markup.parse(value)


class TestQueries:
    """Tests for query_all(), query_first() and friends."""

    HTML = """
    <ul>
      <li class="item" data-id="1">first</li>
      <li class="item" data-id="2"><b>second</b> tail</li>
      <li class="other">third</li>
    </ul>
    """

    def test_query_all_document_order(self):
        doc = markup.parse(self.HTML)
        items = markup.query_all(doc, "li.item")
        assert [markup.attributes(i)["data-id"] for i in items] == ["1", "2"]

    def test_query_all_no_match(self):
        doc = markup.parse(self.HTML)
        assert markup.query_all(doc, "article") == []

    def test_query_all_none_node(self):
        assert markup.query_all(None, "li") == []

    def test_query_first_within_subtree(self):
        doc = markup.parse(self.HTML)
        second = markup.query_all(doc, "li.item")[1]
        assert markup.text(markup.query_first(second, "b")) == "second"
        assert markup.query_first(second, "li.other") is None

    def test_query_first_none_node(self):
        assert markup.query_first(None, "li") is None

    def test_attributes_joins_class_list(self):
        doc = markup.parse('<a class="thread-link big" href="/x" title="T">x</a>')
        attrs = markup.attributes(markup.query_first(doc, "a"))
        assert attrs == {"class": "thread-link big", "href": "/x", "title": "T"}

    def test_attributes_missing(self):
        doc = markup.parse("<a>x</a>")
        assert markup.attributes(markup.query_first(doc, "a")) == {}
        assert markup.attributes(None) == {}

    def test_text_of_none(self):
        assert markup.text(None) == ""

    def test_children_and_first_child_text(self):
        doc = markup.parse(self.HTML)
        second = markup.query_all(doc, "li.item")[1]
        kids = markup.children(second)
        assert len(kids) == 2
        assert markup.first_child_text(second) == "second"

    def test_first_child_text_bare_string(self):
        doc = markup.parse('<span class="p">19,99zł<span>old</span></span>')
        assert markup.first_child_text(markup.query_first(doc, "span.p")) == "19,99zł"

    def test_children_skip_comments_and_doctype(self):
        doc = markup.parse("<!DOCTYPE html><p><!-- vue -->first<b>second</b></p>")
        paragraph = markup.query_first(doc, "p")
        assert [markup.text(c) for c in markup.children(paragraph)] == ["first", "second"]
        assert markup.children(doc)[0].name == "p"

    def test_first_child_text_after_empty_comment(self):
        doc = markup.parse('<span class="p"><!---->19,99zł</span>')
        assert markup.first_child_text(markup.query_first(doc, "span.p")) == "19,99zł"

    def test_first_child_text_without_children(self):
        doc = markup.parse("<div></div>")
        assert markup.first_child_text(markup.query_first(doc, "div")) is None
        assert markup.children(None) == []
        assert markup.first_child_text(None) is None
