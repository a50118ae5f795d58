"""
Tests for DOMParser.

Covers:
- Source-faithful outerHTML reconstruction
- Tag, selector and attribute queries in document order
- Parse failures
"""

import pytest

from app.accessibility.analyzers import DOMParser, parse
from app.accessibility.contracts import ParseError


# ============================================================================
# SERIALIZATION
# ============================================================================


class TestOuterHtml:
    """outerHTML must round-trip the markup as the author wrote it."""

    def test_keeps_attribute_source_order(self):
        """Attributes are not sorted alphabetically."""
        dom = DOMParser('<img src="a.png" alt="Logo">')
        img = dom.get_elements_by_tag("img")[0]
        assert dom.outer_html(img) == '<img src="a.png" alt="Logo">'

    def test_void_element_has_no_closing_slash(self):
        dom = DOMParser('<input type="text" id="q">')
        control = dom.get_elements_by_tag("input")[0]
        assert dom.outer_html(control) == '<input type="text" id="q">'

    def test_nested_markup(self):
        html = '<a href="/home"><img src="i.png" alt="Home"></a>'
        dom = DOMParser(html)
        link = dom.get_elements_by_tag("a")[0]
        assert dom.outer_html(link) == html

    def test_class_kept_as_literal_string(self):
        dom = DOMParser('<div class="btn  primary">Go</div>')
        div = dom.get_elements_by_tag("div")[0]
        assert dom.get_attribute(div, "class") == "btn  primary"
        assert dom.outer_html(div) == '<div class="btn  primary">Go</div>'

    def test_inner_html(self):
        dom = DOMParser("<div><b>Save</b> now</div>")
        div = dom.get_elements_by_tag("div")[0]
        assert dom.inner_html(div) == "<b>Save</b> now"


# ============================================================================
# QUERIES
# ============================================================================


class TestQueries:
    """Element selection helpers."""

    def test_multiple_tag_names_in_document_order(self):
        dom = DOMParser("<h2>a</h2><h1>b</h1><h3>c</h3>")
        names = [el.name for el in dom.get_elements_by_tag("h1", "h2", "h3")]
        assert names == ["h2", "h1", "h3"]

    def test_selector_list_in_document_order(self):
        dom = DOMParser('<span onclick="a()"></span><div onclick="b()"></div>')
        names = [el.name for el in dom.get_elements_by_selector("div[onclick], span[onclick]")]
        assert names == ["span", "div"]

    def test_substring_attribute_selector(self):
        dom = DOMParser('<p style="color: #333">x</p><p style="margin: 0">y</p>')
        matches = dom.get_elements_by_selector('[style*="color"]')
        assert len(matches) == 1

    def test_attribute_presence(self):
        dom = DOMParser('<div role="main"></div><div></div><span role="note"></span>')
        assert len(dom.get_elements_by_attribute("role")) == 2
        assert len(dom.get_elements_by_attribute("role", "note")) == 1

    def test_find_first_with_keyword_attribute(self):
        dom = DOMParser('<label for="email">Email</label><input id="email">')
        label = dom.find_first("label", for_="email")
        assert label is not None
        assert dom.get_text_content(label) == "Email"
        assert dom.find_first("label", for_="phone") is None

    def test_root_element_absent_for_fragment(self):
        assert DOMParser("<p>Hello</p>").root_element() is None
        assert DOMParser("<html><body></body></html>").root_element() is not None

    def test_children_are_direct_tags_only(self):
        dom = DOMParser("<ul>text<li>a</li><li><b>b</b></li></ul>")
        ul = dom.get_elements_by_tag("ul")[0]
        assert [child.name for child in dom.get_children(ul)] == ["li", "li"]

    def test_duplicate_attribute_keeps_first_value(self):
        dom = DOMParser('<div role="checkbox" role="button">Agree</div>')
        div = dom.get_elements_by_tag("div")[0]
        assert dom.get_attribute(div, "role") == "checkbox"

    def test_descendants_filtered_by_tag(self):
        dom = DOMParser("<table><tr><td>1</td><td>2</td></tr></table>")
        table = dom.get_elements_by_tag("table")[0]
        assert len(dom.get_descendants(table, ["td"])) == 2
        assert dom.get_descendants(table, ["th"]) == []

    def test_valueless_attribute_is_empty_string(self):
        dom = DOMParser('<img src="a.png" alt>')
        img = dom.get_elements_by_tag("img")[0]
        assert dom.has_attribute(img, "alt")
        assert dom.get_attribute(img, "alt") == ""
        assert dom.get_attribute(img, "title") is None


# ============================================================================
# PARSE FAILURES
# ============================================================================


class TestParseFailures:
    """Only non-text input or a parser crash is fatal."""

    @pytest.mark.parametrize("bad_input", [None, 42, b"<p>bytes</p>"])
    def test_non_text_input_raises(self, bad_input):
        with pytest.raises(ParseError):
            parse(bad_input)

    def test_malformed_markup_is_tolerated(self):
        dom = parse("<div><p>unclosed <span>text")
        assert dom.has_element("span")

    def test_parser_crash_becomes_parse_error(self, monkeypatch):
        def explode(*args, **kwargs):
            raise ValueError("boom")

        monkeypatch.setattr(
            "app.accessibility.analyzers.dom_parser.BeautifulSoup", explode
        )
        with pytest.raises(ParseError) as exc_info:
            parse("<p>fine</p>")

        assert isinstance(exc_info.value.__cause__, ValueError)
        assert exc_info.value.source_length == len("<p>fine</p>")
        assert "input length" in str(exc_info.value)
