"""
DOM Parser - HTML parsing and element selection using BeautifulSoup.

This module is the markup tree adapter every rule check reads from. It wraps
BeautifulSoup with convenient methods for tag, attribute and CSS selector
queries, and reconstructs element markup the way it appears in the source
so that fix anchors can be found again by plain substring search.

Usage:
    from app.accessibility.analyzers import DOMParser

    parser = DOMParser(html_string)
    for img in parser.get_elements_by_tag("img"):
        if not parser.has_attribute(img, "alt"):
            print(parser.outer_html(img))
"""

import logging
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from ..contracts.errors import ParseError


logger = logging.getLogger(__name__)


class SourceOrderFormatter(HTMLFormatter):
    """
    Serialize tags close to how a browser reports outerHTML.

    - Attributes keep their source order (the default formatter sorts them)
    - Void elements render as <img ...> rather than <img .../>
    - Only &, < and > are escaped
    """

    def __init__(self):
        super().__init__(
            entity_substitution=EntitySubstitution.substitute_xml,
            void_element_close_prefix=None,
        )

    def attributes(self, tag: Tag):
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


OUTER_HTML_FORMATTER = SourceOrderFormatter()


class DOMParser:
    """
    HTML parser using BeautifulSoup for accessibility analysis.

    Provides methods for:
    - Tag, attribute and CSS selector queries (document order)
    - Attribute lookup and text extraction
    - outerHTML / innerHTML reconstruction

    The class attribute is kept as the literal source string rather than a
    token list, so substring filters like [class*="btn"] see what the
    author wrote. A repeated attribute keeps its first value, as browsers do.
    """

    def __init__(self, html: str):
        """
        Initialize parser with HTML content.

        Args:
            html: Raw HTML string to parse

        Raises:
            ParseError: If the input is not text or BeautifulSoup rejects it
        """
        if not isinstance(html, str):
            raise ParseError(
                f"Expected markup text, got {type(html).__name__}"
            )

        self._html = html
        try:
            self._soup = BeautifulSoup(
                html,
                "html.parser",
                multi_valued_attributes=None,
                on_duplicate_attribute="ignore",
            )
        except Exception as e:
            logger.warning(f"Markup could not be parsed: {e}")
            raise ParseError(
                f"Could not parse markup: {e}", source_length=len(html)
            ) from e

    @property
    def soup(self) -> BeautifulSoup:
        """Access the underlying BeautifulSoup object."""
        return self._soup

    @property
    def html(self) -> str:
        """Access the original HTML string."""
        return self._html

    # =========================================================================
    # ELEMENT SELECTION
    # =========================================================================

    def get_all_elements(self) -> List[Tag]:
        """Get all Tag elements in the document, in document order."""
        return [el for el in self._soup.descendants if isinstance(el, Tag)]

    def get_elements_by_tag(self, *tag_names: str) -> List[Tag]:
        """
        Get all elements with any of the given tag names.

        Args:
            tag_names: One or more HTML tag names (e.g., "h1", "h2")

        Returns:
            Matching Tags in document order
        """
        names = [name.lower() for name in tag_names]
        return self._soup.find_all(names if len(names) > 1 else names[0])

    def get_elements_by_selector(self, selector: str) -> List[Tag]:
        """
        Get all elements matching a CSS selector.

        Supports everything soupsieve does, including attribute presence
        ([role]), containment ([style*="color"]), prefix ([class^="btn"])
        and selector lists ("div[onclick], span[onclick]").

        Args:
            selector: CSS selector string

        Returns:
            Matching Tags in document order (may be empty)
        """
        return self._soup.select(selector)

    def get_elements_by_attribute(
        self, attr: str, value: Optional[str] = None
    ) -> List[Tag]:
        """
        Get elements by attribute presence or exact value.

        Args:
            attr: Attribute name (e.g., "role", "tabindex")
            value: Optional attribute value to match

        Returns:
            List of elements with the attribute
        """
        if value is not None:
            return self._soup.find_all(attrs={attr: value})
        return self._soup.find_all(attrs={attr: True})

    def find_first(self, tag_name: str, **attrs: str) -> Optional[Tag]:
        """
        Get the first element with a tag name and exact attribute values.

        Attribute names that are Python keywords can be passed with a
        trailing underscore (for_="email").
        """
        wanted = {name.rstrip("_").replace("_", "-"): value for name, value in attrs.items()}
        return self._soup.find(tag_name.lower(), attrs=wanted)

    def has_element(self, tag_name: str) -> bool:
        return self._soup.find(tag_name.lower()) is not None

    def root_element(self) -> Optional[Tag]:
        """
        Get the <html> element, if the markup has one.

        Fragments without an <html> tag have no document element.
        """
        return self._soup.find("html")

    # =========================================================================
    # ELEMENT TRAVERSAL
    # =========================================================================

    def get_children(self, element: Tag) -> List[Tag]:
        """Get direct child Tags of an element."""
        return [child for child in element.children if isinstance(child, Tag)]

    def get_descendants(
        self, element: Tag, tag_names: Optional[Iterable[str]] = None
    ) -> List[Tag]:
        """
        Get all descendant Tags of an element.

        Args:
            element: Root element (not included in the result)
            tag_names: Optional tag names to restrict the result to
        """
        if tag_names is None:
            return [desc for desc in element.descendants if isinstance(desc, Tag)]
        return element.find_all(list(tag_names))

    # =========================================================================
    # ATTRIBUTES AND TEXT
    # =========================================================================

    @staticmethod
    def tag_name(element: Tag) -> str:
        return element.name.lower()

    @staticmethod
    def has_attribute(element: Tag, attr: str) -> bool:
        return element.has_attr(attr)

    @staticmethod
    def get_attribute(element: Tag, attr: str) -> Optional[str]:
        """
        Get attribute value from element.

        Returns:
            Attribute value, "" for valueless attributes, None if absent
        """
        value = element.get(attr)
        if isinstance(value, list):
            return " ".join(value)
        return value

    @staticmethod
    def get_text_content(element: Tag) -> str:
        """Concatenated text of all descendants, whitespace untouched."""
        return element.get_text()

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    @staticmethod
    def outer_html(element: Tag) -> str:
        """
        Reconstruct the element's markup.

        Falls back to an empty <tag>...</tag> shell if serialization fails.
        """
        try:
            return element.decode(formatter=OUTER_HTML_FORMATTER)
        except Exception as e:
            logger.debug(f"outerHTML reconstruction failed for <{element.name}>: {e}")
            name = element.name.lower()
            return f"<{name}>...</{name}>"

    @staticmethod
    def inner_html(element: Tag) -> str:
        """Reconstruct the markup of the element's children."""
        return element.decode_contents(formatter=OUTER_HTML_FORMATTER)

    def __repr__(self) -> str:
        element_count = len(self.get_all_elements())
        return f"DOMParser({element_count} elements)"


def parse(html: str) -> DOMParser:
    """Parse markup text into a queryable tree. Raises ParseError."""
    return DOMParser(html)
