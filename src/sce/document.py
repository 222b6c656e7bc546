"""
Queryable HTML document used by the extractor.

Document and Element describe the only capabilities extraction needs:
selector queries in document order, descendant text and attribute lookup.
SoupDocument / SoupElement implement them over BeautifulSoup.
"""
from abc import ABC, abstractmethod

import soupsieve
from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

HTML_PARSER = "html.parser"

Selector = soupsieve.SoupSieve


def compile_selector(pattern: str) -> Selector:
    """Compile a CSS selector once so it can be reused across documents."""
    return soupsieve.compile(pattern)


class Element(ABC):

    @abstractmethod
    def select(self, selector: Selector) -> list['Element']:
        """Descendants matching selector, in document order."""
        raise NotImplementedError

    @abstractmethod
    def text(self) -> str:
        """Concatenated text of all descendants."""
        raise NotImplementedError

    @abstractmethod
    def attribute(self, name: str) -> str | None:
        raise NotImplementedError


class Document(ABC):

    @abstractmethod
    def select(self, selector: Selector) -> list[Element]:
        """Elements matching selector, in document order."""
        raise NotImplementedError


class SoupElement(Element):

    def __init__(self, tag: Tag):
        self._tag = tag

    def select(self, selector: Selector) -> list[Element]:
        return [SoupElement(tag) for tag in selector.select(self._tag)]

    def text(self) -> str:
        # every text node, script and style included; comments and doctypes skipped
        return "".join(
            node for node in self._tag.descendants
            if isinstance(node, NavigableString) and not isinstance(node, PreformattedString)
        )

    def attribute(self, name: str) -> str | None:
        value = self._tag.get(name)
        if value is None:
            return None
        # bs4 returns a list for multi-valued attributes such as class
        if isinstance(value, list):
            return " ".join(value)
        return value

    def __repr__(self):
        return f'SoupElement(<{self._tag.name}>)'


class SoupDocument(Document):

    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    def select(self, selector: Selector) -> list[Element]:
        return [SoupElement(tag) for tag in selector.select(self._soup)]


def parse_document(html: str) -> Document:
    """Load raw markup into a queryable document."""
    return SoupDocument(BeautifulSoup(html, HTML_PARSER))
