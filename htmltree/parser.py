import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import Comment, Declaration, Doctype, ProcessingInstruction

from .config import ParserConfig
from .dom.node import Attributes, Document, Element, Node, Text
from .errors import ParseError, StructureError

logger = logging.getLogger(__name__)

# Markup that carries no document content
SKIPPED_STRING_TYPES = (Comment, Declaration, Doctype, ProcessingInstruction)


class RepeatedValues(list):
    """Every value of an attribute name that appears more than once on a tag"""


def keep_repeated_attribute(attrs: Dict[str, Any], key: str, value: str):
    """bs4 on_duplicate_attribute hook that keeps all values instead of the last"""
    existing = attrs[key]
    if isinstance(existing, RepeatedValues):
        existing.append(value)
    else:
        attrs[key] = RepeatedValues([existing, value])


class HTMLParser:
    """Parses HTML into Element/Text trees and renders them back, via BeautifulSoup"""

    def __init__(self, config: ParserConfig = None):
        self.config = config or ParserConfig()

    def parse(self, html_content: Union[str, bytes]) -> Document:
        """Parse HTML text into a tuple of top-level nodes"""
        if not isinstance(html_content, (str, bytes)):
            raise ParseError(f"expected HTML text, got {type(html_content).__name__}")

        options = {'multi_valued_attributes': None}
        if self.config.features == 'html.parser':
            # Only the html.parser builder accepts this hook
            options['on_duplicate_attribute'] = keep_repeated_attribute
        if isinstance(html_content, bytes):
            options['from_encoding'] = self.config.encoding

        try:
            soup = BeautifulSoup(html_content, self.config.features, **options)
        except ParserRejectedMarkup as e:
            raise ParseError(f"HTML parser rejected markup: {e}") from e

        document = self._convert(soup)
        logger.debug(f"Parsed {len(document)} top-level nodes with {self.config.features}")
        return document

    def parse_single(self, html_content: Union[str, bytes],
                     source_label: Optional[str] = None) -> Element:
        """Parse HTML that must consist of exactly one top-level element"""
        document = self.parse(html_content)
        if len(document) != 1 or not isinstance(document[0], Element):
            raise StructureError(len(document), source_label)
        return document[0]

    def serialize(self, document: Sequence[Node]) -> str:
        """Render nodes back to HTML text"""
        soup = BeautifulSoup('', self.config.features)
        stack = [(soup, node) for node in reversed(document)]
        while stack:
            parent, node = stack.pop()
            if isinstance(node, Text):
                parent.append(soup.new_string(node.data))
                continue
            # Later duplicates win; bs4 keeps attributes in a dict
            tag = soup.new_tag(node.tag, attrs=dict(node.attributes))
            parent.append(tag)
            stack.extend((tag, child) for child in reversed(node.children))
        return soup.decode(formatter=self.config.formatter)

    def _convert(self, soup: BeautifulSoup) -> Document:
        """Convert the soup's contents bottom-up with an explicit stack"""
        top: List[Node] = []
        # Frames of (tag being converted, remaining children, converted children)
        stack = [(None, iter(soup.children), top)]
        while stack:
            element, remaining, converted = stack[-1]
            child = next(remaining, None)
            if child is None:
                stack.pop()
                if element is not None:
                    stack[-1][2].append(
                        Element(element.name, self._attributes(element), tuple(converted)))
            elif isinstance(child, Tag):
                stack.append((child, iter(child.children), []))
            elif isinstance(child, SKIPPED_STRING_TYPES):
                continue
            elif isinstance(child, NavigableString):
                converted.append(Text(str(child)))
        return tuple(top)

    def _attributes(self, element: Tag) -> Attributes:
        attributes = []
        for name, value in element.attrs.items():
            values = value if isinstance(value, RepeatedValues) else [value]
            attributes.extend((name, '' if v is None else str(v)) for v in values)
        return tuple(attributes)


_default_parser = HTMLParser()


def parse(html_content: Union[str, bytes]) -> Document:
    return _default_parser.parse(html_content)


def parse_single(html_content: Union[str, bytes], source_label: Optional[str] = None) -> Element:
    return _default_parser.parse_single(html_content, source_label)


def serialize(document: Sequence[Node]) -> str:
    return _default_parser.serialize(document)
