"""
HTML parser implementation.
This module turns markup into a ``soupwalk.dom`` tree, using html5lib directly
or BeautifulSoup with any of its tree builders, and hands back a ``Root`` on
the document's root element.
"""

import logging
from typing import Optional, Union
from xml.dom import Node as MiniDomNode

import html5lib
from html5lib.html5parser import ParseError
from bs4 import BeautifulSoup, FeatureNotFound, NavigableString, ParserRejectedMarkup, Tag
from bs4.element import Comment as SoupComment, Doctype as SoupDoctype, PreformattedString

from .dom import Comment, Document, DocumentType, Element, Node, Text
from .errors import ErrorType, new_error
from .renderer import Renderer
from .root import Root
from .utils.config import Config

logger = logging.getLogger(__name__)

HTML5LIB_BACKEND = "html5lib"
HTML_PARSER_BACKEND = "html.parser"

# Failures that mean "this markup could not be turned into a tree"
_PARSE_FAILURES = (ParseError, ParserRejectedMarkup, FeatureNotFound)


class HTMLParser:
    """HTML parser producing ``soupwalk.dom`` trees."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the HTML parser.

        Args:
            config: Configuration; ``parser.backend`` and ``parser.strict`` are read
        """
        self.config = config or Config()
        self.backend = self.config.get("parser.backend", HTML5LIB_BACKEND)
        self.strict = bool(self.config.get("parser.strict", False))
        self.renderer = Renderer(self.config)
        logger.debug(f"HTML parser initialized (backend: {self.backend}, strict: {self.strict})")

    def parse(self, html_content: Union[str, bytes]) -> Root:
        """
        Parse markup and wrap its root element.

        Args:
            html_content: The markup to parse

        Returns:
            Root: The root element, or an ``UnableToParse`` failure
        """
        if not isinstance(html_content, (str, bytes)):
            logger.error(f"Cannot parse {type(html_content).__name__} as HTML")
            return Root(error=new_error(ErrorType.UNABLE_TO_PARSE), renderer=self.renderer)

        try:
            document = self.parse_document(html_content)
        except _PARSE_FAILURES as e:
            logger.error(f"Error parsing HTML: {e}")
            return Root(error=new_error(ErrorType.UNABLE_TO_PARSE), renderer=self.renderer)

        return self._wrap_document(document)

    def from_soup(self, soup: Tag) -> Root:
        """
        Wrap an already-parsed BeautifulSoup tree.

        Args:
            soup: A ``BeautifulSoup`` object, or a single ``Tag``

        Returns:
            Root: The root element, or an ``UnableToParse`` failure
        """
        if not isinstance(soup, Tag):
            logger.error(f"Cannot wrap {type(soup).__name__}, expected a BeautifulSoup tree")
            return Root(error=new_error(ErrorType.UNABLE_TO_PARSE), renderer=self.renderer)

        return self._wrap_document(self._convert_soup(soup))

    def parse_document(self, html_content: Union[str, bytes]) -> Document:
        """
        Parse markup into a Document with the configured backend.

        Raises:
            html5lib.html5parser.ParseError: Malformed markup in strict mode
            bs4.FeatureNotFound: Unknown BeautifulSoup backend
        """
        logger.debug(f"Parsing HTML content with {self.backend} (first 100 chars): {html_content[:100]!r}")

        if self.backend == HTML5LIB_BACKEND:
            parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"),
                                         strict=self.strict)
            return self._convert_minidom(parser.parse(html_content))

        options = {"multi_valued_attributes": None}
        if self.backend == HTML_PARSER_BACKEND:
            # html.parser keeps the last of repeated attributes unless told otherwise
            options["on_duplicate_attribute"] = "ignore"
        soup = BeautifulSoup(html_content, self.backend, **options)
        return self._convert_soup(soup)

    def _wrap_document(self, document: Document) -> Root:
        root_element = document.document_element
        if root_element is None:
            logger.error("No root element found in parsed document")
            return Root(error=new_error(ErrorType.UNABLE_TO_PARSE), renderer=self.renderer)

        logger.debug(f"Root element: {root_element.tag_name}")
        return Root(root_element, renderer=self.renderer)

    def _convert_minidom(self, parsed_doc) -> Document:
        """
        Convert a document from html5lib's "dom" tree builder.

        Args:
            parsed_doc: The parsed ``xml.dom.minidom`` document
        """
        document = Document()
        stack = [(child, document) for child in reversed(parsed_doc.childNodes)]
        while stack:
            node, parent = stack.pop()
            node_type = node.nodeType

            if node_type == MiniDomNode.ELEMENT_NODE:
                element = Element(node.tagName, node.attributes.items(), node.namespaceURI)
                parent.append_child(element)
                stack.extend((child, element) for child in reversed(node.childNodes))
            elif node_type == MiniDomNode.TEXT_NODE:
                # The dom builder adds one text node per character token
                _append_text(parent, node.nodeValue)
            elif node_type == MiniDomNode.COMMENT_NODE:
                parent.append_child(Comment(node.nodeValue))
            elif node_type == MiniDomNode.DOCUMENT_TYPE_NODE:
                parent.append_child(DocumentType(node.name, node.publicId, node.systemId))
            else:
                logger.debug(f"Skipping node of type {node_type}")
        return document

    def _convert_soup(self, soup: Tag) -> Document:
        document = Document()
        if isinstance(soup, BeautifulSoup):
            stack = [(child, document) for child in reversed(soup.contents)]
        else:
            stack = [(soup, document)]

        while stack:
            node, parent = stack.pop()
            # Doctype and Comment are strings too, so they are checked first
            if isinstance(node, Tag):
                element = Element(node.name, _soup_attributes(node), node.namespace)
                parent.append_child(element)
                stack.extend((child, element) for child in reversed(node.contents))
            elif isinstance(node, SoupDoctype):
                parts = str(node).split()
                parent.append_child(DocumentType(parts[0] if parts else ""))
            elif isinstance(node, SoupComment):
                parent.append_child(Comment(str(node)))
            elif isinstance(node, PreformattedString):
                logger.debug(f"Skipping {type(node).__name__} node")
            elif isinstance(node, NavigableString):
                _append_text(parent, str(node))
        return document


def _append_text(parent: Node, data: str) -> None:
    """Append text to ``parent``, extending its last child if that is text too."""
    if not data:
        return
    last = parent.last_child
    if last is not None and last.is_text:
        last.append_data(data)
    else:
        # Whitespace-only text is kept; sibling stepping has to see it
        parent.append_child(Text(data))


def _soup_attributes(tag: Tag):
    for name, value in tag.attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        yield name, value


def parse(html_content: Union[str, bytes], config: Optional[Config] = None) -> Root:
    """
    Parse markup and return a ``Root`` on its root element.

    Doctype, comments and other nodes in front of the root element are
    skipped. A failed parse returns a ``Root`` whose ``error`` has type
    ``ErrorType.UNABLE_TO_PARSE``.
    """
    return HTMLParser(config).parse(html_content)


def from_soup(soup: Tag, config: Optional[Config] = None) -> Root:
    """Return a ``Root`` over an existing BeautifulSoup tree."""
    return HTMLParser(config).from_soup(soup)
