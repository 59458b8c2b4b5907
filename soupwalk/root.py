"""
Result wrapper for queries.

A ``Root`` either holds a node (and its string value) or an ``Error``. Every
query and navigation method returns a new ``Root``; on a wrapper without a
node they return a ``NodeElementEmpty`` failure instead of running, so calls
can be chained without checking in between.
"""

import logging
from typing import Dict, Optional, Sequence

from . import siblings, traversal
from . import text as extraction
from .dom import Node
from .errors import Error, ErrorType, element_not_found, new_error
from .renderer import Renderer

logger = logging.getLogger(__name__)

_default_renderer: Optional[Renderer] = None


def _get_default_renderer() -> Renderer:
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = Renderer()
    return _default_renderer


class RootList(list):
    """
    List of ``Root`` results with an ``error`` slot.

    A failed search is an empty list whose ``error`` is set.
    """

    def __init__(self, roots: Sequence['Root'] = (), error: Optional[Error] = None):
        super().__init__(roots)
        self.error = error


class Root:
    """
    A node found by a query, or the reason none was found.

    Attributes:
        node: The wrapped node, or None for a failure
        value: The node's own string value (tag name for elements, text for
            text nodes); "" for a failure
        error: The failure, or None
    """

    def __init__(self, node: Optional[Node] = None, error: Optional[Error] = None,
                 renderer: Optional[Renderer] = None):
        if node is not None and error is not None:
            raise ValueError("a Root holds either a node or an error, not both")
        if node is None and error is None:
            error = new_error(ErrorType.NODE_ELEMENT_EMPTY)

        self.node = node
        self.value = node.data if node is not None else ""
        self.error = error
        self._renderer = renderer

    def __repr__(self) -> str:
        if self.error is not None:
            return f"<Root error={self.error!r}>"
        return f"<Root {self.node!r}>"

    def _wrap(self, node: Node) -> 'Root':
        return Root(node, renderer=self._renderer)

    def _fail(self, error: Error) -> 'Root':
        return Root(error=error, renderer=self._renderer)

    def _empty(self) -> 'Root':
        return self._fail(new_error(ErrorType.NODE_ELEMENT_EMPTY, cause=self.error))

    def _find(self, args: Sequence[str], strict: bool) -> 'Root':
        if self.node is None:
            return self._empty()

        node = traversal.find_first(self.node, args, strict)
        if node is None:
            logger.debug(f"No element matches {list(args)!r} below {self.node!r}")
            return self._fail(element_not_found(args))

        return self._wrap(node)

    def _find_all(self, args: Sequence[str], strict: bool) -> RootList:
        if self.node is None:
            return RootList(error=new_error(ErrorType.NODE_ELEMENT_EMPTY, cause=self.error))

        nodes = traversal.find_all(self.node, args, strict)
        if not nodes:
            return RootList(error=element_not_found(args))

        return RootList([self._wrap(node) for node in nodes])

    def find(self, *args: str) -> 'Root':
        """
        First descendant element matching the query.

        Args:
            *args: ``tag`` or ``tag, attribute, value``. An empty tag matches
                any element; the value must be one of the attribute's
                whitespace-separated tokens.

        Returns:
            Root: The match, or an ``ElementNotFound`` failure
        """
        return self._find(args, strict=False)

    def find_strict(self, *args: str) -> 'Root':
        """Like ``find``, but the attribute value must match exactly."""
        return self._find(args, strict=True)

    def find_all(self, *args: str) -> RootList:
        """
        Every descendant element matching the query, in document order.

        Returns:
            RootList: The matches; empty with ``error`` set when there are none
        """
        return self._find_all(args, strict=False)

    def find_all_strict(self, *args: str) -> RootList:
        """Like ``find_all``, but the attribute value must match exactly."""
        return self._find_all(args, strict=True)

    def next_sibling(self) -> 'Root':
        if self.node is None:
            return self._empty()

        sibling = siblings.next_sibling(self.node)
        if sibling is None:
            return self._fail(new_error(ErrorType.NO_NEXT_SIBLING))
        return self._wrap(sibling)

    def previous_sibling(self) -> 'Root':
        if self.node is None:
            return self._empty()

        sibling = siblings.previous_sibling(self.node)
        if sibling is None:
            return self._fail(new_error(ErrorType.NO_PREVIOUS_SIBLING))
        return self._wrap(sibling)

    def next_element_sibling(self) -> 'Root':
        """Next sibling that is an element, skipping text and comment nodes."""
        if self.node is None:
            return self._empty()

        sibling = siblings.next_element_sibling(self.node)
        if sibling is None:
            return self._fail(new_error(ErrorType.NO_NEXT_ELEMENT_SIBLING))
        return self._wrap(sibling)

    def previous_element_sibling(self) -> 'Root':
        """Previous sibling that is an element, skipping text and comment nodes."""
        if self.node is None:
            return self._empty()

        sibling = siblings.previous_element_sibling(self.node)
        if sibling is None:
            return self._fail(new_error(ErrorType.NO_PREVIOUS_ELEMENT_SIBLING))
        return self._wrap(sibling)

    def children(self) -> RootList:
        """All direct children, text and comments included."""
        if self.node is None:
            return RootList(error=new_error(ErrorType.NODE_ELEMENT_EMPTY, cause=self.error))
        return RootList([self._wrap(child) for child in self.node.child_nodes])

    def attributes(self) -> Optional[Dict[str, str]]:
        """
        Attributes of the wrapped element.

        Returns:
            A dict keeping the first value of repeated keys, or None for
            non-elements, elements without attributes and failures
        """
        if self.node is None or not self.node.is_element:
            return None
        if not self.node.attributes:
            return None
        return self.node.attribute_map()

    def text(self) -> str:
        """First direct text child that is not whitespace only, or ""."""
        if self.node is None:
            return ""
        return extraction.shallow_text(self.node)

    def full_text(self) -> str:
        """All text below the node, concatenated in document order."""
        if self.node is None:
            return ""
        return extraction.full_text(self.node)

    def render(self) -> str:
        """
        Markup of the node and its subtree.

        Raises:
            Error: If this is a failure wrapper
            Exception: Whatever the serializer raises
        """
        if self.node is None:
            raise self._empty().error
        renderer = self._renderer or _get_default_renderer()
        return renderer.render(self.node)

    def html(self) -> str:
        """Markup of the node and its subtree; "" if it cannot be rendered."""
        if self.node is None:
            return ""
        try:
            return self.render()
        except Exception as e:
            logger.error(f"Error rendering {self.node!r}: {e}")
            return ""

    # DOM-style aliases
    findAll = find_all
    findStrict = find_strict
    findAllStrict = find_all_strict
    nextSibling = next_sibling
    previousSibling = previous_sibling
    nextElementSibling = next_element_sibling
    previousElementSibling = previous_element_sibling
    fullText = full_text
