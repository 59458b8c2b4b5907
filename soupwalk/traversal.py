"""
Depth-first search over the node tree.

The search starts strictly below the given root: the root itself is never a
candidate. Children are visited in document order, each node before its
descendants.
"""

import logging
from typing import Iterator, List, Optional, Sequence

from .dom import Node
from .matcher import matches

logger = logging.getLogger(__name__)


def iter_descendants(root: Node) -> Iterator[Node]:
    """Yield every descendant of ``root`` in pre-order."""
    stack = list(reversed(root.child_nodes))
    while stack:
        node = stack.pop()
        yield node
        if node.child_nodes:
            stack.extend(reversed(node.child_nodes))


def find_first(root: Node, args: Sequence[str], strict: bool = False) -> Optional[Node]:
    """
    Find the first descendant matching the query.

    Args:
        root: Node to search below
        args: Query arguments, see ``soupwalk.matcher.matches``
        strict: Exact attribute-value comparison

    Returns:
        The first match in pre-order, or None
    """
    for node in iter_descendants(root):
        if matches(node, args, strict):
            return node
    return None


def find_all(root: Node, args: Sequence[str], strict: bool = False) -> List[Node]:
    """
    Find every descendant matching the query, in pre-order.

    An empty list means nothing matched.
    """
    result = [node for node in iter_descendants(root) if matches(node, args, strict)]
    logger.debug(f"find_all({list(args)!r}, strict={strict}) found {len(result)} nodes")
    return result
