"""
Sibling stepping.
"""

from typing import Optional

from .dom import Node


def next_sibling(node: Node) -> Optional[Node]:
    return node.next_sibling


def previous_sibling(node: Node) -> Optional[Node]:
    return node.previous_sibling


def next_element_sibling(node: Node) -> Optional[Node]:
    """The closest following sibling that is an element, skipping text and comments."""
    sibling = node.next_sibling
    while sibling is not None and not sibling.is_element:
        sibling = sibling.next_sibling
    return sibling


def previous_element_sibling(node: Node) -> Optional[Node]:
    """The closest preceding sibling that is an element."""
    sibling = node.previous_sibling
    while sibling is not None and not sibling.is_element:
        sibling = sibling.previous_sibling
    return sibling
