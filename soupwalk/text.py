"""
Text extraction.

Two strategies: ``shallow_text`` returns the first direct text child that is
not whitespace only, ``full_text`` concatenates every text node below an
element.
"""

import re

from .dom import Node

_WHITESPACE_ONLY = re.compile(r'[\t\n\f\r ]+')


def shallow_text(node: Node) -> str:
    """
    First non-whitespace text child of ``node``, verbatim.

    Only direct children are inspected. Returns "" if there is none.
    """
    for child in node.child_nodes:
        if not child.is_text:
            continue
        if _WHITESPACE_ONLY.fullmatch(child.data):
            continue
        return child.data
    return ""


def full_text(node: Node) -> str:
    """
    Concatenate the text below ``node`` in document order.

    Descends through elements only; comments and doctypes contribute
    nothing. No trimming or whitespace filtering.
    """
    parts = []
    stack = list(reversed(node.child_nodes))
    while stack:
        current = stack.pop()
        if current.is_text:
            parts.append(current.data)
        elif current.is_element:
            stack.extend(reversed(current.child_nodes))
    return "".join(parts)
