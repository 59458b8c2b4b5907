"""
Node matching for tag and attribute queries.

A query is a positional argument list: ``(tag,)`` or
``(tag, attribute_name, attribute_value)``. An empty tag matches any element.
Queries of any other length never match.
"""

from typing import Sequence

from .dom import Attr, Node


def match_element_name(node: Node, name: str) -> bool:
    return name == "" or name == node.tag_name


def attribute_equals(attr: Attr, name: str, value: str) -> bool:
    return attr.name == name and attr.value == value


def attribute_contains(attr: Attr, name: str, value: str) -> bool:
    """True if ``value`` is one of the whitespace-separated tokens of the attribute."""
    return attr.name == name and value in attr.value.split()


def matches(node: Node, args: Sequence[str], strict: bool = False) -> bool:
    """
    Decide whether ``node`` satisfies the query ``args``.

    Args:
        node: Candidate node
        args: ``(tag,)`` or ``(tag, attribute_name, attribute_value)``
        strict: Compare attribute values exactly instead of by token

    Returns:
        True if the node is an element matching the query
    """
    if not args or not node.is_element or not match_element_name(node, args[0]):
        return False

    if len(args) == 1:
        return True

    # Two-argument and longer queries are left unmatched on purpose.
    if len(args) != 3:
        return False

    name, value = args[1], args[2]
    compare = attribute_equals if strict else attribute_contains
    return any(compare(attr, name, value) for attr in node.attributes)
