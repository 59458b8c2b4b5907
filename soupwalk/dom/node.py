"""
Node implementation for the parsed tree.
This module implements the base node with its parent, child and sibling links.
"""

from enum import IntEnum
from typing import List, Optional


class NodeType(IntEnum):
    """Node types, numbered as in the DOM specification."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9
    DOCUMENT_TYPE_NODE = 10


class Node:
    """
    Base Node implementation.

    Nodes are created by the tree builders in ``soupwalk.parser``; everything
    else only reads them.
    """

    def __init__(self, node_type: NodeType):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
        """
        self.node_type = node_type

        # Node relationships
        self.parent_node: Optional['Node'] = None
        self.child_nodes: List['Node'] = []
        self.first_child: Optional['Node'] = None
        self.last_child: Optional['Node'] = None
        self.previous_sibling: Optional['Node'] = None
        self.next_sibling: Optional['Node'] = None

        self.node_name: str = "#node"

    @property
    def data(self) -> str:
        """The node's own string value (tag name, text payload, ...)."""
        return ""

    @property
    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT_NODE

    @property
    def is_text(self) -> bool:
        return self.node_type == NodeType.TEXT_NODE

    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.

        Args:
            child: The node to append

        Returns:
            The appended node
        """
        child.parent_node = self

        # Set sibling relationships
        if self.child_nodes:
            last_child = self.child_nodes[-1]
            last_child.next_sibling = child
            child.previous_sibling = last_child

        self.child_nodes.append(child)

        if not self.first_child:
            self.first_child = child
        self.last_child = child

        return child

    def has_child_nodes(self) -> bool:
        """Check if this node has any child nodes."""
        return len(self.child_nodes) > 0

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.node_name!r}>"
