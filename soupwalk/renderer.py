"""
Markup serialization.

Our tree is fed to html5lib's HTMLSerializer through a tree walker, so the
escaping and void-element rules are html5lib's.
"""

import logging
from typing import Optional

from html5lib.serializer import HTMLSerializer
from html5lib.treewalkers import base

from .dom import Node, NodeType
from .utils.config import Config

logger = logging.getLogger(__name__)


class TreeWalker(base.NonRecursiveTreeWalker):
    """html5lib tree walker over ``soupwalk.dom`` nodes."""

    def getNodeDetails(self, node):
        node_type = node.node_type
        if node_type == NodeType.DOCUMENT_TYPE_NODE:
            return base.DOCTYPE, node.name, node.public_id, node.system_id

        elif node_type == NodeType.TEXT_NODE:
            return base.TEXT, node.data

        elif node_type == NodeType.ELEMENT_NODE:
            attrs = {}
            for attr in node.attributes:
                # First occurrence wins, as on lookup
                attrs.setdefault((None, attr.name), attr.value)
            return (base.ELEMENT, node.namespace_uri, node.tag_name,
                    attrs, node.has_child_nodes())

        elif node_type == NodeType.COMMENT_NODE:
            return base.COMMENT, node.data

        elif node_type == NodeType.DOCUMENT_NODE:
            return (base.DOCUMENT,)

        else:
            return base.UNKNOWN, str(node_type)

    def getFirstChild(self, node):
        return node.first_child

    def getNextSibling(self, node):
        return node.next_sibling

    def getParentNode(self, node):
        return node.parent_node


class Renderer:
    """Renders a node and its subtree back to markup."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the renderer.

        Args:
            config: Configuration; the ``renderer.*`` keys become serializer options
        """
        config = config or Config()
        self.options = {
            "quote_attr_values": config.get("renderer.quote_attr_values", "always"),
            "omit_optional_tags": config.get("renderer.omit_optional_tags", False),
            "minimize_boolean_attributes": config.get("renderer.minimize_boolean_attributes", True),
            "use_trailing_solidus": config.get("renderer.use_trailing_solidus", False),
        }
        logger.debug(f"Renderer initialized with options {self.options}")

    def render(self, node: Node) -> str:
        """
        Serialize ``node`` including itself and all descendants.

        Raises whatever the serializer raises; see ``Root.html`` for the
        best-effort variant.
        """
        serializer = HTMLSerializer(**self.options)
        return serializer.render(TreeWalker(node))
