"""
Element implementation.
This module implements element nodes and their ordered attribute list.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .node import Node, NodeType
from .attr import Attr


class Element(Node):
    """
    Element node implementation.

    Attributes are an ordered list; a key may occur more than once and the
    first occurrence wins on lookup.
    """

    def __init__(self,
                 tag_name: str,
                 attributes: Optional[Iterable[Tuple[str, str]]] = None,
                 namespace: Optional[str] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            attributes: Optional (name, value) pairs in source order
            namespace: Optional namespace URI
        """
        super().__init__(NodeType.ELEMENT_NODE)

        self.tag_name = tag_name
        self.namespace_uri = namespace
        self.node_name = tag_name

        self.attributes: List[Attr] = []
        for name, value in attributes or ():
            self.attributes.append(Attr(name, value))

    @property
    def data(self) -> str:
        return self.tag_name

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of an attribute.

        Args:
            name: The attribute name

        Returns:
            The value of the first attribute with that name, or None
        """
        for attr in self.attributes:
            if attr.name == name:
                return attr.value
        return None

    def attribute_map(self) -> Dict[str, str]:
        """Attributes as a dict, keeping the first value of repeated keys."""
        result: Dict[str, str] = {}
        for attr in self.attributes:
            if attr.name not in result:
                result[attr.name] = attr.value
        return result
