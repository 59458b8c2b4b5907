"""
Document and DocumentType implementation.
"""

from typing import Optional

from .node import Node, NodeType
from .element import Element


class DocumentType(Node):
    """The <!DOCTYPE> declaration of a document."""

    def __init__(self, name: str, public_id: Optional[str] = None, system_id: Optional[str] = None):
        super().__init__(NodeType.DOCUMENT_TYPE_NODE)
        self.name = name or ""
        self.public_id = public_id
        self.system_id = system_id
        self.node_name = "#doctype"

    @property
    def data(self) -> str:
        return self.name


class Document(Node):
    """
    Document node.

    The top of a parsed tree. Its children are the optional doctype,
    top-level comments and the root element.
    """

    def __init__(self):
        """Initialize a new, empty Document."""
        super().__init__(NodeType.DOCUMENT_NODE)
        self.node_name = "#document"

    @property
    def doctype(self) -> Optional[DocumentType]:
        """Get the document's DOCTYPE."""
        for child in self.child_nodes:
            if child.node_type == NodeType.DOCUMENT_TYPE_NODE:
                return child
        return None

    @property
    def document_element(self) -> Optional[Element]:
        """
        The root element.

        Doctype, comment and stray text nodes in front of it are skipped.
        """
        for child in self.child_nodes:
            if child.node_type == NodeType.ELEMENT_NODE:
                return child
        return None
