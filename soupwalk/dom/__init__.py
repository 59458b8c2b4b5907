"""
Node model for parsed markup.
This package provides the read-only tree that the query layer walks.
"""

from .node import Node, NodeType
from .attr import Attr
from .element import Element
from .text import Text
from .comment import Comment
from .document import Document, DocumentType

__all__ = [
    'Node', 'NodeType', 'Attr', 'Element', 'Text', 'Comment', 'Document', 'DocumentType'
]
