"""
Comment node implementation.
"""

from .node import Node, NodeType


class Comment(Node):
    """Comment node. Contributes nothing to extracted text."""

    def __init__(self, data: str):
        super().__init__(NodeType.COMMENT_NODE)

        if data is None:
            data = ""

        self.node_name = "#comment"
        self._data = data

    @property
    def data(self) -> str:
        return self._data
