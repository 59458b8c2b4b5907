"""
Text node implementation.
"""

from .node import Node, NodeType


class Text(Node):
    """Text node holding its raw, unescaped content."""

    def __init__(self, data: str):
        super().__init__(NodeType.TEXT_NODE)

        # Ensure data is not None
        if data is None:
            data = ""

        self.node_name = "#text"
        self._data = data

    @property
    def data(self) -> str:
        return self._data


    def append_data(self, data: str) -> None:
        self._data += data
