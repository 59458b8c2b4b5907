"""
Attr implementation.
This module implements a single (name, value) attribute pair of an Element.
"""


class Attr:
    """
    Attribute of an Element node.

    Names are kept exactly as the parser produced them.
    """

    def __init__(self, name: str, value: str):
        """
        Initialize a new attribute.

        Args:
            name: The attribute name
            value: The attribute value
        """
        self.name = name
        self.value = value if value is not None else ""

    def __eq__(self, other) -> bool:
        if not isinstance(other, Attr):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __repr__(self) -> str:
        return f"Attr({self.name!r}, {self.value!r})"
