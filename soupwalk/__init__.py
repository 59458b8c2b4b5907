"""
soupwalk - find elements in parsed HTML by tag and attribute, step between
siblings, and extract text or markup.

    >>> import soupwalk
    >>> doc = soupwalk.parse('<ul><li class="a b">one</li><li>two</li></ul>')
    >>> doc.find("li", "class", "b").text()
    'one'
"""

from .errors import Error, ErrorType
from .parser import HTMLParser, from_soup, parse
from .renderer import Renderer
from .root import Root, RootList
from .utils.config import Config

__version__ = "1.0.0"

__all__ = [
    'parse', 'from_soup', 'HTMLParser', 'Renderer', 'Root', 'RootList',
    'Error', 'ErrorType', 'Config'
]
