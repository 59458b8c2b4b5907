"""
Utility modules for soupwalk.
"""

from .config import Config

__all__ = ['Config']
