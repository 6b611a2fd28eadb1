"""
Command-line front end.
"""

from .menu import MenuApp

__all__ = ["MenuApp"]
