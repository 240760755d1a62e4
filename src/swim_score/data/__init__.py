"""
Data access layer.

This package contains modules for loading activity stream data.
"""

from .loader import StreamLoader

__all__ = ["StreamLoader"]
