"""
Interfaces module - UI adapters for annotation core.

Provides adapters to connect the core annotation logic
with a document surface and its page navigation controls.
"""

from .gui_adapter import SurfaceAdapter
from .navigation import PageNavigator

__all__ = ['SurfaceAdapter', 'PageNavigator']
