"""
Canvas Composition Module

Places normalized formula content onto a fixed-size canvas.
"""

from .canvas_compositor import CanvasCompositor

__all__ = ['CanvasCompositor']
