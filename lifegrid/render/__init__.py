"""Drawing-surface renderers for the Game of Life grid."""

from .canvas import CanvasRenderer, NullRenderer

__all__ = [
    'CanvasRenderer',
    'NullRenderer'
]
