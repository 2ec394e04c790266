"""Matplotlib canvas renderer.

Draws each cell as a bordered rectangle on a pixel-sized drawing surface:
filled grey when alive, outline only when dead. Rows run along the x axis
and columns along the y axis, with (0, 0) in the top-left corner.
"""

import logging

from matplotlib.axes import Axes
from matplotlib.patches import Rectangle

from ..core.grid import Grid

logger = logging.getLogger(__name__)

STROKE_COLOR = "#000000"
FILL_COLOR = "#666666"


class CanvasRenderer:
    """Renders a Grid onto a matplotlib Axes used as a drawing surface.

    Attributes:
        ax: Target axes
        width: Surface width in pixels
        height: Surface height in pixels
    """

    def __init__(self, ax: Axes, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")

        self.ax = ax
        self.width = width
        self.height = height
        self._setup_axes()

    def _setup_axes(self) -> None:
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)  # y grows downward, like a canvas
        self.ax.set_aspect("equal")
        self.ax.set_xticks([])
        self.ax.set_yticks([])

    def cell_size(self, grid: Grid) -> tuple:
        """Pixel (w, h) of one cell for this grid."""
        return (self.width / grid.row_count, self.height / grid.col_count)

    def draw(self, grid: Grid) -> None:
        """Redraw the whole surface from the grid's current state."""
        for patch in list(self.ax.patches):
            patch.remove()

        if grid.row_count == 0 or grid.col_count == 0:
            self.ax.figure.canvas.draw_idle()
            return

        w, h = self.cell_size(grid)
        for row, col in grid.cells():
            alive = bool(grid.state[row, col])
            self.ax.add_patch(Rectangle(
                (row * w, col * h), w, h,
                edgecolor=STROKE_COLOR,
                facecolor=FILL_COLOR if alive else "none",
                fill=alive,
                linewidth=0.5,
            ))

        self.ax.figure.canvas.draw_idle()


class NullRenderer:
    """Renderer that draws nothing, for headless runs."""

    def draw(self, grid: Grid) -> None:
        pass
