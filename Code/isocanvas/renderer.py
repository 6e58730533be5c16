"""
Isometric Renderer Module for Iso Canvas

This module handles conversion between grid coordinates and 2D screen
coordinates using 2:1 dimetric (pseudo-isometric) projection, draws the
column grid back-to-front, and maps screen points back to columns.

Features:
- Grid to screen coordinate conversion
- Painter's-algorithm rendering with directional side shading
- Screen to column picking (top-face bounding box)
- Zoom via clamped tile dimensions
"""

import math
from typing import List, Optional, Tuple

from .constants import (
    TILE_WIDTH, TILE_HEIGHT, TILE_WIDTH_MIN, TILE_WIDTH_MAX,
    TILE_HEIGHT_MIN, TILE_HEIGHT_MAX, ZOOM_STEP_WIDTH, ZOOM_STEP_HEIGHT,
    VIEWPORT_WIDTH, VIEWPORT_HEIGHT, VIEWPORT_ANCHOR_DIVISOR,
    CAMERA_START_X, CAMERA_START_Y, SHADE_LEFT, SHADE_RIGHT, OUTLINE_ALPHA,
    MATERIAL_COLORS, Material
)
from .surface import DrawSurface, Point, Color
from .world import World

Quad = List[Point]


def shade(color: Color, percent: float) -> Color:
    """
    Lighten (positive) or darken (negative) a color.

    Every channel is shifted by the same share of the full 0-255 range and
    clamped.
    """
    amount = int(math.floor(2.55 * percent + 0.5))
    return tuple(max(0, min(255, channel + amount)) for channel in color)


def outlineColor(color: Color, alpha: float = OUTLINE_ALPHA) -> Color:
    """Color of black at the given opacity composited over `color`"""
    return tuple(int(channel * (1.0 - alpha)) for channel in color)


class IsometricRenderer:
    """
    Projects and draws a World.

    The camera offset (offsetX, offsetY) is a free pan in screen pixels.
    Tile dimensions change with zoom and are always kept inside their
    configured bounds.
    """

    def __init__(self, world: World,
                 viewportWidth: int = VIEWPORT_WIDTH,
                 viewportHeight: int = VIEWPORT_HEIGHT,
                 tileWidth: float = TILE_WIDTH,
                 tileHeight: float = TILE_HEIGHT,
                 widthBounds: Tuple[float, float] = (TILE_WIDTH_MIN, TILE_WIDTH_MAX),
                 heightBounds: Tuple[float, float] = (TILE_HEIGHT_MIN, TILE_HEIGHT_MAX)):
        """
        Initialize the renderer.

        Args:
            world: The grid to draw
            viewportWidth, viewportHeight: Drawing surface resolution
            tileWidth, tileHeight: Starting tile dimensions in pixels
            widthBounds, heightBounds: (min, max) allowed tile dimensions
        """
        if widthBounds[0] > widthBounds[1] or heightBounds[0] > heightBounds[1]:
            raise ValueError("Tile bounds must be given as (min, max)")

        self.world = world
        self.viewportWidth = viewportWidth
        self.viewportHeight = viewportHeight
        self.widthBounds = widthBounds
        self.heightBounds = heightBounds
        self.offsetX = float(CAMERA_START_X)
        self.offsetY = float(CAMERA_START_Y)
        self.tileW = TILE_WIDTH
        self.tileH = TILE_HEIGHT
        self.setTileSize(tileWidth, tileHeight)

    def setTileSize(self, tileWidth: float, tileHeight: float):
        """Set tile dimensions, clamped to the configured bounds"""
        self.tileW = max(self.widthBounds[0], min(self.widthBounds[1], tileWidth))
        self.tileH = max(self.heightBounds[0], min(self.heightBounds[1], tileHeight))

    def zoom(self, steps: int):
        """
        Grow (positive) or shrink (negative) the tiles by whole zoom steps.

        Width and height move in lockstep and are clamped independently.
        """
        self.setTileSize(self.tileW + steps * ZOOM_STEP_WIDTH,
                         self.tileH + steps * ZOOM_STEP_HEIGHT)

    def setOffset(self, offsetX: float, offsetY: float):
        """Update the camera offset"""
        self.offsetX = offsetX
        self.offsetY = offsetY

    def worldToScreen(self, x: float, y: float, z: float) -> Tuple[float, float]:
        """
        Convert grid coordinates to 2D screen coordinates.

        Args:
            x, y: Grid position
            z: Column height

        Returns:
            Tuple of (screenX, screenY) of the column's top apex
        """
        screenX = ((x - y) * self.tileW / 2
                   + self.viewportWidth / 2 + self.offsetX)
        screenY = ((x + y) * self.tileH / 2 - z * self.tileH
                   + self.viewportHeight / VIEWPORT_ANCHOR_DIVISOR + self.offsetY)
        return (screenX, screenY)

    def blockFaces(self, x: int, y: int, z: int) -> Tuple[Quad, Quad, Quad]:
        """
        Get the screen-space faces of a column.

        Returns:
            (left, right, top) quadrilaterals. The top face is the diamond
            below the apex; the sides hang one tile height beneath its
            lower edges.
        """
        sx, sy = self.worldToScreen(x, y, z)
        halfW = self.tileW / 2
        halfH = self.tileH / 2
        tileH = self.tileH

        top = [
            (sx, sy),
            (sx + halfW, sy + halfH),
            (sx, sy + tileH),
            (sx - halfW, sy + halfH),
        ]
        right = [
            top[1],
            (top[1][0], top[1][1] + tileH),
            (top[2][0], top[2][1] + tileH),
            top[2],
        ]
        left = [
            top[3],
            top[2],
            (top[2][0], top[2][1] + tileH),
            (top[3][0], top[3][1] + tileH),
        ]
        return (left, right, top)

    def drawOrder(self) -> List[Tuple[int, int, int, Material]]:
        """Columns sorted back-to-front (ascending x + y, stable)"""
        return sorted(self.world.columns(), key=lambda column: column[0] + column[1])

    def render(self, surface: DrawSurface):
        """Clear the surface and redraw every column"""
        surface.clear()
        for x, y, z, material in self.drawOrder():
            topColor = MATERIAL_COLORS[material]
            left, right, top = self.blockFaces(x, y, z)
            self._drawFace(surface, left, shade(topColor, SHADE_LEFT))
            self._drawFace(surface, right, shade(topColor, SHADE_RIGHT))
            self._drawFace(surface, top, topColor)

    def _drawFace(self, surface: DrawSurface, points: Quad, color: Color):
        surface.fillPolygon(points, color)
        surface.strokePolygon(points, outlineColor(color))

    def pickColumn(self, screenX: float, screenY: float) -> Optional[Tuple[int, int]]:
        """
        Find the column whose top face is under a screen point.

        Uses each top face's bounding box rather than the exact diamond.
        Where boxes overlap, the candidate with the largest x + y + height
        (front-most, then top-most) wins.

        Returns:
            (x, y) of the picked column, or None
        """
        best = None
        bestScore = None
        halfW = self.tileW / 2
        for x, y, z, _ in self.world.columns():
            sx, sy = self.worldToScreen(x, y, z)
            if (sx - halfW <= screenX <= sx + halfW
                    and sy <= screenY <= sy + self.tileH):
                score = x + y + z
                if bestScore is None or score > bestScore:
                    best = (x, y)
                    bestScore = score
        return best
