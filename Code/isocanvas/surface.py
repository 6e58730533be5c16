"""
Drawing surfaces for Iso Canvas.

The renderer only needs three primitives: clear, fill a polygon and stroke
a polygon. DrawSurface names that capability; PygameSurface provides it on
top of a pygame.Surface.
"""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

import pygame

from .constants import BG_COLOR

Point = Tuple[float, float]
Color = Tuple[int, int, int]


class DrawSurface(ABC):
    """Abstract base class for anything the renderer can draw on"""

    @abstractmethod
    def getSize(self) -> Tuple[int, int]:
        """Get the (width, height) of the surface in pixels"""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Erase everything drawn so far"""
        pass

    @abstractmethod
    def fillPolygon(self, points: Sequence[Point], color: Color) -> None:
        pass

    @abstractmethod
    def strokePolygon(self, points: Sequence[Point], color: Color) -> None:
        pass


class PygameSurface(DrawSurface):
    """DrawSurface backed by a pygame.Surface"""

    def __init__(self, surface: pygame.Surface, background: Color = BG_COLOR):
        self.surface = surface
        self.background = background

    @classmethod
    def create(cls, width: int, height: int, background: Color = BG_COLOR) -> 'PygameSurface':
        """Create an off-screen surface of the given size"""
        return cls(pygame.Surface((width, height)), background)

    def getSize(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def clear(self) -> None:
        self.surface.fill(self.background)

    def fillPolygon(self, points: Sequence[Point], color: Color) -> None:
        pygame.draw.polygon(self.surface, color, points)

    def strokePolygon(self, points: Sequence[Point], color: Color) -> None:
        pygame.draw.polygon(self.surface, color, points, 1)
