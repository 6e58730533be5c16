"""
World Module for Iso Canvas

This module contains the World class which manages the square grid of
columns for the painting area. Each column has a height and a top-surface
material; the floor never vanishes, so heights stay within [1, maxHeight].

Features:
- Height raise/lower with clamping
- Top material painting
- Randomized low terrain on construction and reset
"""

import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .constants import (
    GRID_SIZE, MAX_HEIGHT, INITIAL_HEIGHT_MIN, INITIAL_HEIGHT_MAX,
    DEFAULT_MATERIAL, Material, toMaterial
)


@dataclass(frozen=True)
class Column:
    """Snapshot of a single grid column"""
    height: int
    material: Material


class World:
    """
    Manages the N x N column grid.

    Heights and materials are stored as row-major nested lists indexed
    [x][y].
    """

    def __init__(self, size: int = GRID_SIZE, maxHeight: int = MAX_HEIGHT,
                 seed: Optional[int] = None):
        """
        Initialize the world.

        Args:
            size: Number of columns along each side
            maxHeight: Tallest allowed column
            seed: Seed for the terrain generator (None for random)
        """
        if size < 1:
            raise ValueError(f"Grid size must be at least 1, got {size}")
        if maxHeight < 1:
            raise ValueError(f"Max height must be at least 1, got {maxHeight}")

        self.size = size
        self.maxHeight = maxHeight
        self.rng = random.Random(seed)
        self.heights: List[List[int]] = []
        self.materials: List[List[Material]] = []
        self.reset()

    def reset(self):
        """Reinitialize every column to a random low height and the default material"""
        low = min(INITIAL_HEIGHT_MIN, self.maxHeight)
        high = min(INITIAL_HEIGHT_MAX, self.maxHeight)
        self.heights = [
            [self.rng.randint(low, high) for _ in range(self.size)]
            for _ in range(self.size)
        ]
        self.materials = [
            [DEFAULT_MATERIAL for _ in range(self.size)]
            for _ in range(self.size)
        ]

    def isInBounds(self, x: int, y: int) -> bool:
        """Check if a column position is inside the grid"""
        return 0 <= x < self.size and 0 <= y < self.size

    def _checkBounds(self, x: int, y: int):
        if not self.isInBounds(x, y):
            raise IndexError(f"Column ({x}, {y}) outside {self.size}x{self.size} grid")

    def getHeight(self, x: int, y: int) -> int:
        self._checkBounds(x, y)
        return self.heights[x][y]

    def getMaterial(self, x: int, y: int) -> Material:
        self._checkBounds(x, y)
        return self.materials[x][y]

    def getColumn(self, x: int, y: int) -> Column:
        self._checkBounds(x, y)
        return Column(self.heights[x][y], self.materials[x][y])

    def clampHeight(self, height: int) -> int:
        return max(1, min(self.maxHeight, height))

    def setHeight(self, x: int, y: int, height: int) -> int:
        """
        Set a column's height, clamped to [1, maxHeight].

        Returns:
            The height actually stored
        """
        self._checkBounds(x, y)
        self.heights[x][y] = self.clampHeight(height)
        return self.heights[x][y]

    def setMaterial(self, x: int, y: int, material) -> Material:
        """Paint a column's top. Accepts a Material or its string value."""
        self._checkBounds(x, y)
        self.materials[x][y] = toMaterial(material)
        return self.materials[x][y]

    def raiseColumn(self, x: int, y: int, material=None) -> int:
        """
        Add one block to a column, optionally repainting its top.

        Args:
            x, y: Column position
            material: New top material, or None to keep the current one

        Returns:
            The new height
        """
        height = self.setHeight(x, y, self.getHeight(x, y) + 1)
        if material is not None:
            self.setMaterial(x, y, material)
        return height

    def lowerColumn(self, x: int, y: int) -> int:
        """Remove one block from a column (never below 1). Returns the new height."""
        return self.setHeight(x, y, self.getHeight(x, y) - 1)

    def columns(self) -> Iterator[Tuple[int, int, int, Material]]:
        """Iterate (x, y, height, material) for every column, x-major"""
        for x in range(self.size):
            for y in range(self.size):
                yield (x, y, self.heights[x][y], self.materials[x][y])
