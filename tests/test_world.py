"""
Unit tests for the column grid.
"""

import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).parent.parent / "Code"))

from isocanvas.constants import Material, DEFAULT_MATERIAL
from isocanvas.world import World, Column


class TestWorld(unittest.TestCase):
    """Tests for World class."""

    def test_initial_terrain(self):
        """Fresh grid has low random heights and the default material."""
        world = World(18, 7, seed=1)
        assert world.size == 18
        for x, y, height, material in world.columns():
            assert 1 <= height <= 3
            assert material == DEFAULT_MATERIAL
        assert len(list(world.columns())) == 18 * 18

    def test_seed_is_reproducible(self):
        assert World(6, seed=42).heights == World(6, seed=42).heights

    def test_invalid_construction(self):
        with self.assertRaises(ValueError):
            World(0)
        with self.assertRaises(ValueError):
            World(4, maxHeight=0)

    def test_single_column_grid(self):
        world = World(1, seed=3)
        assert list(world.columns())[0][:2] == (0, 0)

    def test_out_of_bounds(self):
        world = World(4, seed=0)
        assert not world.isInBounds(4, 0)
        assert not world.isInBounds(-1, 2)
        with self.assertRaises(IndexError):
            world.getHeight(4, 0)
        with self.assertRaises(IndexError):
            world.raiseColumn(0, -1)

    def test_raise_never_exceeds_max(self):
        world = World(4, maxHeight=7, seed=0)
        for _ in range(20):
            world.raiseColumn(1, 2)
        assert world.getHeight(1, 2) == 7

    def test_lower_never_below_one(self):
        world = World(4, maxHeight=7, seed=0)
        for _ in range(20):
            world.lowerColumn(2, 1)
        assert world.getHeight(2, 1) == 1

    def test_set_height_clamps(self):
        world = World(4, maxHeight=5, seed=0)
        assert world.setHeight(0, 0, 99) == 5
        assert world.setHeight(0, 0, -3) == 1

    def test_raise_paints_lower_keeps_material(self):
        world = World(4, seed=0)
        world.setHeight(3, 3, 2)
        world.raiseColumn(3, 3, Material.STONE)
        assert world.getColumn(3, 3) == Column(3, Material.STONE)
        world.lowerColumn(3, 3)
        assert world.getColumn(3, 3) == Column(2, Material.STONE)

    def test_material_from_string(self):
        world = World(2, seed=0)
        assert world.setMaterial(0, 1, "Water") == Material.WATER
        with self.assertRaises(ValueError):
            world.setMaterial(0, 1, "lava")

    def test_reset(self):
        world = World(5, seed=9)
        world.setHeight(0, 0, 7)
        world.setMaterial(0, 0, Material.WOOD)
        world.reset()
        assert world.getHeight(0, 0) <= 3
        assert all(m == DEFAULT_MATERIAL for _, _, _, m in world.columns())

    def test_reset_with_small_max_height(self):
        world = World(3, maxHeight=2, seed=5)
        assert max(h for _, _, h, _ in world.columns()) <= 2


if __name__ == "__main__":
    unittest.main()
