"""
Unit tests for configuration loading and saving.
"""

import json
import os
import tempfile
import unittest

import fakes  # noqa: F401  (puts the source root on sys.path)

from isocanvas.config import CanvasConfig, loadConfig, saveConfig
from isocanvas.constants import Material, GRID_SIZE, MAX_HEIGHT
from isocanvas.world import World


class TestConfig(unittest.TestCase):
    """Tests for CanvasConfig persistence."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "config.json")

    def tearDown(self):
        self.tmp.cleanup()

    def write(self, text):
        with open(self.path, 'w') as f:
            f.write(text)

    def test_defaults(self):
        config = CanvasConfig()
        assert config.gridSize == GRID_SIZE == 18
        assert config.maxHeight == MAX_HEIGHT == 7
        assert (config.tileWidth, config.tileHeight) == (52, 26)
        assert config.selectedMaterial == Material.GRASS
        assert config.seed is None

    def test_missing_file(self):
        assert loadConfig(self.path) == CanvasConfig()

    def test_overrides(self):
        self.write(json.dumps({"gridSize": 10, "seed": 5, "selectedMaterial": "water"}))
        config = loadConfig(self.path)
        assert config.gridSize == 10
        assert config.seed == 5
        assert config.selectedMaterial == Material.WATER
        assert config.maxHeight == 7

    def test_unknown_and_bad_values_skipped(self):
        self.write(json.dumps({"colour": "red", "maxHeight": "tall", "selectedMaterial": "lava"}))
        assert loadConfig(self.path) == CanvasConfig()

    def test_sizes_below_one_skipped(self):
        self.write(json.dumps({"gridSize": 0, "maxHeight": -2}))
        config = loadConfig(self.path)
        assert config == CanvasConfig()
        # The loaded values must build a world
        world = World(config.gridSize, config.maxHeight, config.seed)
        assert world.size == GRID_SIZE

    def test_invalid_json(self):
        self.write("{not json")
        assert loadConfig(self.path) == CanvasConfig()

    def test_non_object(self):
        self.write("[1, 2, 3]")
        assert loadConfig(self.path) == CanvasConfig()

    def test_save_then_load(self):
        config = CanvasConfig(gridSize=12, tileWidth=60, tileHeight=30,
                              selectedMaterial=Material.STONE)
        assert saveConfig(config, self.path)
        with open(self.path) as f:
            assert json.load(f)["selectedMaterial"] == "stone"
        assert loadConfig(self.path) == config

    def test_save_failure(self):
        missingDir = os.path.join(self.tmp.name, "missing", "config.json")
        assert not saveConfig(CanvasConfig(), missingDir)


if __name__ == "__main__":
    unittest.main()
