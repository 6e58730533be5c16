"""
Configuration for Iso Canvas.

Values default to the module constants and may be overridden by a JSON
file next to the package (``.app_config.json``).
"""

import json
import os
from dataclasses import dataclass, asdict, fields
from typing import Optional

from .constants import (
    APP_CONFIG_FILE, GRID_SIZE, MAX_HEIGHT, TILE_WIDTH, TILE_HEIGHT,
    DEFAULT_MATERIAL, Material, toMaterial
)


@dataclass
class CanvasConfig:
    """User-adjustable settings for the painter"""
    gridSize: int = GRID_SIZE
    maxHeight: int = MAX_HEIGHT
    seed: Optional[int] = None
    tileWidth: float = TILE_WIDTH
    tileHeight: float = TILE_HEIGHT
    selectedMaterial: Material = DEFAULT_MATERIAL

    def toDict(self) -> dict:
        data = asdict(self)
        data["selectedMaterial"] = self.selectedMaterial.value
        return data


def loadConfig(path: str = APP_CONFIG_FILE) -> CanvasConfig:
    """
    Load settings from a JSON file.

    A missing or unreadable file yields the defaults. Unknown keys and
    values that cannot be converted are reported and skipped.

    Args:
        path: Location of the JSON config file

    Returns:
        The resulting CanvasConfig
    """
    config = CanvasConfig()
    if not os.path.exists(path):
        return config

    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except Exception as e:
        print(f"Could not load app config: {e}")
        return config

    if not isinstance(data, dict):
        print(f"Warning: Ignoring app config {path}, expected a JSON object")
        return config

    known = {f.name for f in fields(CanvasConfig)}
    for key, value in data.items():
        if key not in known:
            print(f"Warning: Unknown config key '{key}' ignored")
            continue
        try:
            if key == "selectedMaterial":
                value = toMaterial(value)
            elif key in ("gridSize", "maxHeight"):
                value = int(value)
                if value < 1:
                    raise ValueError(f"must be at least 1, got {value}")
            elif key in ("tileWidth", "tileHeight"):
                value = float(value)
            elif key == "seed" and value is not None:
                value = int(value)
        except (TypeError, ValueError) as e:
            print(f"Warning: Bad value for config key '{key}': {e}")
            continue
        setattr(config, key, value)

    return config


def saveConfig(config: CanvasConfig, path: str = APP_CONFIG_FILE) -> bool:
    """Save settings to a JSON file. Returns True on success."""
    try:
        with open(path, 'w') as f:
            json.dump(config.toDict(), f, indent=2)
        return True
    except Exception as e:
        print(f"Could not save app config: {e}")
        return False
