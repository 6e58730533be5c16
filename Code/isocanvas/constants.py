"""
Constants Module for Iso Canvas

This module centralizes all constant values and enums used by the painter.
Import from here for consistent access.

Usage:
    from isocanvas.constants import (
        VIEWPORT_WIDTH, VIEWPORT_HEIGHT, GRID_SIZE, MAX_HEIGHT,
        Material, MATERIAL_COLORS
    )
"""

import os
import sys
from typing import Dict, Tuple
from enum import Enum

# ============================================================================
# WINDOW AND DISPLAY
# ============================================================================

TITLE = "Iso Voxel Painter"

# Fixed resolution of the drawing surface. The window may be resized, the
# surface is scaled into the canvas area.
VIEWPORT_WIDTH = 960
VIEWPORT_HEIGHT = 640

# Palette panel on the right-hand side of the window
PANEL_WIDTH = 180
SWATCH_SIZE = 36
SWATCH_MARGIN = 12
BUTTON_HEIGHT = 36

WINDOW_WIDTH = VIEWPORT_WIDTH + PANEL_WIDTH
WINDOW_HEIGHT = VIEWPORT_HEIGHT

FPS = 60

# ============================================================================
# GRID SETTINGS
# ============================================================================

GRID_SIZE = 18
MAX_HEIGHT = 7

# Heights used when (re)initializing the grid
INITIAL_HEIGHT_MIN = 1
INITIAL_HEIGHT_MAX = 3

# ============================================================================
# ISOMETRIC PROJECTION
# ============================================================================

TILE_WIDTH = 52
TILE_HEIGHT = 26

TILE_WIDTH_MIN = 30
TILE_WIDTH_MAX = 88
TILE_HEIGHT_MIN = 15
TILE_HEIGHT_MAX = 44

# Pixels added/removed per wheel notch
ZOOM_STEP_WIDTH = 4
ZOOM_STEP_HEIGHT = 2

# Grid origin sits at viewport height divided by this
VIEWPORT_ANCHOR_DIVISOR = 3

CAMERA_START_X = 0
CAMERA_START_Y = -120

# ============================================================================
# INPUT
# ============================================================================

# A release further than this from the press is a drag, not a click
DRAG_THRESHOLD = 4

# ============================================================================
# COLORS
# ============================================================================

BG_COLOR = (18, 22, 30)
PANEL_COLOR = (40, 40, 50)
PANEL_BORDER = (80, 80, 100)
TEXT_COLOR = (220, 220, 220)
SELECTED_COLOR = (255, 215, 0)

# Side shading, as percentages of full channel range
SHADE_RIGHT = -22
SHADE_LEFT = -34

# Face outlines are black at this opacity
OUTLINE_ALPHA = 0.22

# ============================================================================
# PATHS
# ============================================================================

def _get_base_dir() -> str:
    """Get the base directory for user files."""
    if getattr(sys, 'frozen', False):
        return os.path.dirname(sys.executable)
    return os.path.dirname(os.path.abspath(__file__))

BASE_DIR = _get_base_dir()
APP_CONFIG_FILE = os.path.join(BASE_DIR, ".app_config.json")

# ============================================================================
# ENUMS
# ============================================================================

class Material(Enum):
    """Top-surface material of a column"""
    GRASS = "grass"
    DIRT = "dirt"
    STONE = "stone"
    WOOD = "wood"
    WATER = "water"


DEFAULT_MATERIAL = Material.GRASS

MATERIAL_COLORS: Dict[Material, Tuple[int, int, int]] = {
    Material.GRASS: (0x4C, 0xAF, 0x50),
    Material.DIRT: (0x8A, 0x5A, 0x32),
    Material.STONE: (0x7F, 0x8C, 0x8D),
    Material.WOOD: (0x9B, 0x6A, 0x3B),
    Material.WATER: (0x3D, 0x8B, 0xFD),
}


def toMaterial(value) -> Material:
    """
    Coerce a Material or its string value (case-insensitive) to a Material.

    Raises:
        ValueError: if the name is not a known material
    """
    if isinstance(value, Material):
        return value
    try:
        return Material(str(value).lower())
    except ValueError:
        raise ValueError(f"Unknown material: {value!r}") from None
