"""
Engine module for Iso Canvas.

Contains core systems:
- Column grid (world)
- Isometric projection, rendering and picking
- Input controller and pygame input source
- Undo management
- Configuration
"""

from .constants import Material, MATERIAL_COLORS, DEFAULT_MATERIAL
from .config import CanvasConfig, loadConfig, saveConfig
from .world import World, Column
from .surface import DrawSurface, PygameSurface
from .renderer import IsometricRenderer, shade, outlineColor
from .undo import UndoManager, Command, ColumnEditCommand
from .controller import InputController, PointerButton
from .inputsource import PygameInputSource

__version__ = "1.0.0"

__all__ = [
    # World
    'World',
    'Column',
    'Material',
    'MATERIAL_COLORS',
    'DEFAULT_MATERIAL',
    # Config
    'CanvasConfig',
    'loadConfig',
    'saveConfig',
    # Drawing
    'DrawSurface',
    'PygameSurface',
    'IsometricRenderer',
    'shade',
    'outlineColor',
    # Undo system
    'UndoManager',
    'Command',
    'ColumnEditCommand',
    # Input
    'InputController',
    'PointerButton',
    'PygameInputSource',
]
