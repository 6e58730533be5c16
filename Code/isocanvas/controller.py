"""
Input Controller for Iso Canvas

Turns pointer, wheel and reset signals into world/camera/zoom changes and
redraws after every change. The controller knows nothing about pygame; an
input source (see inputsource.py) feeds it.

Behaviour:
- Press + move pans the camera
- Press + release without moving more than DRAG_THRESHOLD pixels is a click:
  primary raises and paints the column, secondary lowers it
- Wheel zooms
- reset() rebuilds the terrain
"""

import math
from enum import IntEnum
from typing import Callable, List, Optional, Tuple

from .constants import DRAG_THRESHOLD, DEFAULT_MATERIAL, Material, toMaterial
from .renderer import IsometricRenderer
from .surface import DrawSurface
from .undo import UndoManager, ColumnEditCommand
from .world import World


class PointerButton(IntEnum):
    """Pointer buttons, numbered like DOM MouseEvent.button"""
    PRIMARY = 0
    MIDDLE = 1
    SECONDARY = 2


class InputController:
    """
    Owns the editor state and applies input to it.

    Pointer coordinates are in display space (where the surface is shown).
    Clicks are rescaled to surface resolution before picking; pan deltas are
    applied as-is.
    """

    def __init__(self, world: World, renderer: IsometricRenderer,
                 surface: DrawSurface,
                 undoManager: Optional[UndoManager] = None,
                 materialSelector: Optional[Callable[[], object]] = None,
                 dragThreshold: float = DRAG_THRESHOLD):
        """
        Initialize the controller.

        Args:
            world: Grid being edited
            renderer: Projection/drawing for the grid
            surface: Where every redraw goes
            undoManager: History for column edits (a new one if None)
            materialSelector: Callable returning the material to paint with;
                when None, the value set through selectMaterial() is used
            dragThreshold: Pointer travel (pixels) that turns a click into a drag
        """
        self.world = world
        self.renderer = renderer
        self.surface = surface
        self.undoManager = undoManager if undoManager is not None else UndoManager()
        self.materialSelector = materialSelector
        self.dragThreshold = dragThreshold
        self.selectedMaterial = DEFAULT_MATERIAL

        # Drag state: start pointer position and camera offset at press
        self.dragging = False
        self.dragStart: Optional[Tuple[float, float, float, float]] = None

        width, height = surface.getSize()
        self.displayRect = (0, 0, width, height)

        # Called after every redraw (e.g. to present the frame)
        self.onRedraw: Optional[Callable[[], None]] = None

    # ==================== Configuration ====================

    def setDisplayRect(self, left: float, top: float, width: float, height: float):
        """Record where, and at what size, the surface is shown"""
        self.displayRect = (left, top, width, height)

    def selectMaterial(self, material) -> Material:
        self.selectedMaterial = toMaterial(material)
        return self.selectedMaterial

    def currentMaterial(self) -> Material:
        """Material a primary click paints with"""
        if self.materialSelector is not None:
            return toMaterial(self.materialSelector())
        return self.selectedMaterial

    def displayToSurface(self, displayX: float, displayY: float) -> Tuple[float, float]:
        """Map a display-space point to surface pixels"""
        left, top, width, height = self.displayRect
        surfaceW, surfaceH = self.surface.getSize()
        scaleX = surfaceW / width if width else 1.0
        scaleY = surfaceH / height if height else 1.0
        return ((displayX - left) * scaleX, (displayY - top) * scaleY)

    # ==================== Drawing ====================

    def redraw(self):
        self.renderer.render(self.surface)
        if self.onRedraw:
            self.onRedraw()

    # ==================== Pointer ====================

    def pointerDown(self, x: float, y: float, button: int = PointerButton.PRIMARY):
        """Start a (potential) drag at a display-space point"""
        self.dragging = True
        self.dragStart = (x, y, self.renderer.offsetX, self.renderer.offsetY)

    def pointerMove(self, x: float, y: float):
        """Pan the camera if a drag is in progress"""
        if not self.dragging or self.dragStart is None:
            return
        startX, startY, camX, camY = self.dragStart
        self.renderer.setOffset(camX + (x - startX), camY + (y - startY))
        self.redraw()

    def pointerUp(self, x: float, y: float, button: int = PointerButton.PRIMARY,
                  onCanvas: bool = True) -> Optional[Tuple[int, int]]:
        """
        End a drag; treat it as a click if the pointer barely moved.

        Args:
            x, y: Display-space release position
            button: Which button was released
            onCanvas: Whether the release happened over the canvas

        Returns:
            The edited column, or None if nothing was edited
        """
        if not self.dragging or self.dragStart is None:
            return None
        startX, startY = self.dragStart[0], self.dragStart[1]
        self.dragging = False
        self.dragStart = None

        moved = math.hypot(x - startX, y - startY) > self.dragThreshold
        if moved or not onCanvas:
            return None

        surfaceX, surfaceY = self.displayToSurface(x, y)
        return self.click(surfaceX, surfaceY, button)

    def click(self, surfaceX: float, surfaceY: float,
              button: int = PointerButton.PRIMARY) -> Optional[Tuple[int, int]]:
        """
        Edit the column under a surface-space point.

        Primary raises the column by one and paints its top with the current
        material; secondary lowers it by one. Other buttons do nothing.
        """
        target = self.renderer.pickColumn(surfaceX, surfaceY)
        if target is None:
            return None
        x, y = target

        height = self.world.getHeight(x, y)
        if button == PointerButton.PRIMARY:
            command = ColumnEditCommand(self.world, x, y, height + 1, self.currentMaterial())
        elif button == PointerButton.SECONDARY:
            command = ColumnEditCommand(self.world, x, y, height - 1, self.world.getMaterial(x, y))
        else:
            return None

        self.undoManager.execute(command)
        self.redraw()
        return target

    # ==================== Wheel / Reset / History ====================

    def wheel(self, deltaY: float):
        """Zoom: positive delta (scroll down) shrinks tiles, negative grows them"""
        if deltaY == 0:
            return
        step = 1 if deltaY > 0 else -1
        self.renderer.zoom(-step)
        self.redraw()

    def reset(self):
        """Regenerate the terrain and forget edit history"""
        self.world.reset()
        self.undoManager.clear()
        self.redraw()

    def undo(self) -> bool:
        if not self.undoManager.can_undo() or self.undoManager.undo() is None:
            return False
        self.redraw()
        return True

    def redo(self) -> bool:
        if not self.undoManager.can_redo() or self.undoManager.redo() is None:
            return False
        self.redraw()
        return True

    def historyStatus(self) -> List[str]:
        """Lines describing the edit history, for the status panel"""
        undoCount, redoCount = self.undoManager.get_history_count()
        lines = [f"Undo: {undoCount} | Redo: {redoCount}"]
        if self.undoManager.can_undo():
            lines.append(f"Next undo: {self.undoManager.get_undo_description()}")
        return lines
