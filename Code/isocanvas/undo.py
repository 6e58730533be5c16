"""
Undo/Redo system for Iso Canvas.

Implements the Command pattern for reversible column edits.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from collections import deque
from typing import Deque, List, Optional, Tuple

from .constants import Material
from .world import World


class Command(ABC):
    """Abstract base class for undoable commands"""

    @abstractmethod
    def execute(self) -> bool:
        """Execute the command. Returns True if it changed anything."""
        pass

    @abstractmethod
    def undo(self) -> bool:
        """Undo the command. Returns True if successful."""
        pass

    @abstractmethod
    def get_description(self) -> str:
        """Get a human-readable description of the command"""
        pass


@dataclass
class ColumnEditCommand(Command):
    """Command to set a column's height and top material"""
    world: World
    x: int
    y: int
    height: int
    material: Material
    # State saved for undo
    previous_height: Optional[int] = None
    previous_material: Optional[Material] = None
    _executed: bool = False

    def execute(self) -> bool:
        """Apply the edit, saving the previous state. No-op edits return False."""
        if not self.world.isInBounds(self.x, self.y):
            return False

        self.previous_height = self.world.getHeight(self.x, self.y)
        self.previous_material = self.world.getMaterial(self.x, self.y)

        newHeight = self.world.clampHeight(self.height)
        if newHeight == self.previous_height and self.material == self.previous_material:
            return False

        self.world.setHeight(self.x, self.y, newHeight)
        self.world.setMaterial(self.x, self.y, self.material)
        self._executed = True
        return True

    def undo(self) -> bool:
        """Restore the previous column state"""
        if not self._executed:
            return False

        self.world.setHeight(self.x, self.y, self.previous_height)
        self.world.setMaterial(self.x, self.y, self.previous_material)
        self._executed = False
        return True

    def get_description(self) -> str:
        return (f"Set ({self.x}, {self.y}) to height {self.height} "
                f"{self.material.value}")


class UndoManager:
    """
    Bounded undo/redo history of column edits.

    Only commands that changed the world are kept; the oldest entry drops
    off once max_history is reached. Recording a new edit discards
    anything that could have been redone.
    """

    def __init__(self, max_history: int = 100):
        self.max_history = max_history
        self.undo_stack: Deque[Command] = deque(maxlen=max_history)
        self.redo_stack: List[Command] = []

    def execute(self, command: Command) -> bool:
        """Run a command and record it if it changed anything"""
        if not command.execute():
            return False
        self.undo_stack.append(command)
        self.redo_stack.clear()
        return True

    def _move(self, source, target, apply) -> Optional[Command]:
        # Pop from one stack, apply, push onto the other; restore on failure
        if not source:
            return None
        command = source.pop()
        if not apply(command):
            source.append(command)
            return None
        target.append(command)
        return command

    def undo(self) -> Optional[Command]:
        """Revert the newest edit. Returns it, or None if there was nothing to undo."""
        return self._move(self.undo_stack, self.redo_stack, lambda c: c.undo())

    def redo(self) -> Optional[Command]:
        """Reapply the last reverted edit. Returns it, or None."""
        return self._move(self.redo_stack, self.undo_stack, lambda c: c.execute())

    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def get_undo_description(self) -> Optional[str]:
        """Description of the edit undo() would revert"""
        return self.undo_stack[-1].get_description() if self.undo_stack else None

    def clear(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()

    def get_history_count(self) -> Tuple[int, int]:
        """Get count of (undo, redo) items"""
        return (len(self.undo_stack), len(self.redo_stack))
