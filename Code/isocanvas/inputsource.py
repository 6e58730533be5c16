"""
Pygame input source for Iso Canvas.

Translates pygame mouse events into InputController signals.
"""

from typing import Optional

import pygame

from .controller import InputController, PointerButton

# pygame mouse button numbers
_BUTTONS = {
    1: PointerButton.PRIMARY,
    2: PointerButton.MIDDLE,
    3: PointerButton.SECONDARY,
}


class PygameInputSource:
    """
    Feeds pygame events to a controller.

    Args:
        controller: Receiver of pointer/wheel signals
        canvasRect: Window area where the drawing surface is shown
    """

    def __init__(self, controller: InputController, canvasRect: pygame.Rect):
        self.controller = controller
        self.setCanvasRect(canvasRect)

    def setCanvasRect(self, canvasRect: pygame.Rect):
        self.canvasRect = pygame.Rect(canvasRect)
        self.controller.setDisplayRect(self.canvasRect.x, self.canvasRect.y,
                                       self.canvasRect.width, self.canvasRect.height)

    def _button(self, event: pygame.event.Event) -> Optional[PointerButton]:
        return _BUTTONS.get(getattr(event, 'button', None))

    def dispatch(self, event: pygame.event.Event) -> bool:
        """
        Handle one event.

        Returns:
            True if the event was consumed
        """
        if event.type == pygame.MOUSEBUTTONDOWN:
            button = self._button(event)
            # Buttons 4/5 are legacy wheel notches, MOUSEWHEEL covers them
            if button is None or not self.canvasRect.collidepoint(event.pos):
                return False
            self.controller.pointerDown(event.pos[0], event.pos[1], button)
            return True

        elif event.type == pygame.MOUSEMOTION:
            # Panning only follows the pointer while it is over the canvas
            if not self.controller.dragging or not self.canvasRect.collidepoint(event.pos):
                return False
            self.controller.pointerMove(event.pos[0], event.pos[1])
            return True

        elif event.type == pygame.MOUSEBUTTONUP:
            button = self._button(event)
            if button is None or not self.controller.dragging:
                return False
            onCanvas = self.canvasRect.collidepoint(event.pos)
            self.controller.pointerUp(event.pos[0], event.pos[1], button, onCanvas)
            return True

        elif event.type == pygame.MOUSEWHEEL:
            # pygame: scroll up is positive y; the controller expects a
            # DOM-style delta where scroll down is positive
            if event.y == 0:
                return False
            self.controller.wheel(-event.y)
            return True

        return False
