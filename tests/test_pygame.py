"""
Unit tests for the pygame surface and input source.

No window is opened: events are constructed directly and drawing goes to
an off-screen surface.
"""

import unittest

import pygame

from fakes import RecordingSurface, flatWorld

from isocanvas.constants import BG_COLOR, MATERIAL_COLORS, Material
from isocanvas.controller import InputController
from isocanvas.inputsource import PygameInputSource
from isocanvas.renderer import IsometricRenderer
from isocanvas.surface import PygameSurface
from isocanvas.world import World


class TestPygameSurface(unittest.TestCase):
    """Tests for drawing onto a pygame.Surface."""

    def test_render_single_column(self):
        world = World(1, seed=2)
        world.setMaterial(0, 0, Material.WATER)
        renderer = IsometricRenderer(world, 200, 150)
        renderer.setOffset(0, 60)
        canvas = PygameSurface.create(200, 150)
        renderer.render(canvas)

        assert canvas.getSize() == (200, 150)
        assert tuple(canvas.surface.get_at((0, 0)))[:3] == BG_COLOR
        sx, sy = renderer.worldToScreen(0, 0, world.getHeight(0, 0))
        center = (int(sx), int(sy + renderer.tileH / 2))
        assert tuple(canvas.surface.get_at(center))[:3] == MATERIAL_COLORS[Material.WATER]

    def test_clear(self):
        canvas = PygameSurface.create(20, 20, background=(1, 2, 3))
        canvas.fillPolygon([(0, 0), (19, 0), (19, 19), (0, 19)], (200, 0, 0))
        canvas.clear()
        assert tuple(canvas.surface.get_at((10, 10)))[:3] == (1, 2, 3)


class TestPygameInputSource(unittest.TestCase):
    """Tests for translating pygame events."""

    def setUp(self):
        self.world = flatWorld(World(18, seed=7), 1)
        self.renderer = IsometricRenderer(self.world, 960, 640)
        self.controller = InputController(self.world, self.renderer, RecordingSurface(960, 640))
        # Surface shown at half size in the top-left of the window
        self.source = PygameInputSource(self.controller, pygame.Rect(0, 0, 480, 320))

    def displayPoint(self, x, y):
        sx, sy = self.renderer.worldToScreen(x, y, self.world.getHeight(x, y))
        return (int((sx + 5) / 2), int((sy + 10) / 2))

    def press(self, pos, button):
        down = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)
        up = pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=button)
        return self.source.dispatch(down), self.source.dispatch(up)

    def test_canvas_rect_sets_display_rect(self):
        assert self.controller.displayRect == (0, 0, 480, 320)

    def test_left_click_raises(self):
        assert self.press(self.displayPoint(6, 2), 1) == (True, True)
        assert self.world.getHeight(6, 2) == 2

    def test_right_click_lowers(self):
        self.world.setHeight(6, 2, 4)
        self.press(self.displayPoint(6, 2), 3)
        assert self.world.getHeight(6, 2) == 3

    def test_press_outside_canvas_ignored(self):
        assert self.press((700, 100), 1) == (False, False)
        assert not self.controller.dragging

    def test_release_outside_canvas(self):
        pos = self.displayPoint(6, 2)
        self.source.dispatch(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1))
        # Far enough to be a drag anyway; the release still ends it
        up = pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(700, 100), button=1)
        assert self.source.dispatch(up)
        assert not self.controller.dragging
        assert self.world.getHeight(6, 2) == 1

    def test_drag_pans(self):
        startX = self.renderer.offsetX
        self.source.dispatch(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(100, 100), button=1))
        assert self.source.dispatch(pygame.event.Event(pygame.MOUSEMOTION, pos=(140, 100)))
        assert self.renderer.offsetX == startX + 40

    def test_motion_over_panel_does_not_pan(self):
        startX = self.renderer.offsetX
        self.source.dispatch(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(100, 100), button=1))
        assert not self.source.dispatch(pygame.event.Event(pygame.MOUSEMOTION, pos=(700, 100)))
        assert self.renderer.offsetX == startX
        # Coming back over the canvas resumes the same drag
        assert self.source.dispatch(pygame.event.Event(pygame.MOUSEMOTION, pos=(120, 100)))
        assert self.renderer.offsetX == startX + 20

    def test_motion_without_drag(self):
        assert not self.source.dispatch(pygame.event.Event(pygame.MOUSEMOTION, pos=(140, 100)))

    def test_legacy_wheel_buttons_ignored(self):
        assert self.press((100, 100), 4) == (False, False)

    def test_wheel_direction(self):
        assert self.source.dispatch(pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=1))
        assert (self.renderer.tileW, self.renderer.tileH) == (56, 28)
        self.source.dispatch(pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=-2))
        assert (self.renderer.tileW, self.renderer.tileH) == (52, 26)

    def test_other_events_pass_through(self):
        assert not self.source.dispatch(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))


if __name__ == "__main__":
    unittest.main()
