"""
Iso Voxel Painter

An isometric voxel-painting canvas using Pygame. The painting area is a
square grid of columns, each with a height and a top material, drawn as
stacked isometric blocks. Left click raises a column and paints its top
with the selected material, right click lowers it, dragging pans the view
and the mouse wheel zooms.

The drawing surface has a fixed resolution and is scaled into the canvas
area of a resizable window; a palette panel on the right selects the
material and clears the grid.
"""

import sys
from typing import Dict, List, Optional, Tuple

import pygame

from isocanvas.constants import (
    TITLE, WINDOW_WIDTH, WINDOW_HEIGHT, VIEWPORT_WIDTH, VIEWPORT_HEIGHT,
    PANEL_WIDTH, SWATCH_SIZE, SWATCH_MARGIN, BUTTON_HEIGHT, FPS,
    PANEL_COLOR, PANEL_BORDER, TEXT_COLOR, SELECTED_COLOR, BG_COLOR,
    APP_CONFIG_FILE, MATERIAL_COLORS, Material
)
from isocanvas.config import CanvasConfig, loadConfig, saveConfig
from isocanvas.controller import InputController
from isocanvas.inputsource import PygameInputSource
from isocanvas.renderer import IsometricRenderer
from isocanvas.surface import PygameSurface
from isocanvas.undo import UndoManager
from isocanvas.world import World

# Number keys select materials in palette order
MATERIAL_KEYS: Dict[int, Material] = {
    pygame.K_1 + i: material for i, material in enumerate(Material)
}


class VoxelPainter:
    """
    Main application class for Iso Voxel Painter.

    Owns the window and the palette panel, and wires pygame input into the
    engine's controller.
    """

    def __init__(self, config: Optional[CanvasConfig] = None, configPath: str = APP_CONFIG_FILE):
        """
        Initialize the application.

        Args:
            config: Settings to start with (loaded from configPath if None)
            configPath: Where preferences are saved on exit
        """
        self.configPath = configPath
        self.config = config if config is not None else loadConfig(configPath)

        # Set up display
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.running = True

        # Engine
        self.world = World(self.config.gridSize, self.config.maxHeight, self.config.seed)
        self.renderer = IsometricRenderer(
            self.world, VIEWPORT_WIDTH, VIEWPORT_HEIGHT,
            self.config.tileWidth, self.config.tileHeight
        )
        self.canvas = PygameSurface.create(VIEWPORT_WIDTH, VIEWPORT_HEIGHT)
        self.undoManager = UndoManager()

        # UI state
        self.selectedMaterial = self.config.selectedMaterial
        self.font = pygame.font.Font(None, 24)
        self.smallFont = pygame.font.Font(None, 18)
        self.swatchRects: List[Tuple[pygame.Rect, Material]] = []
        self.clearButtonRect = pygame.Rect(0, 0, 0, 0)

        self.controller = InputController(
            self.world, self.renderer, self.canvas, self.undoManager,
            materialSelector=lambda: self.selectedMaterial
        )
        self.inputSource = PygameInputSource(self.controller, self._canvasRect())
        self._layoutPanel()
        self.controller.redraw()

    # ==================== Layout ====================

    def _canvasRect(self) -> pygame.Rect:
        width, height = self.screen.get_size()
        return pygame.Rect(0, 0, max(1, width - PANEL_WIDTH), max(1, height))

    def _layoutPanel(self):
        """Position palette swatches and the clear button in the side panel"""
        panelX = self.screen.get_width() - PANEL_WIDTH
        top = 48
        self.swatchRects = []
        for i, material in enumerate(Material):
            rect = pygame.Rect(panelX + SWATCH_MARGIN,
                               top + i * (SWATCH_SIZE + SWATCH_MARGIN),
                               SWATCH_SIZE, SWATCH_SIZE)
            self.swatchRects.append((rect, material))
        buttonTop = top + len(Material) * (SWATCH_SIZE + SWATCH_MARGIN) + SWATCH_MARGIN
        self.clearButtonRect = pygame.Rect(panelX + SWATCH_MARGIN, buttonTop,
                                           PANEL_WIDTH - 2 * SWATCH_MARGIN, BUTTON_HEIGHT)

    def _handleResize(self, width: int, height: int):
        self.screen = pygame.display.set_mode((max(width, PANEL_WIDTH + 1), max(height, 1)),
                                              pygame.RESIZABLE)
        self.inputSource.setCanvasRect(self._canvasRect())
        self._layoutPanel()

    # ==================== Main loop ====================

    def run(self) -> None:
        """Main application loop"""
        print("\n=== Iso Voxel Painter Started ===")
        print("Controls:")
        print("  Left Click: Raise column / paint top")
        print("  Right Click: Lower column")
        print("  Drag: Pan view")
        print("  Mouse Wheel: Zoom")
        print(f"  1-{len(Material)}: Select material")
        print("  C: Clear world")
        print("  Ctrl+Z / Ctrl+Y: Undo / Redo")
        print("  ESC: Quit")
        print("=================================\n")

        while self.running:
            self._handleEvents()
            self._render()
            self.clock.tick(FPS)

        self._saveAppConfig()
        pygame.quit()

    def _saveAppConfig(self) -> None:
        """Save preferences (selected material, zoom) for the next session"""
        self.config.selectedMaterial = self.selectedMaterial
        self.config.tileWidth = self.renderer.tileW
        self.config.tileHeight = self.renderer.tileH
        saveConfig(self.config, self.configPath)

    # ==================== Events ====================

    def _handleEvents(self) -> None:
        """Handle pygame events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self._handleResize(event.w, event.h)

            elif event.type == pygame.KEYDOWN:
                self._handleKeyDown(event)

            elif self.inputSource.dispatch(event):
                continue

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handlePanelClick(*event.pos)

    def _handleKeyDown(self, event):
        mods = pygame.key.get_mods()
        if event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.key in MATERIAL_KEYS:
            self.selectedMaterial = MATERIAL_KEYS[event.key]
        elif event.key == pygame.K_z and mods & pygame.KMOD_CTRL:
            self.controller.undo()
        elif event.key == pygame.K_y and mods & pygame.KMOD_CTRL:
            self.controller.redo()
        elif event.key == pygame.K_c:
            self.controller.reset()

    def _handlePanelClick(self, mouseX: int, mouseY: int):
        """Select a swatch or press the clear button"""
        for rect, material in self.swatchRects:
            if rect.collidepoint(mouseX, mouseY):
                self.selectedMaterial = material
                return
        if self.clearButtonRect.collidepoint(mouseX, mouseY):
            self.controller.reset()

    # ==================== Rendering ====================

    def _render(self) -> None:
        self.screen.fill(BG_COLOR)
        canvasRect = self.inputSource.canvasRect
        if canvasRect.size == self.canvas.getSize():
            self.screen.blit(self.canvas.surface, canvasRect.topleft)
        else:
            scaled = pygame.transform.smoothscale(self.canvas.surface, canvasRect.size)
            self.screen.blit(scaled, canvasRect.topleft)
        self._drawPanel()
        pygame.display.flip()

    def _drawPanel(self):
        panelX = self.screen.get_width() - PANEL_WIDTH
        panelRect = pygame.Rect(panelX, 0, PANEL_WIDTH, self.screen.get_height())
        pygame.draw.rect(self.screen, PANEL_COLOR, panelRect)
        pygame.draw.line(self.screen, PANEL_BORDER, (panelX, 0), (panelX, panelRect.bottom), 2)

        title = self.font.render("Materials", True, TEXT_COLOR)
        self.screen.blit(title, (panelX + SWATCH_MARGIN, 16))

        for i, (rect, material) in enumerate(self.swatchRects):
            pygame.draw.rect(self.screen, MATERIAL_COLORS[material], rect)
            borderColor = SELECTED_COLOR if material == self.selectedMaterial else PANEL_BORDER
            pygame.draw.rect(self.screen, borderColor, rect, 3 if material == self.selectedMaterial else 1)
            label = self.smallFont.render(f"{i + 1}  {material.value}", True, TEXT_COLOR)
            self.screen.blit(label, (rect.right + SWATCH_MARGIN,
                                     rect.centery - label.get_height() // 2))

        hovered = self.clearButtonRect.collidepoint(pygame.mouse.get_pos())
        pygame.draw.rect(self.screen, (100, 100, 100) if hovered else (80, 80, 80), self.clearButtonRect)
        pygame.draw.rect(self.screen, (60, 60, 60), self.clearButtonRect, 2)
        text = self.font.render("Clear", True, (255, 255, 255))
        self.screen.blit(text, text.get_rect(center=self.clearButtonRect.center))

        statusY = self.clearButtonRect.bottom + SWATCH_MARGIN
        for line in self.controller.historyStatus():
            status = self.smallFont.render(line, True, TEXT_COLOR)
            self.screen.blit(status, (panelX + SWATCH_MARGIN, statusY))
            statusY += status.get_height() + 4


def main():
    """Main entry point"""
    print("=" * 50)
    print("  Iso Voxel Painter")
    print("=" * 50)

    pygame.init()
    try:
        app = VoxelPainter()
        app.run()
    except Exception as e:
        print(f"Error: {e}")
        import traceback
        traceback.print_exc()
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
