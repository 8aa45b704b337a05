"""
Pygame renderer for the game.

Draws the board grid, the active piece, a next piece preview and a sidebar
with score / level / lines and the current settings. Cells get a soft neon
halo when glow is enabled.
"""

from __future__ import annotations

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from neontris.game.pieces import PIECE_COLORS, PIECE_IDS, create_piece
from neontris.game.tetris import GameStatus, TetrisGame
from neontris.settings import Settings


# ── Color constants ───────────────────────────────────────────────────────
BACKGROUND_COLOR = (0, 0, 0)
GRID_LINE_COLOR = (20, 20, 30)
BORDER_COLOR = (0, 200, 200)
TEXT_COLOR = (255, 255, 255)
SIDEBAR_BG_COLOR = (10, 10, 16)
EMPTY_CELL_COLOR = (0, 0, 0)
GLOW_ALPHA = 70  # transparency of the glow halo (0-255)
OVERLAY_ALPHA = 150
FALLBACK_COLOR = PIECE_COLORS[1]


class TetrisRenderer:
    """Pygame-based renderer for a TetrisGame.

    The window is divided into:
      - Left: board area (cell_size * board_width) x (cell_size * board_height)
      - Right: sidebar with next piece, score, level, lines and settings

    Attributes:
        game: The TetrisGame being rendered.
        settings: Settings read for the glow toggle and sidebar.
        cell_size: Pixel size of each grid cell.
        screen: Pygame display surface (created on first render).
    """

    SIDEBAR_WIDTH_CELLS: int = 7  # sidebar width in cell units

    def __init__(self, game: TetrisGame, settings: Settings, cell_size: int = 30) -> None:
        """Initialize the renderer.

        Does NOT create the Pygame window yet; that happens on the first
        call to render().

        Raises:
            ImportError: If pygame is not installed.
        """
        if pygame is None:
            raise ImportError("pygame is required for rendering. Install it: pip install pygame")

        self.game = game
        self.settings = settings
        self.cell_size = cell_size

        self.board_pixel_width = cell_size * game.board.width
        self.board_pixel_height = cell_size * game.board.height
        self.sidebar_width = cell_size * self.SIDEBAR_WIDTH_CELLS
        self.window_width = self.board_pixel_width + self.sidebar_width
        self.window_height = self.board_pixel_height

        self.screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self._glow: pygame.Surface | None = None
        self._initialized: bool = False

    def render(self) -> None:
        """Draw the current game state and flip the display."""
        if not self._initialized:
            self._init_pygame()

        self.screen.fill(BACKGROUND_COLOR)
        self._draw_board()
        if self.game.piece is not None and self.game.status is not GameStatus.GAME_OVER:
            self._draw_current_piece()
        self._draw_sidebar()

        pygame.draw.rect(
            self.screen,
            BORDER_COLOR,
            (0, 0, self.board_pixel_width, self.board_pixel_height),
            2,
        )

        if self.game.status is GameStatus.PAUSED:
            self._draw_overlay("PAUSED", "Press P to resume")
        elif self.game.status is GameStatus.GAME_OVER:
            self._draw_overlay("GAME OVER", "Restarting...")

        pygame.display.flip()

    def _init_pygame(self) -> None:
        """Initialize Pygame display and fonts.

        Called once on the first render() invocation.
        """
        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Neontris")
        self._font = pygame.font.SysFont("monospace", 20)
        self._small_font = pygame.font.SysFont("monospace", 14)
        self._big_font = pygame.font.SysFont("monospace", 36, bold=True)
        glow_size = self.cell_size * 2
        self._glow = pygame.Surface((glow_size, glow_size), pygame.SRCALPHA)
        self._initialized = True

    def _draw_cell(self, x: int, y: int, size: int, color: tuple[int, int, int]) -> None:
        if self.settings.glow_enabled:
            self._glow.fill((0, 0, 0, 0))
            halo = size // 2
            pygame.draw.rect(
                self._glow,
                (*color, GLOW_ALPHA),
                (0, 0, size + halo * 2, size + halo * 2),
                border_radius=halo,
            )
            self.screen.blit(self._glow, (x - halo, y - halo))
        pygame.draw.rect(self.screen, color, (x, y, size, size))
        darker = tuple(max(0, c - 40) for c in color)
        pygame.draw.rect(self.screen, darker, (x, y, size, size), 1)

    def _draw_board(self) -> None:
        """Draw grid lines, then every locked cell colored by its piece id."""
        grid = self.game.board.grid
        for row in range(self.game.board.height):
            for col in range(self.game.board.width):
                pygame.draw.rect(
                    self.screen,
                    GRID_LINE_COLOR,
                    (col * self.cell_size, row * self.cell_size, self.cell_size, self.cell_size),
                    1,
                )
        for row in range(self.game.board.height):
            for col in range(self.game.board.width):
                cell_value = int(grid[row, col])
                if cell_value != 0:
                    self._draw_cell(
                        col * self.cell_size,
                        row * self.cell_size,
                        self.cell_size,
                        PIECE_COLORS.get(cell_value, FALLBACK_COLOR),
                    )

    def _draw_current_piece(self) -> None:
        """Draw the falling piece at its board position."""
        piece = self.game.piece
        for board_col, board_row in piece.cells():
            if 0 <= board_row < self.game.board.height:
                value = int(piece.matrix[board_row - piece.y, board_col - piece.x])
                self._draw_cell(
                    board_col * self.cell_size,
                    board_row * self.cell_size,
                    self.cell_size,
                    PIECE_COLORS.get(value, FALLBACK_COLOR),
                )

    def _draw_sidebar(self) -> None:
        """Draw the sidebar with next piece, score, level, lines and settings."""
        sidebar_x = self.board_pixel_width
        pygame.draw.rect(
            self.screen,
            SIDEBAR_BG_COLOR,
            (sidebar_x, 0, self.sidebar_width, self.window_height),
        )

        margin = 15
        x = sidebar_x + margin

        self._draw_next_preview(x, 20)

        text_y = 190
        for label, value in (
            ("SCORE", self.game.score),
            ("LEVEL", self.game.level),
            ("LINES", self.game.lines),
        ):
            self._draw_text(label, x, text_y)
            self._draw_text(str(value), x, text_y + 25)
            text_y += 65

        text_y += 10
        settings = self.settings
        for line in (
            f"PERF  {'on' if settings.performance_mode else 'off'}  [F2]",
            f"GLOW  {'on' if settings.glow_enabled else 'off'}  [G]",
            f"SPEED {self.game.drop_interval}ms [-/=]",
        ):
            self._draw_text(line, x, text_y, font=self._small_font)
            text_y += 20

    def _draw_next_preview(self, x_offset: int, y_offset: int) -> None:
        """Draw the next piece centered in a 4x4-cell box."""
        preview_cell = self.cell_size * 2 // 3
        box_size = preview_cell * 4

        self._draw_text("NEXT", x_offset, y_offset)
        box_y = y_offset + 25
        pygame.draw.rect(
            self.screen,
            EMPTY_CELL_COLOR,
            (x_offset, box_y, box_size, box_size),
        )
        pygame.draw.rect(
            self.screen,
            BORDER_COLOR,
            (x_offset, box_y, box_size, box_size),
            1,
        )

        name = self.game.next_piece
        shape = create_piece(name) if name else None
        if shape is None:
            return

        color = PIECE_COLORS[PIECE_IDS[name]]
        rows, cols = shape.shape
        offset_x = x_offset + (box_size - cols * preview_cell) // 2
        offset_y = box_y + (box_size - rows * preview_cell) // 2
        for r in range(rows):
            for c in range(cols):
                if shape[r, c] != 0:
                    pygame.draw.rect(
                        self.screen,
                        color,
                        (offset_x + c * preview_cell, offset_y + r * preview_cell, preview_cell, preview_cell),
                    )

    def _draw_overlay(self, title: str, subtitle: str) -> None:
        """Dim the board and draw a centered message."""
        overlay = pygame.Surface(
            (self.board_pixel_width, self.board_pixel_height), pygame.SRCALPHA
        )
        overlay.fill((0, 0, 0, OVERLAY_ALPHA))
        self.screen.blit(overlay, (0, 0))

        text_title = self._big_font.render(title, True, (255, 50, 150))
        text_sub = self._small_font.render(subtitle, True, TEXT_COLOR)
        cx = self.board_pixel_width // 2
        cy = self.board_pixel_height // 2
        self.screen.blit(text_title, (cx - text_title.get_width() // 2, cy - 40))
        self.screen.blit(text_sub, (cx - text_sub.get_width() // 2, cy + 10))

    def _draw_text(
        self,
        text: str,
        x: int,
        y: int,
        color: tuple[int, int, int] = TEXT_COLOR,
        font: pygame.font.Font | None = None,
    ) -> None:
        surface = (font or self._font).render(text, True, color)
        self.screen.blit(surface, (x, y))

    def close(self) -> None:
        """Shut down Pygame and close the window."""
        if self._initialized:
            pygame.quit()
            self._initialized = False
