"""
Pygame renderer for the falling-block game.

Draws the locked grid cells, the active piece, and a status panel below the
board with the score text, the Start/Pause button, and the game-over banner.
The board area is exactly (cols * block_size) x (rows * block_size) pixels.
"""

from __future__ import annotations

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from blockfall.game.pieces import shape_cells
from blockfall.game.simulator import BoardSimulator, GameStatus


# ── Color constants ───────────────────────────────────────────────────────
BACKGROUND_COLOR = (0, 0, 0)
LOCKED_COLOR = (255, 255, 0)
PIECE_COLOR = (255, 0, 0)
PANEL_BG_COLOR = (20, 20, 20)
BORDER_COLOR = (200, 200, 200)
TEXT_COLOR = (255, 255, 255)
BUTTON_COLOR = (60, 60, 60)
GAME_OVER_COLOR = (255, 50, 50)

PANEL_HEIGHT = 60


class BoardRenderer:
    """Pygame-based renderer for a BoardSimulator.

    The window is divided into:
      - Top: the board, cols * block_size wide and rows * block_size high
      - Bottom: status panel with score, Start/Pause button, game-over banner

    Attributes:
        sim: Reference to the simulator being rendered.
        block_size: Pixel size of each grid cell.
        board_pixel_width: Pixel width of the board area.
        board_pixel_height: Pixel height of the board area.
        window_width: Total window width.
        window_height: Total window height.
        button_rect: Clickable area of the Start/Pause button.
        screen: Pygame display surface (created on first render).
    """

    def __init__(self, sim: BoardSimulator, block_size: int = 20) -> None:
        """Initialize the renderer.

        Does NOT create the Pygame window yet; that happens on the first
        call to render(), so board drawing can be used on any surface.

        Args:
            sim: The simulator to render.
            block_size: Size of each grid cell in pixels.
        """
        if pygame is None:
            raise ImportError("pygame is required for rendering. Install it: pip install pygame")

        self.sim = sim
        self.block_size = block_size

        self.board_pixel_width = block_size * sim.board.cols
        self.board_pixel_height = block_size * sim.board.rows
        self.window_width = max(self.board_pixel_width, 200)
        self.window_height = self.board_pixel_height + PANEL_HEIGHT
        self.button_rect = pygame.Rect(
            self.window_width - 90, self.board_pixel_height + 15, 80, 30
        )

        self.screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._initialized: bool = False

    def render(self, fps: int = 60) -> int:
        """Draw the current game state to the window.

        Initializes Pygame on the first call.

        Args:
            fps: Target frames per second for the display clock.

        Returns:
            Milliseconds elapsed since the previous frame.
        """
        if not self._initialized:
            self._init_pygame()

        self.screen.fill(BACKGROUND_COLOR)
        board_surface = self.screen.subsurface(
            (0, 0, self.board_pixel_width, self.board_pixel_height)
        )
        self.draw_board(board_surface)
        self._draw_panel()

        pygame.display.flip()
        return self._clock.tick(fps)

    def _init_pygame(self) -> None:
        """Initialize Pygame display, clock, and font.

        Called once on the first render() invocation.
        """
        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Blockfall")
        self._clock = pygame.time.Clock()
        self._font = pygame.font.SysFont("monospace", 18)
        self._initialized = True

    def draw_board(self, surface: pygame.Surface) -> None:
        """Draw the grid and the active piece onto ``surface``.

        Locked cells are yellow, active piece cells red. Piece cells above
        row 0 are not drawn.
        """
        surface.fill(BACKGROUND_COLOR)
        grid = self.sim.board.grid
        for row in range(self.sim.board.rows):
            for col in range(self.sim.board.cols):
                if grid[row, col]:
                    self._fill_cell(surface, LOCKED_COLOR, row, col)

        piece = self.sim.piece
        if piece is None:
            return
        for r, c in shape_cells(piece.shape):
            board_row = piece.y + r
            board_col = piece.x + c
            if 0 <= board_row < self.sim.board.rows and 0 <= board_col < self.sim.board.cols:
                self._fill_cell(surface, PIECE_COLOR, board_row, board_col)

    def _fill_cell(self, surface: pygame.Surface, color: tuple[int, int, int], row: int, col: int) -> None:
        pygame.draw.rect(
            surface,
            color,
            (col * self.block_size, row * self.block_size, self.block_size, self.block_size),
        )

    def _draw_panel(self) -> None:
        """Draw the score text, Start/Pause button, and game-over banner."""
        panel_y = self.board_pixel_height
        pygame.draw.rect(
            self.screen,
            PANEL_BG_COLOR,
            (0, panel_y, self.window_width, PANEL_HEIGHT),
        )
        pygame.draw.line(
            self.screen, BORDER_COLOR, (0, panel_y), (self.window_width, panel_y), 2
        )

        self._draw_text(self.sim.score_text, 10, panel_y + 8)
        if self.sim.status is GameStatus.GAME_OVER:
            self._draw_text("Game Over", 10, panel_y + 32, GAME_OVER_COLOR)

        pygame.draw.rect(self.screen, BUTTON_COLOR, self.button_rect)
        pygame.draw.rect(self.screen, BORDER_COLOR, self.button_rect, 1)
        label = self._font.render(self.button_label(), True, TEXT_COLOR)
        self.screen.blit(label, label.get_rect(center=self.button_rect.center))

    def button_label(self) -> str:
        """'Pause' while a game is running, 'Start' otherwise."""
        return "Pause" if self.sim.is_running else "Start"

    def _draw_text(self, text: str, x: int, y: int, color: tuple[int, int, int] = TEXT_COLOR) -> None:
        """Render text onto the screen.

        Args:
            text: String to display.
            x: Pixel X position.
            y: Pixel Y position.
            color: RGB color tuple for the text.
        """
        surface = self._font.render(text, True, color)
        self.screen.blit(surface, (x, y))

    def close(self) -> None:
        """Shut down Pygame and close the window."""
        if self._initialized:
            pygame.quit()
            self._initialized = False
