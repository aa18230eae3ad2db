"""
Interactive play mode.

Runs the pygame event loop: keyboard and mouse events become Commands, the
FallTimer turns frame time into TICK commands, and the BoardRenderer draws
the result every frame.
"""

from __future__ import annotations

from typing import Any

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from blockfall.game.commands import Command, CommandLog
from blockfall.game.simulator import BoardSimulator, GameStatus
from blockfall.renderer import BoardRenderer
from blockfall.timer import FallTimer

MAX_TICKS_PER_FRAME = 1

# ── Keyboard mapping ──────────────────────────────────────────────────────
# Arrow keys for movement and rotation, Down held for fast descent,
# Enter/Space for the Start/Pause button.
KEYDOWN_MAP: dict[int, Command] = {}
KEYUP_MAP: dict[int, Command] = {}
TOGGLE_KEYS: tuple[int, ...] = ()
if pygame is not None:
    KEYDOWN_MAP = {
        pygame.K_LEFT: Command.LEFT,
        pygame.K_RIGHT: Command.RIGHT,
        pygame.K_UP: Command.ROTATE,
        pygame.K_DOWN: Command.FAST_ON,
    }
    KEYUP_MAP = {
        pygame.K_DOWN: Command.FAST_OFF,
    }
    TOGGLE_KEYS = (pygame.K_RETURN, pygame.K_SPACE)


class GameDriver:
    """Routes input events and timer ticks to one simulator.

    Kept free of pygame calls so the control flow can be driven directly.

    Attributes:
        sim: The game session.
        log: Records every command dispatched to ``sim``.
        timer: Gravity tick source.
    """

    def __init__(self, sim: BoardSimulator) -> None:
        self.sim = sim
        self.log = CommandLog(sim)
        self.timer = FallTimer(lambda: self.sim.fall_interval_ms)

    def toggle(self) -> None:
        """Start/Pause button: start or pause the game and its timer."""
        self.log.dispatch(Command.TOGGLE)
        if self.sim.is_running:
            self.timer.start()
            print("Game started.")
        else:
            self.timer.stop()

    def handle(self, command: Command) -> None:
        """Apply a key command; ignored unless the game is running."""
        if not self.sim.is_running:
            return
        self.log.dispatch(command)

    def advance(self, elapsed_ms: int) -> None:
        """Run the tick that ``elapsed_ms`` of frame time makes due.

        At most ``MAX_TICKS_PER_FRAME`` ticks run per frame; ticks overdue
        after a stalled frame are dropped.
        """
        due = min(self.timer.update(elapsed_ms), MAX_TICKS_PER_FRAME)
        for _ in range(due):
            self.log.dispatch(Command.TICK)
            if not self.sim.is_running:
                self.timer.stop()
                if self.sim.status is GameStatus.GAME_OVER:
                    print(f"Game over | {self.sim.score_text}")
                break


def play(config: dict[str, Any], seed: int | None = None) -> None:
    """Run the game in an interactive window.

    Controls:
      - Enter / Space / Start button: start a new game or pause
      - Left/Right arrow: move piece
      - Up arrow: rotate clockwise
      - Down arrow (held): fast descent
      - Escape / close window: quit

    Args:
        config: Config dict loaded from settings.yaml.
        seed: Optional seed for the piece randomizer.
    """
    if pygame is None:
        raise ImportError("pygame is required for play mode. Install it: pip install pygame")

    fps = config.get("fps", 60)
    sim = BoardSimulator(config, seed=seed)
    driver = GameDriver(sim)
    renderer = BoardRenderer(sim, block_size=config.get("block_size", 20))
    # Force renderer init before event loop (pygame must be initialized for event.get())
    renderer.render(fps)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    break
                if event.key in TOGGLE_KEYS:
                    driver.toggle()
                elif event.key in KEYDOWN_MAP:
                    driver.handle(KEYDOWN_MAP[event.key])
            elif event.type == pygame.KEYUP:
                if event.key in KEYUP_MAP:
                    driver.handle(KEYUP_MAP[event.key])
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if renderer.button_rect.collidepoint(event.pos):
                    driver.toggle()

        if not running:
            break

        elapsed_ms = renderer.render(fps)
        driver.advance(elapsed_ms)

    driver.timer.stop()
    renderer.close()
