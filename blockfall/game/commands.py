"""
Discrete input commands, dispatch, and record/replay.

Every timer tick and key/button event becomes a ``Command`` that is applied
synchronously to a ``BoardSimulator``. Recording the commands of a session
and replaying them against a fresh simulator with the same seed reproduces
the final grid and score.
"""

from __future__ import annotations

import enum
from typing import Any, Iterable

from blockfall.game.simulator import BoardSimulator, Direction


class Command(enum.Enum):
    """Input events the simulator understands."""
    TICK = "tick"
    LEFT = "left"
    RIGHT = "right"
    ROTATE = "rotate"
    FAST_ON = "fast_on"
    FAST_OFF = "fast_off"
    TOGGLE = "toggle"


def dispatch(sim: BoardSimulator, command: Command | str) -> None:
    """Apply a single command to ``sim``.

    Movement commands are no-ops unless the game is running.

    Raises:
        ValueError: If ``command`` is not a known command.
    """
    command = Command(command)
    if command is Command.TOGGLE:
        sim.toggle()
    elif command is Command.TICK:
        sim.tick()
    elif command is Command.LEFT:
        sim.move(Direction.LEFT)
    elif command is Command.RIGHT:
        sim.move(Direction.RIGHT)
    elif command is Command.ROTATE:
        sim.rotate()
    elif command is Command.FAST_ON:
        sim.set_fast_fall(True)
    elif command is Command.FAST_OFF:
        sim.set_fast_fall(False)


class CommandLog:
    """Dispatches commands to a simulator and remembers them in order.

    Attributes:
        sim: The simulator commands are applied to.
        commands: Commands dispatched so far.
    """

    def __init__(self, sim: BoardSimulator) -> None:
        self.sim = sim
        self.commands: list[Command] = []

    def dispatch(self, command: Command | str) -> None:
        command = Command(command)
        dispatch(self.sim, command)
        self.commands.append(command)

    def __len__(self) -> int:
        return len(self.commands)


def replay(
    commands: Iterable[Command | str],
    seed: int | None = None,
    config: dict[str, Any] | None = None,
) -> BoardSimulator:
    """Run ``commands`` against a fresh simulator and return it.

    Args:
        commands: Commands in the order they were dispatched.
        seed: Randomizer seed; must match the recorded session's seed.
        config: Settings of the recorded session.

    Returns:
        The simulator after the last command.
    """
    sim = BoardSimulator(config, seed=seed)
    for command in commands:
        dispatch(sim, command)
    return sim
