import pytest

from blockfall.game.pieces import SHAPES
from blockfall.game.simulator import BoardSimulator, Piece


O_KIND = 5


@pytest.fixture
def sim():
    """A running simulator with a seeded randomizer."""
    simulator = BoardSimulator(seed=1234)
    simulator.start()
    return simulator


@pytest.fixture
def square_sim(sim):
    """Running simulator whose active piece is the square at the spawn offset."""
    sim.piece = Piece(SHAPES[O_KIND], x=3, y=0, kind=O_KIND)
    return sim
