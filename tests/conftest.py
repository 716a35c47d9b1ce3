import random

import pytest

from bentfour.game.board import Board


@pytest.fixture
def board():
    return Board(6, 7)


@pytest.fixture
def rng():
    return random.Random(1234)
