"""
Shared board positions for the test suites.
"""

import pytest

from netgame.core import BoardState


# White network A(0,2) B(2,2) C(2,5) D(4,5) E(4,2) F(7,2):
# right, down, right, up, right
WHITE_NETWORK = [
    "........",
    "........",
    "W.W.W..W",
    "........",
    "........",
    "..W.W...",
    "........",
    "........",
]

# Same chips with a black chip between C and D
WHITE_NETWORK_BLOCKED = [
    "........",
    "........",
    "W.W.W..W",
    "........",
    "........",
    "..WBW...",
    "........",
    "........",
]

# White network without F: one add away from completion
WHITE_NETWORK_MISSING_END = [
    "........",
    "........",
    "W.W.W...",
    "........",
    "........",
    "..W.W...",
    "........",
    "........",
]

# White network above plus a black network
# (3,0) (3,3) (6,3) (6,6) (1,6) (1,7): down, right, down, left, down
BOTH_NETWORKS = [
    "...B....",
    "........",
    "W.W.W..W",
    "...B..B.",
    "........",
    "..W.W...",
    ".B....B.",
    ".B......",
]


@pytest.fixture
def white_network():
    return BoardState.from_strings(WHITE_NETWORK)


@pytest.fixture
def white_network_blocked():
    return BoardState.from_strings(WHITE_NETWORK_BLOCKED)


@pytest.fixture
def white_network_missing_end():
    return BoardState.from_strings(WHITE_NETWORK_MISSING_END)


@pytest.fixture
def both_networks():
    return BoardState.from_strings(BOTH_NETWORKS)


class FixedRandom:
    """Stands in for random.Random where only random() is used"""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def fixed_random():
    return FixedRandom
