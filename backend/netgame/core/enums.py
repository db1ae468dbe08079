# =============================================================================
# Network Board Engine - Enumerations
# =============================================================================
"""
All enumeration types used throughout the engine.
These define the discrete values for sides, directions and move kinds.
"""

from enum import Enum, auto
from typing import List, Tuple


class Side(Enum):
    """
    The two playing colors, plus the sentinel for an unoccupied square.
    Values are chosen so a NumPy int8 grid can store them directly.
    """
    BLACK = -1
    EMPTY = 0
    WHITE = 1

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def opponent(self) -> 'Side':
        """Return the opposing side (EMPTY has no opponent)"""
        if self == Side.BLACK:
            return Side.WHITE
        if self == Side.WHITE:
            return Side.BLACK
        return Side.EMPTY

    @property
    def is_player(self) -> bool:
        """True for BLACK and WHITE"""
        return self != Side.EMPTY

    @property
    def symbol(self) -> str:
        """Return ASCII symbol for display"""
        symbols = {
            Side.BLACK: "B",
            Side.WHITE: "W",
            Side.EMPTY: "·",
        }
        return symbols[self]

    @classmethod
    def from_name(cls, name: str) -> 'Side':
        """Parse 'black' / 'white' (any case) into a playing side"""
        try:
            side = cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown side: {name!r}")
        if not side.is_player:
            raise ValueError(f"Not a playing side: {name!r}")
        return side


class Direction(Enum):
    """
    The eight compass directions away from a square.
    Declaration order is the scan order used for connections and paths:
    left, up-left, up, up-right, right, down-right, down, down-left.
    "Up" means decreasing y.
    """
    L = (-1, 0)
    UL = (-1, -1)
    U = (0, -1)
    UR = (1, -1)
    R = (1, 0)
    DR = (1, 1)
    D = (0, 1)
    DL = (-1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> 'Direction':
        """Return the direction pointing the other way"""
        return Direction((-self.dx, -self.dy))

    def shift(self, x: int, y: int, distance: int = 1) -> Tuple[int, int]:
        """Square `distance` steps away from (x, y) in this direction"""
        return x + self.dx * distance, y + self.dy * distance


class MoveKind(Enum):
    """
    Kinds of move a player can make.
    """
    ADD = auto()    # Place a new chip
    STEP = auto()   # Relocate an existing chip
    QUIT = auto()   # Resign (harness only, never legal on the board)

    def __str__(self) -> str:
        return self.name.lower()


class Difficulty(Enum):
    """
    Engine strength presets. The value is the search depth in plies.
    """
    EASY = 1
    MEDIUM = 2
    HARD = 3
    EXPERT = 4

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def search_depth(self) -> int:
        return self.value


# =============================================================================
# Utility Functions
# =============================================================================

def playing_sides() -> List[Side]:
    """Both playing sides in move order (white opens)"""
    return [Side.WHITE, Side.BLACK]
