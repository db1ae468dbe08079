# =============================================================================
# Network Board Engine - Core Data Structures
# =============================================================================
"""
Core data structures for representing game elements.
Chips and moves are immutable values; the board is the only mutable state.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .enums import Side, MoveKind


# =============================================================================
# Fixed Rules
# =============================================================================

BOARD_SIZE = 8          # Width and height of the grid
MAX_CHIPS = 10          # Chips per side before add moves turn into step moves
NETWORK_LENGTH = 6      # Minimum chips in a winning network


def on_board(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def in_goal(side: Side, x: int, y: int) -> bool:
    """
    Whether (x, y) lies in one of `side`'s goals.
    Black owns the top and bottom rows, white the left and right columns,
    so every corner belongs to both.
    """
    if side == Side.BLACK:
        return y == 0 or y == BOARD_SIZE - 1
    if side == Side.WHITE:
        return x == 0 or x == BOARD_SIZE - 1
    return False


def in_first_goal(side: Side, x: int, y: int) -> bool:
    """The goal networks are counted from (row 0 for black, column 0 for white)"""
    if side == Side.BLACK:
        return y == 0
    return x == 0


def in_same_goal(side: Side, x1: int, y1: int, x2: int, y2: int) -> bool:
    """Assumes both squares are already known to be in `side`'s goals"""
    if side == Side.BLACK:
        return y1 == y2
    return x1 == x2


# =============================================================================
# Chip
# =============================================================================

@dataclass(frozen=True)
class Chip:
    """
    A chip on a single square. Produced on demand from the grid and never
    stored as the source of truth, so two chips are equal iff x, y and side
    all match.
    """
    x: int
    y: int
    side: Side

    def __str__(self) -> str:
        return f"{self.x}{self.y}"

    @property
    def position(self) -> tuple:
        return (self.x, self.y)


# =============================================================================
# Move
# =============================================================================

@dataclass(frozen=True)
class Move:
    """
    A move by one player.

    Attributes:
        kind: ADD, STEP or QUIT
        x1, y1: destination square (ADD and STEP)
        x2, y2: square the chip leaves (STEP only)
    """
    kind: MoveKind
    x1: int = -1
    y1: int = -1
    x2: Optional[int] = None
    y2: Optional[int] = None

    @classmethod
    def add(cls, x: int, y: int) -> 'Move':
        return cls(MoveKind.ADD, x, y)

    @classmethod
    def step(cls, to_x: int, to_y: int, from_x: int, from_y: int) -> 'Move':
        return cls(MoveKind.STEP, to_x, to_y, from_x, from_y)

    @classmethod
    def quit(cls) -> 'Move':
        return cls(MoveKind.QUIT)

    @property
    def is_add(self) -> bool:
        return self.kind == MoveKind.ADD

    @property
    def is_step(self) -> bool:
        return self.kind == MoveKind.STEP

    def reversed(self) -> 'Move':
        """The step that puts a stepped chip back where it came from"""
        assert self.is_step, "only step moves can be reversed"
        return Move.step(self.x2, self.y2, self.x1, self.y1)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the HTTP surface"""
        data: Dict[str, Any] = {"kind": self.kind.name.lower()}
        if self.kind != MoveKind.QUIT:
            data["x1"] = self.x1
            data["y1"] = self.y1
        if self.is_step:
            data["x2"] = self.x2
            data["y2"] = self.y2
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Move':
        kind = MoveKind[str(data["kind"]).upper()]
        if kind == MoveKind.QUIT:
            return cls.quit()
        if kind == MoveKind.ADD:
            return cls.add(int(data["x1"]), int(data["y1"]))
        return cls.step(int(data["x1"]), int(data["y1"]),
                        int(data["x2"]), int(data["y2"]))

    def __str__(self) -> str:
        if self.kind == MoveKind.QUIT:
            return "[quit]"
        if self.kind == MoveKind.ADD:
            return f"[add to {self.x1}{self.y1}]"
        return f"[step from {self.x2}{self.y2} to {self.x1}{self.y1}]"


# =============================================================================
# Engine Configuration
# =============================================================================

@dataclass
class EngineConfig:
    """
    Tunable search settings. Board size, chip cap and network length are
    fixed rules (module constants above), not configuration.
    """
    search_depth: int = 3
    endgame_depth: int = 2   # Depth once the opponent nears the chip cap

    # Static evaluation weights
    weights: Dict[str, float] = field(default_factory=lambda: {
        "connections": 10.0,
        "longest_path": 2.6,
        "mobility": 2.0,
        "goal_chips": 2.0,
    })

    def __post_init__(self):
        """Depth must allow at least one ply of look-ahead"""
        self.search_depth = max(1, self.search_depth)
        self.endgame_depth = max(1, self.endgame_depth)
