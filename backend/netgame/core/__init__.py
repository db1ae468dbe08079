# =============================================================================
# Core Game Module
# =============================================================================
"""
Core board engine components including:
- Sides, directions and move kinds
- Chip and move values
- Board state and move rules
- Path enumeration and network detection
"""

from .enums import Side, Direction, MoveKind, Difficulty, playing_sides
from .data_structures import (
    Chip, Move, EngineConfig,
    BOARD_SIZE, MAX_CHIPS, NETWORK_LENGTH,
    on_board, in_goal, in_first_goal, in_same_goal
)
from .paths import PathFinder, NetworkDetector
from .board import BoardState

__all__ = [
    # Enums
    "Side", "Direction", "MoveKind", "Difficulty", "playing_sides",
    # Data structures
    "Chip", "Move", "EngineConfig",
    "BOARD_SIZE", "MAX_CHIPS", "NETWORK_LENGTH",
    "on_board", "in_goal", "in_first_goal", "in_same_goal",
    # Core classes
    "BoardState", "PathFinder", "NetworkDetector",
]
