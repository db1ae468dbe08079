# =============================================================================
# Network Board Engine - Board State
# =============================================================================
"""
The authoritative game board and the rules that govern it.

The grid is the single source of truth. Each side's chip list is derived
from it and rebuilt after every mutation. do_move / undo_move are the only
ways the grid changes once a game is running.
"""

from typing import Dict, List, Optional, Sequence, Tuple
import numpy as np

from .enums import Side, Direction, MoveKind
from .data_structures import (
    Chip, Move, BOARD_SIZE, MAX_CHIPS,
    on_board, in_goal
)
from .paths import PathFinder, NetworkDetector


ConnectedChips = Tuple[Optional[Chip], ...]


class BoardState:
    """
    An 8x8 Network board.

    The grid is indexed [x, y] and stores Side values (-1 black, 0 empty,
    1 white). Moves are validated with is_valid_move / validate_move and
    applied with do_move; do_move itself never validates.

    Example usage:
        board = BoardState()
        move = Move.add(3, 4)
        if board.is_valid_move(Side.WHITE, move):
            board.do_move(Side.WHITE, move)
    """

    def __init__(self):
        self.grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        self._chips: Dict[Side, Tuple[Chip, ...]] = {
            Side.BLACK: (),
            Side.WHITE: (),
        }
        self._networks: Dict[Side, int] = {
            Side.BLACK: 0,
            Side.WHITE: 0,
        }

    @classmethod
    def from_strings(cls, rows: Sequence[str]) -> 'BoardState':
        """
        Build a board from an ASCII picture, one string per row (y), one
        character per column (x): 'B' black, 'W' white, anything else empty.
        Chips are placed directly; move rules are not applied.
        """
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        board = cls()
        for y, row in enumerate(rows):
            row = row.replace(" ", "")
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Row {y} must have {BOARD_SIZE} squares: {row!r}")
            for x, char in enumerate(row):
                if char.upper() == "B":
                    board.grid[x, y] = Side.BLACK.value
                elif char.upper() == "W":
                    board.grid[x, y] = Side.WHITE.value
        board._refresh_chips(Side.BLACK)
        board._refresh_chips(Side.WHITE)
        return board

    # =========================================================================
    # Queries
    # =========================================================================

    def piece_at(self, x: int, y: int) -> Side:
        return Side(int(self.grid[x, y]))

    def chips(self, side: Side) -> Tuple[Chip, ...]:
        """Chips of `side` in x-major order; empty for Side.EMPTY"""
        return self._chips.get(side, ())

    def chip_count(self, side: Side) -> int:
        return len(self.chips(side))

    def is_empty(self) -> bool:
        return not self._chips[Side.BLACK] and not self._chips[Side.WHITE]

    def chips_in_goal(self, side: Side) -> int:
        """Number of `side`'s chips sitting in either of its goals"""
        return sum(1 for c in self.chips(side) if in_goal(side, c.x, c.y))

    def network_count(self, side: Side) -> int:
        """Networks found by the most recent has_network(side) call"""
        return self._networks.get(side, 0)

    def square_in_direction(self, direction: Direction, distance: int,
                            x: int, y: int) -> Optional[Side]:
        """Contents of the square `distance` away, or None off the board"""
        nx, ny = direction.shift(x, y, distance)
        if not on_board(nx, ny):
            return None
        return self.piece_at(nx, ny)

    def connected_chips(self, side: Side, x: int, y: int) -> ConnectedChips:
        """
        For each of the eight directions (Direction order), the first chip
        seen from (x, y) if it belongs to `side`, else None. Empty squares
        are looked through; a chip of the other side blocks the line.
        """
        found: List[Optional[Chip]] = []
        for direction in Direction:
            hit = None
            for distance in range(1, BOARD_SIZE):
                nx, ny = direction.shift(x, y, distance)
                if not on_board(nx, ny):
                    break
                occupant = self.piece_at(nx, ny)
                if occupant == Side.EMPTY:
                    continue
                if occupant == side:
                    hit = Chip(nx, ny, side)
                break
            found.append(hit)
        return tuple(found)

    def connection_count(self, side: Side) -> int:
        """Connected pairs of `side`'s chips (each pair counted once)"""
        total = 0
        for chip in self.chips(side):
            total += sum(1 for c in self.connected_chips(side, chip.x, chip.y)
                         if c is not None)
        return total // 2

    def all_paths(self, side: Side) -> List[Tuple[Chip, ...]]:
        return PathFinder(self).all_paths(side)

    def has_network(self, side: Side) -> bool:
        """
        Whether `side` currently has a network. Also records how many
        networks were found, replacing the previous count for that side.
        """
        count = NetworkDetector(self).count_networks(side)
        self._networks[side] = count
        return count > 0

    # =========================================================================
    # Move Validation
    # =========================================================================

    def validate_move(self, side: Side, move: Move) -> Tuple[bool, str]:
        """
        Validate a move for `side` against the current board.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if move.kind == MoveKind.QUIT:
            return False, "Quit is not a board move"

        # Positions on board
        if move.is_step and not on_board(move.x2, move.y2):
            return False, "Source square is off the board"
        if not on_board(move.x1, move.y1):
            return False, "Destination square is off the board"

        if not side.is_player:
            return False, f"Invalid side: {side}"

        # Opponent's goal (this also rules out every corner)
        if in_goal(side.opponent, move.x1, move.y1):
            return False, "Destination is in the opponent's goal"

        if move.is_step and self.piece_at(move.x2, move.y2) != side:
            return False, f"No {side} chip at ({move.x2}, {move.y2})"

        # Also stops a chip stepping onto its own square
        if self.piece_at(move.x1, move.y1) != Side.EMPTY:
            return False, "Destination square is occupied"

        count = self.chip_count(side)
        if move.is_add and count >= MAX_CHIPS:
            return False, f"All {MAX_CHIPS} chips placed; only step moves allowed"
        if move.is_step and count < MAX_CHIPS:
            return False, f"Step moves require all {MAX_CHIPS} chips on the board"

        if self._forms_cluster(side, move):
            return False, "Move would form a cluster of three or more chips"

        return True, ""

    def is_valid_move(self, side: Side, move: Move) -> bool:
        return self.validate_move(side, move)[0]

    def _neighbors(self, side: Side, x: int, y: int) -> List[Tuple[int, int]]:
        """Squares touching (x, y), diagonals included, holding a `side` chip"""
        result = []
        for direction in Direction:
            if self.square_in_direction(direction, 1, x, y) == side:
                result.append(direction.shift(x, y))
        return result

    def _forms_cluster(self, side: Side, move: Move) -> bool:
        """
        Apply the move, then check whether the moved chip touches two chips
        of its side, or touches one that touches another. Only called once
        every other check in validate_move has passed.
        """
        self.do_move(side, move)
        try:
            neighbors = self._neighbors(side, move.x1, move.y1)
            if len(neighbors) >= 2:
                return True
            for nx, ny in neighbors:
                others = [sq for sq in self._neighbors(side, nx, ny)
                          if sq != (move.x1, move.y1)]
                if others:
                    return True
            return False
        finally:
            self.undo_move(side, move)

    def get_all_valid_moves(self, side: Side) -> List[Move]:
        """
        Every legal move for `side`: add moves while it has fewer than
        MAX_CHIPS chips, step moves afterwards.
        """
        candidates: List[Move] = []
        if self.chip_count(side) < MAX_CHIPS:
            for x in range(BOARD_SIZE):
                for y in range(BOARD_SIZE):
                    if self.piece_at(x, y) == Side.EMPTY:
                        candidates.append(Move.add(x, y))
        else:
            for chip in self.chips(side):
                for x in range(BOARD_SIZE):
                    for y in range(BOARD_SIZE):
                        if self.piece_at(x, y) == Side.EMPTY:
                            candidates.append(Move.step(x, y, chip.x, chip.y))
        return [m for m in candidates if self.is_valid_move(side, m)]

    # =========================================================================
    # Mutation
    # =========================================================================

    def do_move(self, side: Side, move: Move):
        """
        Record a move that has already been validated. Performs no checks.
        """
        if move.is_step:
            self.grid[move.x2, move.y2] = Side.EMPTY.value
        self.grid[move.x1, move.y1] = side.value
        self._refresh_chips(side)

    def undo_move(self, side: Side, move: Move):
        """
        Reverse a move previously recorded with do_move(side, move).
        """
        assert self.piece_at(move.x1, move.y1) == side, \
            f"cannot undo {move}: no {side} chip at destination"
        if move.is_step:
            assert self.piece_at(move.x2, move.y2) == Side.EMPTY, \
                f"cannot undo {move}: source square is occupied"
            self.do_move(side, move.reversed())
        else:
            self.grid[move.x1, move.y1] = Side.EMPTY.value
            self._refresh_chips(side)

    def _refresh_chips(self, side: Side):
        """Rebuild `side`'s chip list from the grid"""
        xs, ys = np.nonzero(self.grid == side.value)
        self._chips[side] = tuple(
            Chip(int(x), int(y), side) for x, y in zip(xs, ys)
        )

    # =========================================================================
    # Copying and Display
    # =========================================================================

    def copy(self) -> 'BoardState':
        clone = BoardState()
        clone.grid = self.grid.copy()
        clone._chips = dict(self._chips)
        clone._networks = dict(self._networks)
        return clone

    def to_grid(self) -> List[List[str]]:
        """Rows of side names ("black", "white", "empty"), indexed [y][x]"""
        return [
            [str(self.piece_at(x, y)) for x in range(BOARD_SIZE)]
            for y in range(BOARD_SIZE)
        ]

    def __str__(self) -> str:
        lines = [" " + "".join(f" {x}" for x in range(BOARD_SIZE))]
        for y in range(BOARD_SIZE):
            cells = "".join(f" {self.piece_at(x, y).symbol}"
                            for x in range(BOARD_SIZE))
            lines.append(f"{y}{cells}")
        return "\n".join(lines)
