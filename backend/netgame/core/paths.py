# =============================================================================
# Network Board Engine - Paths and Networks
# =============================================================================
"""
Path enumeration and network detection.

A path is a tuple of same-side chips where each chip is connected to the
next (straight line of sight, no chip in between) and the path turns at
every chip: a segment may not continue in the direction of the previous
segment, nor double back along it. A network is a path of at least
NETWORK_LENGTH chips running from one of the side's goals to the other
without touching a goal in between.

Everything here is a pure function of the current board; nothing is
cached across moves.
"""

from typing import List, Optional, Tuple, TYPE_CHECKING

from .enums import Side, Direction
from .data_structures import (
    Chip, NETWORK_LENGTH, in_goal, in_first_goal, in_same_goal
)

if TYPE_CHECKING:
    from .board import BoardState


Path = Tuple[Chip, ...]


class PathFinder:
    """
    Enumerates every path between one side's chips.
    Paths of a single chip are starting points only and are not reported.
    """

    def __init__(self, board: 'BoardState'):
        self.board = board

    def all_paths(self, side: Side) -> List[Path]:
        """Every path for `side`, depth first from each chip in x-major order"""
        paths: List[Path] = []
        for chip in self.board.chips(side):
            paths.extend(self._extend((chip,), None))
        return paths

    def _extend(self, path: Path, last_dir: Optional[Direction]) -> List[Path]:
        """
        All paths that grow `path` by one or more chips.

        Args:
            path: Non-empty path so far
            last_dir: Direction of the segment ending at path[-1], or None
                      for a single-chip path
        """
        assert path, "cannot extend an empty path"
        found: List[Path] = []
        last = path[-1]

        # Every chip already used
        if len(path) == self.board.chip_count(last.side):
            return found

        connected = self.board.connected_chips(last.side, last.x, last.y)
        for direction, chip in zip(Direction, connected):
            if chip is None:
                continue
            if last_dir is not None and direction in (last_dir, last_dir.opposite):
                continue
            if chip in path:
                continue
            longer = path + (chip,)
            found.append(longer)
            found.extend(self._extend(longer, direction))
        return found

    @staticmethod
    def longest_path_length(paths: List[Path]) -> int:
        """Length in chips of the longest path (0 when there are none)"""
        return max((len(p) for p in paths), default=0)


class NetworkDetector:
    """
    Judges which paths are networks.
    """

    def __init__(self, board: 'BoardState'):
        self.board = board
        self.finder = PathFinder(board)

    @staticmethod
    def is_network(side: Side, path: Path) -> bool:
        """
        Network conditions:
        1. At least NETWORK_LENGTH chips
        2. First and last chips sit in the side's goals, and not the same one
        3. No chip in between sits in either goal
        Turning at every chip is guaranteed by how paths are built.
        """
        if len(path) < NETWORK_LENGTH:
            return False
        first, last = path[0], path[-1]
        if not (in_goal(side, first.x, first.y) and in_goal(side, last.x, last.y)):
            return False
        if in_same_goal(side, first.x, first.y, last.x, last.y):
            return False
        return not any(in_goal(side, c.x, c.y) for c in path[1:-1])

    def networks(self, side: Side) -> List[Path]:
        """
        Every network for `side`. Only paths starting in the side's first
        goal are considered so each network is reported once, not once per
        direction of travel.
        """
        return [
            path for path in self.finder.all_paths(side)
            if in_first_goal(side, path[0].x, path[0].y)
            and self.is_network(side, path)
        ]

    def count_networks(self, side: Side) -> int:
        return len(self.networks(side))
