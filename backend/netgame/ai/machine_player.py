# =============================================================================
# Network Board Engine - Machine Player
# =============================================================================
"""
The player a referee talks to. It keeps its own board in step with the
game and asks the MinMax agent for moves.
"""

import logging
import random
from typing import Dict, Optional

from ..core import BoardState, Move, Side, Difficulty, EngineConfig
from .minmax_agent import MinMaxAgent

logger = logging.getLogger(__name__)


class MachinePlayer:
    """
    A search-backed Network player.

    Example usage:
        player = MachinePlayer(Side.BLACK, search_depth=2)
        player.opponent_move(Move.add(0, 3))
        move = player.choose_move()
    """

    def __init__(
        self,
        side: Side,
        search_depth: int = 3,
        rng: Optional[random.Random] = None,
        config: Optional[EngineConfig] = None
    ):
        self.side = side
        self.opp_side = side.opponent
        self.board = BoardState()
        self.agent = MinMaxAgent(side, max_depth=search_depth, config=config, rng=rng)
        self.last_mover: Optional[Side] = None

    def choose_move(self) -> Move:
        """
        Search for a move, record it on the internal board and return it.
        Raises RuntimeError once either side holds a network.
        """
        held = [str(side) for side, has in self.networks().items() if has]
        if held:
            raise RuntimeError(f"Game is over: network held by {', '.join(held)}")
        move = self.agent.choose_move(self.board)
        if move is None:
            raise RuntimeError(f"{self.side} has no legal move")
        self.board.do_move(self.side, move)
        self.last_mover = self.side
        return move

    def force_move(self, move: Move) -> bool:
        """
        Record `move` as this player's own if it is legal. Returns whether
        it was applied; the board is untouched otherwise.
        """
        return self._apply(self.side, move)

    def opponent_move(self, move: Move) -> bool:
        """
        Record `move` as the opponent's if it is legal. Returns whether it
        was applied; the board is untouched otherwise.
        """
        return self._apply(self.opp_side, move)

    # camelCase names for referees that expect them
    chooseMove = choose_move
    forceMove = force_move
    opponentMove = opponent_move

    def _apply(self, side: Side, move: Move) -> bool:
        valid, reason = self.board.validate_move(side, move)
        if not valid:
            logger.debug("Rejected %s for %s: %s", move, side, reason)
            return False
        self.board.do_move(side, move)
        self.last_mover = side
        return True

    def networks(self) -> Dict[Side, bool]:
        """Which sides currently hold a network"""
        return {side: self.board.has_network(side)
                for side in (Side.BLACK, Side.WHITE)}

    def winner(self) -> Optional[Side]:
        """
        The side holding a network, if any. When both do, the side that
        did not make the last move wins.
        """
        held = [side for side, has in self.networks().items() if has]
        if not held:
            return None
        if len(held) == 1:
            return held[0]
        if self.last_mover is not None:
            return self.last_mover.opponent
        return None


# =============================================================================
# Convenience Functions
# =============================================================================

def create_machine_player(
    side: Side,
    difficulty: Difficulty = Difficulty.MEDIUM,
    rng: Optional[random.Random] = None
) -> MachinePlayer:
    """
    Create a machine player whose search depth matches the difficulty.
    """
    return MachinePlayer(side, search_depth=difficulty.search_depth, rng=rng)
