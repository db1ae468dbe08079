# =============================================================================
# Network Board Engine - MinMax AI Agent
# =============================================================================
"""
Hand-coded MinMax algorithm with Alpha-Beta pruning.

The search works on a single board in place: every move explored is
applied with do_move and taken back with undo_move before the frame
returns, so the board is unchanged once a search completes.

Key Features:
1. Alpha-Beta Pruning - Skips replies that cannot change the result
2. Forced Results First - A network on the board ends the line at any depth,
   and a move that completes a network at the root is played without search
3. Ranked Wins - Among decided lines, sooner wins, later losses and more
   networks are preferred
4. Opening Shortcut - White's first chip goes to a random center square
5. Endgame Depth Clamp - Step moves multiply the branching factor, so the
   depth is reduced once the opponent is about to run out of chips
"""

import logging
import random
import time
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Optional, Tuple

from ..core import (
    BoardState, Move, Side, EngineConfig, Difficulty, PathFinder,
    BOARD_SIZE, MAX_CHIPS
)

logger = logging.getLogger(__name__)


# Scores for decided positions
MAX_SCORE = float('inf')
MIN_SCORE = -MAX_SCORE

# Search scores are (value, rank) pairs compared as tuples. The rank only
# separates positions with equal value, which in practice means decided ones.
Score = Tuple[float, float]
LOWEST: Score = (MIN_SCORE, MIN_SCORE)
HIGHEST: Score = (MAX_SCORE, MAX_SCORE)

# Rank per ply left in the search; outweighs any network margin
DEPTH_RANK = 1000.0


@contextmanager
def applied_move(board: BoardState, side: Side, move: Move) -> Iterator[BoardState]:
    """
    Apply `move` for the duration of the block and undo it on the way out,
    however the block is left.
    """
    board.do_move(side, move)
    try:
        yield board
    finally:
        board.undo_move(side, move)


# =============================================================================
# State Evaluator
# =============================================================================

class StateEvaluator:
    """
    Evaluates boards from one side's point of view.
    Positive values favor that side.
    """

    def __init__(self, weights: Optional[Dict[str, float]] = None):
        self.weights = dict(weights) if weights else dict(EngineConfig().weights)

    def terminal_score(self, board: BoardState, side: Side) -> Optional[float]:
        """
        MIN_SCORE if the opponent has a network, MAX_SCORE if `side` has
        one, None otherwise. The opponent is checked first: when a move
        completes both networks, the mover loses.
        """
        if board.has_network(side.opponent):
            return MIN_SCORE
        if board.has_network(side):
            return MAX_SCORE
        return None

    def evaluate(self, board: BoardState, side: Side) -> float:
        """Full static evaluation: decided positions first, then heuristics"""
        terminal = self.terminal_score(board, side)
        if terminal is not None:
            return terminal
        return self.heuristic(board, side)

    def heuristic(self, board: BoardState, side: Side) -> float:
        """
        Weighted sum of four differences (mine minus the opponent's):
        connections, longest path, legal moves, chips in goal.
        """
        opp = side.opponent

        connections = board.connection_count(side) - board.connection_count(opp)

        longest = (PathFinder.longest_path_length(board.all_paths(side))
                   - PathFinder.longest_path_length(board.all_paths(opp)))

        mobility = (len(board.get_all_valid_moves(side))
                    - len(board.get_all_valid_moves(opp)))

        goal_chips = board.chips_in_goal(side) - board.chips_in_goal(opp)

        return (self.weights["connections"] * connections
                + self.weights["longest_path"] * longest
                + self.weights["mobility"] * mobility
                + self.weights["goal_chips"] * goal_chips)

    def network_margin(self, board: BoardState, side: Side) -> int:
        """My networks minus the opponent's, refreshing both counts"""
        board.has_network(side)
        board.has_network(side.opponent)
        return board.network_count(side) - board.network_count(side.opponent)


# =============================================================================
# MinMax Agent
# =============================================================================

@dataclass
class SearchStats:
    """Statistics for one move choice"""
    nodes_searched: int = 0
    nodes_pruned: int = 0
    depth_used: int = 0
    time_ms: float = 0.0
    best_move: Optional[Move] = None
    best_score: float = 0.0
    best_rank: float = 0.0
    network_margin: int = 0
    opening: bool = False
    immediate_win: bool = False


class MinMaxAgent:
    """
    MinMax AI agent with Alpha-Beta pruning for one side.

    Example usage:
        agent = MinMaxAgent(side=Side.BLACK, max_depth=3)
        move = agent.choose_move(board)
    """

    def __init__(
        self,
        side: Side,
        max_depth: Optional[int] = None,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the MinMax agent.

        Args:
            side: Which side this agent plays
            max_depth: Search depth in plies (overrides config.search_depth)
            config: Search settings and evaluation weights; never modified
            rng: Source of random() for the opening shortcut
        """
        if not side.is_player:
            raise ValueError(f"Agent needs a playing side, got {side}")
        self.side = side
        self.opp_side = side.opponent
        self.config = replace(config) if config else EngineConfig()
        if max_depth is not None:
            self.config = replace(self.config, search_depth=max_depth)
        self.max_depth = self.config.search_depth
        self.rng = rng or random.Random()
        self.evaluator = StateEvaluator(self.config.weights)

        # Search state
        self.nodes_searched = 0
        self.nodes_pruned = 0

        # Statistics history
        self.search_history: List[SearchStats] = []

    def choose_move(self, board: BoardState) -> Optional[Move]:
        """
        Find the best move for this agent's side. The board is left exactly
        as it was. Returns None only when the side has no legal move.
        """
        start = time.time()
        self.nodes_searched = 0
        self.nodes_pruned = 0

        if self._is_opening(board):
            move = self._opening_move()
            logger.debug("Opening shortcut for %s: %s", self.side, move)
            self._record(SearchStats(best_move=move, opening=True), start)
            return move

        decided = self.evaluator.terminal_score(board, self.side)
        if decided is not None:
            moves = board.get_all_valid_moves(self.side)
            move = moves[0] if moves else None
            logger.info("%s to move in a decided position (%s), playing %s",
                        self.side, decided, move)
            self._record(SearchStats(best_move=move, best_score=decided), start)
            return move

        move = self._immediate_win(board)
        if move is not None:
            stats = SearchStats(
                nodes_searched=self.nodes_searched,
                depth_used=1,
                best_move=move,
                best_score=MAX_SCORE,
                immediate_win=True,
            )
            with applied_move(board, self.side, move):
                stats.network_margin = self.evaluator.network_margin(board, self.side)
            self._record(stats, start)
            logger.info("%s completes a network with %s", self.side, move)
            return move

        depth = self.search_depth_for(board)
        if depth < self.max_depth:
            logger.debug("Opponent has %d chips, searching %d plies instead of %d",
                         board.chip_count(self.opp_side), depth, self.max_depth)

        score, move = self._minimax(board, self.side, LOWEST, HIGHEST, depth)

        stats = SearchStats(
            nodes_searched=self.nodes_searched,
            nodes_pruned=self.nodes_pruned,
            depth_used=depth,
            best_move=move,
            best_score=score[0],
            best_rank=score[1],
        )
        if move is not None:
            with applied_move(board, self.side, move):
                stats.network_margin = self.evaluator.network_margin(board, self.side)
        self._record(stats, start)

        logger.info("%s chose %s (score=%s, depth=%d, nodes=%d, pruned=%d, %.1fms)",
                    self.side, move, score[0], depth, stats.nodes_searched,
                    stats.nodes_pruned, stats.time_ms)
        return move

    def search_depth_for(self, board: BoardState) -> int:
        """Configured depth, clamped once the opponent is one chip short of the cap"""
        if board.chip_count(self.opp_side) >= MAX_CHIPS - 1:
            return min(self.max_depth, self.config.endgame_depth)
        return self.max_depth

    def _is_opening(self, board: BoardState) -> bool:
        return self.side == Side.WHITE and board.is_empty()

    def _opening_move(self) -> Move:
        """An add move to one of the four center squares, chosen at random"""
        low, high = BOARD_SIZE // 2 - 1, BOARD_SIZE // 2
        val = self.rng.random()
        if val < 0.25:
            return Move.add(low, low)
        elif val < 0.5:
            return Move.add(low, high)
        elif val < 0.75:
            return Move.add(high, low)
        return Move.add(high, high)

    def _immediate_win(self, board: BoardState) -> Optional[Move]:
        """The first legal move that completes this side's network alone"""
        for move in board.get_all_valid_moves(self.side):
            self.nodes_searched += 1
            with applied_move(board, self.side, move):
                if self.evaluator.terminal_score(board, self.side) == MAX_SCORE:
                    return move
        return None

    def _decided_score(self, board: BoardState, terminal: float, depth: int) -> Score:
        """
        Score a position with a network on it. Wins reached with more plies
        left rank higher, losses lower; then the network margin decides.
        """
        sign = 1 if terminal == MAX_SCORE else -1
        rank = sign * depth * DEPTH_RANK + self.evaluator.network_margin(board, self.side)
        return terminal, rank

    def _minimax(
        self, board: BoardState, color: Side,
        alpha: Score, beta: Score, depth: int
    ) -> Tuple[Score, Optional[Move]]:
        """
        The core MinMax algorithm with Alpha-Beta pruning.

        Args:
            board: Board to search; restored before returning
            color: Side to move at this node
            alpha: Best score this agent can already force
            beta: Best score the opponent can already force
            depth: Remaining plies; 0 means evaluate statically

        Returns:
            ((value, rank), best_move); best_move is None at leaves and
            when `color` has no legal move
        """
        self.nodes_searched += 1

        # Decided positions end the line at any depth
        terminal = self.evaluator.terminal_score(board, self.side)
        if terminal is not None:
            return self._decided_score(board, terminal, depth), None

        if depth == 0:
            return (self.evaluator.heuristic(board, self.side), 0.0), None

        maximizing = color == self.side
        best_score = alpha if maximizing else beta
        best_move = None

        for move in board.get_all_valid_moves(color):
            # Keep some move even if every line loses
            if best_move is None:
                best_move = move

            with applied_move(board, color, move):
                score, _ = self._minimax(board, color.opponent, alpha, beta, depth - 1)

            if maximizing and score > best_score:
                alpha = best_score = score
                best_move = move
            elif not maximizing and score < best_score:
                beta = best_score = score
                best_move = move

            if alpha >= beta:
                self.nodes_pruned += 1
                break

        return best_score, best_move

    def _record(self, stats: SearchStats, start: float):
        stats.time_ms = (time.time() - start) * 1000
        self.search_history.append(stats)

    def get_search_stats(self) -> Dict:
        """Get statistics from the most recent search"""
        if not self.search_history:
            return {}

        latest = self.search_history[-1]
        return {
            "nodes_searched": latest.nodes_searched,
            "nodes_pruned": latest.nodes_pruned,
            "depth_used": latest.depth_used,
            "time_ms": latest.time_ms,
            "best_move": str(latest.best_move) if latest.best_move else None,
            "best_score": latest.best_score,
            "best_rank": latest.best_rank,
            "network_margin": latest.network_margin,
            "opening": latest.opening,
            "immediate_win": latest.immediate_win,
        }


# =============================================================================
# Convenience Functions
# =============================================================================

def create_minmax_agent(
    side: Side,
    difficulty: Difficulty = Difficulty.MEDIUM,
    rng: Optional[random.Random] = None
) -> MinMaxAgent:
    """
    Create a MinMax agent whose depth matches the difficulty.
    """
    return MinMaxAgent(side=side, max_depth=difficulty.search_depth, rng=rng)
