# =============================================================================
# AI Module
# =============================================================================
"""
AI agents for the Network Board Engine.

Contains:
- MinMaxAgent: Hand-coded MinMax with Alpha-Beta pruning
- MachinePlayer: The referee-facing player built on MinMaxAgent
"""

from .minmax_agent import (
    MinMaxAgent,
    create_minmax_agent,
    StateEvaluator,
    SearchStats,
    applied_move,
    LOWEST,
    HIGHEST,
    MAX_SCORE,
    MIN_SCORE,
)

from .machine_player import (
    MachinePlayer,
    create_machine_player,
)

__all__ = [
    # MinMax Agent
    "MinMaxAgent",
    "create_minmax_agent",
    "StateEvaluator",
    "SearchStats",
    "applied_move",
    "LOWEST",
    "HIGHEST",
    "MAX_SCORE",
    "MIN_SCORE",

    # Player
    "MachinePlayer",
    "create_machine_player",
]
