# =============================================================================
# Network Board Engine - Package
# =============================================================================
"""
Network Board Engine

A rules engine for the two-player connection game "Network" on an 8x8
board, with a MinMax search agent using Alpha-Beta pruning.
"""

__version__ = "0.1.0"
