# =============================================================================
# Network Board Engine - Command Line Interface
# =============================================================================
"""
Simple CLI for watching and playing the game.

    python -m netgame.cli --mode selfplay --depth 2
    python -m netgame.cli --mode play --side white
"""

import argparse
import logging
import random
from typing import Dict, Optional

from .core import Move, MoveKind, Side, playing_sides
from .ai import MachinePlayer

logger = logging.getLogger(__name__)


def print_header():
    """Print game header"""
    print("\n" + "=" * 40)
    print("   NETWORK")
    print("   White: left/right goals | Black: top/bottom goals")
    print("=" * 40 + "\n")


def print_board(player: MachinePlayer, turn: int, last: Optional[Move] = None):
    """Print the board as one player sees it"""
    print(f"\n{'='*30}")
    if last is not None:
        print(f"Move {turn}: {player.last_mover} {last}")
    print(f"{'='*30}")
    print(player.board)
    counts = ", ".join(f"{s}: {player.board.chip_count(s)}"
                       for s in (Side.WHITE, Side.BLACK))
    print(f"Chips - {counts}")


def parse_move(text: str) -> Move:
    """
    Parse 'add X Y', 'step FROMX FROMY TOX TOY' or 'quit'.
    Coordinates may also be written as two-digit squares: 'add 34'.
    """
    parts = text.replace(",", " ").split()
    if not parts:
        raise ValueError("Empty move")
    kind = parts[0].lower()
    digits = [int(ch) for part in parts[1:] for ch in part]
    if kind in ("q", "quit"):
        return Move.quit()
    if kind == "add" and len(digits) == 2:
        return Move.add(digits[0], digits[1])
    if kind == "step" and len(digits) == 4:
        return Move.step(digits[2], digits[3], digits[0], digits[1])
    raise ValueError(f"Cannot read move: {text!r}")


def self_play(depth: int, max_moves: int, seed: Optional[int]) -> Optional[Side]:
    """
    Two machine players play each other, refereed here. Each keeps its own
    board; every move is reported to the other side.
    """
    rng = random.Random(seed)
    players: Dict[Side, MachinePlayer] = {
        side: MachinePlayer(side, search_depth=depth, rng=rng)
        for side in playing_sides()
    }

    for turn in range(1, max_moves + 1):
        side = playing_sides()[(turn - 1) % 2]
        mover, other = players[side], players[side.opponent]

        move = mover.choose_move()
        if not other.opponent_move(move):
            logger.error("%s rejected %s's move %s", side.opponent, side, move)
            return side.opponent

        print_board(mover, turn, move)
        winner = mover.winner()
        if winner is not None:
            print(f"\n{winner} completes a network after {turn} moves!")
            return winner

    print(f"\nNo winner after {max_moves} moves.")
    return None


def interactive_game(human: Side, depth: int, seed: Optional[int]) -> Optional[Side]:
    """Play against the engine from the terminal"""
    engine = MachinePlayer(human.opponent, search_depth=depth,
                           rng=random.Random(seed))
    turn = 0
    side = Side.WHITE

    print("Moves: 'add X Y', 'step FROMX FROMY TOX TOY', 'q' to quit")
    print(engine.board)

    while True:
        turn += 1
        if side == human:
            text = input(f"\n{human} move: ").strip()
            try:
                move = parse_move(text)
            except ValueError as e:
                print(f"  {e}")
                turn -= 1
                continue
            if move.kind == MoveKind.QUIT:
                print("Game ended by player.")
                return engine.side
            if not engine.opponent_move(move):
                _, reason = engine.board.validate_move(human, move)
                print(f"  Illegal move: {reason}")
                turn -= 1
                continue
        else:
            move = engine.choose_move()

        print_board(engine, turn, move)
        winner = engine.winner()
        if winner is not None:
            print(f"\n{winner} wins!")
            return winner
        side = side.opponent


def main(argv=None):
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Network board engine")
    parser.add_argument("--mode", choices=["selfplay", "play"], default="selfplay")
    parser.add_argument("--side", default="white", help="Your side in play mode")
    parser.add_argument("--depth", type=int, default=2, help="Search depth in plies")
    parser.add_argument("--max-moves", type=int, default=60)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    print_header()

    if args.mode == "selfplay":
        self_play(args.depth, args.max_moves, args.seed)
    else:
        interactive_game(Side.from_name(args.side), args.depth, args.seed)


if __name__ == "__main__":
    main()
