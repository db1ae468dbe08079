"""
CLI Tests
"""

import pytest

from netgame.cli import main, parse_move, self_play
from netgame.core import Move


@pytest.mark.parametrize("text, move", [
    ("add 3 4", Move.add(3, 4)),
    ("add 34", Move.add(3, 4)),
    ("ADD 3,4", Move.add(3, 4)),
    ("step 2 2 3 4", Move.step(3, 4, 2, 2)),
    ("step 22 34", Move.step(3, 4, 2, 2)),
    ("q", Move.quit()),
    ("quit", Move.quit()),
])
def test_parse_move(text, move):
    assert parse_move(text) == move


@pytest.mark.parametrize("text", ["", "add 3", "step 1 2 3", "jump 1 2"])
def test_parse_move_rejects(text):
    with pytest.raises(ValueError):
        parse_move(text)


def test_self_play_without_winner(capsys):
    assert self_play(depth=1, max_moves=2, seed=0) is None
    out = capsys.readouterr().out
    assert "Move 1: white [add to " in out
    assert "Move 2: black " in out
    assert "No winner after 2 moves." in out


def test_main_selfplay(capsys):
    main(["--mode", "selfplay", "--depth", "1", "--max-moves", "1", "--seed", "3"])
    out = capsys.readouterr().out
    assert "NETWORK" in out
    assert "No winner after 1 moves." in out
