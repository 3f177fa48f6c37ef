from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from errors import ConfigurationError, InvalidSelectionError, MoveLookupError  # type: ignore[import-not-found]  # noqa: E402
from protocol import OUTCOME_LABELS, MoveSet, Reveal, determine_outcome  # type: ignore[import-not-found]  # noqa: E402

CLASSIC = ["rock", "paper", "scissors"]
EXTENDED = ["rock", "paper", "scissors", "lizard", "spock"]


def _moves(n: int) -> MoveSet:
    return MoveSet.from_moves(f"m{i}" for i in range(n))


def test_determine_outcome_classic_scenarios() -> None:
    assert determine_outcome(CLASSIC, "rock", "scissors") == "user_win"
    assert determine_outcome(CLASSIC, "rock", "paper") == "computer_win"
    assert determine_outcome(CLASSIC, "paper", "rock") == "user_win"
    assert determine_outcome(CLASSIC, "scissors", "paper") == "user_win"
    assert determine_outcome(CLASSIC, "scissors", "scissors") == "draw"


def test_determine_outcome_wraps_around_the_circle() -> None:
    # rock=0, spock=4: (4 - 0) % 5 == 4 > 2
    assert determine_outcome(EXTENDED, "rock", "spock") == "user_win"
    assert determine_outcome(EXTENDED, "spock", "rock") == "computer_win"
    # distance exactly half goes to the computer
    assert determine_outcome(EXTENDED, "rock", "scissors") == "computer_win"


@pytest.mark.parametrize("n", [3, 5, 7])
def test_move_loses_to_the_moves_after_it_and_beats_those_before(n: int) -> None:
    moves = _moves(n)
    names = list(moves)
    for i, user_move in enumerate(names):
        for step in range(1, n // 2 + 1):
            assert determine_outcome(moves, user_move, names[(i + step) % n]) == "computer_win"
            assert determine_outcome(moves, user_move, names[(i - step) % n]) == "user_win"


@pytest.mark.parametrize("n", [3, 5, 7, 9, 11])
def test_same_move_is_always_a_draw(n: int) -> None:
    moves = _moves(n)
    for move in moves:
        assert determine_outcome(moves, move, move) == "draw"


@pytest.mark.parametrize("n", [3, 5, 7, 9, 11])
def test_outcome_is_antisymmetric(n: int) -> None:
    moves = _moves(n)
    for a in moves:
        for b in moves:
            if a == b:
                continue
            assert (determine_outcome(moves, a, b) == "user_win") == (determine_outcome(moves, b, a) == "computer_win")


@pytest.mark.parametrize("n", [3, 5, 7, 9, 11])
def test_each_move_beats_and_loses_to_half_the_others(n: int) -> None:
    moves = _moves(n)
    for user_move in moves:
        outcomes = [determine_outcome(moves, user_move, other) for other in moves]
        assert outcomes.count("user_win") == n // 2
        assert outcomes.count("computer_win") == n // 2
        assert outcomes.count("draw") == 1


@pytest.mark.parametrize("moves", [["a", "b"], ["a", "b", "c", "d"], ["a"], []])
def test_move_set_rejects_short_or_even_lists(moves: list[str]) -> None:
    with pytest.raises(ConfigurationError, match="odd number"):
        MoveSet.from_moves(moves)


def test_move_set_rejects_duplicates() -> None:
    with pytest.raises(ConfigurationError, match="unique"):
        MoveSet.from_moves(["rock", "paper", "rock"])


def test_move_set_rejects_blank_names() -> None:
    with pytest.raises(ConfigurationError):
        MoveSet.from_moves(["rock", " ", "paper"])


def test_configuration_error_carries_usage_example() -> None:
    with pytest.raises(ConfigurationError) as info:
        MoveSet.from_moves(["rock", "paper"])
    assert "Example: rps play rock paper scissors" in str(info.value)


def test_determine_outcome_validates_raw_move_lists() -> None:
    with pytest.raises(ConfigurationError):
        determine_outcome(["rock", "paper", "scissors", "lizard"], "rock", "paper")


def test_unknown_move_is_a_lookup_error() -> None:
    with pytest.raises(MoveLookupError):
        determine_outcome(CLASSIC, "rock", "lizard")
    with pytest.raises(LookupError):
        MoveSet.from_moves(CLASSIC).index("Rock")


def test_from_selection_is_one_based() -> None:
    moves = MoveSet.from_moves(CLASSIC)
    assert moves.from_selection(1) == "rock"
    assert moves.from_selection(3) == "scissors"
    with pytest.raises(InvalidSelectionError):
        moves.from_selection(0)
    with pytest.raises(InvalidSelectionError):
        moves.from_selection(4)


def test_move_set_basics() -> None:
    moves = MoveSet.from_moves(EXTENDED)
    assert len(moves) == 5
    assert moves.half == 2
    assert "lizard" in moves
    assert list(moves) == EXTENDED


def test_reveal_outcome_label() -> None:
    reveal = Reveal(user_move="rock", computer_move="paper", outcome="computer_win", key="00")
    assert reveal.outcome_label == "Computer wins"
    assert OUTCOME_LABELS["user_win"] == "You win!"
    assert OUTCOME_LABELS["draw"] == "Draw"
