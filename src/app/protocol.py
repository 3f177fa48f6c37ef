from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Literal

from errors import ConfigurationError, InvalidSelectionError, MoveLookupError

Move = str
Outcome = Literal["draw", "computer_win", "user_win"]

OUTCOME_LABELS: dict[Outcome, str] = {
    "draw": "Draw",
    "computer_win": "Computer wins",
    "user_win": "You win!",
}

MIN_MOVES = 3


@dataclass(frozen=True)
class MoveSet:
    """Ordered, distinct move names; position defines circular adjacency."""

    moves: tuple[Move, ...]

    def __post_init__(self) -> None:
        validate_moves(self.moves)

    @classmethod
    def from_moves(cls, values: Iterable[str]) -> "MoveSet":
        return cls(moves=tuple(values))

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def __contains__(self, move: object) -> bool:
        return move in self.moves

    @property
    def half(self) -> int:
        return len(self.moves) // 2

    def index(self, move: Move) -> int:
        try:
            return self.moves.index(move)
        except ValueError:
            raise MoveLookupError(f"unknown move {move!r}; expected one of {', '.join(self.moves)}") from None

    def from_selection(self, number: int) -> Move:
        """Map a 1-based menu number to its move."""
        if not 1 <= number <= len(self.moves):
            raise InvalidSelectionError(f"selection must be between 1 and {len(self.moves)}, got {number}")
        return self.moves[number - 1]


def validate_moves(values: Sequence[str]) -> None:
    if len(values) < MIN_MOVES or len(values) % 2 == 0:
        raise ConfigurationError(f"You must provide an odd number of moves (at least {MIN_MOVES}).")
    if any(not value or not value.strip() for value in values):
        raise ConfigurationError("Move names must not be blank.")
    if len(set(values)) != len(values):
        raise ConfigurationError("Moves must be unique.")


def as_move_set(moves: MoveSet | Sequence[str]) -> MoveSet:
    return moves if isinstance(moves, MoveSet) else MoveSet.from_moves(moves)


def determine_outcome(moves: MoveSet | Sequence[str], user_move: Move, computer_move: Move) -> Outcome:
    move_set = as_move_set(moves)
    user_index = move_set.index(user_move)
    computer_index = move_set.index(computer_move)

    if user_index == computer_index:
        return "draw"
    # Each move loses to the `half` moves that follow it on the circle and beats the `half` before it.
    distance = (computer_index - user_index) % len(move_set)
    return "computer_win" if distance <= move_set.half else "user_win"


@dataclass(frozen=True)
class Commitment:
    hmac: str


@dataclass(frozen=True)
class Reveal:
    user_move: Move
    computer_move: Move
    outcome: Outcome
    key: str

    @property
    def outcome_label(self) -> str:
        return OUTCOME_LABELS[self.outcome]
