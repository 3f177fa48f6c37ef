"""One round of the commit-reveal game.

The round is driven in a fixed order: ``commit()`` fixes the secret key and
the computer's move and yields the HMAC to publish, ``submit()`` feeds the
user's prompt lines until the round resolves or the user exits, and
``reveal()`` hands out the key only once the user's move is locked in.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable, Sequence
from enum import Enum

from commit_reveal import compute_commitment, generate_key
from errors import InvalidSelectionError, ProtocolOrderError
from protocol import Commitment, Move, MoveSet, Reveal, as_move_set, determine_outcome

logger = logging.getLogger(__name__)

EXIT_COMMAND = "0"
HELP_COMMAND = "?"


class Command(Enum):
    EXIT = EXIT_COMMAND
    HELP = HELP_COMMAND


class RoundState(str, Enum):
    AWAITING_INPUT = "awaiting_input"
    RESOLVED = "resolved"
    TERMINATED = "terminated"


def parse_selection(raw: str, moves: MoveSet) -> Command | Move:
    choice = raw.strip()
    if choice == EXIT_COMMAND:
        return Command.EXIT
    if choice == HELP_COMMAND:
        return Command.HELP
    if not choice.isdecimal():
        raise InvalidSelectionError(f"not a move number: {choice!r}")
    try:
        number = int(choice)
    except ValueError:
        # Digit strings past the interpreter's int conversion limit.
        raise InvalidSelectionError(f"not a move number: {choice[:20]!r}...") from None
    return moves.from_selection(number)


class GameRound:
    def __init__(
        self,
        moves: MoveSet | Sequence[str],
        *,
        key_factory: Callable[[], str] = generate_key,
        choose_move: Callable[[Sequence[Move]], Move] = secrets.choice,
    ) -> None:
        # Validation happens here, before any key material exists.
        self.moves = as_move_set(moves)
        self._key_factory = key_factory
        self._choose_move = choose_move
        self._key: str | None = None
        self._computer_move: Move | None = None
        self._user_move: Move | None = None
        self.commitment: Commitment | None = None
        self.state = RoundState.AWAITING_INPUT
        self.help_requested = False

    def commit(self) -> Commitment:
        if self.commitment is not None:
            raise ProtocolOrderError("round is already committed")
        self._key = self._key_factory()
        self._computer_move = self._choose_move(self.moves.moves)
        self.commitment = Commitment(hmac=compute_commitment(key=self._key, move=self._computer_move))
        logger.info("round committed: hmac=%s", self.commitment.hmac)
        return self.commitment

    def submit(self, raw: str) -> RoundState:
        """Handle one prompt line; invalid lines raise and leave the round as it was."""
        if self.commitment is None:
            raise ProtocolOrderError("the commitment must be published before the user picks")
        if self.state is not RoundState.AWAITING_INPUT:
            raise ProtocolOrderError(f"round is {self.state.value}, not awaiting input")

        self.help_requested = False
        selection = parse_selection(raw, self.moves)
        if selection is Command.HELP:
            self.help_requested = True
        elif selection is Command.EXIT:
            self.state = RoundState.TERMINATED
            self._key = None
            logger.info("round terminated by user")
        else:
            self._user_move = selection
            self.state = RoundState.RESOLVED
            logger.info("user committed to %s", selection)
        return self.state

    def reveal(self) -> Reveal:
        if self.state is not RoundState.RESOLVED:
            raise ProtocolOrderError("the key is revealed only after the user has picked a move")
        if self._key is None:
            raise ProtocolOrderError("round key was already revealed")
        if self._computer_move is None or self._user_move is None:
            raise ProtocolOrderError("round has no committed moves to reveal")

        reveal = Reveal(
            user_move=self._user_move,
            computer_move=self._computer_move,
            outcome=determine_outcome(self.moves, self._user_move, self._computer_move),
            key=self._key,
        )
        # The key belongs to this round only.
        self._key = None
        logger.info("round resolved: %s vs %s -> %s", reveal.user_move, reveal.computer_move, reveal.outcome)
        return reveal
