from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence

from commit_reveal import verify_commitment
from errors import ConfigurationError, EntropySourceError, InvalidSelectionError
from game import EXIT_COMMAND, HELP_COMMAND, GameRound, RoundState
from help_table import format_table
from protocol import MoveSet

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="rps")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="cmd", required=True)

    play = sub.add_parser("play", help="Play one round against the computer")
    play.add_argument("moves", nargs="+", help="Odd number (>= 3) of distinct move names, e.g. rock paper scissors")

    table = sub.add_parser("table", help="Print who wins for every pair of moves")
    table.add_argument("moves", nargs="+")

    verify = sub.add_parser("verify", help="Check a published HMAC against the revealed key and computer move")
    verify.add_argument("--key", required=True, help="HMAC key printed at the end of the round")
    verify.add_argument("--move", required=True, help="Computer move printed at the end of the round")
    verify.add_argument("--hmac", required=True, help="HMAC printed before you picked")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.cmd == "verify":
        if verify_commitment(expected_commitment=args.hmac, key=args.key, move=args.move):
            print("OK")
            return 0
        print("MISMATCH")
        return 1

    try:
        moves = MoveSet.from_moves(args.moves)
    except ConfigurationError as exc:
        raise SystemExit(f"Error: {exc}") from None

    if args.cmd == "table":
        print(format_table(moves))
        return 0

    if args.cmd == "play":
        try:
            return play_round(moves)
        except EntropySourceError as exc:
            logger.critical("aborting round: %s", exc)
            raise SystemExit(f"Error: {exc}") from None

    raise SystemExit("unhandled command")


def play_round(
    moves: MoveSet,
    *,
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] = print,
) -> int:
    read = input if read is None else read
    game = GameRound(moves)
    commitment = game.commit()
    write(f"HMAC: {commitment.hmac}")

    while game.state is RoundState.AWAITING_INPUT:
        _print_menu(moves, write)
        try:
            line = read("Enter your move: ")
        except EOFError:
            line = EXIT_COMMAND
        try:
            game.submit(line)
        except InvalidSelectionError as exc:
            logger.debug("rejected selection: %s", exc)
            write("Invalid input, please try again.")
            continue
        if game.help_requested:
            write("")
            write(format_table(moves))

    if game.state is RoundState.TERMINATED:
        write("Exiting the game.")
        return 0

    reveal = game.reveal()
    write(f"Your move: {reveal.user_move}")
    write(f"Computer move: {reveal.computer_move}")
    write(reveal.outcome_label)
    write(f"HMAC key: {reveal.key}")
    return 0


def _print_menu(moves: Sequence[str] | MoveSet, write: Callable[[str], None]) -> None:
    write("Available moves:")
    for number, move in enumerate(moves, start=1):
        write(f"{number} - {move}")
    write(f"{EXIT_COMMAND} - Exit")
    write(f"{HELP_COMMAND} - Help")


if __name__ == "__main__":
    raise SystemExit(main())
