from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from protocol import MoveSet, Outcome, as_move_set, determine_outcome

Cell = Literal["Draw", "Win", "Lose"]

# Rows play the user's side, so the outcome is read from the row's point of view.
_ROW_VIEW: dict[Outcome, Cell] = {
    "draw": "Draw",
    "user_win": "Win",
    "computer_win": "Lose",
}


def build_matrix(moves: MoveSet | Sequence[str]) -> list[list[Cell]]:
    move_set = as_move_set(moves)
    return [
        [_ROW_VIEW[determine_outcome(move_set, row_move, col_move)] for col_move in move_set]
        for row_move in move_set
    ]


def format_table(moves: MoveSet | Sequence[str]) -> str:
    """Render the pairwise outcome matrix, one row per move as the user's pick."""
    move_set = as_move_set(moves)
    matrix = build_matrix(move_set)

    first_width = max(len("Moves"), *(len(m) for m in move_set))
    col_widths = [max(len(m), len("Draw")) for m in move_set]

    lines: list[str] = []
    header = f"{'Moves':{first_width}}  " + "  ".join(f"{m:{w}}" for m, w in zip(move_set, col_widths))
    lines.append(header.rstrip())
    lines.append("-" * len(header.rstrip()))
    for row_move, cells in zip(move_set, matrix):
        row = f"{row_move:{first_width}}  " + "  ".join(f"{c:{w}}" for c, w in zip(cells, col_widths))
        lines.append(row.rstrip())
    return "\n".join(lines)
