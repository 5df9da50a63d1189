from __future__ import annotations

from typing import Final

from protocol import OUTCOME_LABELS, MoveSet, OutcomeTable

HELP_HEADER: Final[str] = "v PC\\User >"
HELP_TITLE: Final[str] = "Results are from the user's perspective:"


def format_menu(moves: MoveSet) -> str:
    lines = ["Available moves:"]
    lines.extend(f"{ordinal} - {name}" for ordinal, name in moves)
    lines.append("0 - exit")
    lines.append("? - help")
    lines.append("Enter your move: ")
    return "\n".join(lines)


def format_help_table(table: OutcomeTable) -> str:
    """Bordered grid: rows are the computer's move, columns the user's.

    Each cell is what the user gets by playing the column against the row.
    """
    moves = table.moves
    names = list(moves.names)
    label_width = max(len(label) for label in OUTCOME_LABELS.values())
    widths = [max(len(HELP_HEADER), *(len(n) for n in names))]
    widths.extend(max(len(n), label_width) for n in names)

    rule = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def row(cells: list[str]) -> str:
        return "|" + "|".join(f" {cell:<{w}} " for cell, w in zip(cells, widths)) + "|"

    lines = [rule, row([HELP_HEADER, *names]), rule]
    for pc, pc_name in moves:
        cells = [OUTCOME_LABELS[table.outcome(user, pc)] for user in moves.ordinals]
        lines.append(row([pc_name, *cells]))
    lines.append(rule)
    return "\n".join(lines)
