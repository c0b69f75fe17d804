from __future__ import annotations

from collections.abc import Sequence

from .models import RollOutcome, RollReport

HEADER = ("Die", "Roll")


def format_die(outcome: RollOutcome) -> str:
    return outcome.label


def format_roll(outcome: RollOutcome) -> str:
    if outcome.dropped is None:
        return str(outcome.kept)
    return f"{outcome.kept} ({outcome.dropped})"


def _border(widths: Sequence[int], edge: str, fill: str) -> str:
    return edge + "+".join(fill * (w + 2) for w in widths) + edge


def _row(cells: Sequence[str], widths: Sequence[int]) -> str:
    return "|" + "|".join(f" {c.ljust(w)} " for c, w in zip(cells, widths)) + "|"


def render_table(report: RollReport) -> str:
    """Render one row per die plus a closing Total row, e.g.

    +-------+--------+
    | Die   | Roll   |
    +=======+========+
    | d20a  | 17 (4) |
    |-------+--------|
    | Total | 17     |
    +-------+--------+
    """

    rows = [(format_die(o), format_roll(o)) for o in report.outcomes]
    rows.append(("Total", str(report.total)))

    widths = [max(len(r[i]) for r in [HEADER, *rows]) for i in range(len(HEADER))]

    lines = [_border(widths, "+", "-"), _row(HEADER, widths), _border(widths, "+", "=")]
    for i, row in enumerate(rows):
        if i:
            lines.append(_border(widths, "|", "-"))
        lines.append(_row(row, widths))
    lines.append(_border(widths, "+", "-"))

    return "\n".join(lines)
