from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from .dice import make_rng, roll_expressions
from .errors import DiceError
from .table import render_table


mcp = FastMCP("roll")


@mcp.tool()
def roll_dice(expressions: list[str], seed: int | None = None) -> dict[str, Any]:
    """Roll one or more dice expressions such as 1d20, 4d8 or 1d20a.

    Input: expressions (list of strings), optional integer seed
    Output: every die rolled, the total and the rendered table

    Raises a hard error (exception) on the first invalid expression.
    """

    try:
        report = roll_expressions(expressions, rng=make_rng(seed))
    except DiceError as e:
        raise ValueError(str(e)) from None

    return {
        "rolls": [
            {
                "die": o.label,
                "sides": o.sides,
                "mode": o.mode.name.lower(),
                "kept": o.kept,
                "dropped": o.dropped,
            }
            for o in report.outcomes
        ],
        "total": report.total,
        "table": render_table(report),
    }


def run() -> None:
    # stdio transport
    mcp.run()


if __name__ == "__main__":
    run()
