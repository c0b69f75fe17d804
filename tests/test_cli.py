import re

import pytest

from dice_roll import __version__
from dice_roll.cli import main


def _rows(out):
    return [[c.strip() for c in line.strip("|").split("|")] for line in out.splitlines() if line.startswith("| ")]


def test_help(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    assert "usage: roll" in capsys.readouterr().out


@pytest.mark.parametrize("flag", ["--version", "-V"])
def test_version(capsys, flag):
    with pytest.raises(SystemExit) as exc:
        main([flag])
    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == f"roll {__version__}"


def test_no_arguments_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
    assert "usage: roll" in capsys.readouterr().err


def test_single_die(capsys):
    assert main(["1d20"]) == 0
    out = capsys.readouterr().out
    assert "| Die" in out
    rows = _rows(out)
    assert rows[0] == ["Die", "Roll"]
    assert rows[1][0] == "d20"
    assert 1 <= int(rows[1][1]) <= 20
    assert rows[-1][0] == "Total"


def test_multiple_dice_total(capsys):
    assert main(["2d6", "1d10"]) == 0
    rows = _rows(capsys.readouterr().out)
    assert [r[0] for r in rows] == ["Die", "d6", "d6", "d10", "Total"]
    assert int(rows[-1][1]) == sum(int(r[1]) for r in rows[1:-1])


def test_advantage_row(capsys):
    assert main(["1d20a"]) == 0
    rows = _rows(capsys.readouterr().out)
    assert rows[1][0] == "d20a"
    kept, dropped = map(int, re.fullmatch(r"(\d+) \((\d+)\)", rows[1][1]).groups())
    assert kept >= dropped
    assert rows[-1] == ["Total", str(kept)]


def test_seed_makes_output_reproducible(capsys):
    main(["3d6", "1d20d", "--seed", "7"])
    first = capsys.readouterr().out
    main(["3d6", "1d20d", "--seed", "7"])
    assert capsys.readouterr().out == first


@pytest.mark.parametrize(
    ("args", "message"),
    [
        (["invalid"], "Error: Failed to parse dice expression 'invalid'"),
        (["1d20extra"], "Error: Invalid dice format '1d20extra'. Unparsed content: 'extra'"),
        (["2d0"], "Error: Dice cannot have 0 sides."),
    ],
)
def test_invalid_expression(capsys, args, message):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert message in captured.err


def test_first_invalid_expression_is_the_only_error(capsys):
    assert main(["1d6", "2d0", "invalid"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "Error: Dice cannot have 0 sides."
