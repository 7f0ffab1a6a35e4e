"""Command-line entry points, driven through typer's CliRunner."""

from __future__ import annotations

from typer.testing import CliRunner

from main import app

runner = CliRunner()


def test_solve_prints_moves() -> None:
    result = runner.invoke(app, ["solve", "1", "0", "2", "3", "4", "5", "6", "7", "8"])
    assert result.exit_code == 0, result.output
    assert "Solver: left" in result.output


def test_solve_unsolvable_exits_nonzero() -> None:
    result = runner.invoke(app, ["solve", "0", "2", "1", "3", "4", "5", "6", "7", "8"])
    assert result.exit_code == 1
    assert "--max-depth" in result.output


def test_solve_zero_depth() -> None:
    result = runner.invoke(
        app, ["solve", "-d", "0", "1", "0", "2", "3", "4", "5", "6", "7", "8"]
    )
    assert result.exit_code == 1


def test_solve_rejects_bad_tiles() -> None:
    result = runner.invoke(app, ["solve", "1", "1", "2", "3", "4", "5", "6", "7", "8"])
    assert result.exit_code == 1
    assert "permutation" in result.output


def test_shuffle_graph_walk() -> None:
    result = runner.invoke(app, ["shuffle", "--seed", "3"])
    assert result.exit_code == 0, result.output
    assert "Shuffler:" in result.output
    assert "Misplaced:" in result.output


def test_shuffle_permutation() -> None:
    result = runner.invoke(app, ["shuffle", "--permutation", "--seed", "3", "-r", "4", "-c", "4"])
    assert result.exit_code == 0, result.output
    assert "Shuffler:" not in result.output


def test_shuffle_threshold_too_high() -> None:
    result = runner.invoke(app, ["shuffle", "-r", "2", "-c", "2", "-m", "5"])
    assert result.exit_code == 1
    assert "--min-misplaced" in result.output


def test_shuffle_reads_environment() -> None:
    result = runner.invoke(
        app,
        ["shuffle"],
        env={
            "SLIDESEARCH_ROWS": "2",
            "SLIDESEARCH_COLS": "2",
            "SLIDESEARCH_MIN_MISPLACED": "5",
        },
    )
    assert result.exit_code == 1


def test_play_until_solved() -> None:
    # A 1×2 board scrambles to [1, 0]; its only legal move solves it.
    result = runner.invoke(
        app,
        ["play", "-r", "1", "-c", "2", "--permutation", "--seed", "1"],
        input="5\n1\n",
    )
    assert result.exit_code == 0, result.output
    assert "Invalid move" in result.output
    assert "Swap with tile 1 (left)" in result.output
    assert "Congratulations" in result.output


def test_play_hint_finishes_board() -> None:
    result = runner.invoke(
        app,
        ["play", "-r", "1", "-c", "2", "--permutation", "--seed", "1"],
        input="0\n",
    )
    assert result.exit_code == 0, result.output
    assert "Hint: moved left" in result.output
    assert "Congratulations" in result.output


def test_shuffle_rejects_zero_threshold() -> None:
    result = runner.invoke(app, ["shuffle", "-m", "0"])
    assert result.exit_code == 2
