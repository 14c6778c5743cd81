"""Tests for the command line driver."""

from main import main


def test_solves_maze_file(tmp_path, capsys, first_example: str) -> None:
    path = tmp_path / "maze.txt"
    path.write_text(first_example)

    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Minimum cost: 7036" in out
    assert "Cells on optimal paths: 45" in out


def test_render_and_options(tmp_path, capsys, loop: str) -> None:
    path = tmp_path / "maze.txt"
    path.write_text(loop)

    assert main([str(path), "--worklist", "stack", "--render", "--start-direction", "N"]) == 0
    out = capsys.readouterr().out
    assert "Minimum cost: 2004" in out
    assert "#OOO#" in out


def test_unreachable(tmp_path, capsys, walled_off: str) -> None:
    path = tmp_path / "maze.txt"
    path.write_text(walled_off)

    assert main([str(path)]) == 1
    assert "No path" in capsys.readouterr().out


def test_malformed_file(tmp_path, capsys) -> None:
    path = tmp_path / "maze.txt"
    path.write_text("S.x.E\n")

    assert main([str(path)]) == 2
    assert "Invalid tile" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "nope.txt")]) == 2
    assert "Could not load maze" in capsys.readouterr().err
