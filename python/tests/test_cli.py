import pytest

from gridlab import cli


def test_demo_runs(capsys):
    assert cli.main(["--seed", "1", "--size", "2"]) == 0
    out = capsys.readouterr().out
    assert "1. Working with 2D (2x2)" in out
    assert "2. Working with 3D (2x2x2)" in out
    assert "Layer 1:" in out
    assert out.count("Minimum element:") == 2
    assert "(coordinates: [" in out


def test_demo_reproducible(capsys):
    cli.main(["--seed", "3"])
    first = capsys.readouterr().out
    cli.main(["--seed", "3"])
    assert capsys.readouterr().out == first


def test_invalid_size_returns_error():
    assert cli.main(["--size", "0"]) == 1


def test_invalid_range_exits():
    with pytest.raises(SystemExit) as exc:
        cli.main(["--low", "5", "--high", "1"])
    assert exc.value.code == 2


def test_interactive(monkeypatch, capsys):
    answers = iter(["4", "2", "9", "7"] + ["3"] * 8)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert cli.main(["--interactive", "--size", "2"]) == 0
    out = capsys.readouterr().out
    assert "Minimum element: 2.00 (coordinates: [0, 1])" in out
    assert "Minimum element: 3.00 (coordinates: [0, 0, 0])" in out


def test_interactive_input_ends_early(monkeypatch):
    answers = iter(["1", "2"])

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)
    assert cli.main(["--interactive", "--size", "2"]) == 1
