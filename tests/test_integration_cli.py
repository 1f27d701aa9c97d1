"""Integration tests for the command line."""

import pytest

from parfrac_pkg import config
from parfrac_pkg.cli import main_entry

LINEAR_EXPRESSION = r"\frac{5x + 3}{(x + 2)(x - 2)}"


@pytest.fixture(autouse=True)
def restore_config(monkeypatch):
    monkeypatch.setattr(config, "LANG", "pt")
    monkeypatch.setattr(config, "OUTPUT_PRECISION", 10)


class TestCLI:
    """Test CLI entry points."""

    def test_solve(self, capsys):
        assert main_entry(["-e", LINEAR_EXPRESSION]) == 0
        out = capsys.readouterr().out
        assert "A = 1.75 \\qquad B = 3.25" in out

    def test_expand(self, capsys):
        assert main_entry(["--expand", "-e", LINEAR_EXPRESSION]) == 0
        out = capsys.readouterr().out
        assert "\\frac{A}{x + 2} + \\frac{B}{x - 2}" in out
        assert "\\ln" not in out

    def test_error_exit_code(self, capsys):
        assert main_entry(["-e", "x + 1"]) == 1
        assert "Error: A expressão deve ter uma fração." in capsys.readouterr().out

    def test_english_messages(self, capsys):
        assert main_entry(["--lang", "en", "-e", "x + 1"]) == 1
        assert "Error: The expression must contain a fraction." in capsys.readouterr().out

    def test_precision(self, capsys):
        expression = r"\frac{2x + 1}{(x^2 + 1)(x^2 + 4)}"
        assert main_entry(["-p", "3", "-e", expression]) == 0
        assert "A = 0.667" in capsys.readouterr().out

    def test_verify(self, capsys):
        assert main_entry(["--verify", "-e", LINEAR_EXPRESSION]) == 0
        assert "% verification: OK" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main_entry(["--version"]) == 0
        assert capsys.readouterr().out.strip() == config.VERSION

    def test_health_check(self, capsys):
        assert main_entry(["--health-check"]) == 0
        assert "0 failed" in capsys.readouterr().out

    def test_interactive_loop(self, capsys, monkeypatch):
        lines = iter([LINEAR_EXPRESSION, "", "quit"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
        assert main_entry([]) == 0
        out = capsys.readouterr().out
        assert "Example:" in out
        assert "3.25 \\cdot \\ln | x - 2 | + C" in out

    def test_interactive_loop_eof(self, monkeypatch):
        def raise_eof(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", raise_eof)
        assert main_entry([]) == 0
