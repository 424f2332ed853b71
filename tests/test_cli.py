"""Tests for command-line option handling."""

import pytest

from chassis_shell import __version__, cli


@pytest.fixture
def captured(monkeypatch):
    """Replace curses.wrapper so main() returns the config it would run with."""
    calls = []
    monkeypatch.setattr(cli.curses, "wrapper", lambda fn, config, debug: calls.append((config, debug)))
    return calls


class TestMain:
    def test_defaults(self, captured):
        cli.main([])
        config, debug = captured[0]
        assert config.history.size == 20
        assert debug is False

    def test_overrides(self, captured):
        cli.main(["-n", "50", "--prompt", "cm> ", "-d"])
        config, debug = captured[0]
        assert config.history.size == 50
        assert config.prompt == "cm> "
        assert debug is True

    @pytest.mark.parametrize("size", ["0", "-5"])
    def test_non_positive_history_size_rejected(self, captured, size):
        with pytest.raises(SystemExit):
            cli.main(["-n", size])
        assert captured == []

    def test_missing_config_rejected(self, captured, tmp_path):
        with pytest.raises(SystemExit):
            cli.main(["-c", str(tmp_path / "nope.yml")])
        assert captured == []

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            cli.main(["--version"])
        assert __version__ in capsys.readouterr().out
