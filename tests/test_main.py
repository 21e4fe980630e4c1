"""
Tests for the cmdtree-demo command-line program in script mode.
"""

import pytest

from cmdtree.__main__ import build_parser, main


@pytest.fixture
def script(tmp_path):
    def write(text):
        path = tmp_path / "script.txt"
        path.write_text(text)
        return str(path)

    return write


class TestParser:
    """Test argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.script is None
        assert args.config is None
        assert args.log_level == "WARNING"
        assert args.no_color is False

    def test_rejects_unknown_log_level(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--log-level", "LOUD"])


class TestScriptMode:
    """Test running a script against the demo tree."""

    def test_successful_script(self, script, capsys):
        path = script("print\necho hello world\ncountdown 2\nexit\n")

        assert main(["--script", path, "--no-color"]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == [
            "cmdtree-demo=> print",
            "cmdtree-demo.print=> echo hello world",
            "hello world",
            "cmdtree-demo.print=> countdown 2",
            "2",
            "1",
            "0",
            "cmdtree-demo.print=> exit",
        ]

    def test_usage_errors_reported_on_stderr(self, script, capsys):
        path = script("print\ncountdown\n")

        assert main(["--script", path, "--no-color"]) == 1

        captured = capsys.readouterr()
        assert "usage: countdown <non-negative integer>" in captured.err

    def test_unknown_word_does_not_fail_script(self, script, capsys):
        path = script("nonsense\n")

        assert main(["--script", path, "--no-color"]) == 0
        assert "'nonsense' does not match" in capsys.readouterr().out

    def test_config_file(self, script, tmp_path, capsys):
        config = tmp_path / "cmdtree.yaml"
        config.write_text("prompt_suffix: '> '\nroot_keyword: home\n")
        path = script("print\nhome\n")

        assert main(["--script", path, "--config", str(config), "--no-color"]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == ["cmdtree-demo> print", "cmdtree-demo.print> home"]
