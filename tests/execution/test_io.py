"""
Tests for the interactive loop and its terminal collaborators.

Focus Areas:
1. Script readers hand out lines and echo them
2. Help and error rendering in plain text
3. The run loop stops on exit or end of input
"""

import io

from cmdtree import LineKind
from cmdtree.execution.io import Presenter, ScriptReader, help_line


class WriteOnlySink:
    """Output sink offering nothing but `write`."""

    def __init__(self):
        self.chunks = []

    def write(self, text):
        self.chunks.append(text)

    def getvalue(self):
        return "".join(self.chunks)


class TestScriptReader:
    """Test the batch line reader."""

    def test_lines_then_end_of_input(self):
        reader = ScriptReader(["print", "echo hi"])
        assert reader.read_line("> ") == "print"
        assert reader.read_line("> ") == "echo hi"
        assert reader.read_line("> ") is None
        assert reader.read_line("> ") is None

    def test_echo(self):
        echo = io.StringIO()
        reader = ScriptReader(["print"], echo=echo)
        reader.read_line("example=> ")
        assert echo.getvalue() == "example=> print\n"

    def test_from_file(self, tmp_path):
        script = tmp_path / "script.txt"
        script.write_text("print\necho hello world\n\nexit\n")

        reader = ScriptReader.from_file(script)

        lines = []
        while (line := reader.read_line("")) is not None:
            lines.append(line)
        assert lines == ["print", "echo hello world", "", "exit"]


class TestPresenter:
    """Test plain-text rendering."""

    def test_unrecognized(self, sink):
        Presenter(sink, colorize=False).print_unrecognized("nope")
        assert sink.getvalue() == "'nope' does not match any keywords, classes, or actions\n"

    def test_help_lists_builtins_classes_and_actions(self, commander, sink):
        Presenter(sink, colorize=False).print_help(commander.tree, "root")
        lines = sink.getvalue().splitlines()

        assert lines[0] == "example: base class of commander tree"
        assert lines[1:5] == [
            "help -- prints the help messages",
            "cancel | c -- returns to the parent class",
            "root -- returns to the root class",
            "exit -- sends the exit signal to end the interactive loop",
        ]
        assert lines[5:] == [
            "Classes:",
            "    class1 -- class1 help message",
            "    print -- printing actions",
            "Actions:",
            "    clone -- clone something",
        ]

    def test_help_omits_empty_sections(self, commander, sink):
        empty = commander.tree.find_class("class1").find_class("another")
        Presenter(sink, colorize=False).print_help(empty, "home")
        output = sink.getvalue()

        assert output.splitlines()[0] == "another"
        assert "home -- returns to the root class" in output
        assert "Classes:" not in output
        assert "Actions:" not in output

    def test_no_ansi_codes_without_colour(self, commander, sink):
        Presenter(sink, colorize=False).print_help(commander.tree, "root")
        assert "\x1b[" not in sink.getvalue()

    def test_render_ignores_other_results(self, commander, sink):
        commander.execute("print")
        result = commander.execute("echo quiet")
        sink.seek(0)
        sink.truncate()

        Presenter(sink, colorize=False).render(result, commander.current_class, "root")

        assert sink.getvalue() == ""

    def test_help_line(self):
        assert help_line("name", "").plain == "name\n"
        assert help_line("name", "msg", indent="  ").plain == "  name -- msg\n"


class TestParseLine:
    """Test execute plus presentation."""

    def test_help_printed_for_current_class(self, commander, sink):
        commander.execute("print")
        result = commander.parse_line("help")

        assert result.kind is LineKind.HELP
        output = sink.getvalue()
        assert output.startswith("print: printing actions\n")
        assert "    echo -- echo the arguments" in output
        assert "    countdown -- count down to zero" in output

    def test_unrecognized_printed(self, commander, sink):
        result = commander.parse_line("missing word")
        assert result.is_error
        assert sink.getvalue() == "'missing' does not match any keywords, classes, or actions\n"

    def test_empty_line_prints_nothing(self, commander, sink):
        assert commander.parse_line("").kind is LineKind.EMPTY
        assert sink.getvalue() == ""

    def test_action_output_not_duplicated(self, commander, sink):
        commander.parse_line("print")
        commander.parse_line("echo once")
        assert sink.getvalue() == "once\n"

    def test_sink_override(self, commander, sink):
        out = io.StringIO()
        commander.parse_line("help", sink=out)
        assert sink.getvalue() == ""
        assert out.getvalue().startswith("example")


class TestRun:
    """Test the read loop with scripted input."""

    def test_runs_until_end_of_input(self, commander, sink):
        results = []
        commander.run(
            ScriptReader(["print", "echo hello world", "countdown 2"]),
            on_result=results.append,
        )

        assert [r.kind for r in results] == [LineKind.CLASS, LineKind.ACTION, LineKind.ACTION]
        assert sink.getvalue() == "hello world\n2\n1\n0\n"

    def test_stops_at_exit(self, commander, calls):
        results = []
        commander.run(ScriptReader(["clone", "exit", "clone"]), on_result=results.append)

        assert results[-1].is_exit
        assert calls == [("clone", [])]

    def test_exit_keeps_cursor(self, commander):
        commander.run(ScriptReader(["class1", "inner-class1", "exit"]))
        assert commander.path == "example.class1.inner-class1"

    def test_prompt_shows_current_path(self, commander):
        echo = io.StringIO()
        commander.run(ScriptReader(["class1", "cancel"], echo=echo))
        assert echo.getvalue() == "example=> class1\nexample.class1=> cancel\n"

    def test_errors_do_not_stop_loop(self, commander, sink, calls):
        commander.run(ScriptReader(["nope", "", "clone x"]))
        assert calls == [("clone", ["x"])]
        assert "'nope' does not match" in sink.getvalue()

    def test_sink_argument(self, commander, sink):
        out = io.StringIO()
        commander.run(ScriptReader(["print", "echo elsewhere"]), sink=out)
        assert out.getvalue() == "elsewhere\n"
        assert sink.getvalue() == ""


class TestWriteOnlySink:
    """Help and error rendering only ever call `write` on the sink."""

    def test_presenter(self, commander):
        out = WriteOnlySink()
        presenter = Presenter(out, colorize=False)

        presenter.print_unrecognized("nope")
        presenter.print_help(commander.tree, "root")

        text = out.getvalue()
        assert text.startswith("'nope' does not match any keywords, classes, or actions\n")
        assert "example: base class of commander tree\n" in text

    def test_parse_line(self, commander):
        out = WriteOnlySink()

        commander.parse_line("help", sink=out)
        commander.parse_line("nope", sink=out)

        text = out.getvalue()
        assert "    print -- printing actions\n" in text
        assert text.endswith("'nope' does not match any keywords, classes, or actions\n")

    def test_run(self, commander):
        out = WriteOnlySink()

        commander.run(ScriptReader(["print", "echo hi", "help", "missing", "exit"]), sink=out)

        text = out.getvalue()
        assert text.startswith("hi\nprint: printing actions\n")
        assert "'missing' does not match" in text

    def test_colour_requested_for_non_terminal(self, commander):
        out = WriteOnlySink()
        Presenter(out, colorize=True).print_help(commander.tree, "root")
        assert "\x1b[" not in out.getvalue()
