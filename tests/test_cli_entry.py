"""Tests for the command line entry and console loop."""

from file_refactor.cli import main, run_console
from file_refactor.cli.cli_entry import create_parser


def reader(*lines):
    """Line reader replaying lines, then signalling end of input."""
    remaining = list(lines)

    def read_line(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)
    return read_line


class TestRunConsole:
    """Read-dispatch loop."""

    def test_quit_stops_loop(self, router):
        read_line = reader("commands", "quit", "never read")

        assert run_console(router, read_line) == 0
        assert router.session.exit_requested is True

    def test_end_of_input_stops_loop(self, router, capsys):
        assert run_console(router, reader("help")) == 0
        assert "Quitting application..." in capsys.readouterr().out

    def test_keyboard_interrupt_stops_loop(self, router):
        def interrupted(prompt):
            raise KeyboardInterrupt

        assert run_console(router, interrupted) == 0

    def test_full_session(self, router, tmp_path):
        (tmp_path / "notes.txt").write_text("")

        run_console(router, reader("refext", "", "txt", "md", "y", "quit"))

        assert (tmp_path / "notes.md").exists()


class TestMain:
    """Argument handling."""

    def test_defaults(self):
        args = create_parser().parse_args([])

        assert args.root is None
        assert args.verbose is False

    def test_missing_root_fails(self, tmp_path, capsys):
        assert main(["--root", str(tmp_path / "missing")]) == 1
        assert "Directory does not exist" in capsys.readouterr().out
