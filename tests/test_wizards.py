"""End-to-end tests of the wizard pages, driven line by line."""

import codecs

import pytest

from file_refactor.core import PageType


def assert_back_on_menu(session):
    assert session.page is PageType.MENU
    assert session.step == 1
    assert session.awaiting_value is False
    assert session.file_extension is None
    assert session.snapshot is None


class TestRemoveChars:
    """refnfiles"""

    def test_steps_advance_one_line_at_a_time(self, drive, tmp_path, make_files):
        make_files(tmp_path, "file_0001.png")

        session = drive("refnfiles")
        assert (session.step, session.awaiting_value) == (1, True)
        drive("")
        assert (session.step, session.awaiting_value) == (2, True)
        drive("png")
        assert (session.step, session.awaiting_value) == (3, True)
        assert [p.name for p in session.matched_files] == ["file_0001.png"]
        drive("4")
        assert session.refactor_offset == 4
        drive("5")
        assert session.refactor_trim_length == 5
        assert session.step == 5

        drive("y")

        assert (tmp_path / "file.png").exists()
        assert not (tmp_path / "file_0001.png").exists()
        assert_back_on_menu(session)

    def test_preview_shown_before_confirmation(self, drive, tmp_path, make_files, capsys):
        make_files(tmp_path, "file_0001.png")

        drive("refnfiles", "", "png", "4", "5")

        out = capsys.readouterr().out
        assert "file_0001.png" in out
        assert "-> file.png" in out
        assert (tmp_path / "file_0001.png").exists()

    @pytest.mark.parametrize("value", ["abc", "-1", "1.5"])
    def test_invalid_offset_returns_to_menu(self, drive, tmp_path, make_files, capsys, value):
        make_files(tmp_path, "file_0001.png")

        session = drive("refnfiles", "", "png", value)

        assert "Offset must be a non-negative whole number" in capsys.readouterr().out
        assert_back_on_menu(session)
        assert (tmp_path / "file_0001.png").exists()


class TestRemovePrefix:
    """remnameprefixes"""

    def test_removes_span(self, drive, tmp_path, make_files):
        make_files(tmp_path, "ORIGINAL_asset.png")

        session = drive("remnameprefixes", "", "png", "ORIGINAL_", "yes")

        assert (tmp_path / ".png").exists()
        assert_back_on_menu(session)

    def test_abort_on_first_failure_keeps_earlier_renames(self, drive, tmp_path, make_files, capsys):
        make_files(tmp_path, "1_TAG_x.png", "2.png", "3_TAG_y.png")

        session = drive("remnameprefixes", "", "png", "_TAG", "y")

        assert sorted(p.name for p in tmp_path.iterdir()) == ["1.png", "2.png", "3_TAG_y.png"]
        assert "Batch stopped at 2.png" in capsys.readouterr().out
        assert_back_on_menu(session)

    def test_empty_target_returns_to_menu(self, drive, tmp_path, make_files, capsys):
        make_files(tmp_path, "a.png")

        session = drive("remnameprefixes", "", "png", "")

        assert "cannot be empty" in capsys.readouterr().out
        assert_back_on_menu(session)


class TestChangeExtension:
    """refext"""

    def test_changes_extension(self, drive, tmp_path, make_files):
        make_files(tmp_path, "notes.txt")

        session = drive("refext", "", "txt", "md", "y")

        assert (tmp_path / "notes.md").exists()
        assert session.new_extension == "md"
        assert_back_on_menu(session)

    def test_prints_progress_per_file(self, drive, tmp_path, make_files, capsys):
        make_files(tmp_path, "notes.txt")

        drive("refext", "", "txt", "md", "y")

        assert "[1/1] notes.txt -> notes.md" in capsys.readouterr().out

    def test_dotted_extensions_are_accepted(self, drive, tmp_path, make_files):
        make_files(tmp_path, "notes.txt")

        drive("refext", "", ".txt", ".md", "y")

        assert (tmp_path / "notes.md").exists()

    @pytest.mark.parametrize("answer", ["n", "no", "", "yess", "maybe", "Y E S"])
    def test_non_affirmative_answer_cancels(self, drive, tmp_path, make_files, capsys, answer):
        make_files(tmp_path, "notes.txt")

        session = drive("refext", "", "txt", "md", answer)

        assert "Cancelled." in capsys.readouterr().out
        assert (tmp_path / "notes.txt").exists()
        assert not (tmp_path / "notes.md").exists()
        assert_back_on_menu(session)

    @pytest.mark.parametrize("answer", ["y", "Y", "yes", "YES", " Yes "])
    def test_affirmative_answers_run(self, drive, tmp_path, make_files, answer):
        make_files(tmp_path, "notes.txt")

        drive("refext", "", "txt", "md", answer)

        assert (tmp_path / "notes.md").exists()

    def test_missing_directory_aborts_wizard(self, drive, capsys):
        session = drive("refext", "missing", "txt")

        assert "Directory does not exist" in capsys.readouterr().out
        assert_back_on_menu(session)

    def test_no_matching_files_aborts_wizard(self, drive, tmp_path, make_files, capsys):
        make_files(tmp_path, "notes.rst")

        session = drive("refext", "", "txt")

        assert "No matching files found" in capsys.readouterr().out
        assert_back_on_menu(session)

    def test_only_last_scanned_directory_is_changed(self, drive, tmp_path, make_files):
        make_files(tmp_path, "top.txt")
        make_files(tmp_path / "sub", "inner.txt")

        drive("refext", "", "txt", "md", "y")

        assert (tmp_path / "top.txt").exists()
        assert (tmp_path / "sub" / "inner.md").exists()

    def test_directory_relative_to_root(self, drive, tmp_path, make_files):
        make_files(tmp_path / "docs", "notes.txt")

        drive("refext", "docs", "txt", "md", "y")

        assert (tmp_path / "docs" / "notes.md").exists()


class TestCreateFiles:
    """cfiles"""

    @pytest.fixture
    def project(self, tmp_path, make_files):
        (tmp_path / "template.txt").write_text("class REPLACE_CLS", encoding="utf-8")
        make_files(tmp_path / "assets", "Player.png")
        (tmp_path / "out").mkdir()
        return tmp_path

    def test_creates_files(self, drive, project):
        session = drive("cfiles", "template.txt", "assets", "png", "cs", "out", "y")

        created = project / "out" / "Player.cs"
        assert created.read_bytes() == codecs.BOM_UTF8 + b"class Player"
        assert session.template_path == project.resolve() / "template.txt"
        assert_back_on_menu(session)

    def test_absolute_paths_accepted(self, drive, project):
        drive("cfiles", str(project / "template.txt"), "assets", "png", "cs", str(project / "out"), "y")

        assert (project / "out" / "Player.cs").exists()

    def test_missing_template_aborts_before_scan(self, drive, project, capsys):
        session = drive("cfiles", "nope.txt")

        assert "Template file does not exist" in capsys.readouterr().out
        assert_back_on_menu(session)

    def test_latin1_template_aborts_before_scan(self, drive, project, capsys):
        (project / "template.txt").write_bytes(b"// caf\xe9\nclass REPLACE_CLS")

        session = drive("cfiles", "template.txt")

        assert "Template file is not valid UTF-8" in capsys.readouterr().out
        assert_back_on_menu(session)
        assert list((project / "out").iterdir()) == []

    def test_missing_output_directory_aborts_before_confirmation(self, drive, project, capsys):
        session = drive("cfiles", "template.txt", "assets", "png", "cs", "missing")

        assert "Directory does not exist" in capsys.readouterr().out
        assert_back_on_menu(session)
        assert not (project / "missing").exists()

    def test_cancel_creates_nothing(self, drive, project):
        session = drive("cfiles", "template.txt", "assets", "png", "cs", "out", "n")

        assert list((project / "out").iterdir()) == []
        assert_back_on_menu(session)


class TestCreateFile:
    """cfile"""

    def test_creates_file(self, drive, tmp_path):
        (tmp_path / "docs").mkdir()

        session = drive("cfile", "docs", "Notes.txt", "y")

        assert (tmp_path / "docs" / "Notes.txt").read_bytes() == codecs.BOM_UTF8
        assert_back_on_menu(session)

    def test_existing_file_aborts(self, drive, tmp_path, capsys):
        (tmp_path / "Notes.txt").write_text("keep")

        session = drive("cfile", "", "Notes.txt")

        assert "File already exists" in capsys.readouterr().out
        assert (tmp_path / "Notes.txt").read_text() == "keep"
        assert_back_on_menu(session)

    def test_missing_directory_aborts(self, drive, capsys):
        session = drive("cfile", "missing")

        assert "Directory does not exist" in capsys.readouterr().out
        assert_back_on_menu(session)
