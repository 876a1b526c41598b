"""Tests for console message helpers."""

from unittest.mock import patch

from patternlink.console import confirm, console, error, info, success, warning


class TestMessageHelpers:
    """Helpers pass rich markup through."""

    def test_markup_is_rendered(self):
        with console.capture() as capture:
            info("[bold]done[/bold]")
        output = capture.get()
        assert "done" in output
        assert "[bold]" not in output

    def test_each_helper_prints_message(self):
        with console.capture() as capture:
            success("saved")
            warning("careful")
            error("failed")
        output = capture.get()
        assert "saved" in output
        assert "careful" in output
        assert "failed" in output


class TestConfirm:
    """Tests for confirm()."""

    @patch.object(console, "input", return_value="y")
    def test_yes(self, _mock_input):
        assert confirm("Delete?") is True

    @patch.object(console, "input", return_value="")
    def test_default(self, _mock_input):
        assert confirm("Delete?", default=True) is True
        assert confirm("Delete?") is False

    @patch.object(console, "input", side_effect=EOFError)
    def test_eof_declines(self, _mock_input):
        assert confirm("Delete?") is False

    @patch.object(console, "input", return_value="n")
    def test_suffix_shown_literally(self, mock_input):
        confirm("Delete?")
        assert mock_input.call_args[0][0] == "Delete? \\[y/N]: "
