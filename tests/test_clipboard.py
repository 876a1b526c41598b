"""Tests for clipboard access."""

import subprocess
from unittest.mock import MagicMock, patch

from patternlink.clipboard import (
    CLIPBOARD_READERS,
    detect_command,
    read_clipboard_text,
    write_clipboard_text,
)


class TestDetectCommand:
    """Tests for detect_command()."""

    @patch("patternlink.clipboard.shutil.which")
    def test_prefers_pbpaste(self, mock_which):
        mock_which.side_effect = lambda cmd: f"/usr/bin/{cmd}"
        assert detect_command(CLIPBOARD_READERS) == ["pbpaste"]

    @patch("patternlink.clipboard.shutil.which")
    def test_falls_back_to_xclip(self, mock_which):
        mock_which.side_effect = lambda cmd: None if cmd == "pbpaste" else f"/usr/bin/{cmd}"
        assert detect_command(CLIPBOARD_READERS)[0] == "xclip"

    @patch("patternlink.clipboard.shutil.which")
    def test_none_available(self, mock_which):
        mock_which.return_value = None
        assert detect_command(CLIPBOARD_READERS) is None


class TestReadClipboardText:
    """Tests for read_clipboard_text()."""

    @patch("patternlink.clipboard.detect_command", return_value=["pbpaste"])
    @patch("patternlink.clipboard.subprocess.run")
    def test_returns_text(self, mock_run, _mock_detect):
        mock_run.return_value = MagicMock(returncode=0, stdout="https://example.com/a")
        assert read_clipboard_text() == "https://example.com/a"
        mock_run.assert_called_once_with(["pbpaste"], capture_output=True, text=True, timeout=5)

    @patch("patternlink.clipboard.detect_command", return_value=["pbpaste"])
    @patch("patternlink.clipboard.subprocess.run")
    def test_empty_clipboard(self, mock_run, _mock_detect):
        mock_run.return_value = MagicMock(returncode=0, stdout="")
        assert read_clipboard_text() is None

    @patch("patternlink.clipboard.detect_command", return_value=["pbpaste"])
    @patch("patternlink.clipboard.subprocess.run")
    def test_nonzero_exit(self, mock_run, _mock_detect):
        mock_run.return_value = MagicMock(returncode=1, stdout="text")
        assert read_clipboard_text() is None

    @patch("patternlink.clipboard.detect_command", return_value=["pbpaste"])
    @patch("patternlink.clipboard.subprocess.run")
    def test_timeout(self, mock_run, _mock_detect):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="pbpaste", timeout=5)
        assert read_clipboard_text() is None

    @patch("patternlink.clipboard.detect_command", return_value=None)
    def test_no_command(self, _mock_detect):
        assert read_clipboard_text() is None


class TestWriteClipboardText:
    """Tests for write_clipboard_text()."""

    @patch("patternlink.clipboard.detect_command", return_value=["pbcopy"])
    @patch("patternlink.clipboard.subprocess.run")
    def test_passes_text_as_input(self, mock_run, _mock_detect):
        mock_run.return_value = MagicMock(returncode=0)
        assert write_clipboard_text("[A-1](url)") is True
        mock_run.assert_called_once_with(
            ["pbcopy"],
            input="[A-1](url)",
            capture_output=True,
            text=True,
            timeout=5,
        )

    @patch("patternlink.clipboard.detect_command", return_value=["pbcopy"])
    @patch("patternlink.clipboard.subprocess.run")
    def test_subprocess_error(self, mock_run, _mock_detect):
        mock_run.side_effect = subprocess.SubprocessError("failed")
        assert write_clipboard_text("x") is False

    @patch("patternlink.clipboard.detect_command", return_value=None)
    def test_no_command(self, _mock_detect):
        assert write_clipboard_text("x") is False
