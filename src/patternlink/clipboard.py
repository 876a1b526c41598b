"""System clipboard access for patternlink.

Uses pbpaste/pbcopy on macOS and falls back to xclip elsewhere.
"""

import shutil
import subprocess

CLIPBOARD_READERS = [
    ["pbpaste"],
    ["xclip", "-selection", "clipboard", "-o"],
]

CLIPBOARD_WRITERS = [
    ["pbcopy"],
    ["xclip", "-selection", "clipboard"],
]


def detect_command(candidates: list[list[str]]) -> list[str] | None:
    """Return the first clipboard command whose executable is installed."""
    for command in candidates:
        if shutil.which(command[0]):
            return command
    return None


def read_clipboard_text() -> str | None:
    """Read plain text from the clipboard.

    Returns:
        Clipboard text, or None if empty or unavailable
    """
    command = detect_command(CLIPBOARD_READERS)
    if command is None:
        return None
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (subprocess.SubprocessError, FileNotFoundError):
        return None
    if result.returncode == 0 and result.stdout:
        return result.stdout
    return None


def write_clipboard_text(text: str) -> bool:
    """Replace the clipboard contents with text.

    Returns:
        True if the clipboard was written, False otherwise
    """
    command = detect_command(CLIPBOARD_WRITERS)
    if command is None:
        return False
    try:
        result = subprocess.run(
            command,
            input=text,
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (subprocess.SubprocessError, FileNotFoundError):
        return False
    return result.returncode == 0
