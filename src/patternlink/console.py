"""Rich console output for patternlink."""

from rich.console import Console
from rich.markup import escape

# Console instance writing to stderr (stdout reserved for data)
console = Console(stderr=True)


def info(msg: str) -> None:
    """Print an informational message."""
    console.print(f"[blue]ℹ[/blue] {msg}")


def success(msg: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {msg}")


def warning(msg: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]⚠[/yellow] {msg}")


def error(msg: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {msg}")


def confirm(prompt: str, default: bool = False) -> bool:
    """Prompt user for yes/no confirmation.

    Args:
        prompt: The question to ask
        default: Default value if user just presses Enter

    Returns:
        True if user confirms, False otherwise
    """
    suffix = "[Y/n]" if default else "[y/N]"
    try:
        response = console.input(f"{prompt} {escape(suffix)}: ").strip().lower()
        if not response:
            return default
        return response in ("y", "yes")
    except (EOFError, KeyboardInterrupt):
        console.print()
        return False
