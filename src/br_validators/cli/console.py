"""Rich console configuration for CLI output."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Custom theme for BR Validators
THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red bold",
        "success": "green",
        "highlight": "magenta",
        "muted": "dim",
        "header": "bold blue",
        "value": "bold",
        "valid": "green",
        "invalid": "red",
    }
)

# Global console instance
console = Console(theme=THEME)


def configure_logging(level: str = "WARNING") -> None:
    """Send log records through the shared console."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[error]Erro:[/error] {message}")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[warning]Aviso:[/warning] {message}")


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[success]{message}[/success]")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[info]{message}[/info]")


def format_flag(value: bool) -> str:
    """Render a boolean as a colored yes/no."""
    return "[valid]sim[/valid]" if value else "[invalid]não[/invalid]"
