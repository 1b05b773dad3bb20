"""Rich console configuration and helpers."""

from rich.console import Console
from rich.theme import Theme

# Custom theme for consistent styling
custom_theme = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "word": "magenta",
        "type": "blue",
        "skipped": "dim yellow",
        "dim": "dim",
    }
)

# Main console for output
console = Console(theme=custom_theme)

# Error console for stderr
error_console = Console(theme=custom_theme, stderr=True)

# Marker and style per vocabulary type, used when listing results
TYPE_STYLES = {
    "verb": "[type]verb[/]",
    "noun": "[type]noun[/]",
    "adjective": "[type]adjective[/]",
    "unset": "[dim]unset[/]",
}


def format_type(value: str) -> str:
    """Styled label for a vocabulary type value."""
    return TYPE_STYLES.get(value, value)
