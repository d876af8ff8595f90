# Argline CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used for help output."""
from rich.console import Console
from rich.theme import Theme

HELP_THEME = Theme(
    {
        "usage": "bold",
        "section": "bold cyan",
        "flag": "green",
        "metavar": "yellow",
        "epilog": "dim",
    }
)

console = Console(theme=HELP_THEME)
