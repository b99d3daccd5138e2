"""Rich consoles used for help pages, argument dumps and warnings."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rich.console import Console
    from rich.theme import Theme

STYLES = {
    "argslist.error": "bold red",
    "argslist.warning": "bold yellow",
    "argslist.info": "bold blue",
}


def theme() -> "Theme":
    from rich.theme import Theme

    return Theme(STYLES)


def create_console(*, stderr: bool = False, **kwargs: Any) -> "Console":
    """Create a :class:`~rich.console.Console` that knows the ``argslist.*`` styles.

    Parameters
    ----------
    stderr: bool
        Write to ``sys.stderr`` instead of ``sys.stdout``.
    **kwargs
        Forwarded to :class:`~rich.console.Console`.
    """
    from rich.console import Console

    kwargs.setdefault("theme", theme())
    return Console(stderr=stderr, **kwargs)


def echo(console: "Console", message: Any, style: str) -> None:
    """Print ``message`` verbatim; command-line input must never be read as markup."""
    from rich.text import Text

    if isinstance(message, str):
        message = Text(message, style=style)
    console.print(message, markup=False, highlight=False, soft_wrap=True)
