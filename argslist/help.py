"""Plain text help page for an argument :class:`~argslist.descriptor.Schema`."""

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from argslist.descriptor import Arity

if TYPE_CHECKING:
    from argslist.descriptor import ArgDescriptor

HELP_TITLE = "Arguments:"
COLUMN_SEPARATOR = "    "


def arity_label(arity: Arity, type_: str = "string") -> str:
    """Human readable description of how many values of which type an argument takes.

    Examples
    --------
    >>> arity_label(Arity.MULTI, "int")
    'multiple ints'
    >>> arity_label(Arity.REPEATED_GROUP, "bool")
    'repeated multiple bools'
    """
    if arity is Arity.NONE:
        return "no values"
    elif arity is Arity.SINGLE:
        return f"single {type_}"
    elif arity is Arity.MULTI:
        return f"multiple {type_}s"
    else:
        return f"repeated multiple {type_}s"


def align_columns(rows: Sequence[Sequence[str]]) -> list[list[str]]:
    """Left-justify every cell to the widest cell of its column.

    Parameters
    ----------
    rows: Sequence[Sequence[str]]
        Table of strings. All rows must have the same length.

    Returns
    -------
    list[list[str]]
        Padded copy of ``rows``.
    """
    if not rows:
        return []
    widths = [max(len(cell) for cell in column) for column in zip(*rows, strict=True)]
    return [[cell.ljust(width) for cell, width in zip(row, widths, strict=True)] for row in rows]


def help_row(descriptor: "ArgDescriptor") -> list[str]:
    return [
        "",
        descriptor.example,
        "|".join(descriptor.names),
        arity_label(descriptor.arity, descriptor.type),
        descriptor.explanation,
    ]


def format_help(descriptors: Iterable["ArgDescriptor"], separator: str = COLUMN_SEPARATOR) -> str:
    """Render the help page.

    One line per descriptor, holding an empty leading column (indentation), the example,
    the ``|``-joined aliases, the arity label and the explanation.
    Padding of the last column is kept so every line has the same width.
    """
    lines = [separator.join(row) for row in align_columns([help_row(x) for x in descriptors])]
    return "\n".join([HELP_TITLE, *lines])
