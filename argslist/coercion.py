"""Conversion of raw value tokens into typed values."""

import re
from collections.abc import Callable

from argslist.diagnostics import DiagnosticKind

Report = Callable[[DiagnosticKind, str], None]

_INT_PATTERN = re.compile(r"-?[0-9]+")
_INT_PREFIX_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")

_TRUE_STRINGS = ("true", "t", "1")
_FALSE_STRINGS = ("false", "f", "0")


def unescape(value: str) -> str:
    """Strip a single leading backslash.

    This lets users supply values that would otherwise look like flags, e.g. ``\\-5``.
    A literal leading backslash has to be doubled.
    """
    return value[1:] if value.startswith("\\") else value


def _int(value: str, report: Report) -> int | None:
    if not _INT_PATTERN.fullmatch(value):
        report(DiagnosticKind.INVALID_INT, f"unexpected int arg value '{value}'. Expected /^-?\\d+$/.")
    # Leading digits only, so "4.3" -> 4 and "12abc" -> 12.
    match = _INT_PREFIX_PATTERN.match(value)
    return int(match.group(1)) if match else None


def _bool(value: str, report: Report) -> bool:
    lower_value = value.lower()
    if lower_value in _TRUE_STRINGS:
        return True
    elif lower_value in _FALSE_STRINGS:
        return False
    report(
        DiagnosticKind.INVALID_BOOL,
        f"unexpected bool arg value '{value}'. Expected 'true', 't', '1', 'false', 'f', or '0'.",
    )
    return False


_converters: dict[str, Callable[[str, Report], object]] = {
    "int": _int,
    "bool": _bool,
}


def coerce(value: str, type_: str, report: Report) -> str | int | bool | None:
    """Convert a raw value token according to a descriptor's ``type``.

    Parameters
    ----------
    value: str
        Raw value token, possibly escaped with a leading backslash.
    type_: str
        ``"string"``, ``"int"`` or ``"bool"``.
        Unknown types are reported and the value is kept as a string.
    report: Callable[[DiagnosticKind, str], None]
        Receives every anomaly found during conversion.

    Returns
    -------
    str | int | bool | None
        Coerced value. :obj:`None` only for an int value without any leading digits.
    """
    value = unescape(value)
    if type_ == "string":
        return value
    try:
        converter = _converters[type_]
    except KeyError:
        report(DiagnosticKind.UNKNOWN_TYPE, f"unexpected arg type '{type_}'. Expected 'int', 'bool', or 'string'.")
        return value
    return converter(value, report)
