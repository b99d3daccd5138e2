from collections.abc import Callable
from enum import Enum

from attrs import field, frozen

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLog",
    "DiagnosticSink",
]


class DiagnosticKind(Enum):
    """Every recoverable anomaly the parser reports."""

    UNKNOWN_NAME = "unknown-name"
    """A flag token that matches no descriptor. Following values are orphaned."""

    REPEATED_NAME = "repeated-name"
    """A single or multi value flag supplied more than once."""

    ORPHAN_VALUE = "orphan-value"
    """A value token with no active flag. The value is discarded."""

    ZERO_VALUE = "zero-value"
    """A value token following a flag that takes no values. The value is discarded."""

    EXCESS_VALUE = "excess-value"
    """A second value for a single value flag. The first value is kept."""

    INVALID_INT = "invalid-int"
    """An int value that is not a plain decimal integer. A best-effort parse is used."""

    INVALID_BOOL = "invalid-bool"
    """A bool value that isn't one of the recognized spellings. ``False`` is used."""

    UNKNOWN_TYPE = "unknown-type"
    """A descriptor declares a type other than ``string``, ``int`` or ``bool``. The raw value is kept."""


@frozen(kw_only=True)
class Diagnostic:
    """A single non-fatal anomaly found while parsing."""

    kind: DiagnosticKind

    message: str
    """Description of the anomaly, without the severity prefix."""

    token: str | None = None
    """Command-line token that caused the anomaly, if any."""

    severity: str = field(default="warning")

    def __str__(self):
        return f"{self.severity.capitalize()}: {self.message}"


DiagnosticSink = Callable[[Diagnostic], object]


class DiagnosticLog(list[Diagnostic]):
    """A :class:`list` that can be handed to the parser as its diagnostic sink.

    .. code-block:: python

        log = DiagnosticLog()
        args = parser.parse(["-x"], on_diagnostic=log)
        assert log.kinds == [DiagnosticKind.UNKNOWN_NAME]
    """

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.append(diagnostic)

    @property
    def kinds(self) -> list[DiagnosticKind]:
        return [x.kind for x in self]

    @property
    def messages(self) -> list[str]:
        return [str(x) for x in self]
