import copy
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from attrs import define, field

from argslist.coercion import coerce
from argslist.console import create_console, echo
from argslist.descriptor import ArgDescriptor, Arity, Schema
from argslist.diagnostics import Diagnostic, DiagnosticKind, DiagnosticSink
from argslist.help import format_help
from argslist.utils import is_flag_token, normalize_tokens

if TYPE_CHECKING:
    from rich.console import Console


def _schema_converter(value: Schema | Iterable[ArgDescriptor | Mapping[str, Any]]) -> Schema:
    return value if isinstance(value, Schema) else Schema(value)


def _marker_validator(instance, attribute, value: str):
    if len(value) != 1:
        raise ValueError(f"Flag marker must be a single character; got {value!r}.")


@define
class ArgsListParser:
    """Parses a flat list of command-line tokens against a :class:`~argslist.descriptor.Schema`.

    Malformed input never raises; every anomaly is reported as a
    :class:`~argslist.diagnostics.Diagnostic` and parsing continues.
    """

    schema: Schema = field(converter=_schema_converter)

    print_args: bool = False
    """Echo the collected arguments (before defaults are applied) to :attr:`console`."""

    marker: str = field(default="-", validator=_marker_validator, kw_only=True)
    """Leading character of a flag token."""

    _console: "Console | None" = field(default=None, alias="console", kw_only=True)
    _error_console: "Console | None" = field(default=None, alias="error_console", kw_only=True)

    @property
    def console(self) -> "Console":
        """Receives the help page and the argument dump."""
        if self._console is None:
            self._console = create_console()
        return self._console

    @console.setter
    def console(self, value: "Console | None"):
        self._console = value

    @property
    def error_console(self) -> "Console":
        """Receives warnings when :meth:`parse` is called without ``on_diagnostic``."""
        if self._error_console is None:
            self._error_console = create_console(stderr=True)
        return self._error_console

    @error_console.setter
    def error_console(self, value: "Console | None"):
        self._error_console = value

    def report(self, diagnostic: Diagnostic) -> None:
        """Default diagnostic sink."""
        echo(self.error_console, str(diagnostic), f"argslist.{diagnostic.severity}")

    def format_help(self) -> str:
        return format_help(self.schema)

    def print_help(self) -> None:
        echo(self.console, self.format_help(), "argslist.info")

    def parse(
        self,
        tokens: None | str | Iterable[str] = None,
        *,
        on_diagnostic: DiagnosticSink | None = None,
    ) -> dict[str, Any] | None:
        """Parse command-line tokens.

        Parameters
        ----------
        tokens: None | str | Iterable[str]
            Tokens to parse. Defaults to ``sys.argv[1:]``.
            A string is split with :func:`shlex.split`.
        on_diagnostic: Callable[[Diagnostic], Any] | None
            Receives each :class:`~argslist.diagnostics.Diagnostic`.
            Defaults to printing them on :attr:`error_console`.

        Returns
        -------
        dict[str, Any] | None
            Parsed values keyed by canonical name, with every argument that never
            appeared set to its default. :obj:`None` if help was requested.
        """
        tokens = normalize_tokens(tokens)
        sink = self.report if on_diagnostic is None else on_diagnostic

        if not tokens or tokens[0] == "help":
            self.print_help()
            if tokens:
                return None

        def warn(kind: DiagnosticKind, message: str, token: str | None = None):
            sink(Diagnostic(kind=kind, message=message, token=token))

        args: dict[str, Any] = {}
        seen: set[str] = set()
        descriptor: ArgDescriptor | None = None

        for token in tokens:
            if is_flag_token(token, self.marker):
                descriptor = self.schema.lookup(token[1:])
                if descriptor is None:
                    warn(DiagnosticKind.UNKNOWN_NAME, f"unexpected arg name '{token}'.", token)
                    continue

                name = descriptor.name
                if descriptor.arity is Arity.NONE:
                    args[name] = True
                elif descriptor.arity is Arity.REPEATED_GROUP:
                    args.setdefault(name, []).append([])
                elif name in seen:
                    warn(DiagnosticKind.REPEATED_NAME, f"arg name '{token}' appeared multiple times.", token)
                elif descriptor.arity is Arity.MULTI:
                    args[name] = []
                seen.add(name)
                continue

            if descriptor is None:
                warn(DiagnosticKind.ORPHAN_VALUE, f"arg value '{token}' provided without an arg name.", token)
                continue

            name = descriptor.name
            if descriptor.arity is Arity.NONE:
                warn(DiagnosticKind.ZERO_VALUE, f"arg value provided for zero value arg '{name}'.", token)
                continue
            if descriptor.arity is Arity.SINGLE and name in args:
                warn(DiagnosticKind.EXCESS_VALUE, f"multiple arg values provided for single value arg '{name}'.", token)
                continue

            value = coerce(token, descriptor.type, lambda kind, message: warn(kind, message, token))  # noqa: B023
            if descriptor.arity is Arity.SINGLE:
                args[name] = value
            elif descriptor.arity is Arity.MULTI:
                args[name].append(value)
            else:
                args[name][-1].append(value)

        if self.print_args:
            self._print_args(args)

        return {x.name: args[x.name] if x.name in args else copy.deepcopy(x.default) for x in self.schema}

    def _print_args(self, args: dict[str, Any]) -> None:
        from rich.json import JSON

        echo(self.console, "\nArgs:", "argslist.info")
        echo(self.console, JSON.from_data(args, indent=2, default=repr), "argslist.info")
