__version__ = "0.1.0"

__all__ = [
    "ArgDescriptor",
    "ArgsListParser",
    "Arity",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLog",
    "DuplicateAliasError",
    "Schema",
    "SchemaError",
    "coerce",
    "format_help",
    "unescape",
]

from argslist.coercion import coerce, unescape
from argslist.descriptor import ArgDescriptor, Arity, Schema
from argslist.diagnostics import Diagnostic, DiagnosticKind, DiagnosticLog
from argslist.exceptions import DuplicateAliasError, SchemaError
from argslist.help import format_help
from argslist.parser import ArgsListParser
