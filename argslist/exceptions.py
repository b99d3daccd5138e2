__all__ = [
    "DuplicateAliasError",
    "SchemaError",
]


class SchemaError(Exception):
    """The argument schema is malformed.

    This is a developer error rather than a runtime error; malformed command-line
    input is reported through :class:`~argslist.diagnostics.Diagnostic` instead.
    """


class DuplicateAliasError(SchemaError):
    """An alias has already been claimed by another argument descriptor."""

    def __init__(self, alias: str, first: str, second: str):
        self.alias = alias
        self.first = first
        self.second = second
        super().__init__(f'Alias "{alias}" is used by both "{first}" and "{second}".')
