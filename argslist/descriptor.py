from collections.abc import Iterable, Iterator, Mapping
from enum import IntEnum
from typing import Any

from attrs import field, frozen

from argslist.exceptions import DuplicateAliasError, SchemaError
from argslist.utils import is_iterable, to_tuple_converter

__all__ = [
    "ArgDescriptor",
    "Arity",
    "Schema",
]


class Arity(IntEnum):
    """How many values an argument consumes from the command line."""

    NONE = 0
    """Boolean presence flag; ``True`` when supplied."""

    SINGLE = 1
    """Exactly one value."""

    MULTI = 2
    """All values up to the next flag, collected into one list."""

    REPEATED_GROUP = 3
    """The flag may recur; every occurrence starts a new inner list."""


def _arity_converter(value: Arity | int | str) -> Arity:
    if isinstance(value, Arity):
        return value
    if isinstance(value, str):
        try:
            return Arity[value.strip().upper().replace("-", "_")]
        except KeyError:
            raise ValueError(f'Unknown arity "{value}". Choices: {", ".join(a.name for a in Arity)}.') from None
    return Arity(value)


def _names_validator(instance, attribute, value: tuple[str, ...]):
    if not value:
        raise SchemaError("An argument descriptor requires at least one name.")
    for name in value:
        if not isinstance(name, str) or not name:
            raise SchemaError(f"Argument names must be non-empty strings; got {name!r}.")
    if len(set(value)) != len(value):
        raise SchemaError(f"Argument names {value!r} contain duplicates.")


def _default_validator(instance: "ArgDescriptor", attribute, value: Any):
    if value is None or instance.arity < Arity.MULTI:
        return
    if not is_iterable(value) or isinstance(value, Mapping):
        raise SchemaError(
            f'Argument "{instance.name}" collects a list of values; its default must be a sequence, got {value!r}.'
        )


# Keys understood by ``ArgDescriptor.from_mapping`` that differ from the attribute names.
_MAPPING_ALIASES = {
    "values": "arity",
    "defaultValues": "default",
    "defaultValue": "default",
    "default_value": "default",
}


@frozen(kw_only=True)
class ArgDescriptor:
    """Declares a single command-line argument."""

    names: tuple[str, ...] = field(converter=to_tuple_converter, validator=_names_validator)
    """
    Aliases of this argument, without the leading marker.
    The first entry is the canonical name used as the key of the parsed result.
    """

    arity: Arity = field(default=Arity.NONE, converter=_arity_converter)

    type: str = "string"
    """
    One of ``"string"``, ``"int"`` or ``"bool"``.
    Any other value is tolerated here and reported whenever a value is coerced.
    """

    default: Any = field(default=None, validator=_default_validator, hash=False)
    """Value reported when the argument never appears on the command line."""

    example: str = ""

    explanation: str = ""

    @property
    def name(self) -> str:
        """Canonical name."""
        return self.names[0]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ArgDescriptor":
        """Build a descriptor from a plain dictionary.

        Besides the attribute names, the keys ``values`` (arity) and
        ``defaultValues``/``defaultValue`` (default) are accepted.
        """
        kwargs = {}
        for key, value in mapping.items():
            key = _MAPPING_ALIASES.get(key, key)
            if key in kwargs:
                raise SchemaError(f'Argument descriptor key "{key}" supplied more than once: {dict(mapping)!r}.')
            kwargs[key] = value
        try:
            return cls(**kwargs)
        except TypeError as e:
            raise SchemaError(f"Invalid argument descriptor {dict(mapping)!r}: {e}") from e


def _descriptor_converter(value: ArgDescriptor | Mapping[str, Any]) -> ArgDescriptor:
    if isinstance(value, ArgDescriptor):
        return value
    if isinstance(value, Mapping):
        return ArgDescriptor.from_mapping(value)
    raise SchemaError(f"Expected an ArgDescriptor or a mapping; got {value!r}.")


def _descriptors_converter(value: Iterable[ArgDescriptor | Mapping[str, Any]]) -> tuple[ArgDescriptor, ...]:
    return tuple(_descriptor_converter(x) for x in to_tuple_converter(value))


def _unique_aliases_validator(instance, attribute, value: tuple[ArgDescriptor, ...]):
    owners: dict[str, str] = {}
    for descriptor in value:
        for alias in descriptor.names:
            if alias in owners:
                raise DuplicateAliasError(alias, owners[alias], descriptor.name)
            owners[alias] = descriptor.name


@frozen
class Schema:
    """Ordered, immutable collection of :class:`ArgDescriptor`.

    A schema may be shared by any number of parse calls.
    """

    descriptors: tuple[ArgDescriptor, ...] = field(
        factory=tuple,
        converter=_descriptors_converter,
        validator=_unique_aliases_validator,
    )

    def __iter__(self) -> Iterator[ArgDescriptor]:
        return iter(self.descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)

    def __getitem__(self, index: int) -> ArgDescriptor:
        return self.descriptors[index]

    @property
    def canonical_names(self) -> tuple[str, ...]:
        return tuple(descriptor.name for descriptor in self.descriptors)

    def lookup(self, alias: str) -> ArgDescriptor | None:
        """First descriptor, in declaration order, that answers to ``alias``.

        Parameters
        ----------
        alias: str
            Flag name with its marker already stripped, e.g. ``"o"`` for ``-o``.

        Returns
        -------
        ArgDescriptor | None
            Matched descriptor, or :obj:`None` if no descriptor has this alias.
        """
        return next((descriptor for descriptor in self.descriptors if alias in descriptor.names), None)
