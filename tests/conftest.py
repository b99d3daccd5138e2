import pytest
from rich.console import Console

from argslist import ArgDescriptor, ArgsListParser, Arity, DiagnosticLog


@pytest.fixture
def console():
    return Console(width=200, force_terminal=True, highlight=False, color_system=None, legacy_windows=False)


@pytest.fixture
def schema():
    return [
        ArgDescriptor(
            names=("build", "b"),
            example="-b",
            explanation="if provided, re-builds",
        ),
        ArgDescriptor(
            names=("files", "f"),
            arity=Arity.MULTI,
            example="-f in_1.js in_2.js in_3.js",
            explanation="the input files to process",
        ),
        ArgDescriptor(
            names=("output", "o"),
            arity=Arity.SINGLE,
            example="-o out.js",
            explanation="the output file to process",
        ),
        ArgDescriptor(
            names=("threads", "t"),
            arity=Arity.SINGLE,
            type="int",
            default=8,
            example="-t 16",
            explanation="number of threads to use",
        ),
    ]


@pytest.fixture
def parser(schema, console):
    return ArgsListParser(schema, console=console, error_console=console)


@pytest.fixture
def log():
    return DiagnosticLog()


@pytest.fixture
def defaults():
    return {"build": None, "files": None, "output": None, "threads": 8}
