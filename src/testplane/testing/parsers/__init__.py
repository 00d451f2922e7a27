"""Result parsers, one per output format, looked up by project tag.

Importing this package registers every parser with ``parser_registry``.
"""

from testplane.testing.models import ProcessOutcome, ProjectTag, TestRunResult
from testplane.testing.parsers.base import ParserRegistry, ResultParser, parser_registry
from testplane.testing.parsers.containers import DockerComposeParser
from testplane.testing.parsers.generic import (
    EmptyRepositoryParser,
    GenericParser,
    empty_repository_result,
)
from testplane.testing.parsers.javascript import (
    CypressParser,
    JestParser,
    KarmaParser,
    MochaParser,
    PlaywrightParser,
)
from testplane.testing.parsers.jvm import JavaParser
from testplane.testing.parsers.native import CargoParser, GoParser
from testplane.testing.parsers.python import BehaveParser, PytestParser, UnittestParser

__all__ = [
    "BehaveParser",
    "CargoParser",
    "CypressParser",
    "DockerComposeParser",
    "EmptyRepositoryParser",
    "GenericParser",
    "GoParser",
    "JavaParser",
    "JestParser",
    "KarmaParser",
    "MochaParser",
    "ParserRegistry",
    "PlaywrightParser",
    "PytestParser",
    "ResultParser",
    "UnittestParser",
    "empty_repository_result",
    "get_parser",
    "parse_outcome",
    "parser_registry",
]


def get_parser(tag: ProjectTag | None) -> ResultParser:
    """Parser for ``tag``; the generic parser for anything unregistered."""
    parser_class = parser_registry.for_tag(tag) or GenericParser
    return parser_class()


def parse_outcome(outcome: ProcessOutcome, tag: ProjectTag | None) -> TestRunResult:
    return get_parser(tag).parse(outcome, tag)
