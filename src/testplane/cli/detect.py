"""tpl detect command - show the detected stack and resolved commands."""

import json
from pathlib import Path

import click

from testplane.testing.commands import CommandResolver
from testplane.testing.detection import ProjectTypeDetector
from testplane.testing.models import TestKind
from testplane.testing.parsers import get_parser


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "--kind",
    type=click.Choice([k.value for k in TestKind]),
    multiple=True,
    help="Test kind to inspect (repeatable; default: both)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def detect_command(path: Path, kind: tuple[str, ...], as_json: bool) -> None:
    """Show what TestPlane would run for a repository.

    PATH is the repository root (default: current directory).
    """
    repo_root = path.resolve()
    kinds = [TestKind(k) for k in kind] or list(TestKind)
    resolver = CommandResolver()

    report: dict[str, dict[str, str | None]] = {}
    for test_kind in kinds:
        tag = ProjectTypeDetector(test_kind).detect(repo_root)
        command = resolver.resolve(repo_root, tag, test_kind)
        report[test_kind.value] = {
            "tag": tag.value,
            "command": command.line if command else None,
            "parser": get_parser(tag).parser_id,
        }

    if as_json:
        click.echo(json.dumps({"path": str(repo_root), "kinds": report}, indent=2))
        return

    click.echo(f"Repository: {repo_root}")
    for name, entry in report.items():
        command_text = entry["command"] or "(undeterminable)"
        click.echo(f"{name}: {entry['tag']} -> {command_text} [parser: {entry['parser']}]")
