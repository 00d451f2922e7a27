"""tpl run command - run unit and/or integration tests for a repository."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import click

from testplane.config.loader import load_config
from testplane.config.models import TestPlaneConfig
from testplane.core.errors import TestPlaneError
from testplane.core.logging import configure_logging
from testplane.core.progress import get_console, make_case_table, pluralize, spinner, status
from testplane.testing.models import TestKind, TestRunResult
from testplane.testing.orchestrator import orchestrator_for

_KIND_CHOICES = ["unit", "integration", "all"]


def apply_logging(config: TestPlaneConfig, *, verbose: bool) -> None:
    """Switch from the bootstrap logger to the loaded ``logging`` section.

    ``-v`` forces DEBUG on every output, overriding per-output levels.
    """
    logging_config = config.logging
    if verbose:
        logging_config = logging_config.model_copy(
            update={
                "level": "DEBUG",
                "outputs": [o.model_copy(update={"level": None}) for o in logging_config.outputs],
            }
        )
    configure_logging(config=logging_config)


def parse_env_pairs(pairs: tuple[str, ...]) -> dict[str, str]:
    """Turn ``KEY=VALUE`` options into a mapping."""
    env: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--env")
        env[key] = value
    return env


async def _run_kinds(
    config: TestPlaneConfig,
    kinds: list[TestKind],
    repo_root: Path,
    repo_id: str,
    *,
    test_command: str | None,
    env: dict[str, str],
    screenshots: bool,
    timeout: float | None,
) -> dict[TestKind, TestRunResult | TestPlaneError]:
    results: dict[TestKind, TestRunResult | TestPlaneError] = {}
    for kind in kinds:
        orchestrator = orchestrator_for(kind, config)
        try:
            results[kind] = await orchestrator.run_tests(
                repo_root,
                repo_id,
                test_command=test_command,
                env=env,
                capture_screenshots=screenshots and kind == TestKind.INTEGRATION,
                timeout_sec=timeout,
            )
        except TestPlaneError as e:
            results[kind] = e
        finally:
            await orchestrator.drain_notifications()
    return results


def _print_result(kind: TestKind, result: TestRunResult, *, show_cases: bool) -> None:
    s = result.summary
    counts = (
        f"{pluralize(s.total, 'test')}: {s.passed} passed, {s.failed} failed, "
        f"{s.skipped} skipped ({s.duration_ms / 1000:.1f}s)"
    )
    style = "success" if result.success else "error"
    status(f"{kind.value}: {counts}", style=style)
    status(f"parser: {result.parser}{' (degraded)' if result.degraded else ''}", indent=2)
    if result.truncated:
        status("output was truncated", style="warning", indent=2)
    if result.log_file:
        status(f"log: {result.log_file}", indent=2)
    for shot in result.screenshots:
        status(f"screenshot: {shot}", indent=2)
    if show_cases and result.details:
        get_console().print(make_case_table(result.details))


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "--kind",
    type=click.Choice(_KIND_CHOICES),
    default="unit",
    show_default=True,
    help="Which suite to run",
)
@click.option("--repo-id", default=None, help="Identifier used in log names (default: directory name)")
@click.option("--command", "test_command", default=None, help="Shell command to run instead of the detected one")
@click.option("--env", "env_pairs", multiple=True, metavar="KEY=VALUE", help="Extra environment variable (repeatable)")
@click.option("--screenshots", is_flag=True, help="Provision a screenshot directory for integration runs")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None, help="Timeout in seconds")
@click.option("--log-dir", type=click.Path(file_okay=False, path_type=Path), default=None, help="Directory for run logs")
@click.option("--cases", "show_cases", is_flag=True, help="List individual test cases")
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def run_command(
    ctx: click.Context,
    path: Path,
    kind: str,
    repo_id: str | None,
    test_command: str | None,
    env_pairs: tuple[str, ...],
    screenshots: bool,
    timeout: float | None,
    log_dir: Path | None,
    show_cases: bool,
    as_json: bool,
) -> None:
    """Run a repository's tests and report normalized results.

    PATH is the repository root (default: current directory). Exits with
    status 1 when any suite fails or cannot be run.
    """
    repo_root = path.resolve()
    env = parse_env_pairs(env_pairs)
    overrides: dict[str, Any] = {}
    if log_dir is not None:
        overrides["paths"] = {"log_dir": str(log_dir.resolve())}

    try:
        config = load_config(repo_root, **overrides)
    except TestPlaneError as e:
        raise click.ClickException(e.message) from e
    apply_logging(config, verbose=bool((ctx.obj or {}).get("verbose")))

    kinds = list(TestKind) if kind == "all" else [TestKind(kind)]
    label = " and ".join(k.value for k in kinds)

    with spinner(f"Running {label} tests in {repo_root.name}"):
        results = asyncio.run(
            _run_kinds(
                config,
                kinds,
                repo_root,
                repo_id or repo_root.name,
                test_command=test_command,
                env=env,
                screenshots=screenshots,
                timeout=timeout,
            )
        )

    ok = all(isinstance(r, TestRunResult) and r.success for r in results.values())

    if as_json:
        payload = {
            k.value: (r.to_dict() if isinstance(r, TestRunResult) else {"error": r.to_dict()})
            for k, r in results.items()
        }
        click.echo(json.dumps(payload, indent=2))
    else:
        for test_kind, outcome in results.items():
            if isinstance(outcome, TestRunResult):
                _print_result(test_kind, outcome, show_cases=show_cases)
            else:
                status(f"{test_kind.value}: {outcome.message}", style="error")

    if not ok:
        sys.exit(1)
