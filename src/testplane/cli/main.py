"""TestPlane CLI - tpl command."""

import click

from testplane import __version__
from testplane.cli.detect import detect_command
from testplane.cli.run import run_command
from testplane.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="tpl")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """TestPlane - run a repository's tests and report normalized results."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(run_command, name="run")
cli.add_command(detect_command, name="detect")


if __name__ == "__main__":
    cli()
