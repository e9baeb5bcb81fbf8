"""lcovbridge CLI."""

from pathlib import Path

import click

from lcovbridge import __version__
from lcovbridge.cli.convert import convert_command
from lcovbridge.cli.summary import summary_command
from lcovbridge.config import load_config
from lcovbridge.core.errors import ConfigError
from lcovbridge.core.logging import configure_logging, set_run_id


@click.group()
@click.version_option(version=__version__, prog_name="lcovbridge")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory containing .lcovbridge.yaml (default: current directory)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_dir: Path | None) -> None:
    """lcovbridge - convert LCOV and JaCoCo coverage into LCOV tracefiles."""
    overrides = {"logging": {"level": "DEBUG"}} if verbose else {}
    try:
        config = load_config(config_dir, **overrides)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(config=config.logging)
    set_run_id()

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


cli.add_command(convert_command, name="convert")
cli.add_command(summary_command, name="summary")


if __name__ == "__main__":
    cli()
