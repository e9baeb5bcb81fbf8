"""lcovbridge convert command - turn a coverage report into an LCOV tracefile."""

from pathlib import Path

import click
from rich.console import Console

from lcovbridge.cli.utils import FORMAT_CHOICE, load_report
from lcovbridge.config import LcovBridgeConfig
from lcovbridge.coverage import AUTO, print_summary, summarize, write_lcov
from lcovbridge.core.errors import LcovWriteError


@click.command()
@click.argument("report", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-f", "--format", "format_id", type=FORMAT_CHOICE, default=AUTO, show_default=True)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="LCOV output path; '.lcov' is appended if missing (default: <report dir>/report.lcov)",
)
@click.option("--summary/--no-summary", "show_summary", default=True, help="Print coverage table")
@click.pass_context
def convert_command(
    ctx: click.Context,
    report: Path,
    format_id: str,
    output: Path | None,
    show_summary: bool,
) -> None:
    """Convert REPORT (LCOV or JaCoCo XML) into an LCOV tracefile."""
    config: LcovBridgeConfig = ctx.obj["config"]
    console = Console(stderr=True)

    parsed = load_report(report, format_id, config)

    if show_summary:
        print_summary(summarize(parsed), console)

    destination = output or report.parent / config.coverage.output_name
    try:
        written = write_lcov(parsed, destination)
    except LcovWriteError as e:
        raise click.ClickException(str(e)) from e

    if written is None:
        console.print("[yellow]Coverage report is empty[/yellow] - no LCOV file created")
        return
    console.print(f"[green]Created coverage lcov report:[/green] {written}")
