"""lcovbridge summary command - print per-file coverage totals."""

import json
from pathlib import Path

import click
from rich.console import Console

from lcovbridge.cli.utils import FORMAT_CHOICE, load_report
from lcovbridge.config import LcovBridgeConfig
from lcovbridge.coverage import (
    AUTO,
    detect_parser,
    print_summary,
    summarize,
    summarize_jacoco_xml,
    summary_to_dict,
)


@click.command()
@click.argument("report", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-f", "--format", "format_id", type=FORMAT_CHOICE, default=AUTO, show_default=True)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def summary_command(ctx: click.Context, report: Path, format_id: str, as_json: bool) -> None:
    """Show function, line and branch coverage of REPORT per file."""
    config: LcovBridgeConfig = ctx.obj["config"]

    if format_id == AUTO:
        with report.open("rb") as f:
            detected = detect_parser(f.read(4096))
        if detected is not None:
            format_id = detected.format_id

    if format_id == "jacoco":
        summary = summarize_jacoco_xml(report, source_root=config.coverage.java_source_root)
    else:
        summary = summarize(load_report(report, format_id, config))

    if as_json:
        click.echo(json.dumps(summary_to_dict(summary), indent=2))
        return
    print_summary(summary, Console())
