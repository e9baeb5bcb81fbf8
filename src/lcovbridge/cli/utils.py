"""Shared CLI helpers."""

from pathlib import Path

import click

from lcovbridge.config import LcovBridgeConfig
from lcovbridge.coverage import AUTO, PARSER_BY_FORMAT, Report, parse_artifact
from lcovbridge.core.errors import CoverageIOError, CoverageParseError

FORMAT_CHOICE = click.Choice([AUTO, *sorted(PARSER_BY_FORMAT)])


def load_report(path: Path, format_id: str, config: LcovBridgeConfig) -> Report:
    """Parse a report file, turning library errors into CLI errors."""
    try:
        return parse_artifact(
            path,
            format_id=format_id,
            source_root=config.coverage.java_source_root,
        )
    except (CoverageIOError, CoverageParseError) as e:
        raise click.ClickException(str(e)) from e
