"""Tests for the lcovbridge command line."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from lcovbridge import __version__
from lcovbridge.cli.main import cli
from lcovbridge.config import CONFIG_FILE_NAME


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def lcov_file(tmp_path: Path, explore_me_lcov: str) -> Path:
    path = tmp_path / "lcov.info"
    path.write_text(explore_me_lcov)
    return path


@pytest.fixture
def jacoco_file(tmp_path: Path, explore_me_jacoco: bytes) -> Path:
    path = tmp_path / "jacoco.xml"
    path.write_bytes(explore_me_jacoco)
    return path


def invoke(runner: CliRunner, tmp_path: Path, *args: str):
    return runner.invoke(cli, ["--config-dir", str(tmp_path), *args])


class TestVersion:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestConvert:
    """lcovbridge convert."""

    def test_lcov_input_written_next_to_report(
        self, runner: CliRunner, tmp_path: Path, lcov_file: Path
    ) -> None:
        result = invoke(runner, tmp_path, "convert", str(lcov_file))

        assert result.exit_code == 0, result.output
        assert "Created coverage lcov report" in result.output
        content = (tmp_path / "report.lcov").read_text()
        assert content.startswith("SF:com/example/ExploreMe.java\n")
        assert content.endswith("end_of_record\n")

    def test_jacoco_input(self, runner: CliRunner, tmp_path: Path, jacoco_file: Path) -> None:
        result = invoke(runner, tmp_path, "convert", "--no-summary", str(jacoco_file))

        assert result.exit_code == 0, result.output
        content = (tmp_path / "report.lcov").read_text()
        assert content.startswith("SF:src/main/java/com/example/ExploreMe.java\n")
        assert "BRDA:10,0,1,-\n" in content

    def test_output_gets_suffix(self, runner: CliRunner, tmp_path: Path, lcov_file: Path) -> None:
        target = tmp_path / "out" / "coverage"
        result = invoke(runner, tmp_path, "convert", str(lcov_file), "-o", str(target))

        assert result.exit_code == 0, result.output
        assert (tmp_path / "out" / "coverage.lcov").is_file()
        assert not target.exists()

    def test_empty_report_creates_nothing(self, runner: CliRunner, tmp_path: Path) -> None:
        empty = tmp_path / "empty.info"
        empty.write_text("")

        result = invoke(runner, tmp_path, "convert", str(empty))

        assert result.exit_code == 0, result.output
        assert "Coverage report is empty" in result.output
        assert not (tmp_path / "report.lcov").exists()

    def test_malformed_lcov_fails(self, runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.info"
        bad.write_text("SF:a.c\nDA:1\nend_of_record\n")

        result = invoke(runner, tmp_path, "convert", "-f", "lcov", str(bad))

        assert result.exit_code != 0
        assert "LCOV_FIELD_COUNT" in result.output
        assert not (tmp_path / "report.lcov").exists()

    def test_undetectable_format_fails(self, runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "notes.txt"
        bad.write_text("hello world\n")

        result = invoke(runner, tmp_path, "convert", str(bad))

        assert result.exit_code != 0

    def test_unknown_xml_encoding_fails_cleanly(self, runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "jacoco.xml"
        bad.write_bytes(b'<?xml version="1.0" encoding="bogus"?><report><package/></report>')

        result = invoke(runner, tmp_path, "convert", "-f", "jacoco", str(bad))

        assert result.exit_code == 1
        assert "JACOCO_INVALID_XML" in result.output
        assert not isinstance(result.exception, LookupError)

    def test_output_name_from_config(
        self, runner: CliRunner, tmp_path: Path, lcov_file: Path
    ) -> None:
        (tmp_path / CONFIG_FILE_NAME).write_text("coverage:\n  output_name: merged\n")

        result = invoke(runner, tmp_path, "convert", "--no-summary", str(lcov_file))

        assert result.exit_code == 0, result.output
        assert (tmp_path / "merged.lcov").is_file()


class TestSummary:
    """lcovbridge summary."""

    def test_lcov_json(self, runner: CliRunner, tmp_path: Path, lcov_file: Path) -> None:
        result = invoke(runner, tmp_path, "summary", "--json", str(lcov_file))

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["files"][0]["filename"] == "com/example/ExploreMe.java"
        assert data["total"]["lines_found"] == 4
        assert data["total"]["lines_hit"] == 3
        assert data["total"]["branches_hit"] == 1

    def test_jacoco_json(self, runner: CliRunner, tmp_path: Path, jacoco_file: Path) -> None:
        result = invoke(runner, tmp_path, "summary", "--json", str(jacoco_file))

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["files"][0]["filename"] == "src/main/java/com/example/ExploreMe.java"
        assert data["total"] == {
            "functions_found": 2,
            "functions_hit": 2,
            "lines_found": 7,
            "lines_hit": 5,
            "branches_found": 6,
            "branches_hit": 3,
        }

    def test_source_root_from_config(
        self, runner: CliRunner, tmp_path: Path, jacoco_file: Path
    ) -> None:
        (tmp_path / CONFIG_FILE_NAME).write_text("coverage:\n  java_source_root: app/java\n")

        result = invoke(runner, tmp_path, "summary", "--json", str(jacoco_file))

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["files"][0]["filename"] == "app/java/com/example/ExploreMe.java"

    def test_broken_jacoco_gives_empty_summary(self, runner: CliRunner, tmp_path: Path) -> None:
        broken = tmp_path / "jacoco.xml"
        broken.write_text("<report><package")

        result = invoke(runner, tmp_path, "summary", "-f", "jacoco", "--json", str(broken))

        assert result.exit_code == 0
        assert '"files": []' in result.output

    def test_table_output(self, runner: CliRunner, tmp_path: Path, lcov_file: Path) -> None:
        result = invoke(runner, tmp_path, "summary", str(lcov_file))

        assert result.exit_code == 0, result.output
        assert "Coverage Report" in result.output
        assert "Total" in result.output

    def test_invalid_config_fails(self, runner: CliRunner, tmp_path: Path, lcov_file: Path) -> None:
        (tmp_path / CONFIG_FILE_NAME).write_text("logging:\n  level: LOUD\n")

        result = invoke(runner, tmp_path, "summary", str(lcov_file))

        assert result.exit_code != 0
        assert "CONFIG_INVALID_VALUE" in result.output
