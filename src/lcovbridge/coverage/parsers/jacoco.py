"""JaCoCo XML format parser.

JaCoCo is the standard Java coverage tool, used via Maven and Gradle.
Per-line data lives in <sourcefile> elements while per-method data lives in
<class> elements, so the two are correlated by name.

Structure:
<report name="...">
  <package name="com/example">
    <class name="com/example/Foo" sourcefilename="Foo.java">
      <method name="bar" desc="()V" line="10">
        <counter type="LINE" missed="5" covered="10"/>
        <counter type="METHOD" missed="0" covered="1"/>
      </method>
    </class>
    <sourcefile name="Foo.java">
      <line nr="10" mi="0" ci="3" mb="1" cb="1"/>
      <counter type="LINE" missed="5" covered="10"/>
      <counter type="BRANCH" missed="1" covered="1"/>
      <counter type="METHOD" missed="0" covered="1"/>
    </sourcefile>
  </package>
</report>
"""

import posixpath
import xml.etree.ElementTree as ET
from pathlib import Path

import structlog

from lcovbridge.core.errors import CoverageIOError, JacocoXMLError
from lcovbridge.coverage.models import (
    Branch,
    Function,
    FunctionExecution,
    Line,
    Overview,
    Report,
    SourceFile,
)

log = structlog.get_logger()

DEFAULT_SOURCE_ROOT = "src/main/java"


def int_attr(element: ET.Element, name: str) -> int:
    """Read an integer attribute; missing or garbled values count as 0."""
    raw = element.get(name)
    if raw is None:
        return 0
    try:
        return int(raw)
    except ValueError:
        log.debug("jacoco.invalid_attribute", element=element.tag, attribute=name, value=raw)
        return 0


def count_counter(overview: Overview, counter: ET.Element) -> None:
    """Fold one <counter> element into an Overview.

    LINE, BRANCH and METHOD counters map onto lines, branches and functions;
    other counter types (INSTRUCTION, COMPLEXITY, CLASS) are ignored.
    """
    covered = int_attr(counter, "covered")
    found = covered + int_attr(counter, "missed")
    kind = counter.get("type")
    if kind == "LINE":
        overview.lines_found += found
        overview.lines_hit += covered
    elif kind == "BRANCH":
        overview.branches_found += found
        overview.branches_hit += covered
    elif kind == "METHOD":
        overview.functions_found += found
        overview.functions_hit += covered


def sourcefile_overview(sourcefile: ET.Element) -> Overview:
    """Sum the counters attached directly to a <sourcefile>."""
    overview = Overview()
    for counter in sourcefile.findall("counter"):
        count_counter(overview, counter)
    return overview


def source_path(package: str, filename: str, source_root: str = DEFAULT_SOURCE_ROOT) -> str:
    """Build the report path of a source file.

    HTML generators resolve report paths against the project directory, so
    package paths are anchored at the conventional Maven/Gradle source root.
    """
    parts = [p for p in (source_root, package, filename) if p]
    return posixpath.join(*parts) if parts else ""


def load_root(data: bytes) -> ET.Element | None:
    """Parse report bytes; None for empty input.

    Raises:
        JacocoXMLError: If the bytes are not well-formed XML.
    """
    if not data.strip():
        return None
    try:
        # expat never fetches the external report.dtd JaCoCo declares
        return ET.fromstring(data)
    # unknown declared encodings surface as LookupError/ValueError from expat
    except (ET.ParseError, LookupError, ValueError) as e:
        raise JacocoXMLError.invalid_xml(str(e)) from e


def _class_name(package: str, filename: str) -> str:
    stem, _ext = posixpath.splitext(filename)
    return f"{package}/{stem}" if package else stem


class JacocoParser:
    """Parser for JaCoCo XML reports."""

    def __init__(self, source_root: str = DEFAULT_SOURCE_ROOT) -> None:
        self.source_root = source_root

    @property
    def format_id(self) -> str:
        return "jacoco"

    def can_parse(self, data: bytes) -> bool:
        """JaCoCo reports have a <report> root carrying counter elements."""
        header = data[:4096].decode("utf-8", errors="ignore")
        return "<report" in header and ("<counter" in header or "<package" in header)

    def parse(self, path: Path) -> Report:
        try:
            data = path.read_bytes()
        except OSError as e:
            raise CoverageIOError.read_failed(str(path), str(e)) from e
        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> Report:
        """Parse JaCoCo XML into a Report.

        Lines collapse to executed/not executed. Branch records are
        synthesized from the per-line covered/missed branch counts, so their
        numbers are positional rather than tied to real decision points.
        """
        report = Report()
        root = load_root(data)
        if root is None:
            log.debug("jacoco.empty_report")
            return report

        for package in root.iter("package"):
            package_name = package.get("name", "")
            classes = package.findall("class")

            for sourcefile in package.findall("sourcefile"):
                filename = sourcefile.get("name", "")
                sf = SourceFile(name=source_path(package_name, filename, self.source_root))

                for line in sourcefile.findall("line"):
                    nr = int_attr(line, "nr")
                    sf.line_information.append(
                        Line(number=nr, executions=1 if int_attr(line, "ci") > 0 else 0)
                    )
                    sf.branch_information.extend(
                        Branch(line=nr, block=0, number=i, executions=1)
                        for i in range(int_attr(line, "cb"))
                    )
                    sf.branch_information.extend(
                        Branch(line=nr, block=0, number=i, executions=0)
                        for i in range(int_attr(line, "mb"))
                    )

                class_name = _class_name(package_name, filename)
                for cls in classes:
                    if cls.get("name") != class_name:
                        continue
                    for method in cls.findall("method"):
                        name = method.get("name", "")
                        sf.function_information.append(
                            Function(name=name, line=int_attr(method, "line"))
                        )
                        executed = any(
                            c.get("type") == "METHOD" and int_attr(c, "covered") > 0
                            for c in method.findall("counter")
                        )
                        sf.function_executions.append(
                            FunctionExecution(name=name, executions=1 if executed else 0)
                        )

                sf.overview = sourcefile_overview(sourcefile)
                report.source_files.append(sf)

        log.debug("jacoco.parsed", source_files=len(report.source_files))
        return report
