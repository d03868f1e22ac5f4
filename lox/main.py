"""Top-level scanning orchestration for Lox sources."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from lox.errors import Diagnostic, DiagnosticCollector, ErrorReporter, ScanError
from lox.scanner import Scanner
from lox.tokens import Token


@dataclass
class ScanArtifacts:
    """Scanner output for one source: tokens plus collected diagnostics."""

    filename: str
    tokens: list[Token]
    diagnostics: list[Diagnostic]

    @property
    def ok(self) -> bool:
        return not self.diagnostics


def scan_source(
    source: str,
    *,
    filename: str = "<input>",
    reporter: ErrorReporter | None = None,
) -> ScanArtifacts:
    """Scan source text and collect every reported error.

    When ``reporter`` is given, reports are forwarded to it as well as being
    recorded in the returned artifacts.
    """

    collector = DiagnosticCollector()
    sink: ErrorReporter = collector if reporter is None else _TeeReporter(collector, reporter)
    tokens = Scanner(source, sink).scan_tokens()
    return ScanArtifacts(filename=filename, tokens=tokens, diagnostics=list(collector.diagnostics))


def scan_file(path: str | Path, *, strict: bool = False) -> ScanArtifacts:
    """Read a UTF-8 source file and scan it."""
    target = Path(path)
    artifacts = scan_source(target.read_text(encoding="utf-8"), filename=str(target))
    if strict and not artifacts.ok:
        raise ScanError(artifacts.diagnostics)
    return artifacts


def check_source(source: str, *, filename: str = "<input>") -> list[Token]:
    """Scan source and raise ScanError if any error was reported."""
    artifacts = scan_source(source, filename=filename)
    if not artifacts.ok:
        raise ScanError(artifacts.diagnostics)
    return artifacts.tokens


class _TeeReporter:
    """Forwards each report to several reporters in order."""

    def __init__(self, *reporters: ErrorReporter) -> None:
        self._reporters = reporters

    def report(self, line: int, message: str) -> None:
        for reporter in self._reporters:
            reporter.report(line, message)
