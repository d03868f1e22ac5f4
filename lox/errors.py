"""Structured scanner diagnostics, error reporters, and exception hierarchy for Lox."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Final, Protocol


logger = logging.getLogger(__name__)

UNEXPECTED_CHARACTER: Final[str] = "Unexpected character."
UNTERMINATED_STRING: Final[str] = "Unterminated string."

ERROR_HINTS: Final[dict[str, str]] = {
    "LEX001": "Only ASCII letters, digits, operators and punctuation are valid outside strings.",
    "LEX002": "Close the string with a double quote.",
    "CLI001": "Run lox --help for usage.",
    "CLI002": "Check that the input file exists and is UTF-8 text.",
    "CLI003": "Check that the output directory exists and is writable.",
    "CLI999": "Run with --debug",
}

_MESSAGE_CODES: Final[dict[str, str]] = {
    UNEXPECTED_CHARACTER: "LEX001",
    UNTERMINATED_STRING: "LEX002",
}


@dataclass(frozen=True)
class Diagnostic:
    """Machine-readable diagnostic recorded for one error report."""

    code: str
    message: str
    line: int | None = None
    hint: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize the diagnostic for JSON output."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "hint": self.hint,
        }
        if self.line is not None:
            payload["line"] = self.line
        return payload


class LoxError(Exception):
    """Base error carrying a code and optional source line."""

    def __init__(self, code: str, message: str, line: int | None = None, hint: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.line = line
        self.hint = hint

    def to_diagnostic(self) -> Diagnostic:
        """Convert exception into serializable diagnostic."""
        return Diagnostic(code=self.code, message=self.message, line=self.line, hint=self.hint)

    def __str__(self) -> str:
        if self.line is None:
            return f"[{self.code}] {self.message}"
        return f"[{self.code}] {self.message} (line {self.line})"


class ScanError(LoxError):
    """Raised by strict scanning helpers when errors were reported."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        if not diagnostics:
            raise ValueError("ScanError requires at least one diagnostic.")
        first = diagnostics[0]
        super().__init__(code=first.code, message=first.message, line=first.line, hint=first.hint)
        self.diagnostics = list(diagnostics)


class CLIError(LoxError):
    """Raised by CLI usage or input/output failures; the hint comes from ERROR_HINTS."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(code=code, message=message, hint=ERROR_HINTS.get(code, ""))


class ErrorReporter(Protocol):
    """Sink receiving scanner error reports; must not affect scanning."""

    def report(self, line: int, message: str) -> None:
        """Record one error at a 1-based source line."""
        ...


class DiagnosticCollector:
    """Default in-memory reporter that keeps every report as a Diagnostic."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def report(self, line: int, message: str) -> None:
        code = _MESSAGE_CODES.get(message, "LEX000")
        self.diagnostics.append(Diagnostic(code=code, message=message, line=line, hint=ERROR_HINTS.get(code, "")))
        logger.debug("line %d: %s (%s)", line, message, code)

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)

    def reset(self) -> None:
        self.diagnostics.clear()


def format_diagnostic(diag: Diagnostic) -> str:
    """Format diagnostic into a stable human-readable line."""
    location = "" if diag.line is None else f"[line {diag.line}] "
    hint = f" Hint: {diag.hint}" if diag.hint else ""
    return f"{location}Error {diag.code}: {diag.message}{hint}"
