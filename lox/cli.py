"""Command-line interface for the Lox scanner."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from lox.errors import ERROR_HINTS, CLIError, Diagnostic, format_diagnostic
from lox.main import ScanArtifacts, scan_source
from lox.serialization import artifacts_to_json


_LOG = logging.getLogger("lox")


def build_parser() -> argparse.ArgumentParser:
    """Build argparse command tree for the Lox CLI."""
    parser = argparse.ArgumentParser(prog="lox", description="Lox lexical scanner")
    subparsers = parser.add_subparsers(dest="command", required=True)

    tokens_parser = subparsers.add_parser("tokens", help="Scan source and print its token stream")
    tokens_parser.add_argument("input", nargs="?", help="Input .lox file")
    tokens_parser.add_argument("--code", help="Inline Lox source string")
    tokens_parser.add_argument("--json", action="store_true", help="Print tokens and diagnostics as JSON")
    tokens_parser.add_argument("-o", "--output", help="Output file path")
    tokens_parser.add_argument("--debug", action="store_true", help="Emit debug logging to stderr")

    check_parser = subparsers.add_parser("check", help="Report scan errors without printing tokens")
    check_parser.add_argument("input", nargs="?", help="Input .lox file")
    check_parser.add_argument("--code", help="Inline Lox source string")
    check_parser.add_argument("--debug", action="store_true", help="Emit debug logging to stderr")

    return parser


def configure_logging(debug: bool = False) -> None:
    """Attach a stderr handler to the package logger."""
    level = logging.DEBUG if debug or os.environ.get("LOX_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _LOG.addHandler(handler)


def run(argv: list[str] | None = None) -> int:
    """Run CLI and return shell exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    try:
        source, filename = _resolve_source(args.input, args.code)
        artifacts = scan_source(source, filename=filename)
        _LOG.debug("%s: tokens=%d errors=%d", filename, len(artifacts.tokens), len(artifacts.diagnostics))

        if args.command == "tokens":
            rendered = artifacts_to_json(artifacts) + "\n" if args.json else render_tokens(artifacts)
            _write_output(rendered, args.output)
            _print_diagnostics(artifacts)
            return 0 if artifacts.ok else 1

        if artifacts.ok:
            print("OK")
            return 0
        _print_diagnostics(artifacts)
        return 1

    except CLIError as err:
        print(format_diagnostic(err.to_diagnostic()), file=sys.stderr)
        return 2
    except Exception as err:  # pragma: no cover
        _LOG.debug("internal error", exc_info=True)
        diag = Diagnostic(code="CLI999", message=f"Internal error: {err}", hint=ERROR_HINTS["CLI999"])
        print(format_diagnostic(diag), file=sys.stderr)
        return 3


def render_tokens(artifacts: ScanArtifacts) -> str:
    """Render one token per line as ``<line> <token>``."""
    return "".join(f"{token.line:>4} {token}\n" for token in artifacts.tokens)


def _print_diagnostics(artifacts: ScanArtifacts) -> None:
    for diag in artifacts.diagnostics:
        print(format_diagnostic(diag), file=sys.stderr)


def _write_output(rendered: str, output_path: str | None) -> None:
    if not output_path:
        sys.stdout.write(rendered)
        return
    try:
        Path(output_path).write_text(rendered, encoding="utf-8")
    except OSError as err:
        raise CLIError("CLI003", f"Cannot write output: {err}") from err


def _resolve_source(input_path: str | None, inline_code: str | None) -> tuple[str, str]:
    if input_path and inline_code is not None:
        raise CLIError("CLI001", "Use either input file path or --code, not both.")
    if input_path:
        path = Path(input_path)
        try:
            return path.read_text(encoding="utf-8"), str(path)
        except (OSError, UnicodeDecodeError) as err:
            raise CLIError("CLI002", f"Cannot read input: {err}") from err
    if inline_code is not None:
        return inline_code, "<inline>"
    raise CLIError("CLI001", "No source provided. Pass input file path or --code.")


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
