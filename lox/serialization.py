"""Serialization helpers for token streams and scan artifacts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from lox.main import ScanArtifacts
from lox.tokens import Token


def token_to_dict(token: Token) -> dict[str, Any]:
    """Serialize a token to a JSON-compatible mapping."""
    return {
        "type": token.token_type.name,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
    }


def tokens_to_json(tokens: Iterable[Token], indent: int = 2) -> str:
    """Serialize a token stream to JSON text."""
    return json.dumps([token_to_dict(token) for token in tokens], indent=indent, sort_keys=True)


def artifacts_to_dict(artifacts: ScanArtifacts) -> dict[str, Any]:
    """Serialize tokens and diagnostics of one scan."""
    return {
        "file": artifacts.filename,
        "ok": artifacts.ok,
        "tokens": [token_to_dict(token) for token in artifacts.tokens],
        "diagnostics": [diag.to_dict() for diag in artifacts.diagnostics],
    }


def artifacts_to_json(artifacts: ScanArtifacts, indent: int = 2) -> str:
    return json.dumps(artifacts_to_dict(artifacts), indent=indent, sort_keys=True)


def write_tokens(tokens: Iterable[Token], path: str | Path) -> None:
    """Write serialized token JSON to path."""
    target = Path(path)
    target.write_text(tokens_to_json(tokens), encoding="utf-8")
