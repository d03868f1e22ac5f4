"""Lox lexical scanner package."""

from __future__ import annotations

from typing import Any


__all__ = [
    "KEYWORDS",
    "ScanArtifacts",
    "Scanner",
    "Token",
    "TokenType",
    "check_source",
    "scan_file",
    "scan_source",
]


def scan_source(*args: Any, **kwargs: Any):
    from lox.main import scan_source as _scan_source

    return _scan_source(*args, **kwargs)


def scan_file(*args: Any, **kwargs: Any):
    from lox.main import scan_file as _scan_file

    return _scan_file(*args, **kwargs)


def check_source(*args: Any, **kwargs: Any):
    from lox.main import check_source as _check_source

    return _check_source(*args, **kwargs)


def __getattr__(name: str):
    if name == "ScanArtifacts":
        from lox.main import ScanArtifacts

        return ScanArtifacts
    if name == "Scanner":
        from lox.scanner import Scanner

        return Scanner
    if name in ("Token", "TokenType", "KEYWORDS"):
        from lox import tokens

        return getattr(tokens, name)
    raise AttributeError(name)
