# src/bsonjson/infrastructure/io/streams.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Whole-stream input and output for the CLI.

Input is read fully into memory; output is written in one call.
"""

from __future__ import annotations

from pathlib import Path

import typer

__all__ = ["read_input", "write_bytes", "write_line"]


def read_input(path: Path | None = None) -> bytes:
    """Read the whole input.

    Args:
        path: File to read. ``None`` reads standard input until end-of-stream.

    Returns:
        Raw input bytes.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    if path is None:
        return typer.get_binary_stream("stdin").read()
    return path.read_bytes()


def write_bytes(data: bytes) -> None:
    """Write raw bytes to standard output."""
    stdout = typer.get_binary_stream("stdout")
    stdout.write(data)
    stdout.flush()


def write_line(text: str) -> None:
    """Write ``text`` and a trailing newline to standard output."""
    typer.echo(text)
