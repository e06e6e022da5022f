# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""bs: BSON decoder and encoder CLI.

Usage:
    bs [--path FILE] < input.json > output.bson     JSON → BSON (default)
    bs --decode [--path FILE] < input.bson          BSON → one line of JSON

Environment:
    BS_LOG_LEVEL   Root log level (default WARNING; --verbose forces DEBUG).
    BS_LOG_JSON    Emit JSON log lines on stderr (default true).

Any failure (I/O, parse, conversion) is fatal: a description is printed on
stderr and the process exits with status 1 without writing to stdout.
"""

from __future__ import annotations

from pathlib import Path

import typer

from bsonjson.adapters.mappers.bson_to_json import bson_to_simple_json
from bsonjson.adapters.mappers.json_to_bson import json_into_bson
from bsonjson.config import get_settings
from bsonjson.domain.exceptions.base import BsonJsonError
from bsonjson.domain.exceptions.codec import MalformedInputError
from bsonjson.domain.exceptions.conversion import ConversionError
from bsonjson.infrastructure.codecs.bson_codec import read_document
from bsonjson.infrastructure.codecs.json_codec import load_json
from bsonjson.infrastructure.io.streams import read_input, write_bytes, write_line
from bsonjson.infrastructure.logging.logger import (
    configure_root_logging,
    get_json_logger,
    set_run_context,
)

log = get_json_logger(__name__)

app = typer.Typer(
    add_completion=False,
    help="bson decoder and encoder CLI",
)


def _fail(headline: str, exc: Exception) -> typer.Exit:
    """Report a fatal error and build the exit signal.

    Args:
        headline: Operator-facing summary of the failed step.
        exc: Underlying error.

    Returns:
        ``typer.Exit`` with status 1, to be raised by the caller.
    """
    details = exc.details if isinstance(exc, BsonJsonError) else {}
    code = exc.code if isinstance(exc, BsonJsonError) else type(exc).__name__
    log.error(
        "run.failed",
        exc_info=exc,
        extra={"extra": {"code": code, "details": details}},
    )
    summary = str(exc).splitlines()[0] if str(exc) else type(exc).__name__
    typer.echo(f"{headline}: {summary}", err=True)
    return typer.Exit(code=1)


def _decode(data: bytes) -> None:
    try:
        document = read_document(data)
    except MalformedInputError as exc:
        raise _fail("Failed to parse given data", exc) from exc
    except ConversionError as exc:
        raise _fail("Failed to generate JSON from BSON", exc) from exc
    try:
        text = bson_to_simple_json(document)
    except (BsonJsonError, RecursionError) as exc:
        raise _fail("Failed to generate JSON from BSON", exc) from exc
    write_line(text)
    log.info("decode.done", extra={"extra": {"bytes_in": len(data), "chars_out": len(text)}})


def _encode(data: bytes) -> None:
    try:
        value = load_json(data)
    except MalformedInputError as exc:
        raise _fail("Failed to parse given data", exc) from exc
    try:
        payload = json_into_bson(value)
    except BsonJsonError as exc:
        raise _fail("Failed to generate BSON from JSON", exc) from exc
    write_bytes(payload)
    log.info("encode.done", extra={"extra": {"bytes_in": len(data), "bytes_out": len(payload)}})


@app.command()
def main(
    path: Path | None = typer.Option(  # noqa: B008
        None,
        "--path",
        "-p",
        dir_okay=False,
        help="Input file. Reads standard input when omitted.",
    ),
    decode: bool = typer.Option(  # noqa: B008
        False,
        "--decode",
        "-d",
        help="Decode BSON into JSON. The default is to encode JSON into BSON.",
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False,
        "--verbose",
        "-v",
        help="Log at DEBUG level on stderr.",
    ),
) -> None:
    """Convert JSON to BSON, or BSON to JSON with ``--decode``."""
    try:
        settings = get_settings()
    except RuntimeError as exc:
        configure_root_logging("DEBUG" if verbose else None)
        raise _fail("Failed to load settings", exc) from exc
    configure_root_logging(
        "DEBUG" if verbose else settings.log_level,
        json_format=settings.log_json,
    )
    mode = "decode" if decode else "encode"
    set_run_context(mode=mode)
    log.debug("run.start", extra={"extra": {"path": str(path) if path else "<stdin>"}})

    try:
        data = read_input(path)
    except OSError as exc:
        raise _fail("Failed to read input", exc) from exc

    if decode:
        _decode(data)
    else:
        _encode(data)


if __name__ == "__main__":
    app()
