# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Bridge to the external parser.

The DSL grammar lives outside this project. An external parser turns source
text such as::

    foo = (x,y)(a,b,c);
    @grow = (X) -> (Y,Z) -> (W);
    $s = foo <~ @grow 3;

into a JSON array of declaration nodes. This module decodes that tree into
typed declarations, optionally running the parser executable first.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable

from pydantic import TypeAdapter, ValidationError

from hyperlir.model.declarations import Declaration

# ###############
# Public Interface
# ###############

# Turns source text into declarations or raises ParseError.
Parser = Callable[[str], list[Declaration]]


class ParseError(Exception):
    """Raised when source text or a parse tree cannot be turned into declarations."""


def parse_declarations(text: str) -> list[Declaration]:
    """Decode a JSON parse tree into a list of declarations.

    Args:
        text: A JSON array of declaration nodes.

    Returns:
        The declarations in source order.

    Raises:
        ParseError: If *text* is not valid JSON or a node is malformed.
    """
    try:
        return _DECLARATIONS.validate_json(text)
    except ValidationError as exc:
        raise ParseError(f"Invalid declaration tree: {exc}") from exc


def run_parser(command: list[str], source: str, *, timeout: float | None = None) -> list[Declaration]:
    """Run an external parser on *source* and decode its output.

    The parser receives the source text on stdin and must print the JSON
    parse tree on stdout. A non-zero exit is a parse error whose message is
    the parser's stderr.

    Raises:
        ParseError: If the parser cannot be run, fails, or emits a bad tree.
    """
    if not command:
        raise ParseError("No parser command configured")
    try:
        result = subprocess.run(
            command,
            input=source,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as exc:
        raise ParseError(f"Parser executable not found: {command[0]}") from exc
    except subprocess.TimeoutExpired as exc:
        raise ParseError(f"Parser timed out: {' '.join(command)}") from exc
    if result.returncode != 0:
        raise ParseError(result.stderr.strip() or f"Parser exited with status {result.returncode}")
    return parse_declarations(result.stdout)


def make_parser(command: list[str] | None = None) -> Parser:
    """Return a parser that runs *command*, or decodes JSON trees when it is None."""
    if not command:
        return parse_declarations
    return lambda source: run_parser(command, source)


# ################
# Implementation
# ################

_DECLARATIONS: TypeAdapter[list[Declaration]] = TypeAdapter(list[Declaration])
