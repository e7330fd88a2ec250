# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler workflow: from declarations to one artifact per state.

A run goes through these stages, each fed by the previous one:

1. Symbol tables are built from the declarations.
2. Semantic analysis checks that every reference resolves.
3. Reference checks reject state and rule cycles.
4. Each state's source and rule are compiled and assembled into an artifact,
   together with a preview for display.

Any error in stages 2 or 3 aborts the run; no artifact is produced.
Nothing is carried over from one run to the next.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from hyperlir.compiler.artifact import artifact_path, write_artifact
from hyperlir.compiler.frontend import ParseError, Parser, parse_declarations
from hyperlir.compiler.hypergraph import compile_hypergraph
from hyperlir.compiler.rule import compile_rule
from hyperlir.compiler.semantic_analysis import analyze
from hyperlir.compiler.symbols import SymbolTable, build_symbol_table
from hyperlir.model.artifact import Artifact
from hyperlir.model.declarations import Declaration, StateDecl
from hyperlir.validation.checks import ValidationWarning, validate
from hyperlir.views.preview import render_preview

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class CompilerError(Exception):
    """Raised when a program cannot be compiled.

    Covers parse errors, semantic errors and reference cycles.

    Attributes:
        errors: Every error message collected during the failed run.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors if errors is not None else [message]


@dataclass(frozen=True)
class CompiledState:
    """A state's compiled artifact and its display preview."""

    name: str
    artifact: Artifact
    preview: str


@dataclass
class CompilationResult:
    """The outcome of one successful compilation run.

    Attributes:
        states: Compiled states in declaration order.
        warnings: Non-fatal findings of the reference checks.
    """

    states: list[CompiledState] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def artifacts(self) -> dict[str, Artifact]:
        """State name to artifact; a later state of the same name wins."""
        return {state.name: state.artifact for state in self.states}

    @property
    def previews(self) -> list[tuple[str, str]]:
        """Ordered ``(state name, preview)`` pairs for display."""
        return [(state.name, state.preview) for state in self.states]

    def artifact(self, name: str) -> Artifact:
        """Return the artifact compiled for state *name*.

        Raises:
            KeyError: If no state of that name was compiled.
        """
        artifacts = self.artifacts
        if name not in artifacts:
            raise KeyError(name)
        return artifacts[name]


def compile_state(state: StateDecl, table: SymbolTable) -> Artifact:
    """Assemble the artifact of a single state."""
    return Artifact(
        hypergraph=compile_hypergraph(state.source, table),
        rule=compile_rule(state.rule, table),
        steps=state.count,
        clean=True,
    )


def compile_program(declarations: list[Declaration]) -> CompilationResult:
    """Compile a declaration sequence into one artifact per state.

    Args:
        declarations: Parsed declarations in source order.

    Returns:
        A :class:`CompilationResult` holding the artifacts, previews and any
        warnings.

    Raises:
        CompilerError: If semantic analysis or the reference checks report
            errors. All messages are collected in ``errors``.
    """
    table = build_symbol_table(declarations)

    semantic_errors = analyze(declarations, table.states)
    if semantic_errors:
        raise _aggregate("Semantic errors", [e.message for e in semantic_errors])

    checks = validate(declarations)
    if checks.has_errors:
        raise _aggregate("Reference errors", [e.message for e in checks.errors])

    result = CompilationResult(warnings=list(checks.warnings))
    for state in table.states:
        artifact = compile_state(state, table)
        result.states.append(CompiledState(name=state.name, artifact=artifact, preview=render_preview(artifact)))
    logger.debug(
        "Compiled %d state(s) from %d declaration(s) with %d warning(s)",
        len(result.states),
        len(declarations),
        len(result.warnings),
    )
    return result


def compile_source(source: str, parser: Parser = parse_declarations) -> CompilationResult:
    """Parse *source* with *parser* and compile the result.

    Raises:
        CompilerError: On parse errors or any error raised by
            :func:`compile_program`.
    """
    try:
        declarations = parser(source)
    except ParseError as exc:
        raise CompilerError(f"Parse error: {exc}") from exc
    return compile_program(declarations)


def write_artifacts(result: CompilationResult, build_dir: Path) -> list[Path]:
    """Write every artifact of *result* to *build_dir* and return the paths written."""
    paths: list[Path] = []
    for name, artifact in result.artifacts.items():
        path = artifact_path(name, build_dir)
        write_artifact(artifact, path)
        paths.append(path)
    return paths


# ################
# Implementation
# ################


def _aggregate(title: str, messages: list[str]) -> CompilerError:
    lines = "\n".join(f"  {m}" for m in messages)
    return CompilerError(f"{title}:\n{lines}", messages)
