# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline for HyperLIR programs: symbol tables, analysis, resolution and assembly."""

from hyperlir.compiler.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from hyperlir.compiler.build import (
    CompilationResult,
    CompiledState,
    CompilerError,
    compile_program,
    compile_source,
    compile_state,
    write_artifacts,
)
from hyperlir.compiler.frontend import ParseError, make_parser, parse_declarations, run_parser
from hyperlir.compiler.hypergraph import compile_hypergraph
from hyperlir.compiler.rule import compile_rule, normalize_rule
from hyperlir.compiler.semantic_analysis import SemanticError, analyze
from hyperlir.compiler.symbols import SymbolTable, build_symbol_table
from hyperlir.compiler.unfold import unfold, unfold_all

__all__ = [
    "parse_declarations",
    "run_parser",
    "make_parser",
    "ParseError",
    "SymbolTable",
    "build_symbol_table",
    "analyze",
    "SemanticError",
    "unfold",
    "unfold_all",
    "compile_hypergraph",
    "compile_rule",
    "normalize_rule",
    "compile_state",
    "compile_program",
    "compile_source",
    "write_artifacts",
    "CompilationResult",
    "CompiledState",
    "CompilerError",
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
]
