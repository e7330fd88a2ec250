# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compilation of a state's source into the artifact's hypergraph."""

from __future__ import annotations

from hyperlir.compiler.symbols import SymbolTable
from hyperlir.model.artifact import Artifact, Hyperedge
from hyperlir.model.declarations import VertexGroup

# ###############
# Public Interface
# ###############


def compile_hypergraph(source: str | list[VertexGroup], table: SymbolTable) -> list[Hyperedge] | Artifact:
    """Compile a state source into hyperedges or a nested artifact.

    A literal group list and an array name both become a list of hyperedges.
    The name of another state becomes a nested artifact wrapping that state's
    own hypergraph, with an empty rule and that state's step count, so a
    chain ``$b = $a <~ ...`` keeps one level of nesting per link. Arrays win
    over states when a name is declared as both. An unknown name yields an
    empty list.
    """
    if isinstance(source, list):
        return _edges(source)
    if source in table.arrays:
        return _edges(table.arrays[source])
    state = table.state(source)
    if state is None:
        return []
    return Artifact(
        hypergraph=compile_hypergraph(state.source, table),
        rule={},
        steps=state.count,
        clean=True,
    )


# ################
# Implementation
# ################


def _edges(groups: list[VertexGroup]) -> list[Hyperedge]:
    return [Hyperedge(vertices=list(group)) for group in groups]
