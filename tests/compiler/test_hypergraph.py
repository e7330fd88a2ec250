# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for hypergraph compilation, including state-on-state nesting."""

from hyperlir.compiler.hypergraph import compile_hypergraph
from hyperlir.compiler.symbols import SymbolTable, build_symbol_table
from hyperlir.model.artifact import Artifact, Hyperedge
from hyperlir.model.declarations import ArrayDecl, Inline, StateDecl


def _edges(*groups: list[str]) -> list[Hyperedge]:
    return [Hyperedge(vertices=g) for g in groups]


def _table() -> SymbolTable:
    return build_symbol_table(
        [
            ArrayDecl(name="foo", value=[["x"], ["y"]]),
            StateDecl(name="a", source="foo", rule=Inline(value=["p"]), count=2),
            StateDecl(name="b", source="a", rule=Inline(value=["r"])),
            StateDecl(name="c", source="b", rule=Inline(value=["s"]), count=7),
            StateDecl(name="lit", source=[["m", "n"]], rule=Inline(value=["t"])),
        ]
    )


class TestFlatSources:
    def test_literal_groups(self) -> None:
        assert compile_hypergraph([["p"], ["q", "r"]], _table()) == _edges(["p"], ["q", "r"])

    def test_empty_literal(self) -> None:
        assert compile_hypergraph([], _table()) == []

    def test_array_name(self) -> None:
        assert compile_hypergraph("foo", _table()) == _edges(["x"], ["y"])

    def test_unknown_name_is_empty(self) -> None:
        assert compile_hypergraph("nowhere", _table()) == []

    def test_array_takes_precedence_over_state(self) -> None:
        table = build_symbol_table(
            [
                ArrayDecl(name="dup", value=[["arr"]]),
                StateDecl(name="dup", source=[["st"]], rule=Inline(value=["p"])),
            ]
        )
        assert compile_hypergraph("dup", table) == _edges(["arr"])


class TestNesting:
    def test_state_source_is_nested(self) -> None:
        result = compile_hypergraph("a", _table())
        assert result == Artifact(hypergraph=_edges(["x"], ["y"]), rule={}, steps=2, clean=True)

    def test_chain_keeps_one_level_per_link(self) -> None:
        result = compile_hypergraph("b", _table())
        assert isinstance(result, Artifact)
        assert result.steps is None
        assert result.rule == {}
        inner = result.hypergraph
        assert isinstance(inner, Artifact)
        assert inner.steps == 2
        assert inner.hypergraph == _edges(["x"], ["y"])

    def test_nested_literal_state(self) -> None:
        result = compile_hypergraph("lit", _table())
        assert result == Artifact(hypergraph=_edges(["m", "n"]), rule={}, steps=None)

    def test_nested_artifacts_are_clean(self) -> None:
        result = compile_hypergraph("c", _table())
        depth = 0
        while isinstance(result, Artifact):
            assert result.clean is True
            assert result.rule == {}
            result = result.hypergraph
            depth += 1
        assert depth == 3
        assert result == _edges(["x"], ["y"])
