# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Expansion of rule items into concrete vertex groups."""

from __future__ import annotations

from hyperlir.compiler.symbols import SymbolTable
from hyperlir.model.declarations import Inline, RuleRef, SeqItem, VarRef, VertexGroup, rule_parts

# ###############
# Public Interface
# ###############


def unfold(item: SeqItem, table: SymbolTable) -> list[VertexGroup]:
    """Expand *item* into the ordered vertex groups it stands for.

    - ``Inline`` yields its single group.
    - ``VarRef`` yields the referenced array's groups.
    - ``RuleRef`` yields the referenced rule's parts, each unfolded in turn
      and concatenated in order (``L``, ``I``, ``R`` for a triple).

    Unknown names yield an empty list; semantic analysis rejects them first.
    The tables are never modified and every call returns fresh lists.
    """
    if isinstance(item, Inline):
        return [list(item.value)]
    if isinstance(item, VarRef):
        return [list(group) for group in table.arrays.get(item.name, [])]
    # RuleRef is the only remaining variant.
    assert isinstance(item, RuleRef)
    rule = table.rules.get(item.name)
    if rule is None:
        return []
    return unfold_all(rule_parts(rule.body), table)


def unfold_all(items: list[SeqItem], table: SymbolTable) -> list[VertexGroup]:
    """Unfold each of *items* and concatenate the results in order."""
    groups: list[VertexGroup] = []
    for item in items:
        groups.extend(unfold(item, table))
    return groups
