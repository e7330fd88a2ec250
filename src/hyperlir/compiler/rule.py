# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compilation of a state's rule into the artifact's rule map."""

from __future__ import annotations

from hyperlir.compiler.symbols import SymbolTable
from hyperlir.compiler.unfold import unfold, unfold_all
from hyperlir.model.artifact import INTERFACE, LEFT, RIGHT, RULE, Hyperedge
from hyperlir.model.declarations import RuleRef, SeqItem, StateRule, rule_parts

# ###############
# Public Interface
# ###############


def normalize_rule(rule: StateRule, table: SymbolTable) -> list[SeqItem]:
    """Flatten a state's rule into parts, expanding one level of rule references.

    Each ``RuleRef`` at the top level is replaced by the parts of the rule it
    names (``[L, I, R]`` for a triple, the items of a sequence). Deeper
    references are left for :func:`~hyperlir.compiler.unfold.unfold`.
    """
    parts: list[SeqItem] = []
    for item in rule_parts(rule):
        referenced = table.rules.get(item.name) if isinstance(item, RuleRef) else None
        if referenced is not None:
            parts.extend(rule_parts(referenced.body))
        else:
            parts.append(item)
    return parts


def compile_rule(rule: StateRule, table: SymbolTable) -> dict[str, list[Hyperedge]]:
    """Compile a state's rule into hyperedges keyed by role.

    Exactly three normalized parts are placed under ``L``, ``I`` and ``R``,
    each unfolded on its own. Any other number of parts is unfolded,
    concatenated and placed under the single key ``rule``.
    """
    parts = normalize_rule(rule, table)
    if len(parts) == 3:
        left, interface, right = parts
        return {
            LEFT: _edges(unfold(left, table)),
            INTERFACE: _edges(unfold(interface, table)),
            RIGHT: _edges(unfold(right, table)),
        }
    return {RULE: _edges(unfold_all(parts, table))}


# ################
# Implementation
# ################


def _edges(groups: list[list[str]]) -> list[Hyperedge]:
    return [Hyperedge(vertices=group) for group in groups]
