# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Symbol tables for one compilation run."""

from __future__ import annotations

from dataclasses import dataclass, field

from hyperlir.model.declarations import ArrayDecl, Declaration, RuleDecl, StateDecl, VertexGroup

# ###############
# Public Interface
# ###############


@dataclass
class SymbolTable:
    """Lookups built from a declaration sequence.

    Attributes:
        arrays: Array name to its vertex groups.
        rules: Rule name to its declaration.
        states: State declarations in source order (duplicates included).
    """

    arrays: dict[str, list[VertexGroup]] = field(default_factory=dict)
    rules: dict[str, RuleDecl] = field(default_factory=dict)
    states: list[StateDecl] = field(default_factory=list)
    _state_index: dict[str, StateDecl] = field(default_factory=dict, repr=False)

    def state(self, name: str) -> StateDecl | None:
        """Return the last state declared under *name*, or None."""
        return self._state_index.get(name)


def build_symbol_table(declarations: list[Declaration]) -> SymbolTable:
    """Partition *declarations* into array, rule and state lookups.

    No validation is done here. A later declaration with the same name as an
    earlier one in the same namespace replaces it.
    """
    table = SymbolTable()
    for decl in declarations:
        if isinstance(decl, ArrayDecl):
            table.arrays[decl.name] = decl.value
        elif isinstance(decl, RuleDecl):
            table.rules[decl.name] = decl
        else:
            assert isinstance(decl, StateDecl)
            table.states.append(decl)
            table._state_index[decl.name] = decl
    return table
