# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic analysis for parsed HyperLIR declarations.

Checks that every name used by a rule or state resolves: array references,
rule references and name-valued state sources. This is distinct from the
reference checks in :mod:`hyperlir.validation` (cycles, duplicates, unused
declarations), which operate on declarations already known to resolve.
"""

from __future__ import annotations

from dataclasses import dataclass

from hyperlir.model.declarations import (
    ArrayDecl,
    Declaration,
    RuleDecl,
    RuleRef,
    StateDecl,
    VarRef,
    rule_parts,
)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class SemanticError:
    """A structural error detected during semantic analysis.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


def analyze(
    declarations: list[Declaration],
    states: list[StateDecl] | None = None,
) -> list[SemanticError]:
    """Perform semantic analysis on a declaration sequence.

    Checks performed, in declaration order:
    - Every ``VarRef`` in a rule or state names a declared array.
    - Every ``RuleRef`` in a rule or state names a declared rule.
    - Every state whose source is a name refers to a declared array or state.

    All violations are collected; analysis never stops at the first one.

    Args:
        declarations: The parsed declarations.
        states: The state declarations extracted from *declarations*. When
            omitted they are collected from *declarations*.

    Returns:
        A list of :class:`SemanticError` instances. An empty list means no
        semantic errors were found.
    """
    if states is None:
        states = [d for d in declarations if isinstance(d, StateDecl)]

    array_names = {d.name for d in declarations if isinstance(d, ArrayDecl)}
    rule_names = {d.name for d in declarations if isinstance(d, RuleDecl)}
    state_names = {s.name for s in states}

    errors: list[SemanticError] = []
    for decl in declarations:
        if isinstance(decl, RuleDecl):
            errors.extend(_check_rule_items(f"rule '{decl.name}'", rule_parts(decl.body), array_names, rule_names))
        elif isinstance(decl, StateDecl):
            errors.extend(_check_rule_items(f"state '{decl.name}'", rule_parts(decl.rule), array_names, rule_names))
            if isinstance(decl.source, str) and decl.source not in array_names | state_names:
                errors.append(SemanticError(f"Unknown variable or state '{decl.source}' in state '{decl.name}'"))
    return errors


# ################
# Implementation
# ################


def _check_rule_items(
    ctx: str,
    items: list,
    array_names: set[str],
    rule_names: set[str],
) -> list[SemanticError]:
    """Check that the references among *items* resolve."""
    errors: list[SemanticError] = []
    for item in items:
        if isinstance(item, VarRef) and item.name not in array_names:
            errors.append(SemanticError(f"Unknown variable '{item.name}' in {ctx}"))
        elif isinstance(item, RuleRef) and item.name not in rule_names:
            errors.append(SemanticError(f"Unknown rule '{item.name}' in {ctx}"))
    return errors
