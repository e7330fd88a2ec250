# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic model for HyperLIR (declarations and compiled artifacts)."""

from hyperlir.model.artifact import INTERFACE, LEFT, RIGHT, RULE, Artifact, Hyperedge
from hyperlir.model.declarations import (
    ArrayDecl,
    Declaration,
    Inline,
    RuleBody,
    RuleDecl,
    RuleRef,
    Sequence,
    SeqItem,
    StateDecl,
    StateRule,
    Triple,
    VarRef,
    VertexGroup,
    rule_parts,
)

__all__ = [
    # Declarations
    "VertexGroup",
    "Inline",
    "VarRef",
    "RuleRef",
    "SeqItem",
    "Triple",
    "Sequence",
    "RuleBody",
    "StateRule",
    "ArrayDecl",
    "RuleDecl",
    "StateDecl",
    "Declaration",
    "rule_parts",
    # Artifacts
    "Hyperedge",
    "Artifact",
    "LEFT",
    "INTERFACE",
    "RIGHT",
    "RULE",
]
