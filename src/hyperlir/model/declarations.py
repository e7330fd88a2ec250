# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration nodes produced by the parser: arrays, rules and states."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

# An ordered list of vertex labels; each group sources one hyperedge.
VertexGroup = list[str]


class Inline(BaseModel):
    """A literal vertex group written directly in a rule, e.g. ``(Y,Z)``."""

    type: Literal["inline"] = "inline"
    value: VertexGroup = _Field(default_factory=list)


class VarRef(BaseModel):
    """A reference to a declared array by name."""

    type: Literal["varRef"] = "varRef"
    name: str


class RuleRef(BaseModel):
    """A reference to a declared rule by name (``@name`` in source)."""

    type: Literal["ruleRef"] = "ruleRef"
    name: str


# One element of a rule: a literal group or a reference to an array or rule.
SeqItem = Annotated[Inline | VarRef | RuleRef, _Field(discriminator="type")]


class Triple(BaseModel):
    """A rule split into its Left, Interface and Right parts."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["triple"] = "triple"
    left: SeqItem = _Field(alias="L")
    interface: SeqItem = _Field(alias="I")
    right: SeqItem = _Field(alias="R")


class Sequence(BaseModel):
    """A rule given as a flat, ordered list of items."""

    type: Literal["sequence"] = "sequence"
    items: list[SeqItem] = _Field(default_factory=list)


# The body of a rule. The form is fixed when the node is built and never
# re-derived from the parts it holds.
RuleBody = Annotated[Triple | Sequence, _Field(discriminator="type")]

# What a state may carry after ``<~``: a rule body, one item, or a list of items.
StateRule = Annotated[Triple | Sequence | Inline | VarRef | RuleRef, _Field(discriminator="type")] | list[SeqItem]


class ArrayDecl(BaseModel):
    """``name = (a,b)(c);``: a named sequence of vertex groups."""

    type: Literal["array"] = "array"
    name: str
    value: list[VertexGroup] = _Field(default_factory=list)


class RuleDecl(BaseModel):
    """``@name = ...;``: a named rewriting rule."""

    type: Literal["rule"] = "rule"
    name: str
    body: RuleBody


class StateDecl(BaseModel):
    """``$name = source <~ rule [count];``: a hypergraph paired with a rule.

    Attributes:
        source: Literal vertex groups, or the name of an array or another state.
        rule: The rule to evolve the hypergraph by.
        count: Number of rewriting steps, or ``None`` to leave it to the service.
    """

    type: Literal["state"] = "state"
    name: str
    source: str | list[VertexGroup]
    rule: StateRule
    count: int | None = _Field(default=None, ge=0)


Declaration = Annotated[ArrayDecl | RuleDecl | StateDecl, _Field(discriminator="type")]


def rule_parts(rule: Triple | Sequence | Inline | VarRef | RuleRef | list) -> list[Inline | VarRef | RuleRef]:
    """Flatten a rule body, a single item, or an item list into its parts.

    A triple yields ``[L, I, R]``; a sequence or list yields its items in
    order; a single item yields a one-element list.
    """
    if isinstance(rule, Triple):
        return [rule.left, rule.interface, rule.right]
    if isinstance(rule, Sequence):
        return list(rule.items)
    if isinstance(rule, list):
        return list(rule)
    assert isinstance(rule, Inline | VarRef | RuleRef)
    return [rule]


# Resolve forward references for models built from the annotated unions.
Triple.model_rebuild()
Sequence.model_rebuild()
RuleDecl.model_rebuild()
StateDecl.model_rebuild()
