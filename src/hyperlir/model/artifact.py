# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiled artifacts: the payload sent to the execution service."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

# Rule roles. A three-part rule uses LEFT/INTERFACE/RIGHT; any other shape
# is emitted under the single RULE key.
LEFT = "L"
INTERFACE = "I"
RIGHT = "R"
RULE = "rule"


class Hyperedge(BaseModel):
    """An ordered collection of vertex labels."""

    vertices: list[str] = _Field(default_factory=list)


class Artifact(BaseModel):
    """One state's hypergraph and the rule to evolve it by.

    Attributes:
        hypergraph: The hyperedges of the state, or a nested artifact when the
            state is built on top of another state.
        rule: Hyperedges keyed by role (``L``/``I``/``R`` or ``rule``).
        steps: Number of rewriting steps, or ``None``.
        clean: Always ``True`` for a freshly compiled artifact.
    """

    hypergraph: list[Hyperedge] | Artifact = _Field(default_factory=list)
    rule: dict[str, list[Hyperedge]] = _Field(default_factory=dict)
    steps: int | None = None
    clean: bool = True


# Resolve the self-reference in Artifact.hypergraph.
Artifact.model_rebuild()
