# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Human-readable previews of compiled artifacts.

A preview mirrors the source notation, one field per line::

    hypergraph: (x,y)(a,b,c)
    rule:
      L: (X)
      I: (Y,Z)
      R: (W)
    steps: 3

A nested hypergraph is rendered as an indented block of the same form.
"""

from __future__ import annotations

from hyperlir.model.artifact import Artifact, Hyperedge

# ###############
# Public Interface
# ###############

INDENT = "  "


def render_preview(artifact: Artifact) -> str:
    """Render *artifact* as multi-line text for display."""
    return "\n".join(_preview_lines(artifact, depth=0))


def format_edges(edges: list[Hyperedge]) -> str:
    """Render hyperedges in source notation, e.g. ``(x,y)(a,b,c)``; ``()`` when empty."""
    if not edges:
        return "()"
    return "".join(f"({','.join(edge.vertices)})" for edge in edges)


# ################
# Implementation
# ################


def _preview_lines(artifact: Artifact, depth: int) -> list[str]:
    pad = INDENT * depth
    lines: list[str] = []

    if isinstance(artifact.hypergraph, Artifact):
        lines.append(f"{pad}hypergraph:")
        lines.extend(_preview_lines(artifact.hypergraph, depth + 1))
    else:
        lines.append(f"{pad}hypergraph: {format_edges(artifact.hypergraph)}")

    if artifact.rule:
        lines.append(f"{pad}rule:")
        for role, edges in artifact.rule.items():
            lines.append(f"{pad}{INDENT}{role}: {format_edges(edges)}")
    else:
        lines.append(f"{pad}rule: -")

    steps = "-" if artifact.steps is None else str(artifact.steps)
    lines.append(f"{pad}steps: {steps}")
    return lines
