# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of compiled artifacts.

Artifacts are stored and transmitted as compact JSON in the exact shape the
execution service expects::

    {"hypergraph": [{"vertices": [...]}, ...] | {<nested artifact>},
     "rule": {"L": [...], "I": [...], "R": [...]} | {"rule": [...]},
     "steps": 3 | null,
     "clean": true}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from hyperlir.model.artifact import Artifact, Hyperedge

# ###############
# Public Interface
# ###############

ARTIFACT_SUFFIX = ".hg.json"


def serialize(artifact: Artifact) -> str:
    """Serialize an Artifact to a compact JSON string."""
    return json.dumps(artifact_to_dict(artifact), separators=(",", ":"))


def deserialize(data: str) -> Artifact:
    """Deserialize an Artifact from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`Artifact`.

    Raises:
        ValueError: If the payload is not valid JSON or not an artifact.
    """
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Artifact is not valid JSON: {exc}") from exc
    return _artifact_from_dict(obj)


def artifact_to_dict(artifact: Artifact) -> dict[str, Any]:
    """Return the wire representation of *artifact* as plain Python data."""
    if isinstance(artifact.hypergraph, Artifact):
        hypergraph: Any = artifact_to_dict(artifact.hypergraph)
    else:
        hypergraph = [_edge_to_dict(e) for e in artifact.hypergraph]
    return {
        "hypergraph": hypergraph,
        "rule": {role: [_edge_to_dict(e) for e in edges] for role, edges in artifact.rule.items()},
        "steps": artifact.steps,
        "clean": artifact.clean,
    }


def artifact_path(state_name: str, build_dir: Path) -> Path:
    """Return the path under *build_dir* where the artifact of *state_name* is written."""
    return build_dir / (state_name + ARTIFACT_SUFFIX)


def write_artifact(artifact: Artifact, path: Path) -> None:
    """Write a compiled artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(artifact), encoding="utf-8")


def read_artifact(path: Path) -> Artifact:
    """Read and deserialize a compiled artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################


def _edge_to_dict(edge: Hyperedge) -> dict[str, Any]:
    return {"vertices": list(edge.vertices)}


def _edge_from_dict(obj: Any) -> Hyperedge:
    if not isinstance(obj, dict) or not isinstance(obj.get("vertices"), list):
        raise ValueError(f"Malformed hyperedge: {obj!r}")
    return Hyperedge(vertices=[str(v) for v in obj["vertices"]])


def _artifact_from_dict(obj: Any) -> Artifact:
    if not isinstance(obj, dict):
        raise ValueError(f"Artifact must be a JSON object, got {type(obj).__name__}")
    for key in ("hypergraph", "rule", "steps", "clean"):
        if key not in obj:
            raise ValueError(f"Artifact is missing field '{key}'")

    raw_graph = obj["hypergraph"]
    if isinstance(raw_graph, list):
        hypergraph: list[Hyperedge] | Artifact = [_edge_from_dict(e) for e in raw_graph]
    else:
        hypergraph = _artifact_from_dict(raw_graph)

    raw_rule = obj["rule"]
    if not isinstance(raw_rule, dict):
        raise ValueError(f"Artifact 'rule' must be an object, got {type(raw_rule).__name__}")
    rule = {role: [_edge_from_dict(e) for e in edges] for role, edges in raw_rule.items()}

    steps = obj["steps"]
    if steps is not None and (not isinstance(steps, int) or isinstance(steps, bool)):
        raise ValueError(f"Artifact 'steps' must be an integer or null, got {steps!r}")

    clean = obj["clean"]
    if not isinstance(clean, bool):
        raise ValueError(f"Artifact 'clean' must be a boolean, got {clean!r}")

    return Artifact(hypergraph=hypergraph, rule=rule, steps=steps, clean=clean)
