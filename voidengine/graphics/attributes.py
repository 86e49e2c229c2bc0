"""Per-vertex attribute lists of a piece of geometry."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Attributes:
    """Vertex positions, normals and texture coordinates."""

    positions: list[tuple[float, float, float]] = field(default_factory=list)
    normals: list[tuple[float, float, float]] = field(default_factory=list)
    uvs: list[tuple[float, float]] = field(default_factory=list)