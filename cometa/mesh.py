"""Mesh geometry: interleaved vertex data, triangle indices and built-in shapes."""

from __future__ import annotations

import math
from typing import Iterable

from .datatype import DataType
from .layout import Layout, LayoutBuffer

_PI = 3.14159265359


def _full_layout() -> LayoutBuffer:
    return LayoutBuffer(
        [
            Layout(0, DataType.FLOAT3, "aPos"),
            Layout(1, DataType.FLOAT3, "aNormal"),
            Layout(2, DataType.FLOAT3, "aColor"),
            Layout(3, DataType.FLOAT2, "aTexCoord"),
        ]
    )


_BOX_VERTICES = (
    # Front face
    -0.5, -0.5, 0.5, 0.0, 0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0,
    0.5, -0.5, 0.5, 0.0, 0.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.0,
    0.5, 0.5, 0.5, 0.0, 0.0, 1.0, 1.0, 0.0, 0.0, 1.0, 1.0,
    -0.5, 0.5, 0.5, 0.0, 0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 1.0,
    # Back face
    -0.5, -0.5, -0.5, 0.0, 0.0, -1.0, 0.0, 1.0, 0.0, 1.0, 0.0,
    -0.5, 0.5, -0.5, 0.0, 0.0, -1.0, 0.0, 1.0, 0.0, 1.0, 1.0,
    0.5, 0.5, -0.5, 0.0, 0.0, -1.0, 0.0, 1.0, 0.0, 0.0, 1.0,
    0.5, -0.5, -0.5, 0.0, 0.0, -1.0, 0.0, 1.0, 0.0, 0.0, 0.0,
    # Top face
    -0.5, 0.5, -0.5, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 1.0,
    -0.5, 0.5, 0.5, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0,
    0.5, 0.5, 0.5, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 0.0,
    0.5, 0.5, -0.5, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0,
    # Bottom face
    -0.5, -0.5, -0.5, 0.0, -1.0, 0.0, 1.0, 1.0, 0.0, 0.0, 1.0,
    0.5, -0.5, -0.5, 0.0, -1.0, 0.0, 1.0, 1.0, 0.0, 1.0, 1.0,
    0.5, -0.5, 0.5, 0.0, -1.0, 0.0, 1.0, 1.0, 0.0, 1.0, 0.0,
    -0.5, -0.5, 0.5, 0.0, -1.0, 0.0, 1.0, 1.0, 0.0, 0.0, 0.0,
    # Right face
    0.5, -0.5, -0.5, 1.0, 0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0,
    0.5, 0.5, -0.5, 1.0, 0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 1.0,
    0.5, 0.5, 0.5, 1.0, 0.0, 0.0, 1.0, 0.0, 1.0, 0.0, 1.0,
    0.5, -0.5, 0.5, 1.0, 0.0, 0.0, 1.0, 0.0, 1.0, 0.0, 0.0,
    # Left face
    -0.5, -0.5, -0.5, -1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 0.0, 0.0,
    -0.5, -0.5, 0.5, -1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 0.0,
    -0.5, 0.5, 0.5, -1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0,
    -0.5, 0.5, -0.5, -1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 0.0, 1.0,
)

_BOX_INDICES = (
    0, 1, 2, 2, 3, 0,
    4, 5, 6, 6, 7, 4,
    8, 9, 10, 10, 11, 8,
    12, 13, 14, 14, 15, 12,
    16, 17, 18, 18, 19, 16,
    20, 21, 22, 22, 23, 20,
)

_PLANE_VERTICES = (
    -0.5, 0.0, -0.5, 0.0, 1.0, 0.0, 0.0, 0.0,
    0.5, 0.0, -0.5, 0.0, 1.0, 0.0, 1.0, 0.0,
    0.5, 0.0, 0.5, 0.0, 1.0, 0.0, 1.0, 1.0,
    -0.5, 0.0, 0.5, 0.0, 1.0, 0.0, 0.0, 1.0,
)

_PLANE_INDICES = (0, 1, 2, 2, 3, 0)


class Mesh:
    """Interleaved vertex floats and triangle indices, described by a layout."""

    def __init__(self, layout: LayoutBuffer | None = None) -> None:
        self.layout = layout if layout is not None else LayoutBuffer()
        self.vertices: list[float] = []
        self.indices: list[int] = []

    @property
    def num_vertices(self) -> int:
        """Number of vertex floats stored (not the number of vertices)."""
        return len(self.vertices)

    @property
    def num_indices(self) -> int:
        return len(self.indices)

    def add_vertices(self, vertices: Iterable[float]) -> None:
        """Append vertex floats."""
        self.vertices.extend(float(v) for v in vertices)

    def add_indices(self, indices: Iterable[int]) -> None:
        """Append triangle indices."""
        self.indices.extend(int(i) for i in indices)

    @classmethod
    def create_box(cls) -> "Mesh":
        """Unit cube centred at the origin with per-face normals, colours and UVs."""
        mesh = cls(_full_layout())
        mesh.add_vertices(_BOX_VERTICES)
        mesh.add_indices(_BOX_INDICES)
        return mesh

    @classmethod
    def create_sphere(
        cls, sector_count: int = 36, stack_count: int = 18, radius: float = 0.5
    ) -> "Mesh":
        """UV sphere made of stacks and sectors."""
        if sector_count < 1 or stack_count < 1:
            raise ValueError("sector_count and stack_count must be at least 1")
        if radius == 0:
            raise ValueError("radius must be non-zero")

        vertices: list[float] = []
        for i in range(stack_count + 1):
            stack_angle = _PI / 2 - i * (_PI / stack_count)
            xy = radius * math.cos(stack_angle)
            z = radius * math.sin(stack_angle)
            for j in range(sector_count + 1):
                sector_angle = j * (2 * _PI / sector_count)
                x = xy * math.cos(sector_angle)
                y = xy * math.sin(sector_angle)
                vertices.extend((x, y, z))
                vertices.extend((x / radius, y / radius, z / radius))
                vertices.extend((1.0, 1.0, 1.0))
                vertices.extend((j / sector_count, i / stack_count))

        indices: list[int] = []
        for i in range(stack_count):
            for j in range(sector_count):
                first = i * (sector_count + 1) + j
                second = first + sector_count + 1
                indices.extend((first, second, first + 1))
                indices.extend((second, second + 1, first + 1))

        mesh = cls(_full_layout())
        mesh.add_vertices(vertices)
        mesh.add_indices(indices)
        return mesh

    @classmethod
    def create_plane(cls) -> "Mesh":
        """Unit square on the XZ plane facing +Y."""
        mesh = cls(
            LayoutBuffer(
                [
                    Layout(0, DataType.FLOAT3, "aPos"),
                    Layout(1, DataType.FLOAT3, "aNormal"),
                    Layout(2, DataType.FLOAT2, "aTexCoord"),
                ]
            )
        )
        mesh.add_vertices(_PLANE_VERTICES)
        mesh.add_indices(_PLANE_INDICES)
        return mesh

    def describe(self) -> str:
        """Listing of every vertex float and index."""
        lines = [f"Vertices: {self.num_vertices}"]
        lines.extend(f"Vertex [{i}] : {v:g}" for i, v in enumerate(self.vertices))
        lines.append(f"Indices: {self.num_indices}")
        lines.extend(f"Indices [{i}] : {v}" for i, v in enumerate(self.indices))
        return "\n".join(lines) + "\n"