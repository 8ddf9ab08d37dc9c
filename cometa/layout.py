"""Vertex attribute layouts: positions, sizes, offsets and the total stride."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, NamedTuple

from .datatype import (
    GL_FLOAT,
    DataType,
    data_type_component_count,
    data_type_size,
)

logger = logging.getLogger(__name__)

_FLOAT_TYPES = {DataType.FLOAT, DataType.FLOAT2, DataType.FLOAT3, DataType.FLOAT4}


@dataclass
class Layout:
    """One vertex attribute: shader location, data type and debug name."""

    position: int
    data_type: DataType
    name: str
    size: int = field(init=False)
    offset: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.size = data_type_size(self.data_type)


class AttributePointer(NamedTuple):
    """Arguments describing one enabled vertex attribute pointer."""

    index: int
    component_count: int
    gl_type: int
    normalized: bool
    stride: int
    offset: int


class LayoutBuffer:
    """Ordered set of layouts with computed offsets and total stride."""

    def __init__(self, layouts: Iterable[Layout] | None = None) -> None:
        self._layouts: list[Layout] = list(layouts or ())
        self.size = 0
        if self._layouts:
            self.build()

    def build(self) -> None:
        """Recompute every layout's offset and the total stride."""
        self.size = 0
        if not self._layouts:
            logger.info("Building an empty layout buffer")
            return
        offset = 0
        for layout in self._layouts:
            layout.offset = offset
            offset += layout.size
        self.size = offset

    def add(self, layout: Layout) -> None:
        """Append a layout and rebuild."""
        self._layouts.append(layout)
        self.build()

    def attribute_pointers(self) -> list[AttributePointer]:
        """Attribute pointers for every float layout; other types are skipped."""
        pointers = []
        for layout in self._layouts:
            if layout.data_type not in _FLOAT_TYPES:
                logger.warning(
                    "Layout %s of type %s has no attribute pointer support",
                    layout.name,
                    layout.data_type.name,
                )
                continue
            pointers.append(
                AttributePointer(
                    index=layout.position,
                    component_count=data_type_component_count(layout.data_type),
                    gl_type=GL_FLOAT,
                    normalized=False,
                    stride=self.size,
                    offset=layout.offset,
                )
            )
        return pointers

    def __iter__(self) -> Iterator[Layout]:
        return iter(self._layouts)

    def __len__(self) -> int:
        return len(self._layouts)

    def __str__(self) -> str:
        return "".join(
            f"Layout: {layout.position}\t{layout.name}"
            f"\t type: {layout.data_type.value}"
            f"\t stride: {layout.size}"
            f"\t offset: {layout.offset}\n"
            for layout in self._layouts
        )