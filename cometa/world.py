"""Entities and the world that owns them together with their components."""

from __future__ import annotations

import itertools
import logging
from types import MappingProxyType
from typing import Any, ClassVar, Iterator, Mapping, Optional, Type, TypeVar

from .components import (
    ColliderComponent,
    Component,
    MeshRenderable,
    RigidBody,
    SpriteRenderable,
    Tag,
    Transform,
)
from .storage import ComponentRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Component)


class Entity:
    """Identified object whose components live in its world's registry."""

    _uids: ClassVar[Iterator[int]] = itertools.count(1)

    def __init__(self, name: Optional[str] = None) -> None:
        self.uid: int = next(Entity._uids)
        self.name: str = name if name is not None else f"Cometa_{self.uid}"
        self.parent_world: Optional["World"] = None

    def _registry(self) -> ComponentRegistry:
        if self.parent_world is None:
            raise RuntimeError(f"entity {self.uid} does not belong to a world")
        return self.parent_world.component_registry

    def create_component(self, component_type: Type[T]) -> T:
        """Create a component of the given type for this entity and own it."""
        component = self._registry().create_component(self.uid, component_type)
        component.owner = self
        return component

    def get_component(self, component_type: Type[T]) -> Optional[T]:
        """This entity's component of the given type, or None."""
        return self._registry().get_component(self.uid, component_type)

    def remove_component(self, component_type: Type[T]) -> Optional[T]:
        """Remove and return this entity's component of the given type."""
        return self._registry().remove_component(self.uid, component_type)

    def has_component(self, component_type: Type[T]) -> bool:
        """Whether this entity has a component of the given type."""
        return self._registry().has_component(self.uid, component_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.uid == other.uid

    def __hash__(self) -> int:
        return hash(self.uid)

    def __str__(self) -> str:
        return f"Entity UID: {self.uid}\n"

    def __repr__(self) -> str:
        return f"Entity(uid={self.uid}, name={self.name!r})"


class World:
    """Collection of entities, their components and an optional camera."""

    instance_count: ClassVar[int] = 0

    def __init__(self) -> None:
        World.instance_count += 1
        self._entities: dict[int, Entity] = {}
        self.component_registry = ComponentRegistry()
        self.camera: Any = None
        self.uid: int = -1

    @property
    def entities(self) -> Mapping[int, Entity]:
        """Read-only view of the entities by uid."""
        return MappingProxyType(self._entities)

    @property
    def num_entities(self) -> int:
        return len(self._entities)

    def create_entity(self, name: Optional[str] = None) -> Entity:
        """Create an entity in this world, starting with a Transform component."""
        entity = Entity(name)
        entity.parent_world = self
        self._entities[entity.uid] = entity
        entity.create_component(Transform)
        return entity

    def remove_entity(self, uid: int) -> bool:
        """Delete the entity and all its components; False if it is not in this world."""
        if uid not in self._entities:
            logger.warning(
                "[WORLD] Tried to delete entity that doesnt exist or its not "
                "contained in this world"
            )
            return False
        for storage in self.component_registry:
            storage.pop(uid)
        del self._entities[uid]
        return True

    def describe(self) -> str:
        """Debug listing of the entities and their components."""
        lines = [
            "=== WORLD DEBUG INFO ===",
            f"World instance: {World.instance_count}",
            f"Number of entities: {self.num_entities}",
            "",
            "--- ENTITIES ---",
        ]
        for entity in list(self._entities.values()):
            lines.append(f"Processing entity: {entity.uid}")
            lines.append(f"Entity UID: {entity.uid}, Name: {entity.name}")

            transform = entity.get_component(Transform)
            if transform is not None:
                lines.append(str(transform).rstrip("\n"))

            renderable = entity.get_component(MeshRenderable)
            if renderable is not None:
                lines.append("  - MeshRenderable: Yes")
                if renderable.mesh is not None:
                    lines.append("      - Has mesh")
                if renderable.material is not None:
                    lines.append("      - Has material")

            sprite = entity.get_component(SpriteRenderable)
            if sprite is not None:
                color = ", ".join(f"{float(c):g}" for c in sprite.color)
                lines.append(f"  - SpriteRenderable: Color({color})")

            if entity.has_component(ColliderComponent):
                lines.append("  - Collider: Yes")
            if entity.has_component(RigidBody):
                lines.append("  - RigidBody: Yes")

            tag = entity.get_component(Tag)
            if tag is not None:
                lines.append(f"  - Tag: {tag.tag}")
            lines.append("")
        lines.append("=== END WORLD DEBUG INFO ===")
        return "\n".join(lines) + "\n"