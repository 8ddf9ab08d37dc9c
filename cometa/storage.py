"""Per-type component storage and the registry holding one storage per component type."""

from __future__ import annotations

import logging
from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, Type, TypeVar

from .components import (
    ColliderComponent,
    Component,
    DirectionalLight,
    MeshRenderable,
    PointLight,
    RigidBody,
    Script,
    SpriteRenderable,
    Tag,
    Transform,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Component)

COMPONENT_TYPES: Tuple[Type[Component], ...] = (
    Transform,
    MeshRenderable,
    SpriteRenderable,
    PointLight,
    DirectionalLight,
    ColliderComponent,
    RigidBody,
    Script,
    Tag,
)
"""Component types the registry keeps a storage for."""


class ComponentStorage(Generic[T]):
    """Sparse set of components of one type, keyed by entity uid and packed densely."""

    def __init__(self, component_type: Type[T]) -> None:
        self.component_type = component_type
        self._dense: List[T] = []
        self._uids: List[int] = []
        self._sparse: Dict[int, int] = {}

    def _append(self, uid: int, component: T) -> None:
        self._sparse[uid] = len(self._dense)
        self._dense.append(component)
        self._uids.append(uid)

    def create(self, uid: int) -> T:
        """Create a default component for ``uid``, or return the one it already has."""
        existing = self.get(uid)
        if existing is not None:
            logger.info(
                "Entity %s already has a %s component", uid, self.component_type.__name__
            )
            return existing
        component = self.component_type()
        self._append(uid, component)
        return component

    def add(self, uid: int, component: T) -> None:
        """Store ``component`` for ``uid``, replacing any component it had."""
        if not isinstance(component, self.component_type):
            raise TypeError(
                f"expected a {self.component_type.__name__}, "
                f"got {type(component).__name__}"
            )
        index = self._sparse.get(uid)
        if index is None:
            self._append(uid, component)
        else:
            self._dense[index] = component

    def get(self, uid: int) -> Optional[T]:
        """Component of ``uid``, or None when it has none."""
        index = self._sparse.get(uid)
        return None if index is None else self._dense[index]

    def pop(self, uid: int) -> Optional[T]:
        """Remove and return the component of ``uid``; None when it has none."""
        index = self._sparse.pop(uid, None)
        if index is None:
            return None
        removed = self._dense[index]
        last_component = self._dense.pop()
        last_uid = self._uids.pop()
        if index < len(self._dense):
            self._dense[index] = last_component
            self._uids[index] = last_uid
            self._sparse[last_uid] = index
        return removed

    def first(self) -> Optional[T]:
        """First stored component, or None when the storage is empty."""
        return self._dense[0] if self._dense else None

    def items(self) -> Iterator[Tuple[int, T]]:
        """Pairs of entity uid and component, in storage order."""
        return iter(list(zip(self._uids, self._dense)))

    def __contains__(self, uid: object) -> bool:
        return uid in self._sparse

    def __iter__(self) -> Iterator[T]:
        # Iterate over a snapshot so callbacks may add or remove components.
        return iter(list(self._dense))

    def __len__(self) -> int:
        return len(self._dense)


class ComponentRegistry:
    """One component storage for every known component type."""

    def __init__(self) -> None:
        self._storages: Dict[type, ComponentStorage[Any]] = {
            component_type: ComponentStorage(component_type)
            for component_type in COMPONENT_TYPES
        }

    def storage(self, component_type: Type[T]) -> ComponentStorage[T]:
        """Storage for ``component_type`` or for the registered type it derives from."""
        if not isinstance(component_type, type):
            raise TypeError(f"{component_type!r} is not a component type")
        for klass in component_type.__mro__:
            found = self._storages.get(klass)
            if found is not None:
                return found
        raise TypeError(f"no storage for component type {component_type.__name__}")

    def create_component(self, uid: int, component_type: Type[T]) -> T:
        """Create a default component of the given type for ``uid``."""
        return self.storage(component_type).create(uid)

    def add_component(self, uid: int, component: Component) -> None:
        """Store an existing component for ``uid``."""
        self.storage(type(component)).add(uid, component)

    def get_component(self, uid: int, component_type: Type[T]) -> Optional[T]:
        """Component of the given type belonging to ``uid``, or None."""
        return self.storage(component_type).get(uid)

    def remove_component(self, uid: int, component_type: Type[T]) -> Optional[T]:
        """Remove and return the component of the given type belonging to ``uid``."""
        return self.storage(component_type).pop(uid)

    def has_component(self, uid: int, component_type: Type[T]) -> bool:
        """Whether ``uid`` has a component of the given type."""
        return uid in self.storage(component_type)

    def __iter__(self) -> Iterator[ComponentStorage[Any]]:
        return iter(list(self._storages.values()))