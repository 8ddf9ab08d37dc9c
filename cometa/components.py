"""Entity components: transforms, renderables, lights, physics bodies, tags and scripts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from .material import Material
from .mesh import Mesh
from .transforms import euler_rotation, look_at, normalize, ortho, scaling, translation

Vec3 = Tuple[float, float, float]
Vec4 = Tuple[float, float, float, float]

_WORLD_UP = (0.0, 1.0, 0.0)
_LIGHT_DISTANCE = 10.0


def _as_vec3(values: Sequence[float]) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array


def _as_tuple3(values: Sequence[float]) -> Vec3:
    x, y, z = (float(v) for v in values)
    return (x, y, z)


class BaseScript(ABC):
    """Behaviour attached to an entity through a Script component."""

    entity: Any = None

    @abstractmethod
    def on_init(self) -> None:
        """Called when the world's scripts start."""

    @abstractmethod
    def on_update(self, delta_time: float) -> None:
        """Called once per frame with the elapsed time in seconds."""

    @abstractmethod
    def on_close(self) -> None:
        """Called when the world's scripts stop."""

    @abstractmethod
    def on_collision_enter(self, other: Any, collision: Any) -> None:
        """Called when the entity starts touching ``other``."""

    @abstractmethod
    def on_collision_exit(self, other: Any, collision: Any) -> None:
        """Called when the entity stops touching ``other``."""


@dataclass(eq=False)
class Component:
    """Piece of data or behaviour owned by an entity."""

    owner: Any = field(default=None, kw_only=True, repr=False)

    def init(self) -> None:
        """Prepare the component once it is attached; nothing to do by default."""


@dataclass(eq=False)
class Transform(Component):
    """Position, Euler rotation in degrees and scale, optionally relative to a parent."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    parent: Optional["Transform"] = field(default=None, kw_only=True, repr=False)

    def __post_init__(self) -> None:
        self.position = _as_vec3(self.position)
        self.rotation = _as_vec3(self.rotation)
        self.scale = _as_vec3(self.scale)

    def local_matrix(self) -> np.ndarray:
        """Translation times rotation times scale, relative to the parent."""
        rotation = euler_rotation(np.radians(self.rotation))
        return translation(self.position) @ rotation @ scaling(self.scale)

    def world_matrix(self) -> np.ndarray:
        """Local matrix combined with every ancestor's matrix."""
        if self.parent is None:
            return self.local_matrix()
        return self.parent.world_matrix() @ self.local_matrix()

    def __str__(self) -> str:
        def fmt(vector: np.ndarray) -> str:
            return ", ".join(f"{float(v):g}" for v in vector)

        return (
            f"  - Transform: Pos({fmt(self.position)}), "
            f"Rot({fmt(self.rotation)}), "
            f"Scale({fmt(self.scale)})\n"
        )


@dataclass(eq=False)
class MeshRenderable(Component):
    """Mesh drawn with a material."""

    mesh: Optional[Mesh] = None
    material: Optional[Material] = None


@dataclass(eq=False)
class SpriteRenderable(Component):
    """Flat textured sprite tinted by a colour; the texture is an image path."""

    texture: Optional[str] = None
    color: Vec4 = (1.0, 1.0, 1.0, 1.0)


@dataclass(eq=False)
class PointLight(Component):
    """Light radiating from the owner's position with distance attenuation."""

    ambient: Vec3 = (0.2, 0.2, 0.2)
    diffuse: Vec3 = (0.7, 0.7, 0.7)
    specular: Vec3 = (1.0, 1.0, 1.0)
    constant: float = 1.0
    linear: float = 0.07
    quadratic: float = 0.017


class DirectionalLight(Component):
    """Light shining along one direction, with an orthographic shadow projection."""

    def __init__(
        self,
        *,
        direction: Sequence[float] = (-0.2, -1.0, -0.3),
        ambient: Vec3 = (0.05, 0.05, 0.05),
        diffuse: Vec3 = (0.35, 0.4, 0.35),
        specular: Vec3 = (0.5, 0.5, 0.5),
        shadow_near_plane: float = 1.0,
        shadow_far_plane: float = 25.0,
        shadow_ortho_size: float = 10.0,
        owner: Any = None,
    ) -> None:
        super().__init__(owner=owner)
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self._direction = _as_tuple3(direction)
        self._shadow_near_plane = float(shadow_near_plane)
        self._shadow_far_plane = float(shadow_far_plane)
        self._shadow_ortho_size = float(shadow_ortho_size)
        self._light_space: Optional[np.ndarray] = None

    @property
    def direction(self) -> Vec3:
        return self._direction

    @direction.setter
    def direction(self, value: Sequence[float]) -> None:
        self._direction = _as_tuple3(value)
        self._light_space = None

    @property
    def shadow_near_plane(self) -> float:
        return self._shadow_near_plane

    @shadow_near_plane.setter
    def shadow_near_plane(self, value: float) -> None:
        self._shadow_near_plane = float(value)
        self._light_space = None

    @property
    def shadow_far_plane(self) -> float:
        return self._shadow_far_plane

    @shadow_far_plane.setter
    def shadow_far_plane(self, value: float) -> None:
        self._shadow_far_plane = float(value)
        self._light_space = None

    @property
    def shadow_ortho_size(self) -> float:
        return self._shadow_ortho_size

    @shadow_ortho_size.setter
    def shadow_ortho_size(self, value: float) -> None:
        self._shadow_ortho_size = float(value)
        self._light_space = None

    def light_space_matrix(self) -> np.ndarray:
        """Projection times view of the light, recomputed only after a change."""
        if self._light_space is None:
            size = self._shadow_ortho_size
            projection = ortho(
                -size, size, -size, size,
                self._shadow_near_plane, self._shadow_far_plane,
            )
            light_position = -np.asarray(self._direction) * _LIGHT_DISTANCE
            view = look_at(light_position, (0.0, 0.0, 0.0), _WORLD_UP)
            self._light_space = projection @ view
        return self._light_space.copy()


@dataclass(eq=False)
class ColliderComponent(Component):
    """Holds the collision shape of an entity and whether it only triggers events."""

    collider: Any = None
    is_trigger: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColliderComponent):
            return NotImplemented
        if self.is_trigger != other.is_trigger:
            return False
        if self.collider is None and other.collider is None:
            return True
        if (self.collider is None) != (other.collider is None):
            return False
        if type(self.collider) is not type(other.collider):
            return False
        return self.collider is other.collider


class RigidBody(Component):
    """Linear and angular motion state of a physics body."""

    def __init__(self, *, mass: float = 1.0, owner: Any = None) -> None:
        super().__init__(owner=owner)
        self.linear_velocity = np.zeros(3)
        self.force = np.zeros(3)
        self._mass = float(mass)
        self.torque = np.zeros(3)
        self.angular_velocity = np.zeros(3)
        self.inertia_tensor = np.identity(3)
        self.inverse_inertia_tensor = np.identity(3)
        self.enabled = True
        self.affected_by_gravity = True

    @property
    def mass(self) -> float:
        return self._mass

    @mass.setter
    def mass(self, value: float) -> None:
        self._mass = float(value)
        self.init()

    def init(self) -> None:
        """Take the inertia tensors from the owner's collider for the current mass."""
        if self.owner is None:
            raise RuntimeError("[RIGIDBODY] Rigid body has no owner entity")
        collider_component = self.owner.get_component(ColliderComponent)
        if collider_component is None or collider_component.collider is None:
            raise RuntimeError(
                "[RIGIDBODY] Collider must be set to entity before the rigid body"
            )
        collider = collider_component.collider
        self.inertia_tensor = np.array(
            collider.calculate_inertia_tensor(self._mass), dtype=float
        )
        self.inverse_inertia_tensor = np.array(
            collider.calculate_inverse_inertia_tensor(self._mass), dtype=float
        )

    def reset(self) -> None:
        """Restore the resting state with unit mass, then re-initialise."""
        self.linear_velocity = np.zeros(3)
        self.force = np.zeros(3)
        self._mass = 1.0
        self.enabled = True
        self.torque = np.zeros(3)
        self.angular_velocity = np.zeros(3)
        self.inertia_tensor = np.identity(3)
        self.inverse_inertia_tensor = np.identity(3)
        self.init()

    def set_inertia_tensor(self, tensor: Sequence[Sequence[float]]) -> None:
        """Set the inertia tensor and store its inverse."""
        matrix = np.array(tensor, dtype=float)
        if matrix.shape != (3, 3):
            raise ValueError(f"expected a 3x3 tensor, got shape {matrix.shape}")
        inverse = np.linalg.inv(matrix)
        self.inertia_tensor = matrix
        self.inverse_inertia_tensor = inverse


@dataclass(eq=False)
class Tag(Component):
    """Free-form label used to recognise entities."""

    tag: str = ""


@dataclass(eq=False)
class Script(Component):
    """Slot for one script, forwarding lifecycle and collision events to it."""

    script: Optional[BaseScript] = None

    def attach(self, script: BaseScript) -> None:
        """Attach ``script`` and bind it to this component's owner."""
        self.script = script
        script.entity = self.owner

    def detach(self) -> None:
        """Remove the attached script."""
        self.script = None

    def on_init(self) -> None:
        if self.script is not None:
            self.script.on_init()

    def on_update(self, delta_time: float) -> None:
        if self.script is not None:
            self.script.on_update(delta_time)

    def on_close(self) -> None:
        if self.script is not None:
            self.script.on_close()

    def on_collision_enter(self, other: Any, collision: Any) -> None:
        if self.script is not None:
            self.script.on_collision_enter(other, collision)

    def on_collision_exit(self, other: Any, collision: Any) -> None:
        if self.script is not None:
            self.script.on_collision_exit(other, collision)


__all__ = [
    "BaseScript",
    "Component",
    "Transform",
    "MeshRenderable",
    "SpriteRenderable",
    "PointLight",
    "DirectionalLight",
    "ColliderComponent",
    "RigidBody",
    "Tag",
    "Script",
    "normalize",
]