"""Ready-made scripts: a falling obstacle, a player ship and a simple health script."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import numpy as np

from .camera import Key
from .components import BaseScript, MeshRenderable, RigidBody, Tag, Transform
from .transforms import clamp

logger = logging.getLogger(__name__)

KeyPredicate = Callable[[Key], bool]


def _material_of(entity: Any):
    renderable = entity.get_component(MeshRenderable)
    if renderable is None:
        return None
    return renderable.material


def _tag_of(entity: Any) -> Optional[str]:
    tag = entity.get_component(Tag)
    return None if tag is None else tag.tag


def _remove_from_world(entity: Any) -> None:
    world = entity.parent_world
    if world is not None:
        world.remove_entity(entity.uid)


class _ContactTracking:
    """Keeps count of the collisions a script is currently in and whether it was closed."""

    contacts: int
    closed: bool

    def _enter_contact(self) -> None:
        self.contacts += 1

    def _exit_contact(self) -> None:
        self.contacts = max(0, self.contacts - 1)

    def _mark_closed(self) -> None:
        self.closed = True


class ObstacleScript(_ContactTracking, BaseScript):
    """Obstacle that moves at a set speed and removes itself when out of range or expired."""

    def __init__(self, speed: float = 5.0) -> None:
        self.entity: Any = None
        self.speed = float(speed)
        self.destroy_y_position = -20.0
        self.life_span = 10.0
        self.contacts = 0
        self.closed = False

    def on_init(self) -> None:
        logger.info("[OBSTACLE SCRIPT] Initialized")
        if self.entity is None:
            return
        body = self.entity.get_component(RigidBody)
        if body is not None:
            body.linear_velocity = np.array([0.0, self.speed, 0.0])

    def on_update(self, delta_time: float) -> None:
        if self.entity is None:
            return
        transform = self.entity.get_component(Transform)
        if transform is None:
            return

        if transform.position[1] > self.destroy_y_position:
            _remove_from_world(self.entity)
            return

        body = self.entity.get_component(RigidBody)
        if body is not None:
            x, y, z = (float(v) for v in body.linear_velocity)
            if z != self.speed:
                body.linear_velocity = np.array([x, y, self.speed])

        self.life_span -= delta_time
        if self.life_span <= 0.0:
            _remove_from_world(self.entity)

    def on_close(self) -> None:
        logger.info("[OBSTACLE SCRIPT] Closed")
        self._mark_closed()

    def on_collision_enter(self, other: Any, collision: Any) -> None:
        logger.info("[OBSTACLE SCRIPT] Collision Enter")
        self._enter_contact()
        if self.entity is None or other is None:
            return
        if _tag_of(other) != "player":
            return
        logger.info("[OBSTACLE SCRIPT] Hit player!")
        material = _material_of(self.entity)
        if material is not None:
            material.ambient = (1.0, 0.5, 0.0)
            material.diffuse = (1.0, 0.7, 0.0)
            material.specular = (1.0, 0.9, 0.5)

    def on_collision_exit(self, other: Any, collision: Any) -> None:
        logger.info("[OBSTACLE SCRIPT] Collision Exit")
        self._exit_contact()


class ShipScript(_ContactTracking, BaseScript):
    """Player ship steered left and right within bounds; dies when hit by an obstacle.

    ``is_key_pressed`` tells whether a key is held down; without it no key is.
    """

    def __init__(self, is_key_pressed: Optional[KeyPredicate] = None) -> None:
        self.entity: Any = None
        self.is_key_pressed: KeyPredicate = (
            is_key_pressed if is_key_pressed is not None else frozenset().__contains__
        )
        self.move_speed = 3.0
        self.move_bounds = 5.0
        self.is_alive = True
        self.contacts = 0
        self.closed = False

    def on_init(self) -> None:
        logger.info("[SHIP SCRIPT] Initialized")

    def on_update(self, delta_time: float) -> None:
        if not self.is_alive or self.entity is None:
            return
        transform = self.entity.get_component(Transform)
        if transform is None:
            return

        pressed = self.is_key_pressed
        move_x = 0.0
        if pressed(Key.A) or pressed(Key.LEFT):
            logger.info("[SHIP SCRIPT] Moving left")
            move_x -= 1.0
        if pressed(Key.D) or pressed(Key.RIGHT):
            logger.info("[SHIP SCRIPT] Moving right")
            move_x += 1.0

        if move_x != 0.0:
            new_x = float(transform.position[0]) + move_x * self.move_speed * delta_time
            transform.position[0] = clamp(new_x, -self.move_bounds, self.move_bounds)

    def on_close(self) -> None:
        logger.info("[SHIP SCRIPT] Closed")
        self._mark_closed()

    def on_collision_enter(self, other: Any, collision: Any) -> None:
        logger.info("[SHIP SCRIPT] Collision Enter")
        self._enter_contact()
        if _tag_of(other) != "obstacle":
            return
        logger.info("[SHIP SCRIPT] Hit by obstacle!")
        self.is_alive = False
        if self.entity is None:
            return
        material = _material_of(self.entity)
        if material is not None:
            material.ambient = (0.8, 0.1, 0.1)
            material.diffuse = (0.9, 0.2, 0.2)

    def on_collision_exit(self, other: Any, collision: Any) -> None:
        logger.info("[SHIP SCRIPT] Collision Exit")
        self._exit_contact()


class TestScript(_ContactTracking, BaseScript):
    """Script with a byte-sized health counter that enemies wear down on contact."""

    __test__ = False

    def __init__(self, text: str = "") -> None:
        self.entity: Any = None
        self.text = text
        self.health = 100
        self.max_health = 100
        self.damage = 10
        self.contacts = 0
        self.closed = False

    def on_init(self) -> None:
        logger.info("OnInit %s", self.text)

    def on_update(self, delta_time: float) -> None:
        """Nothing happens per frame."""

    def on_close(self) -> None:
        logger.info("OnClose %s", self.text)
        self._mark_closed()

    def on_collision_enter(self, other: Any, collision: Any) -> None:
        logger.info("[TEST SCRIPT] OnCollisionEnter")
        self._enter_contact()
        if _tag_of(other) == "enemy":
            # Health is an unsigned byte and wraps around below zero.
            self.health = (self.health - self.damage) % 256

    def on_collision_exit(self, other: Any, collision: Any) -> None:
        logger.info("[TEST SCRIPT] OnCollisionExit")
        self._exit_contact()