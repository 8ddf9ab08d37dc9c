"""Running entity scripts and turning collision states into enter/exit events."""

from __future__ import annotations

from typing import Any, Dict, Optional

from .components import Script


class ScriptManager:
    """Calls script lifecycle hooks and tracks which entity pairs are colliding."""

    def __init__(self) -> None:
        self._active_collisions: Dict[int, bool] = {}

    def collision_key(self, entity_a: Any, entity_b: Any) -> int:
        """Key for the pair, the same whichever order the entities are given."""
        low, high = sorted((entity_a.uid, entity_b.uid))
        return (low << 32) | high

    def init_scripts(self, world: Any) -> None:
        """Call on_init of every script component in ``world``."""
        if world is None:
            return
        for script in world.component_registry.storage(Script):
            script.on_init()

    def update_scripts(self, world: Any, delta_time: float) -> None:
        """Call on_update of every script component in ``world``."""
        if world is None:
            return
        for script in world.component_registry.storage(Script):
            script.on_update(delta_time)

    def close_scripts(self, world: Any) -> None:
        """Call on_close of every script component in ``world``."""
        if world is None:
            return
        for script in world.component_registry.storage(Script):
            script.on_close()

    def is_colliding(self, entity_a: Any, entity_b: Any) -> bool:
        """Whether the pair is currently recorded as colliding."""
        return self._active_collisions.get(self.collision_key(entity_a, entity_b), False)

    def process_collision(
        self,
        entity_a: Optional[Any],
        entity_b: Optional[Any],
        collision: Any,
        is_colliding: bool,
    ) -> None:
        """Fire enter or exit callbacks on both entities when their contact state changes."""
        if entity_a is None or entity_b is None:
            return
        key = self.collision_key(entity_a, entity_b)
        was_colliding = self._active_collisions.get(key, False)

        if is_colliding and not was_colliding:
            script_a = entity_a.get_component(Script)
            script_b = entity_b.get_component(Script)
            if script_a is not None:
                script_a.on_collision_enter(entity_b, collision)
            if script_b is not None:
                script_b.on_collision_enter(entity_a, collision)
            self._active_collisions[key] = True
        elif not is_colliding and was_colliding:
            script_a = entity_a.get_component(Script)
            script_b = entity_b.get_component(Script)
            if script_a is not None:
                script_a.on_collision_exit(entity_b, collision)
            if script_b is not None:
                script_b.on_collision_exit(entity_a, collision)
            self._active_collisions[key] = False