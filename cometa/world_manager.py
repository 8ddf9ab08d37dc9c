"""Holds the worlds by index and drives the scripts of the current one."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .scripting import ScriptManager
from .world import World

logger = logging.getLogger(__name__)


class WorldManager:
    """Registry of worlds with one of them marked as current."""

    def __init__(self, script_manager: Optional[ScriptManager] = None) -> None:
        self.script_manager = script_manager if script_manager is not None else ScriptManager()
        self._worlds: Dict[int, World] = {}
        self._current_world: Optional[World] = None

    @property
    def current_world(self) -> Optional[World]:
        """The current world, or None (with a warning) when none is set."""
        if self._current_world is None:
            logger.warning(
                "[WORLD_MANAGER] Cannot get current world as it has not been assigned"
            )
        return self._current_world

    def init(self) -> None:
        """Start the scripts of the current world."""
        if self._current_world is not None:
            self.script_manager.init_scripts(self._current_world)

    def update(self, delta_time: float) -> None:
        """Update the scripts of the current world."""
        if self._current_world is not None:
            self.script_manager.update_scripts(self._current_world, delta_time)

    def close(self) -> None:
        """Shut down the scripts of the current world."""
        if self._current_world is not None:
            self.script_manager.close_scripts(self._current_world)

    def create_world(self, index: int) -> World:
        """Create a world stored at ``index``, replacing any world there."""
        world = World()
        world.uid = index
        self._worlds[index] = world
        return world

    def get_world(self, index: int) -> Optional[World]:
        """World at ``index``, or None when there is none."""
        world = self._worlds.get(index)
        if world is None:
            logger.info("[WORLD_MANAGER] World doesnt exist at index: %s", index)
        return world

    def add_world(self, world: World, index: int) -> World:
        """Store ``world`` at ``index`` unless one is already there; return the stored one."""
        return self._worlds.setdefault(index, world)

    def set_current_world(self, index: int) -> None:
        """Make the world at ``index`` current and start its scripts."""
        if index not in self._worlds:
            raise KeyError(
                f"Cannot set as current a non-existing world at index: {index}"
            )
        self._current_world = self._worlds[index]
        self.script_manager.init_scripts(self._current_world)