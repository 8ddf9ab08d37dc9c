import pytest

from cometa.components import BaseScript, Script
from cometa.scripting import ScriptManager
from cometa.world import World
from cometa.world_manager import WorldManager


class Recorder(BaseScript):
    def __init__(self):
        self.events = []

    def on_init(self):
        self.events.append("init")

    def on_update(self, delta_time):
        self.events.append(("update", delta_time))

    def on_close(self):
        self.events.append("close")

    def on_collision_enter(self, other, collision):
        self.events.append("enter")

    def on_collision_exit(self, other, collision):
        self.events.append("exit")


def test_create_and_get_world():
    manager = WorldManager()
    world = manager.create_world(3)
    assert world.uid == 3
    assert manager.get_world(3) is world


def test_get_missing_world_is_none():
    manager = WorldManager()
    assert manager.get_world(42) is None


def test_add_world_keeps_existing():
    manager = WorldManager()
    original = manager.create_world(1)
    other = World()
    assert manager.add_world(other, 1) is original
    assert manager.get_world(1) is original


def test_add_world_to_empty_index():
    manager = WorldManager()
    world = World()
    assert manager.add_world(world, 5) is world
    assert manager.get_world(5) is world


def test_current_world_initially_none():
    manager = WorldManager()
    assert manager.current_world is None


def test_set_current_world_missing_raises():
    manager = WorldManager()
    with pytest.raises(KeyError):
        manager.set_current_world(9)


def test_set_current_world_inits_scripts():
    manager = WorldManager()
    world = manager.create_world(0)
    recorder = Recorder()
    world.create_entity("e").create_component(Script).attach(recorder)
    manager.set_current_world(0)
    assert manager.current_world is world
    assert recorder.events == ["init"]


def test_update_forwards_delta_time():
    manager = WorldManager(ScriptManager())
    world = manager.create_world(0)
    recorder = Recorder()
    world.create_entity("e").create_component(Script).attach(recorder)
    manager.set_current_world(0)
    manager.update(0.25)
    manager.init()
    assert recorder.events == ["init", ("update", 0.25), "init"]


def test_update_without_current_world_does_nothing():
    manager = WorldManager()
    world = manager.create_world(0)
    recorder = Recorder()
    world.create_entity("e").create_component(Script).attach(recorder)
    manager.update(1.0)
    manager.init()
    manager.close()
    assert recorder.events == []


def test_uses_given_script_manager():
    scripts = ScriptManager()
    manager = WorldManager(scripts)
    assert manager.script_manager is scripts