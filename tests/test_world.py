import numpy as np
import pytest

from cometa.components import (
    ColliderComponent,
    MeshRenderable,
    RigidBody,
    Script,
    SpriteRenderable,
    Tag,
    Transform,
)
from cometa.mesh import Mesh
from cometa.world import Entity, World


def test_entity_uids_increase():
    first = Entity()
    second = Entity()
    assert second.uid > first.uid


def test_entity_default_name_uses_uid():
    entity = Entity()
    assert entity.name == f"Cometa_{entity.uid}"


def test_entity_custom_name():
    assert Entity("ship").name == "ship"


def test_entity_str():
    entity = Entity()
    assert str(entity) == f"Entity UID: {entity.uid}\n"


def test_entity_equality_by_uid():
    entity = Entity()
    other = Entity()
    assert entity == entity
    assert entity != other
    assert len({entity, entity, other}) == 2


def test_entity_without_world_raises():
    entity = Entity()
    with pytest.raises(RuntimeError):
        entity.get_component(Transform)


def test_create_entity_has_transform():
    world = World()
    entity = world.create_entity("player")
    transform = entity.get_component(Transform)
    assert transform is not None
    assert transform.owner is entity
    assert entity.parent_world is world
    assert world.num_entities == 1
    assert world.entities[entity.uid] is entity


def test_component_lifecycle():
    world = World()
    entity = world.create_entity("thing")
    tag = entity.create_component(Tag)
    tag.tag = "enemy"
    assert entity.has_component(Tag)
    assert entity.get_component(Tag).tag == "enemy"
    assert entity.create_component(Tag) is tag
    assert entity.remove_component(Tag) is tag
    assert not entity.has_component(Tag)
    assert entity.get_component(Tag) is None


def test_components_are_separate_per_entity():
    world = World()
    a = world.create_entity("a")
    b = world.create_entity("b")
    a.get_component(Transform).position = np.array([1.0, 2.0, 3.0])
    assert np.allclose(b.get_component(Transform).position, [0.0, 0.0, 0.0])


def test_remove_entity_removes_components():
    world = World()
    keep = world.create_entity("keep")
    gone = world.create_entity("gone")
    gone.create_component(Tag)
    gone.create_component(Script)
    assert world.remove_entity(gone.uid) is True
    registry = world.component_registry
    assert not registry.has_component(gone.uid, Transform)
    assert not registry.has_component(gone.uid, Tag)
    assert not registry.has_component(gone.uid, Script)
    assert registry.has_component(keep.uid, Transform)
    assert gone.uid not in world.entities
    assert world.num_entities == 1


def test_remove_missing_entity_returns_false():
    world = World()
    entity = world.create_entity("x")
    assert world.remove_entity(entity.uid) is True
    assert world.remove_entity(entity.uid) is False


def test_entities_view_is_read_only():
    world = World()
    entity = world.create_entity("x")
    with pytest.raises(TypeError):
        world.entities[entity.uid + 1000] = entity
    assert entity.uid + 1000 not in world.entities
    assert world.num_entities == 1
    assert world.entities[entity.uid] is entity


def test_world_defaults():
    world = World()
    assert world.uid == -1
    assert world.camera is None
    assert world.num_entities == 0


def test_instance_count_increases():
    before = World.instance_count
    world = World()
    after = World.instance_count
    assert after == before + 1
    assert world.num_entities == 0


def test_describe_lists_components():
    world = World()
    entity = world.create_entity("ship")
    entity.get_component(Transform).position = np.array([1.0, 2.0, 3.0])
    renderable = entity.create_component(MeshRenderable)
    renderable.mesh = Mesh.create_plane()
    entity.create_component(SpriteRenderable)
    entity.create_component(ColliderComponent)
    entity.create_component(RigidBody)
    entity.create_component(Tag).tag = "player"

    text = world.describe()
    assert text.startswith("=== WORLD DEBUG INFO ===\n")
    assert text.endswith("=== END WORLD DEBUG INFO ===\n")
    assert f"Entity UID: {entity.uid}, Name: ship" in text
    assert "Number of entities: 1" in text
    assert "  - Transform: Pos(1, 2, 3), Rot(0, 0, 0), Scale(1, 1, 1)" in text
    assert "  - MeshRenderable: Yes" in text
    assert "      - Has mesh" in text
    assert "      - Has material" not in text
    assert "  - SpriteRenderable: Color(1, 1, 1, 1)" in text
    assert "  - Collider: Yes" in text
    assert "  - RigidBody: Yes" in text
    assert "  - Tag: player" in text