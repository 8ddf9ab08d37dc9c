# cometa

The scene and geometry core of a small real-time 3D engine. It computes the
data a renderer needs, such as vertex arrays, attribute pointers, matrices and
shader uniform values, and it runs an entity-component system with scripts
and collision callbacks.

## Modules

- `cometa.datatype`: the `DataType` enum and `data_type_size`,
  `data_type_component_count` and `data_type_gl_enum`. Unknown types give 0 and
  a warning.
- `cometa.layout`: `Layout` (one vertex attribute) and `LayoutBuffer`. The
  buffer works out each layout's offset and the total stride (`size`).
  `attribute_pointers()` returns one `AttributePointer` for each float-typed
  layout. `str()` lists the layouts.
- `cometa.mesh`: `Mesh` holds interleaved vertex floats and triangle indices
  together with their `LayoutBuffer`. It has the builders `Mesh.create_box()`,
  `Mesh.create_sphere(sector_count=36, stack_count=18, radius=0.5)` and
  `Mesh.create_plane()`. `num_vertices` counts vertex floats, not vertices.
- `cometa.transforms`: numpy 4x4 matrix helpers. These are `perspective`,
  `ortho`, `look_at`, `translation`, `scaling` and `euler_rotation`, with
  angles in radians. The module also has `normalize` and `clamp`.
- `cometa.camera`: a fly `Camera` and the `Key` enum.
  `Camera.update(delta_time, pressed_keys, mouse_delta, resolution)` does the
  following:
  - It moves the camera with W/A/S/D and turns it with the mouse, but only
    while `Key.LEFT_ALT` is held.
  - It clamps pitch to ±89°.
  - It rebuilds `projection` and `view`.

  `view_projection()` returns `projection @ view`.
- `cometa.material`: `SimpleMaterial` and `Material`. `Material` keeps its
  diffuse, specular and emission maps as image paths.
  - `texture_units()` packs the maps that are present into units from 0 up.
  - `uniforms()` returns every `material.*` uniform value by name.
- `cometa.components`: the components.
  - `Transform` holds position, rotation in degrees and scale. It has
    `local_matrix()`, and `world_matrix()` for a transform with a parent chain.
  - `MeshRenderable`, `SpriteRenderable`, `PointLight` and `Tag`.
  - `DirectionalLight` caches its `light_space_matrix()` until a direction or
    shadow setting changes.
  - `ColliderComponent`.
  - `RigidBody`, described under "What it does not do".
  - `Script`, which forwards lifecycle and collision events to an attached
    `BaseScript`.
- `cometa.storage`: `ComponentStorage` is a sparse set of one component type
  keyed by entity uid. `ComponentRegistry` holds one storage for each
  component type.
- `cometa.world`: `Entity` and `World`. A new entity always starts with a
  `Transform`. `remove_entity` removes all of the entity's components. The
  world's `describe()` produces a debug listing.
- `cometa.scripting`: `ScriptManager` does two jobs:
  - It runs `on_init`, `on_update` and `on_close` for all scripts in a world.
  - It turns per-pair collision states into `on_collision_enter` and
    `on_collision_exit` calls through `process_collision`.
- `cometa.world_manager`: `WorldManager` stores worlds by index and drives the
  scripts of the current world. `set_current_world` raises `KeyError` for an
  unknown index.
- `cometa.scripts`: three ready-made scripts.
  - `ObstacleScript(speed)` removes its entity once it is out of range or its
    life span runs out.
  - `ShipScript(is_key_pressed)` moves left and right within ±5 and dies when
    it is hit by an entity tagged `"obstacle"`.
  - `TestScript(text)` has a byte-sized health value that loses 10 on each
    contact with an entity tagged `"enemy"`.

## Installation

```
pip install .
```

The only runtime dependency is numpy.

## Example

```python
from cometa.mesh import Mesh
from cometa.world_manager import WorldManager
from cometa.scripting import ScriptManager
from cometa.components import Transform, Tag, Script
from cometa.scripts import TestScript

box = Mesh.create_box()
print(box.describe())

manager = WorldManager(ScriptManager())
world = manager.create_world(0)

player = world.create_entity("player")
player.create_component(Tag).tag = "player"
player.create_component(Script).attach(TestScript("hello"))

manager.set_current_world(0)   # runs on_init of every script in the world
manager.update(1 / 60)         # runs on_update with the frame's delta time

print(player.get_component(Transform).world_matrix())
```

## What it does not do

- It does not open a window, compile shaders, upload buffers or draw. Meshes,
  layouts, matrices and `Material.uniforms()` are plain data for a renderer
  that you supply.
- It does not decode images. Texture maps and sprite textures are only paths.
- It does not read input devices. The camera takes the keys that are pressed
  and the mouse delta as arguments, and `ShipScript` takes a key predicate.
- It has no physics simulation and no collision shapes.
  - `ColliderComponent.collider` can be any object.
  - `RigidBody.init()` needs the owner entity to have a collider that provides
    `calculate_inertia_tensor(mass)` and `calculate_inverse_inertia_tensor(mass)`.
  - Collision states must be passed to `ScriptManager.process_collision`.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```