"""Scene, entity-component and mesh-building core of a small real-time 3D engine: layouts, meshes, matrices, camera, materials, components, worlds and scripts."""

__version__ = "0.1.0"