"""Surface materials: lighting colours, optional texture maps and a shader."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

Vec3 = Tuple[float, float, float]


@dataclass
class SimpleMaterial:
    """Material made only of lighting values, without maps."""

    color: Vec3 = (1.0, 1.0, 1.0)
    ambient: Vec3 = (1.0, 0.5, 0.32)
    diffuse: Vec3 = (1.0, 0.5, 0.32)
    specular: Vec3 = (0.5, 0.5, 0.5)
    shininess: float = 256.0


@dataclass
class Material:
    """Material with lighting values, optional diffuse/specular/emission maps and a shader.

    Maps are held as image paths; giving a path at construction marks the map
    as present.
    """

    color: Vec3 = (1.0, 1.0, 1.0)
    ambient: Vec3 = (1.0, 0.5, 0.32)
    diffuse: Vec3 = (1.0, 0.5, 0.32)
    specular: Vec3 = (0.5, 0.5, 0.5)
    shininess: float = 256.0
    diffuse_map: Optional[str] = None
    specular_map: Optional[str] = None
    emission_map: Optional[str] = None
    has_diffuse_map: bool = False
    has_specular_map: bool = False
    has_emission_map: bool = False
    shader: Any = None

    def __post_init__(self) -> None:
        if self.diffuse_map is not None:
            self.has_diffuse_map = True
        if self.specular_map is not None:
            self.has_specular_map = True
        if self.emission_map is not None:
            self.has_emission_map = True

    def load_diffuse_map(self, path: str) -> None:
        """Use the image at ``path`` as the diffuse map."""
        self.diffuse_map = path
        self.has_diffuse_map = True

    def load_specular_map(self, path: str) -> None:
        """Use the image at ``path`` as the specular map."""
        self.specular_map = path
        self.has_specular_map = True

    def load_emission_map(self, path: str) -> None:
        """Use the image at ``path`` as the emission map."""
        self.emission_map = path
        self.has_emission_map = True

    def set_shader(self, shader: Any) -> None:
        """Attach the shader program this material renders with."""
        self.shader = shader

    def unset_shader(self) -> None:
        """Detach the shader."""
        self.shader = None

    def texture_units(self) -> Dict[str, int]:
        """Texture unit for each present map, packed from unit 0 in diffuse, specular, emission order."""
        units: Dict[str, int] = {}
        if self.has_diffuse_map:
            units["material.diffuseMap"] = 0
        if self.has_specular_map:
            units["material.specularMap"] = int(self.has_diffuse_map)
        if self.has_emission_map:
            units["material.emissionMap"] = int(self.has_diffuse_map) + int(
                self.has_specular_map
            )
        return units

    def uniforms(self) -> Dict[str, Any]:
        """Every shader uniform the material sets, by uniform name, in binding order."""
        values: Dict[str, Any] = {
            "material.hasDiffuseMap": self.has_diffuse_map,
            "material.hasSpecularMap": self.has_specular_map,
            "material.hasEmissionMap": self.has_emission_map,
        }
        values.update(self.texture_units())
        values.update(
            {
                "material.color": self.color,
                "material.ambient": self.ambient,
                "material.diffuse": self.diffuse,
                "material.specular": self.specular,
                "material.shininess": self.shininess,
            }
        )
        return values