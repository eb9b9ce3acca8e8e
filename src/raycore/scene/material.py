"""Surface material carried by an entity.

Shading is done by the renderer; this core only stores the material an entity
owns and hands it back with every hit. The fields follow the Phong model the
renderer uses.

Example:
    >>> from src.raycore.scene.material import Material
    >>> red = Material(color=(1.0, 0.2, 0.2), specular=0.3)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Material:
    """Phong surface parameters.

    Attributes:
        color: Surface colour as (R, G, B). Components must be non-negative.
        ambient: Ambient reflection coefficient.
        diffuse: Diffuse reflection coefficient.
        specular: Specular reflection coefficient.
        shininess: Specular exponent (positive).
    """

    color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    def __post_init__(self) -> None:
        if len(self.color) != 3:
            raise ValueError(f"Material color must have 3 components, got {len(self.color)}")
        for i, component in enumerate(self.color):
            if component < 0.0:
                raise ValueError(f"Color component {i} = {component} is negative.")
        for name in ("ambient", "diffuse", "specular"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"Material {name} = {value} is negative.")
        if self.shininess <= 0.0:
            raise ValueError(f"Material shininess = {self.shininess} must be positive.")
