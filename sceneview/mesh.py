"""Mesh entities: a transformable entity that renders a mesh file with a Phong material."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar

from sceneview.entity import Entity, Signal, TransformEntity


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    WHITE: ClassVar[Color]
    GREEN: ClassVar[Color]

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} component {value} is outside 0..255")


Color.WHITE = Color(255, 255, 255)
Color.GREEN = Color(0, 255, 0)


@dataclass(eq=False)
class Mesh:
    """Renderable geometry loaded from ``source``, a file path or URL."""

    source: str = ""


@dataclass(eq=False)
class PhongMaterial:
    """Phong-shaded material described by its diffuse colour."""

    diffuse: Color = Color.GREEN


class MeshEntity(TransformEntity):
    """An entity holding a mesh, a material and a transform."""

    def __init__(self, parent: Entity | None = None) -> None:
        super().__init__(parent)
        self.mesh_changed = Signal()
        self.material_changed = Signal()
        self._mesh = Mesh()
        self.add_component(self._mesh)
        self._material = PhongMaterial(diffuse=Color.GREEN)
        self.add_component(self._material)

    @property
    def source(self) -> str:
        """Location of the mesh file currently shown."""
        return self._mesh.source

    @source.setter
    def source(self, value: str | os.PathLike[str]) -> None:
        self._mesh.source = os.fspath(value)

    @property
    def mesh(self) -> Mesh:
        return self._mesh

    def set_mesh(self, mesh: Mesh) -> None:
        """Replace the mesh component and emit ``mesh_changed``."""
        self.remove_component(self._mesh)
        self.add_component(mesh)
        self._mesh = mesh
        self.mesh_changed.emit()

    @property
    def material(self) -> PhongMaterial:
        return self._material

    def set_material(self, material: PhongMaterial) -> None:
        """Replace the material component and emit ``material_changed``."""
        self.remove_component(self._material)
        self.add_component(material)
        self._material = material
        self.material_changed.emit()