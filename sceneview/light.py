"""Point light entities."""

from __future__ import annotations

from dataclasses import dataclass

from sceneview.entity import Entity, Signal, TransformEntity
from sceneview.mesh import Color


@dataclass(eq=False)
class PointLight:
    """A light radiating in every direction from the entity's position."""

    color: Color = Color.WHITE
    intensity: float = 1.0


class PointLightEntity(TransformEntity):
    """An entity holding a point light and a transform."""

    def __init__(self, parent: Entity | None = None) -> None:
        super().__init__(parent)
        self.point_light_changed = Signal()
        self._point_light = PointLight(color=Color.WHITE, intensity=1.0)
        self.add_component(self._point_light)

    @property
    def light_color(self) -> Color:
        return self._point_light.color

    @light_color.setter
    def light_color(self, color: Color) -> None:
        self._point_light.color = color

    @property
    def intensity(self) -> float:
        return self._point_light.intensity

    @intensity.setter
    def intensity(self, value: float) -> None:
        self._point_light.intensity = float(value)

    @property
    def point_light(self) -> PointLight:
        return self._point_light

    def set_point_light(self, point_light: PointLight) -> None:
        """Replace the light component and emit ``point_light_changed``."""
        self.remove_component(self._point_light)
        self.add_component(point_light)
        self._point_light = point_light
        self.point_light_changed.emit()