"""Scene entities with components, signals and a translation/rotation/scale transform."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterator


class Signal:
    """A list of callables invoked in connection order on ``emit``."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Remove ``slot``; raises ValueError if it is not connected."""
        self._slots.remove(slot)

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vector3:
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


@dataclass(frozen=True)
class Quaternion:
    """Rotation quaternion with the scalar part first."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def from_euler_angles(pitch: float, yaw: float, roll: float) -> Quaternion:
        """Build a rotation from angles in degrees about x (pitch), y (yaw) and z (roll)."""
        half_pitch = math.radians(pitch) * 0.5
        half_yaw = math.radians(yaw) * 0.5
        half_roll = math.radians(roll) * 0.5
        c1, s1 = math.cos(half_yaw), math.sin(half_yaw)
        c2, s2 = math.cos(half_roll), math.sin(half_roll)
        c3, s3 = math.cos(half_pitch), math.sin(half_pitch)
        c1c2 = c1 * c2
        s1s2 = s1 * s2
        return Quaternion(
            w=c1c2 * c3 + s1s2 * s3,
            x=c1c2 * s3 + s1s2 * c3,
            y=s1 * c2 * c3 - c1 * s2 * s3,
            z=c1 * s2 * c3 - s1 * c2 * s3,
        )

    def to_euler_angles(self) -> Vector3:
        """Return (pitch, yaw, roll) in degrees; roll is 0 at gimbal lock."""
        w, x, y, z = self.w, self.x, self.y, self.z
        xx, xy, xz, xw = x * x, x * y, x * z, x * w
        yy, yz, yw = y * y, y * z, y * w
        zz, zw = z * z, z * w
        ww = w * w
        length_squared = xx + yy + zz + ww
        if length_squared != 0.0:
            xx, xy, xz, xw = (v / length_squared for v in (xx, xy, xz, xw))
            yy, yz, yw = (v / length_squared for v in (yy, yz, yw))
            zz, zw = zz / length_squared, zw / length_squared

        sin_pitch = max(-1.0, min(1.0, -2.0 * (yz - xw)))
        pitch = math.asin(sin_pitch)
        if -math.pi / 2 < pitch < math.pi / 2:
            yaw = math.atan2(2.0 * (xz + yw), 1.0 - 2.0 * (xx + yy))
            roll = math.atan2(2.0 * (xy + zw), 1.0 - 2.0 * (xx + zz))
        elif pitch <= -math.pi / 2:
            roll = 0.0
            yaw = -math.atan2(-2.0 * (xy - zw), 1.0 - 2.0 * (yy + zz))
        else:
            roll = 0.0
            yaw = math.atan2(-2.0 * (xy - zw), 1.0 - 2.0 * (yy + zz))
        return Vector3(math.degrees(pitch), math.degrees(yaw), math.degrees(roll))

    def length(self) -> float:
        return math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Quaternion:
        size = self.length()
        if size == 0.0:
            return self
        return Quaternion(self.w / size, self.x / size, self.y / size, self.z / size)


class Transform:
    """Translation, rotation and scale of an entity, with Euler-angle access."""

    def __init__(
        self,
        translation: Vector3 = Vector3(),
        rotation: Quaternion = Quaternion(),
        scale: Vector3 = Vector3(1.0, 1.0, 1.0),
    ) -> None:
        self._translation = translation
        self._rotation = rotation
        self._euler = rotation.to_euler_angles()
        self._scale = scale
        self.changed = Signal()

    @property
    def translation(self) -> Vector3:
        return self._translation

    @translation.setter
    def translation(self, value: Vector3) -> None:
        if value != self._translation:
            self._translation = value
            self.changed.emit()

    @property
    def scale(self) -> Vector3:
        return self._scale

    @scale.setter
    def scale(self, value: Vector3) -> None:
        if value != self._scale:
            self._scale = value
            self.changed.emit()

    @property
    def rotation(self) -> Quaternion:
        return self._rotation

    @rotation.setter
    def rotation(self, value: Quaternion) -> None:
        if value != self._rotation:
            self._rotation = value
            self._euler = value.to_euler_angles()
            self.changed.emit()

    @property
    def rotation_x(self) -> float:
        return self._euler.x

    @rotation_x.setter
    def rotation_x(self, degrees: float) -> None:
        self._set_euler(replace(self._euler, x=degrees))

    @property
    def rotation_y(self) -> float:
        return self._euler.y

    @rotation_y.setter
    def rotation_y(self, degrees: float) -> None:
        self._set_euler(replace(self._euler, y=degrees))

    @property
    def rotation_z(self) -> float:
        return self._euler.z

    @rotation_z.setter
    def rotation_z(self, degrees: float) -> None:
        self._set_euler(replace(self._euler, z=degrees))

    def _set_euler(self, euler: Vector3) -> None:
        if euler == self._euler:
            return
        self._euler = euler
        self._rotation = Quaternion.from_euler_angles(*euler)
        self.changed.emit()


class Entity:
    """A node of the scene tree that carries a set of components."""

    def __init__(self, parent: Entity | None = None) -> None:
        self._components: list[Any] = []
        self._children: list[Entity] = []
        self._parent: Entity | None = None
        self.parent = parent

    @property
    def parent(self) -> Entity | None:
        return self._parent

    @parent.setter
    def parent(self, new_parent: Entity | None) -> None:
        if self._parent is not None:
            self._parent._children = [c for c in self._parent._children if c is not self]
        self._parent = new_parent
        if new_parent is not None:
            new_parent._children.append(self)

    @property
    def children(self) -> tuple[Entity, ...]:
        return tuple(self._children)

    @property
    def components(self) -> tuple[Any, ...]:
        return tuple(self._components)

    def add_component(self, component: Any) -> None:
        """Attach ``component`` once; attaching it again or attaching None does nothing."""
        if component is None or any(c is component for c in self._components):
            return
        self._components.append(component)

    def remove_component(self, component: Any) -> None:
        """Detach ``component`` if attached."""
        self._components = [c for c in self._components if c is not component]


class TransformEntity(Entity):
    """An entity that owns a Transform component placed at the origin."""

    def __init__(self, parent: Entity | None = None) -> None:
        super().__init__(parent)
        self.transform_component_changed = Signal()
        self._transform = Transform(translation=Vector3(0.0, 0.0, 0.0))
        self.add_component(self._transform)

    @property
    def transform(self) -> Transform:
        return self._transform

    def set_transform(self, transform: Transform) -> None:
        """Replace the transform component and emit ``transform_component_changed``."""
        self.remove_component(self._transform)
        self.add_component(transform)
        self._transform = transform
        self.transform_component_changed.emit()

    @property
    def translation(self) -> Vector3:
        return self._transform.translation

    @translation.setter
    def translation(self, value: Vector3) -> None:
        self._transform.translation = value

    @property
    def rotation(self) -> Quaternion:
        return self._transform.rotation

    @rotation.setter
    def rotation(self, value: Quaternion) -> None:
        self._transform.rotation = value

    @property
    def scale(self) -> Vector3:
        return self._transform.scale

    @scale.setter
    def scale(self, value: Vector3) -> None:
        self._transform.scale = value