"""Keyboard controllers that rotate or move bound entities every frame."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace

from sceneview.entity import Entity, Signal, Transform, TransformEntity
from sceneview.keys import Key, KeyboardDevice, KeyNode

DEFAULT_SPEED = 50.0


class _FrameAction:
    """Component that fires ``triggered`` with the elapsed time of each frame."""

    def __init__(self) -> None:
        self.triggered = Signal()

    def trigger(self, delta_time: float) -> None:
        self.triggered.emit(delta_time)


class WASDController(Entity, ABC):
    """Watches four keys and updates the transform of every bound entity each frame."""

    def __init__(
        self,
        keyboard_device: KeyboardDevice | None = None,
        parent: Entity | None = None,
    ) -> None:
        super().__init__(parent)
        self._keyboard = KeyboardDevice() if keyboard_device is None else keyboard_device
        self._frame_action = _FrameAction()
        self._frame_action.triggered.connect(self._on_frame)
        self._entities: list[TransformEntity] = []
        self._w_key = KeyNode(Key.W, self._keyboard, self)
        self._s_key = KeyNode(Key.S, self._keyboard, self)
        self._a_key = KeyNode(Key.A, self._keyboard, self)
        self._d_key = KeyNode(Key.D, self._keyboard, self)
        self.horizontal_speed = DEFAULT_SPEED
        self.vertical_speed = DEFAULT_SPEED

    @property
    def keyboard_device(self) -> KeyboardDevice:
        return self._keyboard

    @property
    def frame_action(self) -> _FrameAction:
        return self._frame_action

    @property
    def bound_entities(self) -> tuple[TransformEntity, ...]:
        return tuple(self._entities)

    def bind_entity(self, entity: TransformEntity) -> None:
        """Drive ``entity`` from this controller; binding twice applies updates twice."""
        self._entities.append(entity)
        entity.add_component(self._frame_action)

    def remove_bind_entity(self, entity: TransformEntity) -> None:
        """Stop driving one binding of ``entity``; unknown entities are ignored."""
        for index, bound in enumerate(self._entities):
            if bound is entity:
                del self._entities[index]
                return

    def frame(self, delta_time: float) -> None:
        """Advance by ``delta_time`` seconds, applying the held keys to bound entities."""
        self._frame_action.trigger(delta_time)

    def _on_frame(self, delta_time: float) -> None:
        for entity in list(self._entities):
            self._apply(entity.transform, delta_time)

    @abstractmethod
    def _apply(self, transform: Transform, delta_time: float) -> None:
        """Update one transform for a frame of ``delta_time`` seconds."""


class WASDRotateController(WASDController):
    """W/S turn about the x axis, A/D about the y axis, in degrees per second."""

    def _apply(self, transform: Transform, delta_time: float) -> None:
        if self._w_key.pressed:
            transform.rotation_x = transform.rotation_x + delta_time * self.vertical_speed
        if self._s_key.pressed:
            transform.rotation_x = transform.rotation_x - delta_time * self.vertical_speed
        if self._a_key.pressed:
            transform.rotation_y = transform.rotation_y + delta_time * self.horizontal_speed
        if self._d_key.pressed:
            transform.rotation_y = transform.rotation_y - delta_time * self.horizontal_speed

    def set_left_rotate_key_code(self, key: int) -> None:
        self._a_key.set_key_code(key)

    def set_right_rotate_key_code(self, key: int) -> None:
        self._d_key.set_key_code(key)

    def set_up_rotate_key_code(self, key: int) -> None:
        self._w_key.set_key_code(key)

    def set_down_rotate_key_code(self, key: int) -> None:
        self._s_key.set_key_code(key)

    def set_rotate_key_code(self, left: int, right: int, up: int, down: int) -> None:
        self.set_left_rotate_key_code(left)
        self.set_right_rotate_key_code(right)
        self.set_up_rotate_key_code(up)
        self.set_down_rotate_key_code(down)


class WASDTranslateController(WASDController):
    """W/S move along -z/+z, A/D along -x/+x; every direction uses the vertical speed."""

    def _apply(self, transform: Transform, delta_time: float) -> None:
        step = delta_time * self.vertical_speed
        if self._w_key.pressed:
            position = transform.translation
            transform.translation = replace(position, z=position.z - step)
        if self._s_key.pressed:
            position = transform.translation
            transform.translation = replace(position, z=position.z + step)
        if self._a_key.pressed:
            position = transform.translation
            transform.translation = replace(position, x=position.x - step)
        if self._d_key.pressed:
            position = transform.translation
            transform.translation = replace(position, x=position.x + step)

    def set_left_translation_key_code(self, key: int) -> None:
        self._a_key.set_key_code(key)

    def set_right_translation_key_code(self, key: int) -> None:
        self._d_key.set_key_code(key)

    def set_forward_translation_key_code(self, key: int) -> None:
        self._w_key.set_key_code(key)

    def set_back_translation_key_code(self, key: int) -> None:
        self._s_key.set_key_code(key)