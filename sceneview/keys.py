"""Keyboard state and per-key nodes that track whether a key is held."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from sceneview.entity import Signal


class Key(IntEnum):
    """Key codes used by the viewer."""

    SPACE = 0x20
    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A
    ESCAPE = 0x01000000
    LEFT = 0x01000012
    UP = 0x01000013
    RIGHT = 0x01000014
    DOWN = 0x01000015


def _as_key(code: int) -> Key | int:
    try:
        return Key(code)
    except ValueError:
        return code


class KeyboardDevice:
    """Holds the set of pressed keys and announces every change on ``key_changed``."""

    def __init__(self) -> None:
        self._pressed: set[int] = set()
        self.key_changed = Signal()

    @property
    def pressed_keys(self) -> frozenset[int]:
        return frozenset(self._pressed)

    def press(self, key: int) -> None:
        code = int(key)
        if code in self._pressed:
            return
        self._pressed.add(code)
        self.key_changed.emit(code, True)

    def release(self, key: int) -> None:
        code = int(key)
        if code not in self._pressed:
            return
        self._pressed.discard(code)
        self.key_changed.emit(code, False)

    def is_pressed(self, key: int) -> bool:
        return int(key) in self._pressed


class KeyNode:
    """Tracks one key of a keyboard device; ``pressed`` is true while it is held."""

    def __init__(self, key: int, keyboard_device: KeyboardDevice, parent: Any = None) -> None:
        self._key = int(key)
        self._device = keyboard_device
        self.parent = parent
        self.active_changed = Signal()
        self._pressed = keyboard_device.is_pressed(self._key)
        keyboard_device.key_changed.connect(self._on_key_changed)

    @property
    def key(self) -> Key | int:
        return _as_key(self._key)

    @property
    def keyboard_device(self) -> KeyboardDevice:
        return self._device

    @property
    def pressed(self) -> bool:
        return self._pressed

    def set_key_code(self, key: int) -> None:
        """Watch ``key`` instead, taking over its current pressed state."""
        self._key = int(key)
        self._set_active(self._device.is_pressed(self._key))

    def _on_key_changed(self, code: int, pressed: bool) -> None:
        if code == self._key:
            self._set_active(pressed)

    def _set_active(self, active: bool) -> None:
        if active != self._pressed:
            self._pressed = active
            self.active_changed.emit(active)