"""Keyboard keys the game reacts to and the set of keys currently held."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum, auto


class Key(Enum):
    """Keys that have a meaning in the game."""

    A = auto()
    C = auto()
    D = auto()
    R = auto()
    SPACE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SLASH = auto()
    RIGHT_BRACKET = auto()
    F11 = auto()


class KeyStates:
    """The keys held down at the moment."""

    def __init__(self, pressed: Iterable[Key] = ()) -> None:
        self._pressed: set[Key] = set(pressed)

    def press(self, key: Key) -> None:
        self._pressed.add(key)

    def release(self, key: Key) -> None:
        self._pressed.discard(key)

    def is_pressed(self, key: Key) -> bool:
        return key in self._pressed

    def __contains__(self, key: object) -> bool:
        return key in self._pressed

    def __iter__(self) -> Iterator[Key]:
        return iter(sorted(self._pressed, key=lambda k: k.value))

    def __len__(self) -> int:
        return len(self._pressed)

    def __repr__(self) -> str:
        names = ", ".join(key.name for key in self)
        return f"KeyStates({{{names}}})"