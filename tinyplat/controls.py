"""Keyboard state, buffered key events and the handler that steers the player."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import TYPE_CHECKING, List, Set, Tuple

from tinyplat.goomba import GoombaState
from tinyplat.mario import MarioLevel, MarioState

if TYPE_CHECKING:
    from tinyplat.scene import Scene

log = logging.getLogger(__name__)


class Key(IntEnum):
    """Keyboard scan codes used by the game."""

    ONE = 0x02
    TWO = 0x03
    R = 0x13
    A = 0x1E
    S = 0x1F
    K = 0x25
    UP = 0xC8
    LEFT = 0xCB
    RIGHT = 0xCD
    DOWN = 0xD0


class KeyEventHandler(ABC):
    """Receives the held-key state once per frame and key press/release events."""

    @abstractmethod
    def key_state(self, keyboard: "Keyboard") -> None:
        """React to the keys held down this frame."""

    @abstractmethod
    def on_key_down(self, key: int) -> None:
        """React to a key being pressed."""

    @abstractmethod
    def on_key_up(self, key: int) -> None:
        """React to a key being released."""


class Keyboard:
    """Tracks held keys and buffers press/release events until processed."""

    def __init__(self) -> None:
        self._down: Set[int] = set()
        self._events: List[Tuple[int, bool]] = []

    def press(self, key: int) -> None:
        if key not in self._down:
            self._down.add(key)
            self._events.append((key, True))

    def release(self, key: int) -> None:
        if key in self._down:
            self._down.discard(key)
            self._events.append((key, False))

    def is_key_down(self, key: int) -> bool:
        return key in self._down

    def process(self, handler: KeyEventHandler) -> None:
        """Report the held keys, then every buffered event in order."""
        handler.key_state(self)
        events, self._events = self._events, []
        for key, pressed in events:
            if pressed:
                handler.on_key_down(key)
            else:
                handler.on_key_up(key)


class SampleKeyHandler(KeyEventHandler):
    """Steers the player of a scene: arrows move, A runs, S jumps, DOWN sits."""

    def __init__(self, scene: "Scene") -> None:
        self.scene = scene

    def on_key_down(self, key: int) -> None:
        log.debug("KeyDown: %d", key)
        mario = self.scene.mario
        if key == Key.K:
            self.scene.goomba1.set_state(GoombaState.WALKING)
        elif key == Key.DOWN:
            mario.set_state(MarioState.SIT)
        elif key == Key.S:
            mario.set_state(MarioState.JUMP)
        elif key == Key.ONE:
            mario.set_level(MarioLevel.SMALL)
        elif key == Key.TWO:
            mario.set_level(MarioLevel.BIG)
        elif key == Key.R:
            self.scene.reload()

    def on_key_up(self, key: int) -> None:
        log.debug("KeyUp: %d", key)
        mario = self.scene.mario
        if key == Key.S:
            mario.set_state(MarioState.RELEASE_JUMP)
        elif key == Key.DOWN:
            mario.set_state(MarioState.SIT_RELEASE)

    def key_state(self, keyboard: Keyboard) -> None:
        mario = self.scene.mario
        running = keyboard.is_key_down(Key.A)
        if keyboard.is_key_down(Key.RIGHT):
            mario.set_state(
                MarioState.RUNNING_RIGHT if running else MarioState.WALKING_RIGHT
            )
        elif keyboard.is_key_down(Key.LEFT):
            mario.set_state(
                MarioState.RUNNING_LEFT if running else MarioState.WALKING_LEFT
            )
        else:
            mario.set_state(MarioState.IDLE)