"""Textures, sprites, frame animations and the registries that hold them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, TypeVar, Union

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Texture:
    """An image that sprites are cut from; -1 marks an unknown size."""

    path: str
    width: int = -1
    height: int = -1


@dataclass(frozen=True)
class Sprite:
    """A rectangular region of a texture."""

    id: int
    left: int
    top: int
    right: int
    bottom: int
    texture: Optional[Texture] = None

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


@dataclass(frozen=True)
class AnimationFrame:
    """A sprite shown for ``time`` milliseconds."""

    sprite: Sprite
    time: int


class Animation:
    """A looping sequence of frames driven by a millisecond clock."""

    def __init__(self, default_time: int) -> None:
        self.default_time = default_time
        self.frames: List[AnimationFrame] = []
        self._index = -1
        self._last_frame_time = -1

    def __len__(self) -> int:
        return len(self.frames)

    @property
    def index(self) -> int:
        """Index of the current frame, or -1 before the first render."""
        return self._index

    def add(self, sprite: Sprite, time: int = 0) -> AnimationFrame:
        """Append a frame; a time of 0 uses the default frame time."""
        if sprite is None:
            raise ValueError("an animation frame needs a sprite")
        frame = AnimationFrame(sprite, time if time else self.default_time)
        self.frames.append(frame)
        return frame

    def current_frame(self, now: int) -> AnimationFrame:
        """Advance the animation to time ``now`` and return the frame to show."""
        if not self.frames:
            raise ValueError("animation has no frames")
        if self._index == -1:
            self._index = 0
            self._last_frame_time = now
        elif now - self._last_frame_time > self.frames[self._index].time:
            self._index = (self._index + 1) % len(self.frames)
            self._last_frame_time = now
        return self.frames[self._index]

    def render(self, ctx: "RenderContext", x: float, y: float) -> None:
        """Draw the current frame at (x, y) using the context's clock."""
        ctx.draw(self.current_frame(ctx.now).sprite, x, y)


class _Registry(Generic[T]):
    _kind = "item"

    def __init__(self) -> None:
        self._items: Dict[int, T] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def _lookup(self, key: int) -> T:
        try:
            return self._items[key]
        except KeyError:
            raise KeyError(f"{self._kind} id {key} not found") from None


class TextureRegistry(_Registry[Texture]):
    """Textures by id."""

    _kind = "texture"

    def add(self, texture_id: int, texture: Union[Texture, str]) -> Texture:
        if isinstance(texture, str):
            texture = Texture(texture)
        self._items[texture_id] = texture
        return texture

    def get(self, texture_id: int) -> Texture:
        """Return the texture with this id; raise KeyError if absent."""
        return self._lookup(texture_id)


class SpriteRegistry(_Registry[Sprite]):
    """Sprites by id."""

    _kind = "sprite"

    def add(
        self,
        sprite_id: int,
        left: int,
        top: int,
        right: int,
        bottom: int,
        texture: Optional[Texture],
    ) -> Sprite:
        sprite = Sprite(sprite_id, left, top, right, bottom, texture)
        self._items[sprite_id] = sprite
        return sprite

    def get(self, sprite_id: int) -> Sprite:
        """Return the sprite with this id; raise KeyError if absent."""
        return self._lookup(sprite_id)


class AnimationRegistry(_Registry[Animation]):
    """Animations by id."""

    _kind = "animation"

    def add(self, animation_id: int, animation: Animation) -> Animation:
        if animation_id in self._items:
            log.warning("Animation %d already exists", animation_id)
        self._items[animation_id] = animation
        return animation

    def get(self, animation_id: int) -> Animation:
        """Return the animation with this id; raise KeyError if absent."""
        return self._lookup(animation_id)


@dataclass
class Resources:
    """All asset registries of a game."""

    textures: TextureRegistry = field(default_factory=TextureRegistry)
    sprites: SpriteRegistry = field(default_factory=SpriteRegistry)
    animations: AnimationRegistry = field(default_factory=AnimationRegistry)


@dataclass(frozen=True)
class DrawCommand:
    """One sprite drawn at a position with an opacity."""

    sprite: Sprite
    x: float
    y: float
    alpha: float = 1.0


@dataclass
class RenderContext:
    """Collects the draw commands of a frame together with clock and camera."""

    resources: Resources = field(default_factory=Resources)
    now: int = 0
    cam_x: float = 0.0
    cam_y: float = 0.0
    title: str = ""
    commands: List[DrawCommand] = field(default_factory=list)

    def draw(self, sprite: Sprite, x: float, y: float, alpha: float = 1.0) -> DrawCommand:
        command = DrawCommand(sprite, x, y, alpha)
        self.commands.append(command)
        return command