"""Base game object and the static scenery objects: bricks, coins, platforms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, NamedTuple, Optional

from tinyplat.animation import RenderContext, Sprite

if TYPE_CHECKING:
    from tinyplat.collision import CollisionEvent

TEX_BBOX = -100
BBOX_ALPHA = 0.25

ANI_BRICK = 10000
BRICK_WIDTH = 16
BRICK_BBOX_WIDTH = 16
BRICK_BBOX_HEIGHT = 16

ANI_COIN = 11000
COIN_WIDTH = 10
COIN_BBOX_WIDTH = 10
COIN_BBOX_HEIGHT = 16


class BoundingBox(NamedTuple):
    """An axis-aligned box as (left, top, right, bottom)."""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


class GameObject(ABC):
    """Something in the world with a position, a speed and a bounding box."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.vx = 0.0
        self.vy = 0.0
        self.nx = 1
        self.state = -1
        self.is_deleted = False

    @abstractmethod
    def get_bounding_box(self) -> BoundingBox:
        """The box used for collision detection."""

    def update(self, dt: int, co_objects: Optional[List["GameObject"]] = None) -> None:
        """Advance the object by ``dt`` milliseconds; static objects stay put."""

    @abstractmethod
    def render(self, ctx: RenderContext) -> None:
        """Draw the object into ``ctx``."""

    def render_bounding_box(self, ctx: RenderContext) -> None:
        """Draw the bounding box translucently, in screen coordinates."""
        texture = ctx.resources.textures.get(TEX_BBOX)
        box = self.get_bounding_box()
        sprite = Sprite(
            TEX_BBOX,
            0,
            0,
            int(box.right) - int(box.left),
            int(box.bottom) - int(box.top),
            texture,
        )
        ctx.draw(sprite, self.x - ctx.cam_x, self.y - ctx.cam_y, BBOX_ALPHA)

    def set_state(self, state: int) -> None:
        self.state = state

    def delete(self) -> None:
        """Mark the object for removal from the scene."""
        self.is_deleted = True

    def is_collidable(self) -> bool:
        """Whether the object looks for collisions while it moves."""
        return False

    def is_blocking(self) -> bool:
        """Whether other objects are pushed back when they hit this one."""
        return True

    def on_no_collision(self, dt: int) -> None:
        """Called when a frame's movement hits nothing."""

    def on_collision_with(self, event: "CollisionEvent") -> None:
        """Called for each collision found during a frame's movement."""


def _centered_box(x: float, y: float, width: float, height: float) -> BoundingBox:
    left = x - width / 2
    top = y - height / 2
    return BoundingBox(left, top, left + width, top + height)


class Brick(GameObject):
    """A solid square block."""

    def get_bounding_box(self) -> BoundingBox:
        return _centered_box(self.x, self.y, BRICK_BBOX_WIDTH, BRICK_BBOX_HEIGHT)

    def render(self, ctx: RenderContext) -> None:
        ctx.resources.animations.get(ANI_BRICK).render(ctx, self.x, self.y)


class Coin(GameObject):
    """A collectable coin that does not block movement."""

    def get_bounding_box(self) -> BoundingBox:
        return _centered_box(self.x, self.y, COIN_BBOX_WIDTH, COIN_BBOX_HEIGHT)

    def render(self, ctx: RenderContext) -> None:
        ctx.resources.animations.get(ANI_COIN).render(ctx, self.x, self.y)
        self.render_bounding_box(ctx)

    def is_blocking(self) -> bool:
        return False


class Platform(GameObject):
    """A horizontal row of cells drawn with begin, middle and end sprites."""

    def __init__(
        self,
        x: float,
        y: float,
        cell_width: float,
        cell_height: float,
        length: int,
        sprite_id_begin: int,
        sprite_id_middle: int,
        sprite_id_end: int,
    ) -> None:
        super().__init__(x, y)
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.length = length
        self.sprite_id_begin = sprite_id_begin
        self.sprite_id_middle = sprite_id_middle
        self.sprite_id_end = sprite_id_end

    def get_bounding_box(self) -> BoundingBox:
        half_cell = self.cell_width / 2
        left = self.x - half_cell
        top = self.y - self.cell_height / 2
        right = left + self.cell_width * self.length - half_cell
        return BoundingBox(left, top, right, top + self.cell_height)

    def render(self, ctx: RenderContext) -> None:
        if self.length <= 0:
            return
        sprites = ctx.resources.sprites
        xx = self.x
        ctx.draw(sprites.get(self.sprite_id_begin), xx, self.y)
        xx += self.cell_width
        for _ in range(self.length - 2):
            ctx.draw(sprites.get(self.sprite_id_middle), xx, self.y)
            xx += self.cell_width
        if self.length > 1:
            ctx.draw(sprites.get(self.sprite_id_end), xx, self.y)