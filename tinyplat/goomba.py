"""Goombas: walking enemies that fall, turn at walls and die when stomped."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import TYPE_CHECKING, Callable, List, Optional

from tinyplat.animation import RenderContext
from tinyplat.collision import process
from tinyplat.objects import BoundingBox, GameObject

if TYPE_CHECKING:
    from tinyplat.collision import CollisionEvent

GOOMBA_GRAVITY = 0.002
GOOMBA_WALKING_SPEED = 0.05

GOOMBA_BBOX_WIDTH = 16
GOOMBA_BBOX_HEIGHT = 14
GOOMBA_BBOX_HEIGHT_DIE = 7

GOOMBA_DIE_TIMEOUT = 500

ANI_GOOMBA_WALKING = 5000
ANI_GOOMBA_DIE = 5001

ANI_GOOMBA1_WALKING = 5100
ANI_GOOMBA1_DIE = 5101


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class GoombaState(IntEnum):
    WALKING = 100
    DIE = 200


class Goomba(GameObject):
    """A walking enemy; it is removed a short while after it dies."""

    ANI_WALKING = ANI_GOOMBA_WALKING
    ANI_DIE = ANI_GOOMBA_DIE

    def __init__(
        self, x: float, y: float, clock: Optional[Callable[[], int]] = None
    ) -> None:
        super().__init__(x, y)
        self._clock = clock or _monotonic_ms
        self.ax = 0.0
        self.ay = GOOMBA_GRAVITY
        self.die_start = -1
        self.set_state(GoombaState.WALKING)

    def get_bounding_box(self) -> BoundingBox:
        height = GOOMBA_BBOX_HEIGHT_DIE if self.state == GoombaState.DIE else GOOMBA_BBOX_HEIGHT
        left = self.x - GOOMBA_BBOX_WIDTH // 2
        top = self.y - height // 2
        return BoundingBox(left, top, left + GOOMBA_BBOX_WIDTH, top + height)

    def update(self, dt: int, co_objects: Optional[List[GameObject]] = None) -> None:
        self.vy += self.ay * dt
        self.vx += self.ax * dt

        if (
            self.state == GoombaState.DIE
            and self._clock() - self.die_start > GOOMBA_DIE_TIMEOUT
        ):
            self.is_deleted = True
            return

        process(self, dt, co_objects)

    def render(self, ctx: RenderContext) -> None:
        ani_id = self.ANI_DIE if self.state == GoombaState.DIE else self.ANI_WALKING
        ctx.resources.animations.get(ani_id).render(ctx, self.x, self.y)
        self.render_bounding_box(ctx)

    def set_state(self, state: int) -> None:
        super().set_state(state)
        if state == GoombaState.DIE:
            self.die_start = self._clock()
            self.y += (GOOMBA_BBOX_HEIGHT - GOOMBA_BBOX_HEIGHT_DIE) // 2
            self.vx = 0.0
            self.vy = 0.0
            self.ay = 0.0
        elif state == GoombaState.WALKING:
            self.vx = -GOOMBA_WALKING_SPEED

    def is_collidable(self) -> bool:
        return True

    def is_blocking(self) -> bool:
        return False

    def on_no_collision(self, dt: int) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt

    def on_collision_with(self, event: "CollisionEvent") -> None:
        if not event.obj.is_blocking():
            return
        # Enemies of the same kind pass through each other.
        if type(event.obj) is type(self):
            return
        if event.ny != 0:
            self.vy = 0.0
        elif event.nx != 0:
            self.vx = -self.vx


class Goomba1(Goomba):
    """A second kind of goomba with its own animations."""

    ANI_WALKING = ANI_GOOMBA1_WALKING
    ANI_DIE = ANI_GOOMBA1_DIE