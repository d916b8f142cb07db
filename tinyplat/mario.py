"""The player character: movement, levels, and collisions with enemies and coins."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from tinyplat.animation import RenderContext
from tinyplat.collision import process
from tinyplat.goomba import Goomba, GoombaState
from tinyplat.objects import BoundingBox, Coin, GameObject

if TYPE_CHECKING:
    from tinyplat.collision import CollisionEvent

MARIO_WALKING_SPEED = 0.1
MARIO_RUNNING_SPEED = 0.2

MARIO_ACCEL_WALK_X = 0.0005
MARIO_ACCEL_RUN_X = 0.0007

MARIO_JUMP_SPEED_Y = 0.5
MARIO_JUMP_RUN_SPEED_Y = 0.6

MARIO_GRAVITY = 0.002

MARIO_JUMP_DEFLECT_SPEED = 0.4

GROUND_Y = 160.0

MARIO_BIG_BBOX_WIDTH = 14
MARIO_BIG_BBOX_HEIGHT = 24
MARIO_BIG_SITTING_BBOX_WIDTH = 14
MARIO_BIG_SITTING_BBOX_HEIGHT = 16

MARIO_SIT_HEIGHT_ADJUST = (MARIO_BIG_BBOX_HEIGHT - MARIO_BIG_SITTING_BBOX_HEIGHT) // 2

MARIO_SMALL_BBOX_WIDTH = 13
MARIO_SMALL_BBOX_HEIGHT = 12

MARIO_UNTOUCHABLE_TIME = 2500

ANI_IDLE_RIGHT = 400
ANI_IDLE_LEFT = 401
ANI_WALKING_RIGHT = 500
ANI_WALKING_LEFT = 501
ANI_RUNNING_RIGHT = 600
ANI_RUNNING_LEFT = 601
ANI_JUMP_WALK_RIGHT = 700
ANI_JUMP_WALK_LEFT = 701
ANI_JUMP_RUN_RIGHT = 800
ANI_JUMP_RUN_LEFT = 801
ANI_SIT_RIGHT = 900
ANI_SIT_LEFT = 901
ANI_BRACE_RIGHT = 1000
ANI_BRACE_LEFT = 1001
ANI_DIE = 999

ANI_SMALL_IDLE_RIGHT = 1100
ANI_SMALL_IDLE_LEFT = 1102
ANI_SMALL_WALKING_RIGHT = 1200
ANI_SMALL_WALKING_LEFT = 1201
ANI_SMALL_RUNNING_RIGHT = 1300
ANI_SMALL_RUNNING_LEFT = 1301
ANI_SMALL_BRACE_RIGHT = 1400
ANI_SMALL_BRACE_LEFT = 1401
ANI_SMALL_JUMP_WALK_RIGHT = 1500
ANI_SMALL_JUMP_WALK_LEFT = 1501
ANI_SMALL_JUMP_RUN_RIGHT = 1600
ANI_SMALL_JUMP_RUN_LEFT = 1601

_BIG_ANIMATIONS: Dict[str, int] = {
    "idle_right": ANI_IDLE_RIGHT,
    "idle_left": ANI_IDLE_LEFT,
    "walking_right": ANI_WALKING_RIGHT,
    "walking_left": ANI_WALKING_LEFT,
    "running_right": ANI_RUNNING_RIGHT,
    "running_left": ANI_RUNNING_LEFT,
    "jump_walk_right": ANI_JUMP_WALK_RIGHT,
    "jump_walk_left": ANI_JUMP_WALK_LEFT,
    "jump_run_right": ANI_JUMP_RUN_RIGHT,
    "jump_run_left": ANI_JUMP_RUN_LEFT,
    "sit_right": ANI_SIT_RIGHT,
    "sit_left": ANI_SIT_LEFT,
    "brace_right": ANI_BRACE_RIGHT,
    "brace_left": ANI_BRACE_LEFT,
}

# Small Mario has no sitting animation of its own.
_SMALL_ANIMATIONS: Dict[str, int] = {
    "idle_right": ANI_SMALL_IDLE_RIGHT,
    "idle_left": ANI_SMALL_IDLE_LEFT,
    "walking_right": ANI_SMALL_WALKING_RIGHT,
    "walking_left": ANI_SMALL_WALKING_LEFT,
    "running_right": ANI_SMALL_RUNNING_RIGHT,
    "running_left": ANI_SMALL_RUNNING_LEFT,
    "jump_walk_right": ANI_SMALL_JUMP_WALK_RIGHT,
    "jump_walk_left": ANI_SMALL_JUMP_WALK_LEFT,
    "jump_run_right": ANI_SMALL_JUMP_RUN_RIGHT,
    "jump_run_left": ANI_SMALL_JUMP_RUN_LEFT,
    "sit_right": ANI_SIT_RIGHT,
    "sit_left": ANI_SIT_LEFT,
    "brace_right": ANI_SMALL_BRACE_RIGHT,
    "brace_left": ANI_SMALL_BRACE_LEFT,
}


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class MarioState(IntEnum):
    DIE = -10
    IDLE = 0
    WALKING_RIGHT = 100
    WALKING_LEFT = 200
    JUMP = 300
    RELEASE_JUMP = 301
    RUNNING_RIGHT = 400
    RUNNING_LEFT = 500
    SIT = 600
    SIT_RELEASE = 601


class MarioLevel(IntEnum):
    SMALL = 1
    BIG = 2


class Mario(GameObject):
    """The player: walks, runs, jumps, sits, stomps goombas and collects coins."""

    def __init__(
        self, x: float, y: float, clock: Optional[Callable[[], int]] = None
    ) -> None:
        super().__init__(x, y)
        self._clock = clock or _monotonic_ms
        self.is_sitting = False
        self.max_vx = 0.0
        self.ax = 0.0
        self.ay = MARIO_GRAVITY
        self.level = MarioLevel.BIG
        self.untouchable = 0
        self.untouchable_start = 0
        self.is_on_platform = False
        self.coin = 0

    def update(self, dt: int, co_objects: Optional[List[GameObject]] = None) -> None:
        self.vy += self.ay * dt
        self.vx += self.ax * dt
        if abs(self.vx) > abs(self.max_vx):
            self.vx = self.max_vx

        if self._clock() - self.untouchable_start > MARIO_UNTOUCHABLE_TIME:
            self.untouchable_start = 0
            self.untouchable = 0

        self.is_on_platform = False
        process(self, dt, co_objects)

    def on_no_collision(self, dt: int) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt

    def on_collision_with(self, event: "CollisionEvent") -> None:
        blocking = event.obj.is_blocking()
        if event.ny != 0 and blocking:
            self.vy = 0.0
            if event.ny < 0:
                self.is_on_platform = True
        elif event.nx != 0 and blocking:
            self.vx = 0.0

        if type(event.obj) is Goomba:
            self._on_collision_with_goomba(event)
        elif isinstance(event.obj, Coin):
            self._on_collision_with_coin(event)

    def _on_collision_with_goomba(self, event: "CollisionEvent") -> None:
        goomba = event.obj
        if event.ny < 0:
            # Jumped on top: kill it and bounce off.
            if goomba.state != GoombaState.DIE:
                goomba.set_state(GoombaState.DIE)
                self.vy = -MARIO_JUMP_DEFLECT_SPEED
        elif self.untouchable == 0 and goomba.state != GoombaState.DIE:
            if self.level > MarioLevel.SMALL:
                self.level = MarioLevel.SMALL
                self.start_untouchable()
            else:
                self.set_state(MarioState.DIE)

    def _on_collision_with_coin(self, event: "CollisionEvent") -> None:
        event.obj.delete()
        self.coin += 1

    def _level_animation_id(self, ids: Dict[str, int]) -> int:
        if not self.is_on_platform:
            kind = "jump_run" if abs(self.ax) == MARIO_ACCEL_RUN_X else "jump_walk"
            return ids[f"{kind}_right" if self.nx >= 0 else f"{kind}_left"]
        if self.is_sitting:
            return ids["sit_right" if self.nx > 0 else "sit_left"]
        if self.vx == 0:
            return ids["idle_right" if self.nx > 0 else "idle_left"]
        if self.vx > 0:
            if self.ax < 0:
                return ids["brace_right"]
            if self.ax == MARIO_ACCEL_RUN_X:
                return ids["running_right"]
            if self.ax == MARIO_ACCEL_WALK_X:
                return ids["walking_right"]
        else:
            if self.ax > 0:
                return ids["brace_left"]
            if self.ax == -MARIO_ACCEL_RUN_X:
                return ids["running_left"]
            if self.ax == -MARIO_ACCEL_WALK_X:
                return ids["walking_left"]
        return ids["idle_right"]

    def animation_id(self) -> int:
        """The id of the animation matching the current state and level."""
        if self.state == MarioState.DIE:
            return ANI_DIE
        if self.level == MarioLevel.BIG:
            return self._level_animation_id(_BIG_ANIMATIONS)
        if self.level == MarioLevel.SMALL:
            return self._level_animation_id(_SMALL_ANIMATIONS)
        return -1

    def render(self, ctx: RenderContext) -> None:
        ctx.resources.animations.get(self.animation_id()).render(ctx, self.x, self.y)
        ctx.title = f"Coins: {self.coin}"

    def set_state(self, state: int) -> None:
        # Dying is final.
        if self.state == MarioState.DIE:
            return

        if state in (
            MarioState.RUNNING_RIGHT,
            MarioState.RUNNING_LEFT,
            MarioState.WALKING_RIGHT,
            MarioState.WALKING_LEFT,
        ):
            if not self.is_sitting:
                running = state in (MarioState.RUNNING_RIGHT, MarioState.RUNNING_LEFT)
                right = state in (MarioState.RUNNING_RIGHT, MarioState.WALKING_RIGHT)
                sign = 1 if right else -1
                self.max_vx = sign * (MARIO_RUNNING_SPEED if running else MARIO_WALKING_SPEED)
                self.ax = sign * (MARIO_ACCEL_RUN_X if running else MARIO_ACCEL_WALK_X)
                self.nx = sign
        elif state == MarioState.JUMP:
            if not self.is_sitting and self.is_on_platform:
                if abs(self.vx) == MARIO_RUNNING_SPEED:
                    self.vy = -MARIO_JUMP_RUN_SPEED_Y
                else:
                    self.vy = -MARIO_JUMP_SPEED_Y
        elif state == MarioState.RELEASE_JUMP:
            if self.vy < 0:
                self.vy += MARIO_JUMP_SPEED_Y / 2
        elif state == MarioState.SIT:
            if self.is_on_platform and self.level != MarioLevel.SMALL:
                state = MarioState.IDLE
                self.is_sitting = True
                self.vx = 0.0
                self.vy = 0.0
                self.y += MARIO_SIT_HEIGHT_ADJUST
        elif state == MarioState.SIT_RELEASE:
            if self.is_sitting:
                self.is_sitting = False
                state = MarioState.IDLE
                self.y -= MARIO_SIT_HEIGHT_ADJUST
        elif state == MarioState.IDLE:
            self.ax = 0.0
            self.vx = 0.0
        elif state == MarioState.DIE:
            self.vy = -MARIO_JUMP_DEFLECT_SPEED
            self.vx = 0.0
            self.ax = 0.0

        super().set_state(state)

    def get_bounding_box(self) -> BoundingBox:
        if self.level == MarioLevel.BIG:
            if self.is_sitting:
                width, height = MARIO_BIG_SITTING_BBOX_WIDTH, MARIO_BIG_SITTING_BBOX_HEIGHT
            else:
                width, height = MARIO_BIG_BBOX_WIDTH, MARIO_BIG_BBOX_HEIGHT
        else:
            width, height = MARIO_SMALL_BBOX_WIDTH, MARIO_SMALL_BBOX_HEIGHT
        left = self.x - width // 2
        top = self.y - height // 2
        return BoundingBox(left, top, left + width, top + height)

    def set_level(self, level: int) -> None:
        # Lift a growing Mario so he does not sink into the platform.
        if self.level == MarioLevel.SMALL:
            self.y -= (MARIO_BIG_BBOX_HEIGHT - MARIO_SMALL_BBOX_HEIGHT) // 2
        self.level = MarioLevel(level)

    def start_untouchable(self) -> None:
        self.untouchable = 1
        self.untouchable_start = self._clock()

    def is_collidable(self) -> bool:
        return self.state != MarioState.DIE

    def is_blocking(self) -> bool:
        return self.state != MarioState.DIE and self.untouchable == 0