"""Early objects: a bouncing walker and a keyboard-driven ground walker."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from tinyplat.animation import RenderContext

MARIO_WIDTH = 14

ANI_BOUNCE_RIGHT = 500
ANI_BOUNCE_LEFT = 501


@dataclass
class BouncingMario:
    """Walks horizontally and turns around at the screen edges."""

    x: float
    y: float
    vx: float
    vy: float = 0.0

    def update(self, dt: int, screen_width: int) -> None:
        self.x += self.vx * dt
        right_edge = screen_width - MARIO_WIDTH
        if self.x <= 0 or self.x >= right_edge:
            self.vx = -self.vx
            if self.x <= 0:
                self.x = 0.0
            elif self.x >= right_edge:
                self.x = float(right_edge)

    def animation_id(self) -> int:
        return ANI_BOUNCE_RIGHT if self.vx > 0 else ANI_BOUNCE_LEFT


WALKING_SPEED = 0.1
RUNNING_SPEED = 0.2
ACCEL_WALK_X = 0.0005
ACCEL_RUN_X = 0.0007
JUMP_SPEED_Y = 0.5
JUMP_RUN_SPEED_Y = 0.6
GRAVITY = 0.002
GROUND_Y = 160.0
SIT_HEIGHT_ADJUST = 4.0
SCREEN_RIGHT_LIMIT = 290.0

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


class GroundState(IntEnum):
    IDLE = 0
    WALKING_RIGHT = 100
    WALKING_LEFT = 200
    JUMP = 300
    RELEASE_JUMP = 301
    RUNNING_RIGHT = 400
    RUNNING_LEFT = 500
    SIT = 600
    SIT_RELEASE = 601


@dataclass
class GroundMario:
    """Walks, runs, jumps and sits on a flat ground line."""

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    nx: int = 1
    state: Optional[GroundState] = None
    is_sitting: bool = False
    max_vx: float = 0.0
    ax: float = 0.0

    def update(self, dt: int) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.vy += GRAVITY * dt
        self.vx += self.ax * dt
        if abs(self.vx) > abs(self.max_vx):
            self.vx = self.max_vx

        if self.y > GROUND_Y:
            self.vy = 0.0
            self.y = GROUND_Y

        if self.vx > 0 and self.x > SCREEN_RIGHT_LIMIT:
            self.x = SCREEN_RIGHT_LIMIT
        if self.vx < 0 and self.x < 0:
            self.x = 0.0

    def set_state(self, state: int) -> None:
        state = GroundState(state)
        on_ground = self.y == GROUND_Y
        if state in (
            GroundState.RUNNING_RIGHT,
            GroundState.RUNNING_LEFT,
            GroundState.WALKING_RIGHT,
            GroundState.WALKING_LEFT,
        ):
            if not self.is_sitting:
                running = state in (GroundState.RUNNING_RIGHT, GroundState.RUNNING_LEFT)
                right = state in (GroundState.RUNNING_RIGHT, GroundState.WALKING_RIGHT)
                sign = 1 if right else -1
                self.max_vx = sign * (RUNNING_SPEED if running else WALKING_SPEED)
                self.ax = sign * (ACCEL_RUN_X if running else ACCEL_WALK_X)
                self.nx = sign
        elif state is GroundState.JUMP:
            if not self.is_sitting and on_ground:
                if abs(self.vx) == RUNNING_SPEED:
                    self.vy = -JUMP_RUN_SPEED_Y
                else:
                    self.vy = -JUMP_SPEED_Y
        elif state is GroundState.RELEASE_JUMP:
            if self.vy < 0:
                self.vy += JUMP_SPEED_Y / 2
        elif state is GroundState.SIT:
            if on_ground:
                state = GroundState.IDLE
                self.is_sitting = True
                self.vx = 0.0
                self.vy = 0.0
        elif state is GroundState.SIT_RELEASE:
            self.is_sitting = False
            state = GroundState.IDLE
        elif state is GroundState.IDLE:
            self.ax = 0.0
            self.vx = 0.0
        self.state = state

    def animation_id(self) -> int:
        right_facing = self.nx > 0
        if self.y < GROUND_Y:
            if abs(self.ax) == ACCEL_RUN_X:
                return ANI_JUMP_RUN_RIGHT if self.nx >= 0 else ANI_JUMP_RUN_LEFT
            return ANI_JUMP_WALK_RIGHT if self.nx >= 0 else ANI_JUMP_WALK_LEFT
        if self.is_sitting:
            return ANI_SIT_RIGHT if right_facing else ANI_SIT_LEFT
        if self.vx == 0:
            return ANI_IDLE_RIGHT if right_facing else ANI_IDLE_LEFT
        if self.vx > 0:
            if self.ax < 0:
                return ANI_BRACE_RIGHT
            if self.ax == ACCEL_RUN_X:
                return ANI_RUNNING_RIGHT
            if self.ax == ACCEL_WALK_X:
                return ANI_WALKING_RIGHT
        else:
            if self.ax > 0:
                return ANI_BRACE_LEFT
            if self.ax == -ACCEL_RUN_X:
                return ANI_RUNNING_LEFT
            if self.ax == -ACCEL_WALK_X:
                return ANI_WALKING_LEFT
        return ANI_IDLE_RIGHT

    def render(self, ctx: RenderContext) -> None:
        offset = SIT_HEIGHT_ADJUST if self.is_sitting else 0.0
        animation = ctx.resources.animations.get(self.animation_id())
        animation.render(ctx, self.x, self.y + offset)