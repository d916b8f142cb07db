"""Asset loading and the demo level: building, updating and drawing the world."""

from __future__ import annotations

import time
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from tinyplat import assets
from tinyplat import mario as mario_ids
from tinyplat.animation import Animation, DrawCommand, RenderContext, Resources
from tinyplat.goomba import (
    ANI_GOOMBA1_DIE,
    ANI_GOOMBA1_WALKING,
    ANI_GOOMBA_DIE,
    ANI_GOOMBA_WALKING,
    Goomba,
    Goomba1,
)
from tinyplat.mario import GROUND_Y, Mario
from tinyplat.objects import (
    ANI_BRICK,
    ANI_COIN,
    BRICK_WIDTH,
    COIN_WIDTH,
    TEX_BBOX,
    Brick,
    Coin,
    GameObject,
    Platform,
)

SCREEN_WIDTH = 320
SCREEN_HEIGHT = 240

TEXTURES_DIR = "textures"
TEXTURE_PATH_MARIO = f"{TEXTURES_DIR}/mario_transparent.png"
TEXTURE_PATH_MISC = f"{TEXTURES_DIR}/misc_transparent.png"
TEXTURE_PATH_ENEMY = f"{TEXTURES_DIR}/enemies_transparent.png"
TEXTURE_PATH_BBOX = f"{TEXTURES_DIR}/bbox.png"

MARIO_START_X = 20.0
MARIO_START_Y = 10.0

BRICK_X = 0.0
GOOMBA_X = 200.0
COIN_X = 100.0

BRICK_Y = GROUND_Y + 20.0
NUM_BRICKS = 70
NUM_COINS = 10

_SpriteRect = Tuple[int, int, int, int, int]
_AnimationSpec = Tuple[int, int, Sequence[int]]

_MARIO_SPRITES: Tuple[_SpriteRect, ...] = (
    (assets.SPRITE_MARIO_BIG_IDLE_RIGHT + 1, 246, 154, 259, 181),
    (assets.SPRITE_MARIO_BIG_IDLE_LEFT + 1, 186, 154, 199, 181),
    (assets.SPRITE_MARIO_BIG_WALKING_RIGHT + 2, 275, 154, 290, 181),
    (assets.SPRITE_MARIO_BIG_WALKING_RIGHT + 3, 304, 154, 321, 181),
    (assets.SPRITE_MARIO_BIG_WALKING_LEFT + 2, 155, 154, 170, 181),
    (assets.SPRITE_MARIO_BIG_WALKING_LEFT + 3, 125, 154, 140, 181),
    (assets.SPRITE_MARIO_BIG_RUNNING_RIGHT + 1, 334, 154, 355, 181),
    (assets.SPRITE_MARIO_BIG_RUNNING_RIGHT + 2, 334, 154, 355, 181),
    (assets.SPRITE_MARIO_BIG_RUNNING_RIGHT + 3, 392, 154, 413, 181),
    (assets.SPRITE_MARIO_BIG_RUNNING_LEFT + 1, 91, 154, 112, 181),
    (assets.SPRITE_MARIO_BIG_RUNNING_LEFT + 2, 65, 154, 86, 181),
    (assets.SPRITE_MARIO_BIG_RUNNING_LEFT + 3, 34, 154, 55, 181),
    (assets.SPRITE_MARIO_BIG_JUMP_WALK_RIGHT + 1, 395, 275, 412, 302),
    (assets.SPRITE_MARIO_BIG_JUMP_WALK_LEFT + 1, 35, 275, 52, 302),
    (assets.SPRITE_MARIO_BIG_JUMP_RUN_RIGHT + 1, 394, 195, 413, 222),
    (assets.SPRITE_MARIO_BIG_JUMP_RUN_LEFT + 1, 35, 195, 52, 222),
    (assets.SPRITE_MARIO_BIG_SIT_RIGHT + 1, 426, 239, 441, 256),
    (assets.SPRITE_MARIO_BIG_SIT_LEFT + 1, 5, 239, 20, 256),
    (assets.SPRITE_MARIO_BIG_BRACE_RIGHT + 1, 425, 154, 442, 181),
    (assets.SPRITE_MARIO_BIG_BRACE_LEFT + 1, 5, 154, 22, 181),
    (assets.SPRITE_MARIO_DIE + 1, 215, 120, 231, 135),
    (assets.SPRITE_MARIO_SMALL_IDLE_RIGHT + 1, 247, 0, 259, 15),
    (assets.SPRITE_MARIO_SMALL_IDLE_LEFT + 1, 187, 0, 198, 15),
    (assets.SPRITE_MARIO_SMALL_WALKING_RIGHT + 2, 275, 0, 291, 15),
    (assets.SPRITE_MARIO_SMALL_WALKING_RIGHT + 3, 306, 0, 320, 15),
    (assets.SPRITE_MARIO_SMALL_WALKING_LEFT + 2, 155, 0, 170, 15),
    (assets.SPRITE_MARIO_SMALL_WALKING_LEFT + 3, 125, 0, 139, 15),
    (assets.SPRITE_MARIO_SMALL_RUNNING_RIGHT + 1, 275, 0, 275 + 15, 15),
    (assets.SPRITE_MARIO_SMALL_RUNNING_RIGHT + 2, 306, 0, 306 + 15, 15),
    (assets.SPRITE_MARIO_SMALL_RUNNING_RIGHT + 3, 335, 0, 335 + 15, 15),
    (assets.SPRITE_MARIO_SMALL_RUNNING_LEFT + 1, 155, 0, 155 + 15, 15),
    (assets.SPRITE_MARIO_SMALL_RUNNING_LEFT + 2, 125, 0, 125 + 15, 15),
    (assets.SPRITE_MARIO_SMALL_RUNNING_LEFT + 3, 95, 0, 95 + 15, 15),
    (assets.SPRITE_MARIO_SMALL_BRACE_LEFT + 1, 6, 0, 6 + 13, 15),
    (assets.SPRITE_MARIO_SMALL_BRACE_RIGHT + 1, 426, 0, 426 + 13, 15),
    (assets.SPRITE_MARIO_SMALL_JUMP_WALK_LEFT + 1, 35, 80, 35 + 15, 80 + 15),
    (assets.SPRITE_MARIO_SMALL_JUMP_WALK_RIGHT + 1, 395, 80, 395 + 15, 80 + 15),
    (assets.SPRITE_MARIO_SMALL_JUMP_RUN_LEFT + 1, 65, 40, 65 + 15, 40 + 15),
    (assets.SPRITE_MARIO_SMALL_JUMP_RUN_RIGHT + 1, 365, 40, 365 + 15, 40 + 15),
)

_MARIO_ANIMATIONS: Tuple[_AnimationSpec, ...] = (
    (mario_ids.ANI_IDLE_RIGHT, 100, (assets.SPRITE_MARIO_BIG_IDLE_RIGHT + 1,)),
    (mario_ids.ANI_IDLE_LEFT, 100, (assets.SPRITE_MARIO_BIG_IDLE_LEFT + 1,)),
    (
        mario_ids.ANI_WALKING_RIGHT,
        100,
        (
            assets.SPRITE_MARIO_BIG_IDLE_RIGHT + 1,
            assets.SPRITE_MARIO_BIG_WALKING_RIGHT + 2,
            assets.SPRITE_MARIO_BIG_WALKING_RIGHT + 3,
        ),
    ),
    (
        mario_ids.ANI_WALKING_LEFT,
        100,
        (
            assets.SPRITE_MARIO_BIG_IDLE_LEFT + 1,
            assets.SPRITE_MARIO_BIG_WALKING_LEFT + 2,
            assets.SPRITE_MARIO_BIG_WALKING_LEFT + 3,
        ),
    ),
    (
        mario_ids.ANI_RUNNING_RIGHT,
        50,
        (
            assets.SPRITE_MARIO_BIG_RUNNING_RIGHT + 1,
            assets.SPRITE_MARIO_BIG_RUNNING_RIGHT + 2,
            assets.SPRITE_MARIO_BIG_RUNNING_RIGHT + 3,
        ),
    ),
    # Running is faster, so its animation is too.
    (
        mario_ids.ANI_RUNNING_LEFT,
        50,
        (
            assets.SPRITE_MARIO_BIG_RUNNING_LEFT + 1,
            assets.SPRITE_MARIO_BIG_RUNNING_LEFT + 2,
            assets.SPRITE_MARIO_BIG_RUNNING_LEFT + 3,
        ),
    ),
    (mario_ids.ANI_JUMP_WALK_RIGHT, 100, (assets.SPRITE_MARIO_BIG_JUMP_WALK_RIGHT + 1,)),
    (mario_ids.ANI_JUMP_WALK_LEFT, 100, (assets.SPRITE_MARIO_BIG_JUMP_WALK_LEFT + 1,)),
    (mario_ids.ANI_JUMP_RUN_RIGHT, 100, (assets.SPRITE_MARIO_BIG_JUMP_RUN_RIGHT + 1,)),
    (mario_ids.ANI_JUMP_RUN_LEFT, 100, (assets.SPRITE_MARIO_BIG_JUMP_RUN_LEFT + 1,)),
    (mario_ids.ANI_SIT_RIGHT, 100, (assets.SPRITE_MARIO_BIG_SIT_RIGHT + 1,)),
    (mario_ids.ANI_SIT_LEFT, 100, (assets.SPRITE_MARIO_BIG_SIT_LEFT + 1,)),
    (mario_ids.ANI_BRACE_RIGHT, 100, (assets.SPRITE_MARIO_BIG_BRACE_RIGHT + 1,)),
    (mario_ids.ANI_BRACE_LEFT, 100, (assets.SPRITE_MARIO_BIG_BRACE_LEFT + 1,)),
    (mario_ids.ANI_DIE, 100, (assets.SPRITE_MARIO_DIE + 1,)),
    (mario_ids.ANI_SMALL_IDLE_RIGHT, 100, (assets.SPRITE_MARIO_SMALL_IDLE_RIGHT + 1,)),
    (
        mario_ids.ANI_SMALL_WALKING_RIGHT,
        100,
        (
            assets.SPRITE_MARIO_SMALL_IDLE_RIGHT + 1,
            assets.SPRITE_MARIO_SMALL_WALKING_RIGHT + 2,
            assets.SPRITE_MARIO_SMALL_WALKING_RIGHT + 3,
        ),
    ),
    (mario_ids.ANI_SMALL_IDLE_LEFT, 100, (assets.SPRITE_MARIO_SMALL_IDLE_LEFT + 1,)),
    (
        mario_ids.ANI_SMALL_WALKING_LEFT,
        100,
        (
            assets.SPRITE_MARIO_SMALL_IDLE_LEFT + 1,
            assets.SPRITE_MARIO_SMALL_WALKING_LEFT + 2,
            assets.SPRITE_MARIO_SMALL_WALKING_LEFT + 3,
        ),
    ),
    (
        mario_ids.ANI_SMALL_RUNNING_RIGHT,
        50,
        (
            assets.SPRITE_MARIO_SMALL_RUNNING_RIGHT + 1,
            assets.SPRITE_MARIO_SMALL_RUNNING_RIGHT + 2,
            assets.SPRITE_MARIO_SMALL_RUNNING_RIGHT + 3,
        ),
    ),
    (
        mario_ids.ANI_SMALL_RUNNING_LEFT,
        50,
        (
            assets.SPRITE_MARIO_SMALL_RUNNING_LEFT + 1,
            assets.SPRITE_MARIO_SMALL_RUNNING_LEFT + 2,
            assets.SPRITE_MARIO_SMALL_RUNNING_LEFT + 3,
        ),
    ),
    (mario_ids.ANI_SMALL_BRACE_LEFT, 100, (assets.SPRITE_MARIO_SMALL_BRACE_LEFT + 1,)),
    (mario_ids.ANI_SMALL_BRACE_RIGHT, 100, (assets.SPRITE_MARIO_SMALL_BRACE_RIGHT + 1,)),
    (
        mario_ids.ANI_SMALL_JUMP_WALK_RIGHT,
        100,
        (assets.SPRITE_MARIO_SMALL_JUMP_WALK_RIGHT + 1,),
    ),
    (
        mario_ids.ANI_SMALL_JUMP_WALK_LEFT,
        100,
        (assets.SPRITE_MARIO_SMALL_JUMP_WALK_LEFT + 1,),
    ),
    (
        mario_ids.ANI_SMALL_JUMP_RUN_LEFT,
        100,
        (assets.SPRITE_MARIO_SMALL_JUMP_RUN_LEFT + 1,),
    ),
    (
        mario_ids.ANI_SMALL_JUMP_RUN_RIGHT,
        100,
        (assets.SPRITE_MARIO_SMALL_JUMP_RUN_RIGHT + 1,),
    ),
)


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


def _add_sprites(resources: Resources, texture_id: int, rects: Iterable[_SpriteRect]) -> None:
    texture = resources.textures.get(texture_id)
    for sprite_id, left, top, right, bottom in rects:
        resources.sprites.add(sprite_id, left, top, right, bottom, texture)


def _add_animations(resources: Resources, specs: Iterable[_AnimationSpec]) -> None:
    for animation_id, default_time, sprite_ids in specs:
        animation = Animation(default_time)
        for sprite_id in sprite_ids:
            animation.add(resources.sprites.get(sprite_id))
        resources.animations.add(animation_id, animation)


def _load_goomba_kind(
    resources: Resources, walk: int, die: int, ani_walking: int, ani_die: int
) -> None:
    _add_sprites(
        resources,
        assets.TEX_ENEMY,
        (
            (walk + 1, 4, 13, 22, 30),
            (walk + 2, 24, 13, 42, 30),
            (die + 1, 44, 19, 62, 30),
        ),
    )
    _add_animations(
        resources,
        (
            (ani_walking, 100, (walk + 1, walk + 2)),
            (ani_die, 100, (die + 1,)),
        ),
    )


def load_resources(resources: Resources) -> Resources:
    """Register every texture, sprite and animation the level uses."""
    resources.textures.add(assets.TEX_MARIO, TEXTURE_PATH_MARIO)
    resources.textures.add(assets.TEX_ENEMY, TEXTURE_PATH_ENEMY)
    resources.textures.add(assets.TEX_MISC, TEXTURE_PATH_MISC)
    resources.textures.add(TEX_BBOX, TEXTURE_PATH_BBOX)

    _add_sprites(resources, assets.TEX_MARIO, _MARIO_SPRITES)
    _add_animations(resources, _MARIO_ANIMATIONS)

    _load_goomba_kind(
        resources,
        assets.SPRITE_GOOMBA_WALK,
        assets.SPRITE_GOOMBA_DIE,
        ANI_GOOMBA_WALKING,
        ANI_GOOMBA_DIE,
    )
    _load_goomba_kind(
        resources,
        assets.SPRITE_GOOMBA1_WALK,
        assets.SPRITE_GOOMBA1_DIE,
        ANI_GOOMBA1_WALKING,
        ANI_GOOMBA1_DIE,
    )

    brick = assets.SPRITE_BRICK + 1
    coin = assets.SPRITE_COIN
    _add_sprites(
        resources,
        assets.TEX_MISC,
        (
            (brick, 372, 153, 372 + 15, 153 + 15),
            (coin + 1, 303, 99, 303 + 9, 99 + 15),
            (coin + 2, 321, 99, 321 + 9, 99 + 15),
            (coin + 3, 338, 99, 338 + 9, 99 + 15),
            (assets.SPRITE_CLOUD_BEGIN, 390, 117, 390 + 15, 117 + 15),
            (assets.SPRITE_CLOUD_MIDDLE, 408, 117, 408 + 15, 117 + 15),
            (assets.SPRITE_CLOUD_END, 426, 117, 426 + 15, 117 + 15),
        ),
    )
    _add_animations(
        resources,
        (
            (ANI_BRICK, 100, (brick,)),
            (ANI_COIN, 300, (coin + 1, coin + 2, coin + 3)),
        ),
    )
    return resources


class Scene:
    """The demo level: its objects, the player and the camera that follows him."""

    def __init__(
        self,
        resources: Optional[Resources] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        if resources is None:
            resources = load_resources(Resources())
        self.resources = resources
        self.clock = clock or _monotonic_ms
        self.ctx = RenderContext(resources=resources)
        self.objects: List[GameObject] = []
        self.mario: Mario
        self.goomba1: Goomba1
        self.reload()

    def _add(self, obj: GameObject) -> GameObject:
        self.objects.append(obj)
        return obj

    def reload(self) -> None:
        """Throw away all objects and build the level from scratch."""
        self.objects = []

        # Main ground
        for i in range(NUM_BRICKS):
            self._add(Brick(i * BRICK_WIDTH * 1.0, BRICK_Y))
        # Short, low platform
        for i in range(1, 3):
            self._add(Brick(i * BRICK_WIDTH * 1.0, BRICK_Y - 44.0))
        # Vertical columns
        for i in range(10):
            self._add(Brick(0.0, BRICK_Y - i * BRICK_WIDTH))
        for column_x, top in ((300.0, 3), (400.0, 4), (500.0, 5)):
            for i in range(1, top):
                self._add(Brick(BRICK_X + column_x, BRICK_Y - i * BRICK_WIDTH))

        self._add(
            Platform(
                90.0,
                GROUND_Y - 74.0,
                16,
                15,
                16,
                assets.SPRITE_CLOUD_BEGIN,
                assets.SPRITE_CLOUD_MIDDLE,
                assets.SPRITE_CLOUD_END,
            )
        )

        self.mario = Mario(MARIO_START_X, MARIO_START_Y, clock=self.clock)
        self._add(self.mario)

        self._add(Goomba(GOOMBA_X, GROUND_Y - 120.0, clock=self.clock))
        self.goomba1 = Goomba1(100.0, GROUND_Y - 120.0, clock=self.clock)
        self._add(self.goomba1)

        for i in range(NUM_COINS):
            self._add(Coin(COIN_X + i * (COIN_WIDTH * 2), GROUND_Y - 96.0))

    def purge_deleted(self) -> List[GameObject]:
        """Drop objects marked as deleted and return them."""
        removed = [obj for obj in self.objects if obj.is_deleted]
        self.objects = [obj for obj in self.objects if not obj.is_deleted]
        return removed

    def update(self, dt: int) -> None:
        """Advance every object by ``dt`` milliseconds and move the camera."""
        co_objects = list(self.objects)
        for obj in co_objects:
            obj.update(dt, co_objects)

        self.purge_deleted()

        cam_x = self.mario.x - SCREEN_WIDTH // 2
        self.ctx.cam_x = max(cam_x, 0.0)
        self.ctx.cam_y = 0.0

    def render(self) -> List[DrawCommand]:
        """Draw every object and return the frame's draw commands."""
        self.ctx.commands = []
        self.ctx.now = self.clock()
        for obj in self.objects:
            obj.render(self.ctx)
        return self.ctx.commands