import pytest

from tinyplat.animation import Animation, RenderContext
from tinyplat.collision import CollisionEvent
from tinyplat.goomba import Goomba, Goomba1, GoombaState
from tinyplat.mario import (
    ANI_DIE,
    ANI_IDLE_RIGHT,
    ANI_SMALL_JUMP_WALK_RIGHT,
    MARIO_ACCEL_WALK_X,
    MARIO_BIG_BBOX_HEIGHT,
    MARIO_BIG_BBOX_WIDTH,
    MARIO_BIG_SITTING_BBOX_HEIGHT,
    MARIO_JUMP_DEFLECT_SPEED,
    MARIO_JUMP_SPEED_Y,
    MARIO_SIT_HEIGHT_ADJUST,
    MARIO_SMALL_BBOX_HEIGHT,
    MARIO_SMALL_BBOX_WIDTH,
    MARIO_UNTOUCHABLE_TIME,
    MARIO_WALKING_SPEED,
    Mario,
    MarioLevel,
    MarioState,
)
from tinyplat.objects import Brick, Coin


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock(10_000)


def test_big_bounding_box_size(clock):
    m = Mario(100, 50, clock)
    box = m.get_bounding_box()
    assert box.width == MARIO_BIG_BBOX_WIDTH
    assert box.height == MARIO_BIG_BBOX_HEIGHT
    assert box.top == m.y - MARIO_BIG_BBOX_HEIGHT / 2


def test_small_bounding_box_size(clock):
    m = Mario(100, 50, clock)
    m.set_level(MarioLevel.SMALL)
    box = m.get_bounding_box()
    assert box.width == MARIO_SMALL_BBOX_WIDTH
    assert box.height == MARIO_SMALL_BBOX_HEIGHT


def test_growing_lifts_mario(clock):
    m = Mario(100, 50, clock)
    m.set_level(MarioLevel.SMALL)
    small_bottom = m.get_bounding_box().bottom
    m.set_level(MarioLevel.BIG)
    assert m.get_bounding_box().bottom == small_bottom
    assert m.level == MarioLevel.BIG


def test_walking_right_sets_acceleration(clock):
    m = Mario(0, 0, clock)
    m.set_state(MarioState.WALKING_RIGHT)
    assert m.max_vx == MARIO_WALKING_SPEED
    assert m.ax == MARIO_ACCEL_WALK_X
    assert m.nx == 1
    assert m.state == MarioState.WALKING_RIGHT


def test_walking_left_faces_left(clock):
    m = Mario(0, 0, clock)
    m.set_state(MarioState.WALKING_LEFT)
    assert m.max_vx == -MARIO_WALKING_SPEED
    assert m.nx == -1


def test_die_is_final(clock):
    m = Mario(0, 0, clock)
    m.set_state(MarioState.DIE)
    m.set_state(MarioState.WALKING_RIGHT)
    assert m.state == MarioState.DIE
    assert m.vy == -MARIO_JUMP_DEFLECT_SPEED
    assert m.is_collidable() is False
    assert m.is_blocking() is False


def test_jump_needs_platform(clock):
    m = Mario(0, 0, clock)
    m.set_state(MarioState.JUMP)
    assert m.vy == 0.0
    m.is_on_platform = True
    m.set_state(MarioState.JUMP)
    assert m.vy == -MARIO_JUMP_SPEED_Y


def test_release_jump_slows_ascent(clock):
    m = Mario(0, 0, clock)
    m.is_on_platform = True
    m.set_state(MarioState.JUMP)
    m.set_state(MarioState.RELEASE_JUMP)
    assert m.vy == -MARIO_JUMP_SPEED_Y / 2


def test_sit_and_release(clock):
    m = Mario(0, 100, clock)
    m.is_on_platform = True
    m.set_state(MarioState.SIT)
    assert m.is_sitting is True
    assert m.state == MarioState.IDLE
    assert m.y == 100 + MARIO_SIT_HEIGHT_ADJUST
    assert m.get_bounding_box().height == MARIO_BIG_SITTING_BBOX_HEIGHT
    m.set_state(MarioState.SIT_RELEASE)
    assert m.is_sitting is False
    assert m.y == 100


def test_small_mario_cannot_sit(clock):
    m = Mario(0, 100, clock)
    m.set_level(MarioLevel.SMALL)
    m.is_on_platform = True
    m.set_state(MarioState.SIT)
    assert m.is_sitting is False


def test_lands_on_brick(clock):
    brick = Brick(0, 100)
    m = Mario(0, 79.5, clock)
    m.update(16, [brick])
    assert m.is_on_platform is True
    assert m.vy == 0
    assert m.get_bounding_box().bottom <= brick.get_bounding_box().top
    m.set_state(MarioState.JUMP)
    assert m.vy == -MARIO_JUMP_SPEED_Y


def test_collects_coin(clock):
    coin = Coin(0, 100)
    m = Mario(0, 79.5, clock)
    m.update(16, [coin])
    assert coin.is_deleted is True
    assert m.coin == 1
    assert m.is_on_platform is False


def test_stomp_goomba(clock):
    m = Mario(0, 0, clock)
    goomba = Goomba(0, 20, clock)
    m.on_collision_with(CollisionEvent(0.5, 0.0, -1.0, obj=goomba, src_obj=m))
    assert goomba.state == GoombaState.DIE
    assert m.vy == -MARIO_JUMP_DEFLECT_SPEED


def test_hit_by_goomba_shrinks_then_kills(clock):
    m = Mario(0, 0, clock)
    goomba = Goomba(20, 0, clock)
    side_hit = CollisionEvent(0.5, -1.0, 0.0, obj=goomba, src_obj=m)
    m.on_collision_with(side_hit)
    assert m.level == MarioLevel.SMALL
    assert m.untouchable == 1
    assert m.is_blocking() is False

    m.on_collision_with(side_hit)
    assert m.state != MarioState.DIE

    clock.now += MARIO_UNTOUCHABLE_TIME + 1
    m.update(1, [])
    assert m.untouchable == 0
    m.on_collision_with(side_hit)
    assert m.state == MarioState.DIE


def test_goomba1_does_not_hurt(clock):
    m = Mario(0, 0, clock)
    other = Goomba1(20, 0, clock)
    m.on_collision_with(CollisionEvent(0.5, -1.0, 0.0, obj=other, src_obj=m))
    assert m.level == MarioLevel.BIG
    assert m.untouchable == 0


def test_animation_ids(clock):
    m = Mario(0, 0, clock)
    m.is_on_platform = True
    assert m.animation_id() == ANI_IDLE_RIGHT
    m.set_level(MarioLevel.SMALL)
    m.is_on_platform = False
    assert m.animation_id() == ANI_SMALL_JUMP_WALK_RIGHT
    m.set_state(MarioState.DIE)
    assert m.animation_id() == ANI_DIE


def test_render_draws_and_sets_title(clock):
    m = Mario(30, 40, clock)
    ctx = RenderContext()
    sprite = ctx.resources.sprites.add(1, 0, 0, 10, 10, None)
    animation = Animation(100)
    animation.add(sprite)
    ctx.resources.animations.add(m.animation_id(), animation)
    m.render(ctx)
    assert ctx.commands[0].sprite == sprite
    assert (ctx.commands[0].x, ctx.commands[0].y) == (30, 40)
    assert ctx.title == "Coins: 0"


def test_render_missing_animation_raises(clock):
    m = Mario(0, 0, clock)
    with pytest.raises(KeyError):
        m.render(RenderContext())