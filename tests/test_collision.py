import pytest

from tinyplat.collision import (
    BLOCK_PUSH_FACTOR,
    CollisionEvent,
    filter_events,
    process,
    scan,
    sweep,
    swept_aabb,
)
from tinyplat.objects import BoundingBox, Brick, Coin, GameObject


class Mover(GameObject):
    def __init__(self, x, y, vx=0.0, vy=0.0, size=16, collidable=True):
        super().__init__(x, y)
        self.vx = vx
        self.vy = vy
        self.size = size
        self.collidable = collidable
        self.events = []
        self.no_collision_calls = 0

    def get_bounding_box(self):
        half = self.size / 2
        return BoundingBox(self.x - half, self.y - half, self.x + half, self.y + half)

    def render(self, ctx):
        ctx.draw(None, self.x, self.y)

    def is_collidable(self):
        return self.collidable

    def on_no_collision(self, dt):
        self.no_collision_calls += 1
        self.x += self.vx * dt
        self.y += self.vy * dt

    def on_collision_with(self, event):
        self.events.append(event)


def test_swept_aabb_hit_from_left_touches_at_t():
    moving = (0.0, 0.0, 10.0, 10.0)
    static = (15.0, 0.0, 25.0, 10.0)
    t, nx, ny = swept_aabb(moving, 10.0, 0.0, static)
    assert 0.0 <= t <= 1.0
    assert moving[2] + t * 10.0 == pytest.approx(static[0])
    assert (nx, ny) == (-1.0, 0.0)


def test_swept_aabb_falling_gives_upward_normal():
    moving = (0.0, 0.0, 10.0, 10.0)
    static = (0.0, 15.0, 10.0, 25.0)
    t, nx, ny = swept_aabb(moving, 0.0, 10.0, static)
    assert moving[3] + t * 10.0 == pytest.approx(static[1])
    assert (nx, ny) == (0.0, -1.0)


def test_swept_aabb_moving_left_gives_right_normal():
    moving = (20.0, 0.0, 30.0, 10.0)
    static = (0.0, 0.0, 15.0, 10.0)
    t, nx, ny = swept_aabb(moving, -10.0, 0.0, static)
    assert moving[0] - t * 10.0 == pytest.approx(static[2])
    assert nx == 1.0


@pytest.mark.parametrize(
    "dx, dy, static",
    [
        (0.0, 0.0, (5.0, 5.0, 15.0, 15.0)),
        (10.0, 0.0, (100.0, 0.0, 110.0, 10.0)),
        (-10.0, 0.0, (15.0, 0.0, 25.0, 10.0)),
    ],
)
def test_swept_aabb_no_collision(dx, dy, static):
    assert swept_aabb((0.0, 0.0, 10.0, 10.0), dx, dy, static) == (-1.0, 0.0, 0.0)


def test_sweep_uses_relative_speed():
    src = Mover(0, 0)
    dest = Mover(30, 0, vx=-0.1)
    event = sweep(src, 200, dest)
    assert event.was_collided
    assert event.obj is dest and event.src_obj is src
    assert event.dx == pytest.approx((src.vx - dest.vx) * 200)
    assert event.nx == -1.0


def test_sweep_same_speed_no_collision():
    src = Mover(0, 0, vx=0.1)
    dest = Mover(20, 0, vx=0.1)
    event = sweep(src, 100, dest)
    assert not event.was_collided
    assert event.t == -1.0


def test_scan_keeps_only_collisions():
    src = Mover(0, 0, vy=0.1)
    below = Brick(0, 20)
    far = Brick(500, 500)
    events = scan(src, 100, [below, far, src])
    assert [e.obj for e in events] == [below]
    assert all(e.was_collided for e in events)


def test_filter_events_picks_earliest_per_axis():
    a, b, c = Brick(0, 0), Brick(1, 0), Brick(2, 0)
    early_x = CollisionEvent(0.2, -1.0, 0.0, obj=a)
    late_x = CollisionEvent(0.6, -1.0, 0.0, obj=b)
    y_event = CollisionEvent(0.5, 0.0, -1.0, obj=c)
    col_x, col_y = filter_events([late_x, early_x, y_event])
    assert col_x is early_x
    assert col_y is y_event


def test_filter_events_skips_non_blocking_and_deleted():
    coin = Coin(0, 0)
    gone = Brick(0, 0)
    gone.delete()
    dropped = CollisionEvent(0.1, -1.0, 0.0, obj=Brick(5, 5), is_deleted=True)
    events = [
        CollisionEvent(0.1, -1.0, 0.0, obj=coin),
        CollisionEvent(0.1, 0.0, -1.0, obj=gone),
        dropped,
    ]
    assert filter_events(events) == (None, None)
    col_x, _ = filter_events(events[:1], filter_block=False)
    assert col_x is events[0]


def test_filter_events_axis_switch():
    event = CollisionEvent(0.3, -1.0, 0.0, obj=Brick(0, 0))
    assert filter_events([event], True, False, True) == (None, None)


def test_process_without_collision_moves_freely():
    src = Mover(0, 0, vx=0.1)
    process(src, 100, [])
    assert src.no_collision_calls == 1
    assert src.x == pytest.approx(0.1 * 100)


def test_process_non_collidable_ignores_obstacles():
    src = Mover(0, 0, vy=0.1, collidable=False)
    process(src, 100, [Brick(0, 20)])
    assert src.no_collision_calls == 1
    assert src.events == []


def test_process_lands_on_brick():
    src = Mover(0, 0, vy=0.1)
    brick = Brick(0, 20)
    process(src, 100, [brick, src])
    assert src.get_bounding_box().bottom == pytest.approx(
        brick.get_bounding_box().top - BLOCK_PUSH_FACTOR
    )
    assert src.x == 0.0
    assert [(e.obj, e.ny) for e in src.events] == [(brick, -1.0)]


def test_process_hits_wall():
    src = Mover(0, 0, vx=0.1)
    wall = Brick(20, 0)
    process(src, 100, [wall])
    assert src.get_bounding_box().right == pytest.approx(
        wall.get_bounding_box().left - BLOCK_PUSH_FACTOR
    )
    assert src.y == 0.0
    assert src.events[0].nx == -1.0


def test_process_corner_resolves_both_axes():
    src = Mover(0, 0, vx=0.1, vy=0.1)
    floor = Brick(0, 20)
    wall = Brick(20, 0)
    process(src, 100, [floor, wall])
    box = src.get_bounding_box()
    assert box.right == pytest.approx(wall.get_bounding_box().left - BLOCK_PUSH_FACTOR)
    assert box.bottom == pytest.approx(floor.get_bounding_box().top - BLOCK_PUSH_FACTOR)
    assert [e.obj for e in src.events] == [wall, floor]


def test_process_passes_through_coin_and_reports_it():
    src = Mover(0, 0, vx=0.1)
    coin = Coin(20, 0)
    process(src, 100, [coin])
    assert src.x == pytest.approx(0.1 * 100)
    assert src.no_collision_calls == 0
    assert [e.obj for e in src.events] == [coin]


def test_process_ignores_deleted_blocker():
    src = Mover(0, 0, vy=0.1)
    brick = Brick(0, 20)
    brick.delete()
    process(src, 100, [brick])
    assert src.y == pytest.approx(0.1 * 100)
    assert src.events == []