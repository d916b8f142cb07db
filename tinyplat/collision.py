"""Swept AABB collision detection and the per-frame collision response."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from tinyplat.objects import GameObject

BLOCK_PUSH_FACTOR = 0.4

_NO_HIT: Tuple[float, float, float] = (-1.0, 0.0, 0.0)


@dataclass(eq=False)
class CollisionEvent:
    """A possible collision of ``src_obj`` with ``obj`` within one frame.

    ``t`` is the fraction of the frame's movement at which the boxes touch,
    ``nx``/``ny`` the collision normal and ``dx``/``dy`` the movement of the
    source relative to the target.
    """

    t: float
    nx: float
    ny: float
    dx: float = 0.0
    dy: float = 0.0
    obj: Optional["GameObject"] = None
    src_obj: Optional["GameObject"] = None
    is_deleted: bool = False

    @property
    def was_collided(self) -> bool:
        return 0.0 <= self.t <= 1.0


def swept_aabb(
    moving: Sequence[float],
    dx: float,
    dy: float,
    static: Sequence[float],
) -> Tuple[float, float, float]:
    """Sweep box ``moving`` by (dx, dy) against box ``static``.

    Boxes are (left, top, right, bottom). Returns ``(t, nx, ny)``; ``t`` is
    -1.0 when the boxes do not collide during the movement.
    """
    ml, mt, mr, mb = moving
    sl, st, sr, sb = static

    # Broad phase: the box covering the whole movement must touch the target.
    bl = ml if dx > 0 else ml + dx
    bt = mt if dy > 0 else mt + dy
    br = mr + dx if dx > 0 else mr
    bb = mb + dy if dy > 0 else mb
    if br < sl or bl > sr or bb < st or bt > sb:
        return _NO_HIT

    if dx == 0 and dy == 0:
        return _NO_HIT

    if dx == 0:
        tx_entry, tx_exit = -9999999.0, 99999999.0
    else:
        if dx > 0:
            dx_entry, dx_exit = sl - mr, sr - ml
        else:
            dx_entry, dx_exit = sr - ml, sl - mr
        tx_entry, tx_exit = dx_entry / dx, dx_exit / dx

    if dy == 0:
        ty_entry, ty_exit = -99999999999.0, 99999999999.0
    else:
        if dy > 0:
            dy_entry, dy_exit = st - mb, sb - mt
        else:
            dy_entry, dy_exit = sb - mt, st - mb
        ty_entry, ty_exit = dy_entry / dy, dy_exit / dy

    if (tx_entry < 0.0 and ty_entry < 0.0) or tx_entry > 1.0 or ty_entry > 1.0:
        return _NO_HIT

    t_entry = max(tx_entry, ty_entry)
    t_exit = min(tx_exit, ty_exit)
    if t_entry > t_exit:
        return _NO_HIT

    if tx_entry > ty_entry:
        return t_entry, (-1.0 if dx > 0 else 1.0), 0.0
    return t_entry, 0.0, (-1.0 if dy > 0 else 1.0)


def sweep(src: "GameObject", dt: int, dest: "GameObject") -> CollisionEvent:
    """Sweep ``src`` against ``dest`` where both may be moving."""
    dx = src.vx * dt - dest.vx * dt
    dy = src.vy * dt - dest.vy * dt
    t, nx, ny = swept_aabb(src.get_bounding_box(), dx, dy, dest.get_bounding_box())
    return CollisionEvent(t, nx, ny, dx, dy, obj=dest, src_obj=src)


def scan(
    src: "GameObject", dt: int, objects: Optional[Iterable["GameObject"]]
) -> List[CollisionEvent]:
    """Return the collisions of ``src`` with ``objects`` within this frame."""
    events = (sweep(src, dt, obj) for obj in objects or ())
    return [event for event in events if event.was_collided]


def filter_events(
    events: Iterable[CollisionEvent],
    filter_block: bool = True,
    filter_x: bool = True,
    filter_y: bool = True,
) -> Tuple[Optional[CollisionEvent], Optional[CollisionEvent]]:
    """Pick the earliest collision on the X axis and on the Y axis.

    With ``filter_block`` only collisions with blocking objects count; an
    axis that is switched off always yields ``None``.
    """
    col_x: Optional[CollisionEvent] = None
    col_y: Optional[CollisionEvent] = None
    min_tx = 1.0
    min_ty = 1.0
    for event in events:
        if event.is_deleted or event.obj.is_deleted:
            continue
        if filter_block and not event.obj.is_blocking():
            continue
        if filter_x and event.t < min_tx and event.nx != 0:
            min_tx, col_x = event.t, event
        if filter_y and event.t < min_ty and event.ny != 0:
            min_ty, col_y = event.t, event
    return col_x, col_y


def process(
    src: "GameObject", dt: int, objects: Optional[Iterable["GameObject"]]
) -> None:
    """Move ``src`` for one frame, stopping it at blocking objects.

    Collision callbacks are fired on ``src`` for every blocking collision
    that stopped it and for every non-blocking object it touched.
    """
    events = scan(src, dt, objects) if src.is_collidable() else []

    if not events:
        src.on_no_collision(dt)
    else:
        col_x, col_y = filter_events(events)

        x, y = src.x, src.y
        dx = src.vx * dt
        dy = src.vy * dt

        if col_x is not None and col_y is not None:
            if col_y.t < col_x.t:
                y += col_y.t * dy + col_y.ny * BLOCK_PUSH_FACTOR
                src.x, src.y = x, y
                src.on_collision_with(col_y)

                # Re-check X from the corrected position.
                col_x.is_deleted = True
                events.append(sweep(src, dt, col_x.obj))
                col_x_other, _ = filter_events(events, True, True, False)
                if col_x_other is not None:
                    x += col_x_other.t * dx + col_x_other.nx * BLOCK_PUSH_FACTOR
                    src.on_collision_with(col_x_other)
                else:
                    x += dx
            else:
                x += col_x.t * dx + col_x.nx * BLOCK_PUSH_FACTOR
                src.x, src.y = x, y
                src.on_collision_with(col_x)

                # Re-check Y from the corrected position.
                col_y.is_deleted = True
                events.append(sweep(src, dt, col_y.obj))
                _, col_y_other = filter_events(events, True, False, True)
                if col_y_other is not None:
                    y += col_y_other.t * dy + col_y_other.ny * BLOCK_PUSH_FACTOR
                    src.on_collision_with(col_y_other)
                else:
                    y += dy
        elif col_x is not None:
            x += col_x.t * dx + col_x.nx * BLOCK_PUSH_FACTOR
            y += dy
            src.on_collision_with(col_x)
        elif col_y is not None:
            x += dx
            y += col_y.t * dy + col_y.ny * BLOCK_PUSH_FACTOR
            src.on_collision_with(col_y)
        else:
            x += dx
            y += dy

        src.x, src.y = x, y

    # Blocking collisions were handled above; report the rest.
    for event in events:
        if event.is_deleted or event.obj.is_blocking():
            continue
        src.on_collision_with(event)