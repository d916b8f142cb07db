# tinyplat

The game logic of a small side-scrolling platformer, with no dependencies.
Movement, state machines, collision and animation timing are plain Python;
drawing a frame produces a list of `DrawCommand` values that you can inspect,
test, or hand to any display layer you choose. Time is passed in as a clock
(a callable returning milliseconds), so every frame can be driven from tests.

## Modules

- `tinyplat.assets` — numeric identifiers for textures and sprites
  (`TEX_MARIO`, `SPRITE_GOOMBA_WALK`, `SPRITE_CLOUD_BEGIN`, ...).
- `tinyplat.animation` — `Texture` (a path and an optional size), `Sprite`
  (a rectangle of a texture), `AnimationFrame` and `Animation`, a looping
  sequence of frames whose `current_frame(now)` advances once a frame's time
  has passed. `TextureRegistry`, `SpriteRegistry` and `AnimationRegistry` map
  ids to items and raise `KeyError` for unknown ids; `Resources` bundles all
  three. `RenderContext` carries the resources, the clock value `now`, the
  camera position (`cam_x`, `cam_y`), a `title` string, and records every
  `DrawCommand` passed to `draw`.
- `tinyplat.simple` — two characters without a collision system:
  `BouncingMario`, who walks back and forth between the screen edges, and
  `GroundMario`, who walks, runs, jumps and sits on a fixed ground line
  according to a `GroundState`.
- `tinyplat.collision` — swept axis-aligned bounding box collision:
  `swept_aabb` for two boxes, `sweep` for two moving objects, `scan` for every
  hit along a frame's movement, `filter_events` to pick the earliest blocking
  hit on each axis, and `process`, which moves an object, stops it against
  blocking objects and reports each `CollisionEvent` back to it.
- `tinyplat.objects` — the abstract `GameObject` with its `BoundingBox`, and
  the scenery: `Brick`, `Coin` (not blocking) and `Platform` (a row of cells
  drawn from begin, middle and end sprites).
- `tinyplat.mario` — the player, `Mario`, with `MarioState` and `MarioLevel`:
  acceleration up to a walking or running speed, jumping, sitting (big Mario
  only), stomping a `Goomba` from above, dropping from big to small when hit
  followed by a spell of untouchability, dying when hit while small, and
  counting the coins he collects.
- `tinyplat.goomba` — `Goomba`, an enemy that walks, falls under gravity,
  turns around at blocking objects and is marked deleted a short while after
  it enters `GoombaState.DIE`; `Goomba1` is the same enemy with its own
  animations.
- `tinyplat.scene` — `load_resources` fills a `Resources` bundle with every
  texture, sprite and animation of the demo level; `Scene` builds that level
  (`reload`), steps it (`update`), drops deleted objects (`purge_deleted`),
  keeps the camera on Mario and draws it (`render`).
- `tinyplat.controls` — input: `Key` scan codes, a `Keyboard` that tracks held
  keys and queues press and release events, the `KeyEventHandler` interface,
  and `SampleKeyHandler`, which steers a scene's Mario: left/right arrows walk,
  with A held they run, S jumps, DOWN sits, 1 and 2 set the level, K sets
  `goomba1` walking and R reloads the scene.

## A frame

```python
from tinyplat.controls import Key, Keyboard, SampleKeyHandler
from tinyplat.scene import Scene

scene = Scene()
keyboard = Keyboard()
handler = SampleKeyHandler(scene)

keyboard.press(Key.RIGHT)
keyboard.process(handler)   # held keys first, then queued key events
scene.update(16)            # move everything, resolve collisions, purge, move camera
commands = scene.render()   # list of DrawCommand for this frame
```

`Scene.update` gives every object the full object list for collision
checking, removes objects marked deleted (stomped goombas, collected coins)
and sets the camera so that Mario is centred horizontally, never left of 0.
`Scene.render` reads the scene's clock into the context and returns the draw
commands; Mario also writes `Coins: N` into `scene.ctx.title`.

## What it does not do

tinyplat opens no window, loads no images, plays no sound and reads no real
keyboard. A `Texture` only records a path; turning draw commands into pixels
and feeding key presses into a `Keyboard` is left to the caller. There is no
command-line program and no built-in game loop: you call `Keyboard.process`,
`Scene.update` and `Scene.render` yourself at whatever rate you like. Levels
are built in code by `Scene.reload`, not read from files.