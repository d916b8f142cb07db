import pytest

from tinyplat.controls import Key, Keyboard, KeyEventHandler, SampleKeyHandler
from tinyplat.goomba import GOOMBA_WALKING_SPEED, GoombaState
from tinyplat.mario import MARIO_JUMP_SPEED_Y, MarioLevel, MarioState
from tinyplat.scene import Scene


class Recorder(KeyEventHandler):
    def __init__(self):
        self.calls = []

    def key_state(self, keyboard):
        self.calls.append(("state", keyboard.is_key_down(Key.A)))

    def on_key_down(self, key):
        self.calls.append(("down", key))

    def on_key_up(self, key):
        self.calls.append(("up", key))


@pytest.fixture
def scene():
    return Scene(clock=lambda: 0)


@pytest.fixture
def handler(scene):
    return SampleKeyHandler(scene)


def test_keyboard_tracks_held_keys():
    keyboard = Keyboard()
    keyboard.press(Key.A)
    assert keyboard.is_key_down(Key.A)
    keyboard.release(Key.A)
    assert not keyboard.is_key_down(Key.A)


def test_keyboard_dispatches_state_then_events_in_order():
    keyboard = Keyboard()
    recorder = Recorder()
    keyboard.press(Key.A)
    keyboard.press(Key.S)
    keyboard.release(Key.S)
    keyboard.process(recorder)
    assert recorder.calls == [
        ("state", True),
        ("down", Key.S.value if False else Key.A),
        ("down", Key.S),
        ("up", Key.S),
    ]


def test_keyboard_events_are_consumed():
    keyboard = Keyboard()
    recorder = Recorder()
    keyboard.press(Key.A)
    keyboard.press(Key.A)
    keyboard.process(recorder)
    keyboard.process(recorder)
    assert recorder.calls == [("state", True), ("down", Key.A), ("state", True)]


def test_handler_cannot_be_abstract():
    with pytest.raises(TypeError):
        KeyEventHandler()


@pytest.mark.parametrize(
    "keys, expected",
    [
        ((Key.RIGHT,), MarioState.WALKING_RIGHT),
        ((Key.RIGHT, Key.A), MarioState.RUNNING_RIGHT),
        ((Key.LEFT,), MarioState.WALKING_LEFT),
        ((Key.LEFT, Key.A), MarioState.RUNNING_LEFT),
        ((), MarioState.IDLE),
    ],
)
def test_key_state_moves_mario(scene, handler, keys, expected):
    keyboard = Keyboard()
    for key in keys:
        keyboard.press(key)
    handler.key_state(keyboard)
    assert scene.mario.state == expected


def test_number_keys_change_level(scene, handler):
    handler.on_key_down(Key.ONE)
    assert scene.mario.level == MarioLevel.SMALL
    handler.on_key_down(Key.TWO)
    assert scene.mario.level == MarioLevel.BIG


def test_jump_and_release(scene, handler):
    mario = scene.mario
    mario.is_on_platform = True
    handler.on_key_down(Key.S)
    assert mario.vy == -MARIO_JUMP_SPEED_Y
    handler.on_key_up(Key.S)
    assert mario.vy == -MARIO_JUMP_SPEED_Y / 2


def test_sit_and_stand(scene, handler):
    mario = scene.mario
    mario.is_on_platform = True
    keyboard = Keyboard()
    keyboard.press(Key.DOWN)
    keyboard.process(handler)
    assert mario.is_sitting
    assert mario.state == MarioState.IDLE
    keyboard.release(Key.DOWN)
    keyboard.process(handler)
    assert not mario.is_sitting


def test_k_makes_goomba_walk(scene, handler):
    scene.goomba1.vx = 0.0
    handler.on_key_down(Key.K)
    assert scene.goomba1.state == GoombaState.WALKING
    assert scene.goomba1.vx == -GOOMBA_WALKING_SPEED


def test_r_reloads_scene(scene, handler):
    old_mario = scene.mario
    handler.on_key_down(Key.R)
    assert scene.mario is not old_mario
    handler.on_key_down(Key.ONE)
    assert scene.mario.level == MarioLevel.SMALL
    assert old_mario.level == MarioLevel.BIG