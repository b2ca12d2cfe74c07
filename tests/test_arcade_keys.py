import pytest

arcade = pytest.importorskip("arcade")

from roguemap.app.arcade_app import _KEY_NAMES  # noqa: E402
from roguemap.input import InputAction, InputMapper  # noqa: E402


@pytest.mark.parametrize(
    "symbol, action",
    [
        (arcade.key.LEFT, InputAction.MOVE_LEFT),
        (arcade.key.RIGHT, InputAction.MOVE_RIGHT),
        (arcade.key.UP, InputAction.MOVE_UP),
        (arcade.key.DOWN, InputAction.MOVE_DOWN),
        (arcade.key.H, InputAction.MOVE_LEFT),
        (arcade.key.S, InputAction.MOVE_DOWN),
        (arcade.key.ESCAPE, InputAction.QUIT),
        (arcade.key.F11, InputAction.TOGGLE_DISPLAY),
    ],
)
def test_arcade_symbols_reach_default_bindings(symbol, action):
    mapper = InputMapper.default()
    assert mapper.translate_key(_KEY_NAMES[symbol]) is action


def test_alt_enter_chord_from_arcade_symbol():
    mapper = InputMapper.default()
    name = _KEY_NAMES[arcade.key.ENTER]
    assert mapper.translate_key(name, modifiers=["ALT"]) is InputAction.TOGGLE_DISPLAY
    assert mapper.translate_key(name) is None


def test_no_motion_or_modifier_names():
    assert not any(n.startswith(("MOTION_", "MOD_")) for n in _KEY_NAMES.values())
