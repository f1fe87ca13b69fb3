"""
Tests for AppContext wiring and the control-surface actions.
"""

import pytest

from horde_keyboard.app_context import AppContext
from horde_keyboard.config import HordeConfig

from conftest import WIDTH, HEIGHT


@pytest.fixture
def context(vibrations):
    return AppContext.build(WIDTH, HEIGHT, HordeConfig(seed=42), vibrate_fn=vibrations.append)


def test_build_wires_components(context):
    assert context.seed == 42
    assert context.horde.initialized
    assert context.horde.agent_count == 50
    assert len(context.hive.tiles) == 84


def test_build_without_seed_picks_one():
    context = AppContext.build(WIDTH, HEIGHT)
    assert isinstance(context.seed, int)
    assert context.horde.initialized


def test_same_seed_same_swarm():
    a = AppContext.build(WIDTH, HEIGHT, HordeConfig(seed=5))
    b = AppContext.build(WIDTH, HEIGHT, HordeConfig(seed=5))
    assert [(m.x, m.y) for m in a.horde.agents] == [(m.x, m.y) for m in b.horde.agents]


def test_haptics_start_from_config(vibrations):
    context = AppContext.build(WIDTH, HEIGHT, HordeConfig(haptics_enabled=False),
                               vibrate_fn=vibrations.append)
    context.space()
    assert vibrations == []


def test_initial_state(context):
    assert context.get_state() == {
        "haptics_enabled": True,
        "chorus_mode": False,
        "agent_count": 50,
        "current_text": "",
    }


def test_toggles_reflected_in_state(context):
    assert context.toggle_haptics() is False
    assert context.toggle_chorus_mode() is True
    state = context.get_state()
    assert state["haptics_enabled"] is False
    assert state["chorus_mode"] is True


def test_keys_edit_output(context, vibrations):
    context.output.append_character("hi")
    context.space()
    context.output.append_character("yo")
    context.backspace()
    context.new_line()
    assert context.get_state()["current_text"] == "hi y\n> "
    assert vibrations == [(50,), (50,), (100,)]


def test_clear_output(context):
    context.add_text("banner\n")
    context.clear_output()
    assert context.output.get_text() == ""


def test_hive_types_into_shared_output(context):
    from horde_keyboard.hive.hive_engine import PointerEventKind
    tile = context.hive.tiles[0]
    context.hive.handle_pointer_event(PointerEventKind.DOWN, (tile.x, tile.y), 0.0)
    context.hive.handle_pointer_event(PointerEventKind.UP, (tile.x, tile.y), 0.1)
    assert context.get_state()["current_text"] == "q"


def test_resize_reaches_both_cores(context):
    context.resize(240, 180)
    assert len(context.hive.tiles) == 18
    assert context.horde.width == 240
    assert context.horde.height == 180
