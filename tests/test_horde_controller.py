"""
Tests for HordeController frame timing and signals.
"""

import pytest

from horde_keyboard.config import HordeConfig
from horde_keyboard.horde.horde_controller import HordeController
from horde_keyboard.horde.horde_engine import HordeEngine


@pytest.fixture
def controller(qapp):
    engine = HordeEngine(480, 360, HordeConfig(press_probability=0.0,
                                                random_activity_probability=0.0))
    engine.initialize(1)
    ctrl = HordeController(engine)
    yield ctrl
    ctrl.stop()


def test_first_frame_has_zero_delta(controller):
    controller.advance_frame(100.0)
    assert controller.engine.now == 0.0
    controller.advance_frame(100.5)
    assert controller.engine.now == pytest.approx(0.5)


def test_backwards_clock_is_clamped(controller):
    controller.advance_frame(10.0)
    controller.advance_frame(9.0)
    assert controller.engine.now == 0.0


def test_frame_signal_carries_timestamp(controller):
    stamps = []
    controller.frame_advanced.connect(stamps.append)
    controller.advance_frame(3.25)
    assert stamps == [3.25]


def test_start_stop(controller):
    assert not controller.running
    controller.start()
    assert controller.running
    controller.stop()
    assert not controller.running


def test_restart_resets_delta(controller):
    controller.start()
    controller.advance_frame(1.0)
    controller.stop()
    controller.start()
    controller.advance_frame(50.0)
    assert controller.engine.now == 0.0


def test_agent_count_signal(controller):
    counts = []
    controller.agent_count_changed.connect(counts.append)
    controller.add_agent()
    controller.remove_agent()
    assert counts == [51, 50]


def test_remove_at_floor_is_silent(qapp):
    engine = HordeEngine(480, 360, HordeConfig(initial_agents=10))
    engine.initialize(1)
    controller = HordeController(engine)
    counts = []
    controller.agent_count_changed.connect(counts.append)
    controller.remove_agent()
    assert counts == []
    assert engine.agent_count == 10


def test_chorus_signal(controller):
    states = []
    controller.chorus_mode_changed.connect(states.append)
    assert controller.toggle_chorus_mode() is True
    controller.toggle_chorus_mode()
    assert states == [True, False]


def test_disperse(controller):
    before = [(a.vx, a.vy) for a in controller.engine.agents]
    controller.disperse_swarm()
    assert [(a.vx, a.vy) for a in controller.engine.agents] != before
