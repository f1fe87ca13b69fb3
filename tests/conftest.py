"""Pytest configuration - shared fixtures for the horde and hive cores."""
from __future__ import annotations

from pathlib import Path
import pytest

from horde_keyboard.config import HordeConfig
from horde_keyboard.hardware.haptics import HapticNotifier
from horde_keyboard.hive.hive_engine import HiveEngine
from horde_keyboard.horde.horde_engine import HordeEngine
from horde_keyboard.output.output_buffer import OutputBuffer

ROOT = Path(__file__).resolve().parents[1]

# Viewport used by most tests: 12 cols x 7 rows of radius-25 tiles
WIDTH = 480.0
HEIGHT = 360.0


@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture
def vibrations():
    """List that records every vibration pattern played."""
    return []


@pytest.fixture
def haptics(vibrations):
    """HapticNotifier whose backend records into `vibrations`."""
    return HapticNotifier(vibrations.append)


@pytest.fixture
def output():
    return OutputBuffer()


@pytest.fixture
def hive(output, haptics):
    return HiveEngine(WIDTH, HEIGHT, output, haptics=haptics)


@pytest.fixture
def horde(haptics):
    engine = HordeEngine(WIDTH, HEIGHT, config=HordeConfig(), haptics=haptics)
    engine.initialize(12345)
    return engine


@pytest.fixture(scope="session")
def qapp():
    """A QCoreApplication for tests that need Qt objects with timers."""
    from PyQt5.QtCore import QCoreApplication
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
