# tests/conftest.py

import pytest
from fakes.fake_store import FakeAttributeStore
from helpers import make_sysfs_motor

from motors import DeviceRegistry, MotorController
from utils.config import MOTOR_ROOT_ENV, MotorConfig


@pytest.fixture(autouse=True)
def _no_root_override(monkeypatch):
    """Keep a developer's TACHO_MOTOR_ROOT from leaking into tests."""
    monkeypatch.delenv(MOTOR_ROOT_ENV, raising=False)


@pytest.fixture
def store():
    s = FakeAttributeStore(mirror_setpoints=True)
    s.add_motor("motor0", port_name="outA")
    return s


@pytest.fixture
def controller(store):
    return MotorController(store=store, config=MotorConfig(root_path="/nonexistent"))


@pytest.fixture
def registry(store):
    return DeviceRegistry(store=store, config=MotorConfig(root_path="/nonexistent"))


@pytest.fixture
def sysfs_root(tmp_path):
    """A tacho-motor class directory with motors in ports B and C."""
    root = tmp_path / "tacho-motor"
    root.mkdir()
    make_sysfs_motor(root, "motor0", "outB")
    make_sysfs_motor(root, "motor1", "outC", regulation_mode="on")
    return root
