# tests/test_registry.py

import pytest
from fakes.fake_store import FakeAttributeStore

from motors.models import MotorAttribute, Port
from motors.registry import DeviceRegistry, find_tacho_motor
from utils.config import MotorConfig
from utils.errors import AttributeIOError, MotorNotFoundError


class TestResolvePort:

    def test_resolves_matching_port(self, registry, store):
        store.add_motor("motor3", port_name="outC")
        assert registry.resolve_port(Port.A) == "motor0"
        assert registry.resolve_port(Port.C) == "motor3"

    def test_returns_none_when_port_empty(self, registry):
        assert registry.resolve_port(Port.D) is None

    def test_accepts_port_letters(self, registry):
        assert registry.resolve_port("a") == "motor0"
        assert registry.resolve_port("A") == "motor0"

    def test_rejects_unknown_port(self, registry):
        with pytest.raises(ValueError):
            registry.resolve_port("e")

    def test_first_match_wins(self, store):
        store.add_motor("motor1", port_name="outB")
        store.add_motor("motor2", port_name="outB")
        registry = DeviceRegistry(store=store, config=MotorConfig(root_path="/nonexistent"))
        assert registry.resolve_port(Port.B) == "motor1"

    def test_not_cached_across_replug(self, registry, store):
        assert registry.resolve_port(Port.A) == "motor0"
        store.unplug("motor0")
        store.add_motor("motor5", port_name="outA")
        assert registry.resolve_port(Port.A) == "motor5"

    def test_reads_port_of_each_device(self, registry, store):
        store.add_motor("motor1", port_name="outB")
        registry.resolve_port(Port.B)
        assert ("motor0", MotorAttribute.PORT) in store.reads
        assert ("motor1", MotorAttribute.PORT) in store.reads

    def test_io_errors_propagate(self, store):
        store.add_motor("motor1", port_name="outB")
        del store.files["motor0"]["port_name"]
        registry = DeviceRegistry(store=store, config=MotorConfig(root_path="/nonexistent"))
        with pytest.raises(AttributeIOError):
            registry.resolve_port(Port.B)

    def test_custom_port_names(self):
        store = FakeAttributeStore()
        store.add_motor("motor0", port_name="ev3-ports:outA")
        config = MotorConfig(root_path="/nonexistent", port_names={Port.A: "ev3-ports:outA"})
        registry = DeviceRegistry(store=store, config=config)
        assert registry.resolve_port(Port.A) == "motor0"


class TestRequirePort:

    def test_returns_device(self, registry):
        assert registry.require_port(Port.A) == "motor0"

    def test_raises_when_missing(self, registry):
        with pytest.raises(MotorNotFoundError, match="port B"):
            registry.require_port(Port.B)

    def test_not_found_is_lookup_error(self, registry):
        with pytest.raises(LookupError):
            registry.require_port("d")


class TestSysfsRegistry:

    def test_resolve_on_sysfs_tree(self, sysfs_root):
        registry = DeviceRegistry(config=MotorConfig(root_path=sysfs_root))
        assert sorted(registry.list_devices()) == ["motor0", "motor1"]
        assert registry.resolve_port(Port.B) == "motor0"
        assert registry.resolve_port(Port.C) == "motor1"
        assert registry.resolve_port(Port.A) is None

    def test_find_tacho_motor(self, sysfs_root):
        registry = DeviceRegistry(config=MotorConfig(root_path=sysfs_root))
        assert find_tacho_motor("c", registry=registry) == "motor1"

    def test_find_tacho_motor_uses_env_root(self, sysfs_root, monkeypatch):
        monkeypatch.setenv("TACHO_MOTOR_ROOT", str(sysfs_root))
        assert find_tacho_motor(Port.B) == "motor0"
