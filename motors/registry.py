"""Lookup of tacho motors by output port."""

import logging
from typing import List, Optional, Union

from utils.config import MotorConfig
from utils.errors import MotorNotFoundError

from .models import MotorAttribute, Port
from .store import AttributeStore, SysfsAttributeStore

logger = logging.getLogger(__name__)


class DeviceRegistry:
    """Enumerates tacho motors and resolves ports to device ids.

    Device ids are never cached: a motor may be unplugged and plugged back in
    under a new id between two calls, so every lookup scans the current
    listing.
    """

    def __init__(
        self,
        store: Optional[AttributeStore] = None,
        config: Optional[MotorConfig] = None,
    ):
        """
        Initialize the registry.

        Args:
            store: Attribute store to read from (default: sysfs store at config.root_path)
            config: Motor configuration (default: MotorConfig())
        """
        self.config = config or MotorConfig()
        self.store = store or SysfsAttributeStore(self.config.root_path)

    def list_devices(self) -> List[str]:
        """List the device ids of all currently visible motors."""
        return self.store.list_devices()

    def resolve_port(self, port: Union[Port, str]) -> Optional[str]:
        """
        Find the motor plugged into ``port``.

        Args:
            port: Port enum member or port letter ("a" .. "d")

        Returns:
            Device id of the first motor reporting that port, or None if no
            motor is plugged in
        """
        port = Port.parse(port)
        port_name = self.config.port_name(port)

        for device_id in self.list_devices():
            if self.store.read(device_id, MotorAttribute.PORT) == port_name:
                logger.info(f"Port {port.name} ({port_name}) -> {device_id}")
                return device_id

        logger.warning(f"No motor found in port {port.name} ({port_name})")
        return None

    def require_port(self, port: Union[Port, str]) -> str:
        """Like resolve_port, but raise MotorNotFoundError when nothing is plugged in."""
        device_id = self.resolve_port(port)
        if device_id is None:
            raise MotorNotFoundError(f"No tacho motor found in port {Port.parse(port).name}")
        return device_id


def find_tacho_motor(
    port: Union[Port, str], registry: Optional[DeviceRegistry] = None
) -> Optional[str]:
    """Find the tacho motor plugged into ``port``. Ports are A, B, C and D."""
    registry = registry or DeviceRegistry()
    return registry.resolve_port(port)
