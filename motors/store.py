"""Attribute store for tacho motors.

Every motor attribute is a small text file. The store composes the path from
the root directory, the motor's device id and the attribute's file name, and
reads or writes the text as-is. Nothing is cached; each call touches the file.
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

from utils.errors import AttributeIOError, AttributeParseError, DeviceNotConnectedError

from .models import MotorAttribute
from .tables import MOTOR_ATTRIBUTES, ROOT_MOTOR_PATH

logger = logging.getLogger(__name__)


class AttributeStore(ABC):
    """Abstract base class for motor attribute storage."""

    @abstractmethod
    def read(self, device_id: str, attribute: MotorAttribute) -> str:
        """
        Read an attribute of a motor.

        Args:
            device_id: Motor device id (e.g. "motor0")
            attribute: Attribute to read

        Returns:
            Attribute text without the trailing newline
        """
        pass

    @abstractmethod
    def write(self, device_id: str, attribute: MotorAttribute, value: object) -> None:
        """
        Write an attribute of a motor.

        Args:
            device_id: Motor device id (e.g. "motor0")
            attribute: Attribute to write
            value: Value to store, converted with str()
        """
        pass

    @abstractmethod
    def list_devices(self) -> List[str]:
        """List the device ids of all currently visible motors."""
        pass


class SysfsAttributeStore(AttributeStore):
    """Attribute store backed by the tacho-motor sysfs class directory."""

    def __init__(self, root_path: Optional[Union[str, Path]] = None):
        """
        Initialize the store.

        Args:
            root_path: Directory holding one sub-directory per motor
                (default: /sys/class/tacho-motor)
        """
        self.root_path = Path(root_path) if root_path is not None else Path(ROOT_MOTOR_PATH)

    def attribute_path(self, device_id: str, attribute: MotorAttribute) -> Path:
        """Path of the file backing ``attribute`` for ``device_id``."""
        return self.root_path / device_id / MOTOR_ATTRIBUTES[attribute]

    def read(self, device_id: str, attribute: MotorAttribute) -> str:
        path = self.attribute_path(device_id, attribute)
        try:
            with open(path, "r", encoding="utf-8") as f:
                value = f.read()
        except OSError as e:
            raise self._io_error(e, "read", device_id, attribute) from e
        except UnicodeDecodeError as e:
            raise AttributeParseError(
                f"Motor {device_id} returned undecodable {MOTOR_ATTRIBUTES[attribute]}: {e}"
            ) from e

        value = value.rstrip("\r\n")
        logger.debug(f"Read {path} = {value!r}")
        return value

    def write(self, device_id: str, attribute: MotorAttribute, value: object) -> None:
        path = self.attribute_path(device_id, attribute)
        logger.debug(f"Write {path} = {value!r}")
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(str(value))
        except OSError as e:
            raise self._io_error(e, "write", device_id, attribute) from e

    def list_devices(self) -> List[str]:
        try:
            entries = os.listdir(self.root_path)
        except OSError as e:
            raise AttributeIOError(
                f"Failed to list motors in {self.root_path}: {e}"
            ) from e
        return [name for name in entries if (self.root_path / name).is_dir()]

    def _io_error(
        self, error: OSError, action: str, device_id: str, attribute: MotorAttribute
    ) -> AttributeIOError:
        """Map an OSError to DeviceNotConnectedError or AttributeIOError."""
        file_name = MOTOR_ATTRIBUTES[attribute]
        if not (self.root_path / device_id).is_dir():
            return DeviceNotConnectedError(
                f"Motor {device_id} is not connected (no {self.root_path / device_id})",
                device_id=device_id,
                attribute=file_name,
            )
        return AttributeIOError(
            f"Failed to {action} {file_name} of motor {device_id}: {error}",
            device_id=device_id,
            attribute=file_name,
        )
