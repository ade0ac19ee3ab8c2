"""Tacho motor lookup, attribute access and run commands."""

from .controller import MotorController
from .models import MotorAttribute, MotorState, Port, RegulationMode, StopMode
from .registry import DeviceRegistry, find_tacho_motor
from .run import run_motor
from .store import AttributeStore, SysfsAttributeStore

__all__ = [
    "AttributeStore",
    "SysfsAttributeStore",
    "DeviceRegistry",
    "find_tacho_motor",
    "MotorController",
    "run_motor",
    "MotorAttribute",
    "MotorState",
    "Port",
    "RegulationMode",
    "StopMode",
]
