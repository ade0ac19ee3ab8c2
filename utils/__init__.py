"""Tacho motor utility modules."""

from utils.errors import (
    AttributeIOError,
    AttributeParseError,
    DeviceNotConnectedError,
    MotorError,
    MotorNotFoundError,
    MotorValidationError,
)
from utils.utils import setup_logging

__all__ = [
    "setup_logging",
    "MotorError",
    "AttributeIOError",
    "DeviceNotConnectedError",
    "AttributeParseError",
    "MotorValidationError",
    "MotorNotFoundError",
]
