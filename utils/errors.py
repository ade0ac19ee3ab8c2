"""Custom exceptions for tacho motor control."""

from typing import Optional


class MotorError(Exception):
    """Base class for all motor control errors."""

    pass


class AttributeIOError(MotorError, OSError):
    """Raised when a motor attribute file cannot be read or written."""

    def __init__(self, message: str, device_id: Optional[str] = None, attribute: Optional[str] = None):
        super().__init__(message)
        self.device_id = device_id
        self.attribute = attribute


class DeviceNotConnectedError(AttributeIOError):
    """Raised when the motor's device directory no longer exists."""

    pass


class AttributeParseError(MotorError, ValueError):
    """Raised when a motor attribute holds text that cannot be parsed."""

    pass


class MotorValidationError(MotorError, ValueError):
    """Raised when a value is outside the range accepted by the motor."""

    pass


class MotorNotFoundError(MotorError, LookupError):
    """Raised when no motor is plugged into the requested port."""

    pass
