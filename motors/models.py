"""Motor data models and enums."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Port(Enum):
    """Output ports on the controller hub."""

    A = "a"
    B = "b"
    C = "c"
    D = "d"

    @classmethod
    def parse(cls, value: Union["Port", str]) -> "Port":
        """Accept a Port or a port letter such as ``"a"`` or ``"B"``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"port must be one of A, B, C, D, got {value!r}") from None


class RegulationMode(Enum):
    """Regulation modes for tacho motors."""

    OFF = "off"  # duty cycle driven, -100 to 100
    ON = "on"  # speed regulated, -2000 to 2000 pulses per second


class StopMode(Enum):
    """Behaviour of the motor when it is stopped."""

    BRAKE = "brake"
    COAST = "coast"


class MotorAttribute(Enum):
    """Symbolic names of the attribute files exposed by a tacho motor."""

    PORT = "port"
    REGULATION_MODE = "regulation_mode"
    SPEED_READ = "speed_read"
    SPEED_WRITE = "speed_write"
    POWER_READ = "power_read"
    POWER_WRITE = "power_write"
    RUN = "run"
    STOP_MODE = "stop_mode"
    POSITION = "position"
    DUTY_CYCLE_READ = "duty_cycle_read"
    DUTY_CYCLE_WRITE = "duty_cycle_write"


@dataclass
class MotorState:
    """Snapshot of a single motor's attributes."""

    device_id: str
    port_name: Optional[str] = None
    regulation_mode: Optional[RegulationMode] = None
    speed: Optional[int] = None
    power: Optional[int] = None
    position: Optional[int] = None
    stop_mode: Optional[StopMode] = None
    error: Optional[str] = None
