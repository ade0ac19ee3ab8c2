"""Typed read/write operations for tacho motors."""

import logging
from typing import Optional, Union

from utils.config import MotorConfig
from utils.errors import AttributeParseError, MotorValidationError

from .models import MotorAttribute, RegulationMode, StopMode
from .store import AttributeStore, SysfsAttributeStore
from .tables import DUTY_CYCLE_MAX, DUTY_CYCLE_MIN, RUN_STOP

logger = logging.getLogger(__name__)


def check_int(name: str, value: object) -> int:
    """Reject anything that is not a plain integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def _parse_int(text: str, device_id: str, attribute: MotorAttribute) -> int:
    """Parse a base-10 integer attribute."""
    try:
        return int(text.strip(), 10)
    except ValueError:
        raise AttributeParseError(
            f"Motor {device_id} returned non-numeric {attribute.value}: {text!r}"
        ) from None


class MotorController:
    """
    Typed access to a tacho motor's attributes.

    Each method takes the motor's device id (as returned by
    DeviceRegistry.resolve_port) and performs a single attribute access.
    Nothing is cached between calls.

    Example:
        registry = DeviceRegistry()
        controller = MotorController()
        motor = registry.require_port(Port.A)
        controller.set_regulation_mode(motor, RegulationMode.ON)
        controller.run(motor, 500)
        controller.stop(motor)
    """

    def __init__(
        self,
        store: Optional[AttributeStore] = None,
        config: Optional[MotorConfig] = None,
    ):
        """
        Initialize the controller.

        Args:
            store: Attribute store to use (default: sysfs store at config.root_path)
            config: Motor configuration (default: MotorConfig())
        """
        self.config = config or MotorConfig()
        self.store = store or SysfsAttributeStore(self.config.root_path)

    def write_state(self, motor: str, attribute: MotorAttribute, value: object) -> None:
        """Write a raw attribute value."""
        self.store.write(motor, attribute, value)

    def read_state(self, motor: str, attribute: MotorAttribute) -> str:
        """Read a raw attribute value."""
        return self.store.read(motor, attribute)

    def _read_int(self, motor: str, attribute: MotorAttribute) -> int:
        return _parse_int(self.read_state(motor, attribute), motor, attribute)

    def write_speed(self, motor: str, speed: int) -> None:
        """Set the target speed (pulses per second) used in regulation mode."""
        self.write_state(motor, MotorAttribute.SPEED_WRITE, check_int("speed", speed))

    def read_speed(self, motor: str) -> int:
        """Read the current speed in pulses per second."""
        return self._read_int(motor, MotorAttribute.SPEED_READ)

    def write_power(self, motor: str, power: int) -> None:
        """Set the target power (duty cycle setpoint) used without regulation."""
        self.write_state(motor, MotorAttribute.POWER_WRITE, check_int("power", power))

    def read_power(self, motor: str) -> int:
        """Read the power currently applied to the motor."""
        return self._read_int(motor, MotorAttribute.POWER_READ)

    def set_duty_cycle(self, motor: str, value: int) -> None:
        """
        Set the duty cycle.

        The duty cycle is useful when you just want to turn the motor on and
        are not too concerned with how stable the speed is. The sign gives the
        direction. It can be updated while the motor is running.

        Args:
            motor: Motor device id
            value: Duty cycle in percent, -100 to 100

        Raises:
            MotorValidationError: If value is outside [-100, 100]; nothing is written
        """
        check_int("duty cycle", value)
        if value < DUTY_CYCLE_MIN or value > DUTY_CYCLE_MAX:
            raise MotorValidationError(
                f"The duty cycle must be in range [{DUTY_CYCLE_MIN}, {DUTY_CYCLE_MAX}], got {value}."
            )
        self.write_state(motor, MotorAttribute.DUTY_CYCLE_WRITE, value)

    def read_duty_cycle(self, motor: str) -> int:
        return self._read_int(motor, MotorAttribute.DUTY_CYCLE_READ)

    def set_regulation_mode(self, motor: str, mode: Union[RegulationMode, str]) -> None:
        """
        Set the regulation mode.

        With regulation off the driver sends a fixed share of the battery
        voltage, so a loaded motor slows down. With regulation on the driver
        holds the speed set in pulses_per_second_sp and adds power under load.
        """
        mode = RegulationMode(mode)
        self.write_state(motor, MotorAttribute.REGULATION_MODE, mode.value)

    def read_regulation_mode(self, motor: str) -> RegulationMode:
        text = self.read_state(motor, MotorAttribute.REGULATION_MODE)
        try:
            return RegulationMode(text.strip())
        except ValueError:
            raise AttributeParseError(
                f"Motor {motor} returned unknown regulation mode: {text!r}"
            ) from None

    def enable_brake_mode(self, motor: str) -> None:
        """Make the motor brake when stopped."""
        self.write_state(motor, MotorAttribute.STOP_MODE, StopMode.BRAKE.value)

    def disable_brake_mode(self, motor: str) -> None:
        """Make the motor coast when stopped (the driver's default)."""
        self.write_state(motor, MotorAttribute.STOP_MODE, StopMode.COAST.value)

    def read_stop_mode(self, motor: str) -> StopMode:
        text = self.read_state(motor, MotorAttribute.STOP_MODE)
        try:
            return StopMode(text.strip())
        except ValueError:
            raise AttributeParseError(
                f"Motor {motor} returned unknown stop mode: {text!r}"
            ) from None

    def current_position(self, motor: str) -> int:
        """Read the tacho position in pulses."""
        return self._read_int(motor, MotorAttribute.POSITION)

    def initialise_position(self, motor: str, position: int) -> None:
        """Set the tacho position counter."""
        self.write_state(motor, MotorAttribute.POSITION, check_int("position", position))

    def run(self, motor: str, speed: int) -> None:
        """
        Set the speed of the motor and start it.

        Without regulation ``speed`` is the power in percent (-100 to 100);
        with regulation it is the target in pulses per second (-2000 to 2000).
        Negative values reverse the motor in both modes.
        """
        from .run import run_motor

        run_motor(self, motor, speed)

    def stop(self, motor: str) -> None:
        """Stop the motor."""
        logger.info(f"Stopping motor {motor}")
        self.write_state(motor, MotorAttribute.RUN, RUN_STOP)
