"""Run command: start a motor within the limits of its regulation mode."""

import logging

from utils.errors import MotorValidationError

from .controller import MotorController, check_int
from .models import MotorAttribute, RegulationMode
from .tables import RUN_LIMITS, RUN_START

logger = logging.getLogger(__name__)


def run_motor(controller: MotorController, motor: str, speed: int) -> None:
    """
    Set the speed of the motor and run it.

    The regulation mode is read from the motor on every call. It decides both
    the legal range and the attribute written:

    - off: ``speed`` is written as power, range [-100, 100]
    - on: ``speed`` is written as target pulses per second, range [-2000, 2000]

    Args:
        controller: Controller used for all attribute access
        motor: Motor device id
        speed: Signed speed; negative values reverse the motor

    Raises:
        MotorValidationError: If speed is outside the mode's range. Nothing is
            written in that case.
    """
    mode = controller.read_regulation_mode(motor)
    check_int("speed", speed)
    low, high = RUN_LIMITS[mode]

    if mode is RegulationMode.ON:
        if speed > high or speed < low:
            raise MotorValidationError(
                f"The speed in regulation mode must be in range [{low}, {high}]."
            )
        controller.write_speed(motor, speed)
    elif mode is RegulationMode.OFF:
        if speed > high or speed < low:
            raise MotorValidationError(f"The speed must be in range [{low}, {high}].")
        controller.write_power(motor, speed)

    logger.info(f"Running motor {motor} at {speed} (regulation {mode.value})")
    controller.write_state(motor, MotorAttribute.RUN, RUN_START)
