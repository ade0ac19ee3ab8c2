"""Attribute tables for ev3dev tacho motors.

Based on the tacho-motor class of the ev3dev kernel drivers.
Each detected motor is a directory under the root path; each attribute is a
text file inside that directory.
"""

from types import MappingProxyType

from .models import MotorAttribute, Port, RegulationMode

ROOT_MOTOR_PATH = "/sys/class/tacho-motor"

# Symbolic attribute -> file name inside the motor's directory
MOTOR_ATTRIBUTES = MappingProxyType(
    {
        MotorAttribute.PORT: "port_name",  # read-only
        MotorAttribute.REGULATION_MODE: "regulation_mode",
        MotorAttribute.SPEED_READ: "pulses_per_second",  # read-only
        MotorAttribute.SPEED_WRITE: "pulses_per_second_sp",
        MotorAttribute.POWER_READ: "duty_cycle",  # read-only
        MotorAttribute.POWER_WRITE: "duty_cycle_sp",
        MotorAttribute.RUN: "run",
        MotorAttribute.STOP_MODE: "stop_mode",
        MotorAttribute.POSITION: "position",
        MotorAttribute.DUTY_CYCLE_READ: "duty_cycle",  # read-only
        MotorAttribute.DUTY_CYCLE_WRITE: "duty_cycle_sp",
    }
)

# Port -> port name reported in the port_name attribute
PORT_NAMES = MappingProxyType(
    {
        Port.A: "outA",
        Port.B: "outB",
        Port.C: "outC",
        Port.D: "outD",
    }
)

# Duty cycle limits (percent, sign gives direction)
DUTY_CYCLE_MIN = -100
DUTY_CYCLE_MAX = 100

# Speed limits in regulation mode (pulses per second)
SPEED_SP_MIN = -2000
SPEED_SP_MAX = 2000

# Regulation mode -> (min, max) accepted by a run command
RUN_LIMITS = MappingProxyType(
    {
        RegulationMode.OFF: (DUTY_CYCLE_MIN, DUTY_CYCLE_MAX),
        RegulationMode.ON: (SPEED_SP_MIN, SPEED_SP_MAX),
    }
)

# Values of the run attribute
RUN_START = 1
RUN_STOP = 0
