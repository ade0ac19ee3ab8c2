"""Configuration for tacho motor access."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from motors.models import Port

MOTOR_ROOT_ENV = "TACHO_MOTOR_ROOT"


def get_motor_root() -> Path:
    """Get the directory holding one sub-directory per tacho motor.

    TACHO_MOTOR_ROOT overrides the sysfs default, which lets the tools run
    against a copy of the tree on a development machine.
    """
    from motors.tables import ROOT_MOTOR_PATH

    root = os.getenv(MOTOR_ROOT_ENV)
    if root and root.strip():
        return Path(root.strip())
    return Path(ROOT_MOTOR_PATH)


@dataclass
class MotorConfig:
    """Configuration for motor lookup and attribute access."""

    root_path: Optional[Path] = None
    port_names: Optional[Dict["Port", str]] = None  # None to use the ev3dev names

    def __post_init__(self):
        """Fill in defaults for anything not provided."""
        from motors.tables import PORT_NAMES

        if self.root_path is None:
            self.root_path = get_motor_root()
        else:
            self.root_path = Path(self.root_path)
        if self.port_names is None:
            self.port_names = dict(PORT_NAMES)

    def port_name(self, port: "Port") -> str:
        """Port name the driver reports for ``port``."""
        return self.port_names[port]
