"""Command-line script to read and display the state of all tacho motors.

Example:
    python read_device.py
    python read_device.py --continuous --interval 0.5
    TACHO_MOTOR_ROOT=/tmp/tacho-motor python read_device.py
"""

import argparse
import logging
import sys
import time
from typing import List

from dotenv import load_dotenv
from rich import box
from rich.console import Console
from rich.live import Live
from rich.table import Table

from motors import DeviceRegistry, MotorAttribute, MotorController, MotorState
from utils import MotorError, setup_logging
from utils.config import MotorConfig

logger = logging.getLogger(__name__)


def read_motor_state(controller: MotorController, motor: str) -> MotorState:
    """
    Read a snapshot of one motor.

    Errors are recorded in the snapshot instead of raised, so one unplugged
    motor does not hide the others.
    """
    state = MotorState(device_id=motor)
    try:
        state.port_name = controller.read_state(motor, MotorAttribute.PORT)
        state.regulation_mode = controller.read_regulation_mode(motor)
        state.speed = controller.read_speed(motor)
        state.power = controller.read_power(motor)
        state.position = controller.current_position(motor)
        state.stop_mode = controller.read_stop_mode(motor)
    except MotorError as e:
        logger.debug(f"Failed to read motor {motor}: {e}")
        state.error = str(e)
    return state


def read_all_motors(registry: DeviceRegistry, controller: MotorController) -> List[MotorState]:
    """Read a snapshot of every visible motor, ordered by port name."""
    states = [read_motor_state(controller, motor) for motor in registry.list_devices()]
    return sorted(states, key=lambda s: (s.port_name or "", s.device_id))


def _fmt(value) -> str:
    if value is None:
        return "-"
    if hasattr(value, "value"):
        return str(value.value)
    return str(value)


def build_table(states: List[MotorState]) -> Table:
    """Build a rich table of motor snapshots."""
    table = Table(title="Tacho Motors", box=box.SIMPLE_HEAVY)
    table.add_column("Device", style="bold")
    table.add_column("Port")
    table.add_column("Regulation")
    table.add_column("Speed (pps)", justify="right")
    table.add_column("Power (%)", justify="right")
    table.add_column("Position", justify="right")
    table.add_column("Stop mode")
    table.add_column("Error", style="red")

    for state in states:
        table.add_row(
            state.device_id,
            _fmt(state.port_name),
            _fmt(state.regulation_mode),
            _fmt(state.speed),
            _fmt(state.power),
            _fmt(state.position),
            _fmt(state.stop_mode),
            state.error or "",
        )

    if not states:
        table.caption = "No tacho motors detected."
    return table


def main():
    """Main entry point for read_device script."""
    load_dotenv()

    parser = argparse.ArgumentParser(description="Read and display the state of all tacho motors")
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Motor class directory (default: $TACHO_MOTOR_ROOT or /sys/class/tacho-motor)",
    )
    parser.add_argument(
        "--continuous",
        action="store_true",
        help="Continuously read and display data (press Ctrl+C to stop)",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=0.5,
        help="Update interval in seconds for continuous mode (default: 0.5)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    config = MotorConfig(root_path=args.root)
    registry = DeviceRegistry(config=config)
    controller = MotorController(store=registry.store, config=config)
    console = Console()

    try:
        if args.continuous:
            with Live(build_table(read_all_motors(registry, controller)), console=console, refresh_per_second=4) as live:
                try:
                    while True:
                        time.sleep(args.interval)
                        live.update(build_table(read_all_motors(registry, controller)))
                except KeyboardInterrupt:
                    pass
            console.print("Stopped by user.")
        else:
            console.print(build_table(read_all_motors(registry, controller)))
    except MotorError as e:
        print(f"Error reading motors: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
