"""Command-line script to find the tacho motor plugged into a port.

Example:
    python find_motor.py --port A
    or
    tacho-find-motor --port A
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from motors import DeviceRegistry
from utils import MotorError, setup_logging
from utils.config import MotorConfig


def main():
    """Main entry point for find_motor script."""
    load_dotenv()

    parser = argparse.ArgumentParser(description="Find the tacho motor plugged into a port")
    parser.add_argument(
        "--port",
        type=str,
        required=True,
        help="Output port: A, B, C or D",
    )
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Motor class directory (default: $TACHO_MOTOR_ROOT or /sys/class/tacho-motor)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    registry = DeviceRegistry(config=MotorConfig(root_path=args.root))

    try:
        motor = registry.resolve_port(args.port)
    except (MotorError, ValueError) as e:
        print(f"\n✗ Error: {e}", file=sys.stderr)
        sys.exit(1)

    if motor is None:
        print(f"\n✗ No motor found in port {args.port.upper()}", file=sys.stderr)
        sys.exit(1)

    print(motor)
    sys.exit(0)


if __name__ == "__main__":
    main()
