from pathlib import Path

DEFAULT_MOTOR_FILES = {
    "regulation_mode": "off",
    "pulses_per_second": "0",
    "pulses_per_second_sp": "0",
    "duty_cycle": "0",
    "duty_cycle_sp": "0",
    "run": "0",
    "stop_mode": "coast",
    "position": "0",
}


def make_sysfs_motor(root: Path, device_id: str, port_name: str, **files: str) -> Path:
    """
    Create a motor directory the way the tacho-motor class exposes it:
    one file per attribute, each terminated by a newline.
    """
    motor_dir = root / device_id
    motor_dir.mkdir(parents=True)
    contents = dict(DEFAULT_MOTOR_FILES, port_name=port_name)
    contents.update(files)
    for name, text in contents.items():
        (motor_dir / name).write_text(f"{text}\n")
    return motor_dir


def read_sysfs_file(root: Path, device_id: str, file_name: str) -> str:
    return (root / device_id / file_name).read_text()
