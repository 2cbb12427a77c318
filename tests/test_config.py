"""Tests for RobotConfig"""

import pytest
import robot_config
from robot_config import RobotConfig


ENV_VARS = (
    "ROBOT_ACTUATOR",
    "ROBOT_SERIAL_PORT",
    "ROBOT_SERIAL_BAUD",
    "ROBOT_POLL_MS",
    "ROBOT_AXIS_DEADZONE",
    "ROBOT_STICK_DEADZONE",
    "ROBOT_SENSITIVITY",
    "ROBOT_MAX_FORWARD_SPEED",
    "ROBOT_MAX_ROTATION_SPEED",
    "ROBOT_MAX_STRAFE_SPEED",
    "ROBOT_DEBUG",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Start from an empty ROBOT_* environment, restored afterwards"""
    for name in ENV_VARS:
        # setenv first so values written by load_dotenv are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    """Test defaults without any .env"""
    config = RobotConfig()

    assert config.actuator == "log"
    assert config.serial_port is None
    assert config.serial_baud == 9600
    assert config.poll_ms == 16
    assert config.axis_deadzone == 0.1
    assert config.stick_deadzone == 0.15
    assert config.sensitivity == 1.0
    assert config.debug is False
    assert config.validate() == (True, [])


def test_environment_overrides(monkeypatch):
    """Test values come from the environment"""
    monkeypatch.setenv("ROBOT_ACTUATOR", " Serial ")
    monkeypatch.setenv("ROBOT_SERIAL_PORT", "/dev/ttyUSB0")
    monkeypatch.setenv("ROBOT_SERIAL_BAUD", "115200")
    monkeypatch.setenv("ROBOT_POLL_MS", "20")

    config = RobotConfig()

    assert config.actuator == "serial"
    assert config.serial_port == "/dev/ttyUSB0"
    assert config.serial_baud == 115200
    assert config.supervisor_config().poll_interval == 0.02
    assert config.validate() == (True, [])


def test_env_file_is_loaded(tmp_path):
    """Test a .env file populates the configuration"""
    env_file = tmp_path / "robot.env"
    env_file.write_text(
        "ROBOT_STICK_DEADZONE=0.2\n"
        "ROBOT_SENSITIVITY=1.5\n"
        "ROBOT_MAX_FORWARD_SPEED=0.6\n"
    )

    config = RobotConfig(str(env_file))
    mapper = config.mapper_config()

    assert mapper.deadzone == 0.2
    assert mapper.sensitivity == 1.5
    assert mapper.max_forward_speed == 0.6
    assert mapper.max_rotation_speed == 1.0


def test_default_env_file_in_cwd(tmp_path):
    """Test .env in the working directory is picked up"""
    (tmp_path / ".env").write_text("ROBOT_AXIS_DEADZONE=0.05\n")

    assert RobotConfig().classifier_config().deadzone == 0.05


def test_environment_beats_env_file(tmp_path, monkeypatch):
    """Test exported variables are not overridden by the file"""
    env_file = tmp_path / "robot.env"
    env_file.write_text("ROBOT_POLL_MS=50\n")
    monkeypatch.setenv("ROBOT_POLL_MS", "10")

    assert RobotConfig(str(env_file)).poll_ms == 10


@pytest.mark.parametrize("value,expected", [
    ("1", True),
    ("true", True),
    ("Yes", True),
    ("on", True),
    ("0", False),
    ("off", False),
    ("", False),
])
def test_debug_flag(monkeypatch, value, expected):
    """Test debug truthy spellings"""
    monkeypatch.setenv("ROBOT_DEBUG", value)
    assert RobotConfig().debug is expected


def test_validate_serial_needs_port(monkeypatch):
    """Test serial actuator requires a port"""
    monkeypatch.setenv("ROBOT_ACTUATOR", "serial")

    is_valid, errors = RobotConfig().validate()

    assert is_valid is False
    assert errors == ["ROBOT_SERIAL_PORT not set (required for serial actuator)"]


def test_validate_unknown_actuator(monkeypatch):
    """Test unknown actuator kinds are rejected"""
    monkeypatch.setenv("ROBOT_ACTUATOR", "bluetooth")

    is_valid, errors = RobotConfig().validate()

    assert is_valid is False
    assert "ROBOT_ACTUATOR must be one of log, serial" in errors


def test_validate_numbers(monkeypatch):
    """Test malformed and out-of-range numbers are reported"""
    monkeypatch.setenv("ROBOT_POLL_MS", "fast")
    monkeypatch.setenv("ROBOT_STICK_DEADZONE", "1.5")
    monkeypatch.setenv("ROBOT_MAX_STRAFE_SPEED", "-0.1")

    is_valid, errors = RobotConfig().validate()

    assert is_valid is False
    assert "ROBOT_POLL_MS is not a number" in errors
    assert "ROBOT_STICK_DEADZONE is out of range" in errors
    assert "ROBOT_MAX_STRAFE_SPEED is out of range" in errors
    assert len(errors) == 3


def test_print_status(capsys):
    """Test status output for a valid configuration"""
    RobotConfig().print_status()

    out = capsys.readouterr().out
    assert "Actuator:       log" in out
    assert "Configuration is valid" in out


def test_main_validate_fails(monkeypatch, capsys):
    """Test --validate exits non-zero on errors"""
    monkeypatch.setenv("ROBOT_ACTUATOR", "serial")
    monkeypatch.setattr("sys.argv", ["padbot-config", "--validate"])

    with pytest.raises(SystemExit) as exc_info:
        robot_config.main()

    assert exc_info.value.code == 1
    assert "Validation failed!" in capsys.readouterr().out


def test_main_validate_passes(monkeypatch, capsys):
    """Test --validate succeeds on defaults"""
    monkeypatch.setattr("sys.argv", ["padbot-config", "--validate"])

    robot_config.main()

    assert "Validation passed!" in capsys.readouterr().out
