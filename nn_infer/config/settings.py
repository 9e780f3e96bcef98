"""
Runtime configuration for nn_infer entry points.

Values are read from environment variables, falling back to defaults:

    NN_INFER_LOG_LEVEL       logging level for the CLI and API (INFO)
    NN_INFER_PRECISION       decimals used when printing vectors (3)
    NN_INFER_TOLERANCE       max abs error accepted by test-case checks (0.01)
    NN_INFER_TEST_DATA_DIR   directory holding test-case files (tests/data)
    NN_INFER_API_HOST        API bind host (0.0.0.0)
    NN_INFER_API_PORT        API bind port (8000)
"""

import os
import logging
from pathlib import Path
from typing import Callable, Dict, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENV_PREFIX = "NN_INFER_"


class ConfigurationError(Exception):
    """Raised when an environment variable holds an invalid value."""
    pass


def _read_env(name: str, default: T, cast: Callable[[str], T], env: Dict[str, str]) -> T:
    key = f"{ENV_PREFIX}{name}"
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default

    try:
        return cast(raw.strip())
    except ValueError as e:
        raise ConfigurationError(f"Invalid value for {key}: {raw!r} ({e})") from e


def _log_level(value: str) -> str:
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown logging level '{value}'")
    return level


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise ValueError("must not be negative")
    return number


def _positive_float(value: str) -> float:
    number = float(value)
    if not number > 0:
        raise ValueError("must be positive")
    return number


def _port(value: str) -> int:
    number = int(value)
    if not 0 < number < 65536:
        raise ValueError("must be between 1 and 65535")
    return number


class InferenceConfig:
    """Configuration for nn_infer entry points, resolved from the environment."""

    def __init__(self, env: Optional[Dict[str, str]] = None):
        env = dict(os.environ) if env is None else env

        self.log_level: str = _read_env("LOG_LEVEL", "INFO", _log_level, env)
        self.precision: int = _read_env("PRECISION", 3, _non_negative_int, env)
        self.tolerance: float = _read_env("TOLERANCE", 0.01, _positive_float, env)
        self.test_data_dir: Path = _read_env("TEST_DATA_DIR", Path("tests/data"), Path, env)
        self.api_host: str = _read_env("API_HOST", "0.0.0.0", str, env)
        self.api_port: int = _read_env("API_PORT", 8000, _port, env)

    def configure_logging(self) -> None:
        """Configure root logging for an entry point."""
        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        logger.debug(f"Logging configured at {self.log_level}")

    def to_dict(self) -> Dict[str, object]:
        return {
            "log_level": self.log_level,
            "precision": self.precision,
            "tolerance": self.tolerance,
            "test_data_dir": str(self.test_data_dir),
            "api_host": self.api_host,
            "api_port": self.api_port
        }


# Global configuration instance
config = InferenceConfig()
