"""Environment configuration for the Gyazo uploader."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ACCESS_TOKEN_VAR = "GYAZO_ACCESS_TOKEN"
TIMEOUT_VAR = "GYAZO_TIMEOUT"
DEFAULT_TIMEOUT = 30.0


def check_timeout(timeout: float | None) -> float | None:
    """Validate a request timeout in seconds.

    Raises:
        ValueError: If the timeout is not None and not a finite number above zero
    """
    if timeout is not None and (not math.isfinite(timeout) or timeout <= 0):
        raise ValueError(f"Timeout must be a number of seconds above zero, got {timeout}")
    return timeout


@dataclass
class Settings:
    """Settings read from the environment."""

    access_token: str | None
    timeout: float = DEFAULT_TIMEOUT


def load_settings(env_file: Path | None = None) -> Settings:
    """Load settings from the environment, after reading a .env file.

    Variables already set in the environment win over the .env file.

    Args:
        env_file: Path to the .env file. If None, python-dotenv searches for one.

    Returns:
        Settings instance

    Raises:
        ValueError: If GYAZO_TIMEOUT is set but is not a number above zero
    """
    if env_file is not None:
        _ = load_dotenv(env_file)
    else:
        _ = load_dotenv()

    access_token = os.getenv(ACCESS_TOKEN_VAR) or None

    raw_timeout = os.getenv(TIMEOUT_VAR)
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ValueError(
                f"{TIMEOUT_VAR} must be a number of seconds, got '{raw_timeout}'"
            ) from e
        if not math.isfinite(timeout) or timeout <= 0:
            raise ValueError(
                f"{TIMEOUT_VAR} must be a number of seconds above zero, got '{raw_timeout}'"
            )

    return Settings(access_token=access_token, timeout=timeout)
