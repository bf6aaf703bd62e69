"""
Configuration Module

Loads settings from environment variables and .env file.
"""

import os
from dataclasses import dataclass
from typing import List, Optional
from pathlib import Path

from .integers import SUPPORTED_WIDTHS

# Load .env file if it exists
from dotenv import load_dotenv
PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = PROJECT_ROOT / "config" / ".env"
load_dotenv(dotenv_path=ENV_PATH)

OVERFLOW_POLICIES = ("wrap", "check")


@dataclass
class Config:
    """
    Application configuration.

    All settings are loaded from environment variables.
    See config/.env.example for available options.
    """

    # === Arithmetic Settings ===
    int_width: int = 32             # Bits in the signed integer type
    overflow: str = "wrap"          # "wrap" (native) or "check" (raise)

    # === Logging Settings ===
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """
        Load configuration from environment variables.

        Environment variables override defaults.
        """
        def get_bool(key: str, default: bool) -> bool:
            """Helper to parse boolean env vars."""
            value = os.getenv(key, str(default)).lower()
            return value in ("true", "1", "yes")

        def get_int(key: str, default: int) -> int:
            """Helper to parse int env vars."""
            try:
                return int(os.getenv(key, default))
            except ValueError:
                return default

        return cls(
            # Arithmetic
            int_width=get_int("MATH_OPS_INT_WIDTH", 32),
            overflow=os.getenv("MATH_OPS_OVERFLOW", "wrap").lower(),

            # Logging
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_json=get_bool("LOG_JSON", False),
            log_file=os.getenv("LOG_FILE") or None,
        )

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.int_width not in SUPPORTED_WIDTHS:
            widths = ", ".join(str(w) for w in SUPPORTED_WIDTHS)
            errors.append(f"MATH_OPS_INT_WIDTH must be one of: {widths}")

        if self.overflow not in OVERFLOW_POLICIES:
            errors.append(
                f"MATH_OPS_OVERFLOW must be one of: {', '.join(OVERFLOW_POLICIES)}"
            )

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")

        return errors

    def __post_init__(self):
        """Validate after initialization."""
        errors = self.validate()
        if errors:
            raise ValueError(f"Configuration errors: {errors}")


def load_config() -> Config:
    """
    Load configuration from environment.

    Usage:
        from math_ops.config import load_config
        config = load_config()
    """
    return Config.from_env()
