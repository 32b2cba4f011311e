"""
Configuration
=============
Runtime configuration for the login flow, read from ``OTPAUTH_*``
environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from otpauth_core.errors import ConfigurationError
from otpauth_core.otp.models import OTPConfig

ENV_PREFIX = "OTPAUTH_"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class AuthConfig:
    """Configuration for the OTP login flow."""
    otp_expiry_seconds: int = 60
    max_attempts: int = 3
    tick_interval_seconds: float = 1.0
    demo_mode: bool = False  # Expose generated codes in OtpEntry state
    service_name: str = "otpauth"
    log_level: str = "INFO"
    log_json: bool = True

    def __post_init__(self):
        OTPConfig(
            expiry_seconds=self.otp_expiry_seconds,
            max_attempts=self.max_attempts,
        )
        if self.tick_interval_seconds <= 0:
            raise ConfigurationError("tick_interval_seconds", "must be positive")
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError("log_level", f"unknown level {self.log_level!r}")

    @property
    def otp(self) -> OTPConfig:
        """Policy subset of this configuration."""
        return OTPConfig(
            expiry_seconds=self.otp_expiry_seconds,
            max_attempts=self.max_attempts,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AuthConfig":
        """
        Build a config from environment variables.

        Unset variables fall back to the dataclass defaults.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ConfigurationError: If a variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        for name, parse in (
            ("otp_expiry_seconds", int),
            ("max_attempts", int),
            ("tick_interval_seconds", float),
            ("demo_mode", _parse_bool),
            ("service_name", str),
            ("log_level", str),
            ("log_json", _parse_bool),
        ):
            raw = env.get(ENV_PREFIX + name.upper())
            if raw is None or raw == "":
                continue
            try:
                kwargs[name] = parse(raw.strip())
            except ValueError as e:
                raise ConfigurationError(name, str(e)) from e

        return cls(**kwargs)


def _parse_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"expected a boolean, got {value!r}")
