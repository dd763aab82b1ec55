"""
Runtime configuration for geopath.
"""

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .exceptions import ConfigurationError
from .logging_config import setup_logging

ENV_PRECISION = "GEOPATH_PRECISION"
ENV_LOG_LEVEL = "GEOPATH_LOG_LEVEL"
ENV_LOG_FILE = "GEOPATH_LOG_FILE"


@dataclass
class RoutingConfig:
    """Settings shared by the CLI and long-running callers.

    Attributes:
        precision: Grid spacing (degrees) for snapping endpoints; 0 disables it
        log_level: Level for the ``geopath`` logger
        log_file: Optional rotating log file
    """

    precision: float = 0.0
    log_level: int = logging.INFO
    log_file: Optional[Path] = None

    def validate(self) -> "RoutingConfig":
        """Raise ConfigurationError if any setting is out of range."""
        if isinstance(self.precision, bool) or not isinstance(self.precision, (int, float)):
            raise ConfigurationError(f"precision must be a number, got {self.precision!r}")
        if not math.isfinite(self.precision) or self.precision < 0:
            raise ConfigurationError(f"precision must be finite and >= 0, got {self.precision}")
        if not isinstance(self.log_level, int):
            raise ConfigurationError(f"log_level must be an int, got {self.log_level!r}")
        return self

    def configure_logging(self) -> logging.Logger:
        return setup_logging(
            level=self.log_level,
            log_file=self.log_file,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> "RoutingConfig":
        """Build a config from GEOPATH_* environment variables.

        Example:
            >>> RoutingConfig.from_env({"GEOPATH_PRECISION": "0.00001"}).precision
            1e-05
        """
        environ = os.environ if environ is None else environ
        config = cls()

        raw = environ.get(ENV_PRECISION)
        if raw:
            try:
                config.precision = float(raw)
            except ValueError as e:
                raise ConfigurationError(f"{ENV_PRECISION} is not a number: {raw!r}") from e

        raw = environ.get(ENV_LOG_LEVEL)
        if raw:
            level = logging.getLevelName(raw.upper())
            if not isinstance(level, int):
                raise ConfigurationError(f"{ENV_LOG_LEVEL} is not a log level: {raw!r}")
            config.log_level = level

        raw = environ.get(ENV_LOG_FILE)
        if raw:
            config.log_file = Path(raw)

        return config.validate()
