"""Configuration management for lift."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

LIFT_HOME = Path(os.environ.get("LIFT_HOME", Path.home() / ".lift"))
CONFIG_FILE = LIFT_HOME / "lift.conf"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass
class Config:
    """lift configuration."""

    # Log file used when a logging command is given no path
    log_file: str = ""
    debug: bool = False

    def log_path(self) -> Path | None:
        """Configured log file with ~ expanded, or None if unset."""
        if not self.log_file:
            return None
        return Path(self.log_file).expanduser()


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config() -> Config:
    """Load configuration from lift.conf file."""
    config = Config()

    if not CONFIG_FILE.exists():
        return config

    for line in CONFIG_FILE.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "log_file":
                config.log_file = value
            case "debug":
                flag = value.lower()
                if flag in _TRUE:
                    config.debug = True
                elif flag in _FALSE:
                    config.debug = False
                else:
                    logger.warning(f"Ignoring invalid DEBUG value: {value!r}")
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
