"""
Configuration loader for gitservice.

Settings come from built-in defaults, an optional .env file, and
GITSERVICE_* environment variables, in that order of precedence.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from . import envparse
from . import validate

logger = logging.getLogger(__name__)

ENV_PREFIX = "GITSERVICE_"

DEFAULTS = {
    "GIT_BINARY": "git",
    "GIT_TIMEOUT": "30",
    "GIT_NETWORK_TIMEOUT": "60",  # clone, push, pull
    "LOG_LEVEL": "WARNING",
}


@dataclass(frozen=True)
class GitConfig:
    """Runtime settings for git invocations. A timeout of 0 disables the deadline."""
    git_binary: str = "git"
    timeout: int = 30
    network_timeout: int = 60
    log_level: str = "WARNING"


def load_config(env_file: Path | None = None, environ: dict | None = None) -> GitConfig:
    """
    Build a GitConfig from defaults, env_file and the process environment.

    Raises:
        FileNotFoundError: env_file given but missing
        ValueError: env_file has invalid syntax
        validate.ValidationError: merged settings don't match the config schema
    """
    settings = dict(DEFAULTS)

    if env_file is not None:
        settings.update(envparse.load_env(env_file))

    environ = os.environ if environ is None else environ
    for key in DEFAULTS:
        value = environ.get(ENV_PREFIX + key)
        if value is not None:
            logger.debug(f"{key} overridden from environment")
            settings[key] = value

    if "LOG_LEVEL" in settings:
        settings["LOG_LEVEL"] = settings["LOG_LEVEL"].upper()

    validate.validate(settings, "config")

    return GitConfig(
        git_binary=settings["GIT_BINARY"],
        timeout=int(settings["GIT_TIMEOUT"]),
        network_timeout=int(settings["GIT_NETWORK_TIMEOUT"]),
        log_level=settings["LOG_LEVEL"],
    )
