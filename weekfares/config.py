"""Runtime settings, read from a TOML file.

Example ``weekfares.toml``::

    [weekfares]
    timeout = 10
    concurrency_limit = 25
    usd = false
    base_url = "https://services-api.ryanair.com/"
"""
import os
import sys
import logging

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .exceptions import ConfigError
from .fanout import DEFAULT_CONCURRENCY_LIMIT

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WEEKFARES_CONFIG"
CONFIG_SECTION = "weekfares"


@dataclass(frozen=True)
class Config:
    timeout: float = 10
    concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT
    usd: bool = False
    base_url: str = "https://services-api.ryanair.com/"

    def __post_init__(self):
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise ConfigError(f"timeout must be a positive number, got {self.timeout!r}")
        if isinstance(self.concurrency_limit, bool) or not isinstance(self.concurrency_limit, int) \
                or self.concurrency_limit < 1:
            raise ConfigError(f"concurrency_limit must be a positive integer, got {self.concurrency_limit!r}")
        if not isinstance(self.usd, bool):
            raise ConfigError(f"usd must be true or false, got {self.usd!r}")
        if not isinstance(self.base_url, str) or not self.base_url:
            raise ConfigError(f"base_url must be a non-empty string, got {self.base_url!r}")


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """Loads settings from `path`, or from the file named by $WEEKFARES_CONFIG.

    Without either, or when the file does not exist, the defaults are used.
    Keys are read from the ``[weekfares]`` table; unknown keys are ignored.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return Config()

    path = Path(path)
    if not path.is_file():
        logger.warning(f"Config file {path} not found, using defaults.")
        return Config()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    section = data.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{CONFIG_SECTION}] in {path} must be a table")

    known = {f.name for f in fields(Config)}
    for key in section.keys() - known:
        logger.warning(f"Ignoring unknown config key {key!r} in {path}")

    logger.debug(f"Loaded config from {path}")
    return replace(Config(), **{k: v for k, v in section.items() if k in known})
