import copy
import json
import logging.config
import pathlib
from functools import lru_cache
from typing import Optional

_DEFAULT = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s [%(levelname)s] %(name)s - %(message)s"}
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
            "level": "INFO",
        },
    },
    "root": {"handlers": ["console"], "level": "INFO"},
}


@lru_cache(maxsize=1)
def setup_logging(cfg_path: Optional[str] = None, *, console_level: Optional[str] = None) -> None:
    """Configure logging once per process.

    - If *cfg_path* exists, merge it over the defaults.
    - *console_level* overrides the console handler level.
    """
    config = copy.deepcopy(_DEFAULT)
    if cfg_path and pathlib.Path(cfg_path).exists():
        user = json.loads(pathlib.Path(cfg_path).read_text())
        config.update(user)

    if console_level:
        config["handlers"]["console"]["level"] = console_level

    logging.config.dictConfig(config)
