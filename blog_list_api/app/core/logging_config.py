"""
Logging set-up driven by ``Settings``.

The root logger gets one console handler and, when ``LOG_FILE`` is
set, one file handler.  Handlers are tagged by name so that repeated
calls (every ``create_app``) never stack duplicates, while the level
is re-applied each time from the settings passed in.
"""

import logging
from pathlib import Path

from .config import Settings

CONSOLE_HANDLER = "blog_list_api.console"
FILE_HANDLER = "blog_list_api.file"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: Settings) -> None:
    """Configure the root logger from ``config``.

    ``config.log_level`` is a level name such as ``"DEBUG"``; unknown
    names fall back to ``INFO``.  pymongo's own loggers stay at WARNING
    unless ``config.debug`` is set.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    logging.getLogger("pymongo").setLevel(logging.DEBUG if config.debug else logging.WARNING)

    existing = {handler.get_name() for handler in root.handlers}
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if CONSOLE_HANDLER not in existing:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if config.log_file and FILE_HANDLER not in existing:
        file_handler = logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
