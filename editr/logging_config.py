"""Log file setup.

The terminal owns stdout while the editor runs, so log records go to a
file in the platform's user log directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import platformdirs

from .constants import EditorConstants


def get_log_path() -> Path:
    return Path(platformdirs.user_log_dir("editr")) / EditorConstants.LOG_FILENAME


def configure_logging(level: Optional[str] = None) -> logging.Handler:
    """Attach a file handler to the ``editr`` logger.

    Args:
        level: Level name; defaults to $EDITR_LOG_LEVEL, then WARNING.

    Returns:
        The installed handler (a NullHandler if the log directory is unusable).
    """
    level_name = (level or os.environ.get(EditorConstants.LOG_LEVEL_ENV)
                  or EditorConstants.DEFAULT_LOG_LEVEL).upper()
    root = logging.getLogger("editr")
    root.setLevel(getattr(logging, level_name, logging.WARNING))

    log_path = get_log_path()
    handler: logging.Handler
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        # delay=True: the file is only created once something is logged
        handler = logging.FileHandler(log_path, encoding="utf-8", delay=True)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"))
    except OSError:
        handler = logging.NullHandler()
    root.addHandler(handler)
    return handler
