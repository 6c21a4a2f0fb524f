#===============================================================================
#  App_Bootstrapper | logging_utils.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Log file + console logging setup. The user only ever sees a generic error
#  dialog, so the log file is where the real failure kind ends up.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import List

from .constants import DATA_DIR_NAME, LOG_FILE_NAME

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_dir: Path, level: int = logging.INFO, also_console: bool = True) -> Path:
    """Attach a file handler (and optionally a console handler) to the root logger.

    Falls back to <tmp>/<DATA_DIR_NAME>/ when log_dir is not writable.
    Calling it again is a no-op that returns the path chosen the first time.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if getattr(root, "_bootstrapper_configured", False):
        return getattr(root, "_bootstrapper_log_path")

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    handlers: List[logging.Handler] = []

    log_path = log_dir / LOG_FILE_NAME
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        fallback_dir = Path(tempfile.gettempdir()) / DATA_DIR_NAME
        fallback_dir.mkdir(parents=True, exist_ok=True)
        log_path = fallback_dir / LOG_FILE_NAME
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
    handlers.append(file_handler)

    if also_console:
        handlers.append(logging.StreamHandler())

    for h in handlers:
        h.setFormatter(fmt)
        root.addHandler(h)

    setattr(root, "_bootstrapper_configured", True)
    setattr(root, "_bootstrapper_log_path", log_path)

    logging.getLogger(__name__).info("Logging initialized (requested=%s, actual=%s)", log_dir, log_path)
    return log_path
