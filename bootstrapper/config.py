#===============================================================================
#  App_Bootstrapper | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Resolves the immutable bootstrap configuration: built-in defaults,
#  overridden by an optional bootstrap.json, with relative paths anchored
#  at the per-user data folder.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import (
    APP_TITLE,
    CONFIG_FILE_NAME,
    DATA_DIR_NAME,
    DEFAULT_APPLICATION_FILE,
    DEFAULT_APPLICATION_URL,
    DEFAULT_DOWNLOAD_DIR,
    DEFAULT_LAUNCH_ARGS,
    DEFAULT_LOG_DIR,
    DEFAULT_RUNTIME_DIR,
    DEFAULT_RUNTIME_EXECUTABLE,
    DEFAULT_RUNTIME_URL,
)
from .errors import ConfigError
from .models import BootstrapConfig

logger = logging.getLogger(__name__)

STRING_KEYS = ("title", "runtime_url", "application_url", "runtime_executable")
PATH_KEYS = ("runtime_install_dir", "application_install_path", "download_dir", "log_dir")


def default_data_root(env: Optional[Dict[str, str]] = None) -> Path:
    """Per-user data folder the install layout lives under."""
    env = os.environ if env is None else env
    if os.name == "nt":
        base = env.get("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        return Path(base) / DATA_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / DATA_DIR_NAME
    xdg = env.get("XDG_DATA_HOME") or ""
    if xdg.strip():
        return Path(xdg) / DATA_DIR_NAME
    return Path.home() / ".local" / "share" / DATA_DIR_NAME


def default_config() -> Dict[str, Any]:
    return {
        "title": APP_TITLE,
        "runtime_url": DEFAULT_RUNTIME_URL,
        "application_url": DEFAULT_APPLICATION_URL,
        "runtime_install_dir": DEFAULT_RUNTIME_DIR,
        "application_install_path": DEFAULT_APPLICATION_FILE,
        "launch_args": list(DEFAULT_LAUNCH_ARGS),
        "runtime_executable": DEFAULT_RUNTIME_EXECUTABLE,
        "download_dir": DEFAULT_DOWNLOAD_DIR,
        "log_dir": DEFAULT_LOG_DIR,
    }


def load_overrides(config_path: Path) -> Dict[str, Any]:
    """Read bootstrap.json. A missing or unreadable file means no overrides."""
    if not config_path.exists():
        return {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not an object", config_path)
        return {}
    return data


def _anchor(value: str, data_root: Path) -> Path:
    p = Path(os.path.expandvars(value)).expanduser()
    return p if p.is_absolute() else data_root / p


def resolve_config(
    base_dir: Path,
    config_path: Optional[Path] = None,
    data_root: Optional[Path] = None,
) -> BootstrapConfig:
    """Build the configuration value used by every other component.

    Resolution order (later wins):
      1) built-in defaults (constants.py)
      2) <base_dir>/bootstrap.json, or config_path when given
    """
    merged = default_config()
    path = config_path or (base_dir / CONFIG_FILE_NAME)
    overrides = load_overrides(path)

    for k, v in overrides.items():
        if k not in merged:
            logger.warning("Unknown config key %r in %s (ignored)", k, path)
            continue
        merged[k] = v

    for k in STRING_KEYS + PATH_KEYS:
        if not isinstance(merged[k], str) or not merged[k].strip():
            raise ConfigError(f"Config key {k!r} must be a non-empty string, got {merged[k]!r}")

    args = merged["launch_args"]
    if not isinstance(args, (list, tuple)) or not all(isinstance(a, str) for a in args):
        raise ConfigError(f"Config key 'launch_args' must be a list of strings, got {args!r}")

    root = data_root or default_data_root()
    config = BootstrapConfig(
        title=merged["title"],
        runtime_url=merged["runtime_url"].strip(),
        application_url=merged["application_url"].strip(),
        runtime_install_dir=_anchor(merged["runtime_install_dir"], root),
        application_install_path=_anchor(merged["application_install_path"], root),
        launch_args=tuple(args),
        runtime_executable=merged["runtime_executable"],
        download_dir=_anchor(merged["download_dir"], root),
        log_dir=_anchor(merged["log_dir"], root),
    )
    logger.debug("Resolved config: %s", config)
    return config
