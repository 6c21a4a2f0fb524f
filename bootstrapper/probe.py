#===============================================================================
#  App_Bootstrapper | probe.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Read-only checks for an installed runtime and application package.
#  Absence is a normal result (None / False), never an exception.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .models import BootstrapConfig, RuntimeHandle


def runtime_executable_path(home: Path, relative: str) -> Path:
    return home.joinpath(*Path(relative).parts)


def _is_runnable(p: Path) -> bool:
    try:
        if not p.is_file():
            return False
    except OSError:
        return False
    if os.name == "nt":
        return True
    return os.access(p, os.X_OK)


def probe_runtime(config: BootstrapConfig) -> Optional[RuntimeHandle]:
    """Return a handle to the installed runtime, or None.

    Lookup order:
      1) <runtime_install_dir>/<runtime_executable>
      2) <runtime_install_dir>/<subdir>/<runtime_executable>, one level only,
         subfolders sorted by name (archives usually wrap a top folder)
    """
    home = config.runtime_install_dir
    exe = runtime_executable_path(home, config.runtime_executable)
    if _is_runnable(exe):
        return RuntimeHandle(home=home, executable=exe)

    try:
        subdirs = sorted((p for p in home.iterdir() if p.is_dir()), key=lambda p: p.name.lower())
    except OSError:
        return None

    for sub in subdirs:
        exe = runtime_executable_path(sub, config.runtime_executable)
        if _is_runnable(exe):
            return RuntimeHandle(home=sub, executable=exe)
    return None


def probe_application(config: BootstrapConfig) -> bool:
    """True when the application package sits at its install path."""
    p = config.application_install_path
    try:
        return p.is_file() and p.stat().st_size > 0
    except OSError:
        return False
