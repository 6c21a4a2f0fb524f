#===============================================================================
#  App_Bootstrapper | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Starts the application with the installed runtime as a detached child
#  process. Only spawn failures are reported; the child is never waited on.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Sequence

from .errors import LaunchError
from .models import RuntimeHandle

logger = logging.getLogger(__name__)


def build_command(runtime: RuntimeHandle, app_path: Path, args: Sequence[str]) -> List[str]:
    return [str(runtime.executable), *args, str(app_path)]


def _detach_kwargs() -> Dict[str, Any]:
    if os.name == "nt":
        flags = getattr(subprocess, "DETACHED_PROCESS", 0) | getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", 0)
        return {"creationflags": flags}
    return {"start_new_session": True}


def launch(runtime: RuntimeHandle, app_path: Path, args: Sequence[str]) -> int:
    """Spawn the application and return its pid without waiting."""
    cmd = build_command(runtime, app_path, args)
    logger.info("Launching: %s", " ".join(cmd))
    try:
        p = subprocess.Popen(
            cmd,
            cwd=str(app_path.parent),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            close_fds=True,
            **_detach_kwargs(),
        )
    except (OSError, ValueError) as e:
        raise LaunchError(f"Could not start {cmd[0]}: {e}") from e

    logger.info("Application started (pid=%s)", p.pid)
    return p.pid
