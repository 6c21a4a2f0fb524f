#===============================================================================
#  App_Bootstrapper | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Shared data models: configuration, runtime handle, progress signals and
#  the workflow outcome.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple
from urllib.parse import urlsplit


@dataclass(frozen=True)
class BootstrapConfig:
    """Resolved once at process start and shared read-only afterwards."""
    title: str
    runtime_url: str
    application_url: str
    runtime_install_dir: Path
    application_install_path: Path
    launch_args: Tuple[str, ...]
    runtime_executable: str     # relative to the runtime home, e.g. "bin/java"
    download_dir: Path          # staging area for fetched artifacts
    log_dir: Path

    @property
    def runtime_archive_path(self) -> Path:
        name = Path(urlsplit(self.runtime_url).path).name or "runtime.zip"
        return self.download_dir / name

    @property
    def application_download_path(self) -> Path:
        return self.download_dir / (self.application_install_path.name + ".part")


@dataclass(frozen=True)
class RuntimeHandle:
    """A runtime installation known to contain its executable."""
    home: Path
    executable: Path


class ProgressSignal(Enum):
    """Discrete workflow stages, in emission order.

    A signal is emitted *after* its stage finished, so it reads as
    "entering the next labeled phase".
    """
    FETCHING_RUNTIME = "fetching_runtime"
    EXTRACTING_RUNTIME = "extracting_runtime"
    FETCHING_APPLICATION = "fetching_application"
    LAUNCHING = "launching"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (ProgressSignal.COMPLETED, ProgressSignal.FAILED)

    @property
    def position(self) -> Optional[int]:
        """Progress bar position; None leaves the bar where it is."""
        return _POSITIONS.get(self)

    @property
    def label(self) -> Optional[str]:
        return SIGNAL_LABELS.get(self)


_POSITIONS = {
    ProgressSignal.FETCHING_RUNTIME: 1,
    ProgressSignal.EXTRACTING_RUNTIME: 2,
    ProgressSignal.FETCHING_APPLICATION: 3,
    ProgressSignal.LAUNCHING: 4,
    ProgressSignal.COMPLETED: 4,
}

SIGNAL_LABELS = {
    ProgressSignal.FETCHING_RUNTIME: "Extracting runtime",
    ProgressSignal.EXTRACTING_RUNTIME: "Downloading application",
    ProgressSignal.FETCHING_APPLICATION: "Preparing launch",
    ProgressSignal.LAUNCHING: "Starting application",
}


class Stage(Enum):
    RUNTIME_CHECK = "runtime_check"
    FETCH_RUNTIME = "fetch_runtime"
    EXTRACT_RUNTIME = "extract_runtime"
    APPLICATION_CHECK = "application_check"
    FETCH_APPLICATION = "fetch_application"
    LAUNCH = "launch"


@dataclass(frozen=True)
class WorkflowOutcome:
    """Terminal result of one workflow run."""
    ok: bool
    stage: Optional[Stage] = None
    error: Optional[BaseException] = None
    pid: Optional[int] = None

    @classmethod
    def started(cls, pid: int) -> "WorkflowOutcome":
        return cls(ok=True, stage=Stage.LAUNCH, pid=pid)

    @classmethod
    def failed(cls, stage: Stage, error: BaseException) -> "WorkflowOutcome":
        return cls(ok=False, stage=stage, error=error)

    @property
    def terminal_signal(self) -> ProgressSignal:
        return ProgressSignal.COMPLETED if self.ok else ProgressSignal.FAILED
