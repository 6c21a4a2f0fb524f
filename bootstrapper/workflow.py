#===============================================================================
#  App_Bootstrapper | workflow.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  The bootstrap sequence: probe runtime -> fetch -> extract -> probe
#  application -> fetch -> launch. Emits one progress signal per finished
#  stage and exactly one terminal signal (COMPLETED or FAILED) per run.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from . import fetcher, installer, launcher, probe
from .errors import BootstrapError, ProbeFault
from .models import BootstrapConfig, ProgressSignal, RuntimeHandle, Stage, WorkflowOutcome

logger = logging.getLogger(__name__)

Emit = Callable[[ProgressSignal], None]


class BootstrapWorkflow:
    """One forward-only bootstrap run.

    Collaborators default to the real modules and can be swapped out
    (tests pass fakes). Every stage failure is fatal: no retries, and the
    only backward step is a single runtime re-probe after extraction.
    """

    def __init__(
        self,
        config: BootstrapConfig,
        emit: Optional[Emit] = None,
        *,
        probe_runtime: Callable[[BootstrapConfig], Optional[RuntimeHandle]] = probe.probe_runtime,
        probe_application: Callable[[BootstrapConfig], bool] = probe.probe_application,
        fetch: Callable[[str, Path], None] = fetcher.fetch,
        install_runtime: Callable[[Path, Path], None] = installer.install_runtime,
        install_application: Callable[[Path, Path], None] = installer.install_application,
        launch: Callable[[RuntimeHandle, Path, Sequence[str]], int] = launcher.launch,
    ):
        self.config = config
        self._emit = emit or (lambda _s: None)
        self._probe_runtime = probe_runtime
        self._probe_application = probe_application
        self._fetch = fetch
        self._install_runtime = install_runtime
        self._install_application = install_application
        self._launch = launch
        self._stage = Stage.RUNTIME_CHECK

    # ----------------------------
    # Entry points
    # ----------------------------
    def run(self) -> WorkflowOutcome:
        """Run every stage and emit the terminal signal. Never raises."""
        try:
            pid = self._run_stages()
            outcome = WorkflowOutcome.started(pid)
        except BootstrapError as e:
            logger.error("Bootstrap failed at %s (%s): %s", self._stage.value, type(e).__name__, e)
            outcome = WorkflowOutcome.failed(self._stage, e)
        except Exception as e:
            logger.exception("Unexpected error at %s", self._stage.value)
            outcome = WorkflowOutcome.failed(self._stage, e)

        self._emit(outcome.terminal_signal)
        return outcome

    def try_fast_path(self) -> Optional[WorkflowOutcome]:
        """Launch directly when both artifacts are installed; emits nothing.

        Returns None when something is missing and the full run is needed.
        """
        runtime = self._probe_runtime(self.config)
        if runtime is None or not self._probe_application(self.config):
            return None

        logger.info("Runtime and application present; launching directly")
        self._stage = Stage.LAUNCH
        try:
            pid = self._launch(runtime, self.config.application_install_path, self.config.launch_args)
        except BootstrapError as e:
            logger.error("Direct launch failed (%s): %s", type(e).__name__, e)
            return WorkflowOutcome.failed(Stage.LAUNCH, e)
        return WorkflowOutcome.started(pid)

    # ----------------------------
    # Stages
    # ----------------------------
    def _run_stages(self) -> int:
        runtime = self._ensure_runtime()
        self._ensure_application()

        self._emit(ProgressSignal.LAUNCHING)

        self._stage = Stage.LAUNCH
        if not self._probe_application(self.config):
            raise ProbeFault(f"Application missing at {self.config.application_install_path}")
        return self._launch(runtime, self.config.application_install_path, self.config.launch_args)

    def _ensure_runtime(self) -> RuntimeHandle:
        cfg = self.config

        self._stage = Stage.RUNTIME_CHECK
        runtime = self._probe_runtime(cfg)
        if runtime is not None:
            logger.info("Using installed runtime at %s", runtime.home)
            return runtime

        logger.info("Runtime not found under %s", cfg.runtime_install_dir)
        self._stage = Stage.FETCH_RUNTIME
        self._fetch(cfg.runtime_url, cfg.runtime_archive_path)
        self._emit(ProgressSignal.FETCHING_RUNTIME)

        self._stage = Stage.EXTRACT_RUNTIME
        self._install_runtime(cfg.runtime_archive_path, cfg.runtime_install_dir)
        self._emit(ProgressSignal.EXTRACTING_RUNTIME)

        # one re-probe only
        self._stage = Stage.RUNTIME_CHECK
        runtime = self._probe_runtime(cfg)
        if runtime is None:
            raise ProbeFault(
                f"Runtime still missing under {cfg.runtime_install_dir} after extraction "
                f"(expected {cfg.runtime_executable})"
            )
        logger.info("Runtime installed at %s", runtime.home)
        return runtime

    def _ensure_application(self) -> None:
        cfg = self.config

        self._stage = Stage.APPLICATION_CHECK
        if self._probe_application(cfg):
            logger.info("Using installed application at %s", cfg.application_install_path)
            return

        logger.info("Application not found at %s", cfg.application_install_path)
        self._stage = Stage.FETCH_APPLICATION
        self._fetch(cfg.application_url, cfg.application_download_path)
        self._install_application(cfg.application_download_path, cfg.application_install_path)
        self._emit(ProgressSignal.FETCHING_APPLICATION)
