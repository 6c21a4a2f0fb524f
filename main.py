#===============================================================================
#  App_Bootstrapper  |  Runtime + Application Bootstrapper
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Makes sure a runtime (e.g. a JRE) and the application package are present
#  in the per-user data folder, downloading and extracting them when missing,
#  then starts the application with that runtime.
#    - Everything installed: launches directly, no window
#    - Otherwise: small progress window while the worker thread installs
#    - --no-gui: same sequence with console output instead of the window
#
#  Folder Conventions (defaults, see bootstrap.json)
#  ------------------
#    <data root>/AppBootstrapper/
#      - runtime/                  -> extracted runtime archive
#      - launcher.jar              -> application package
#      - downloads/                -> staging for downloads
#      - logs/bootstrap.log        -> detailed log (errors by kind)
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (PySide6, requests) which are
#  licensed separately by their respective authors. Ensure compliance with
#  their license terms when distributing this software.
#===============================================================================

from __future__ import annotations

import argparse
import logging
import sys
import threading
from pathlib import Path
from typing import List, Optional

from bootstrapper.channel import ConsoleObserver, ProgressChannel
from bootstrapper.config import resolve_config
from bootstrapper.errors import ConfigError
from bootstrapper.logging_utils import configure_logging
from bootstrapper.models import BootstrapConfig, ProgressSignal
from bootstrapper.workflow import BootstrapWorkflow

logger = logging.getLogger("bootstrapper")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Install the runtime and application if needed, then launch it.")
    ap.add_argument("--config", type=Path, default=None, help="Path to a bootstrap.json (default: next to main.py)")
    ap.add_argument("--no-gui", action="store_true", help="Report progress on the console instead of a window")
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    return ap.parse_args(argv)


def run_console(config: BootstrapConfig) -> int:
    channel = ProgressChannel()
    workflow = BootstrapWorkflow(config, channel.send)
    worker = threading.Thread(target=workflow.run, name="bootstrap-worker", daemon=True)
    worker.start()
    last = ConsoleObserver(channel).run()
    return 0 if last is ProgressSignal.COMPLETED else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    base_dir = Path(__file__).resolve().parent

    try:
        config = resolve_config(base_dir, args.config)
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_logging(config.log_dir, level=logging.DEBUG if args.verbose else logging.INFO)

    outcome = BootstrapWorkflow(config).try_fast_path()
    if outcome is not None:
        return 0 if outcome.ok else 1

    if args.no_gui:
        return run_console(config)

    from bootstrapper.main_window import run_window
    return run_window(config, base_dir)


if __name__ == "__main__":
    sys.exit(main())
