#===============================================================================
#  App_Bootstrapper | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Central place for default configuration, window sizing, labels, and
#  file/folder naming conventions.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os

APP_TITLE = "App Bootstrapper"
DATA_DIR_NAME = "AppBootstrapper"
CONFIG_FILE_NAME = "bootstrap.json"
LOG_FILE_NAME = "bootstrap.log"

# --- Default remote artifacts (override in bootstrap.json) ---
DEFAULT_RUNTIME_URL = "https://downloads.example.com/runtime/jre-windows-x64.zip"
DEFAULT_APPLICATION_URL = "https://downloads.example.com/app/launcher.jar"

# --- Default install layout, relative to the per-user data root ---
DEFAULT_RUNTIME_DIR = "runtime"
DEFAULT_APPLICATION_FILE = "launcher.jar"
DEFAULT_DOWNLOAD_DIR = "downloads"
DEFAULT_LOG_DIR = "logs"
DEFAULT_LAUNCH_ARGS = ("-jar",)

if os.name == "nt":
    DEFAULT_RUNTIME_EXECUTABLE = "bin/javaw.exe"
else:
    DEFAULT_RUNTIME_EXECUTABLE = "bin/java"

# --- Network ---
CONNECT_TIMEOUT = 20
READ_TIMEOUT = 60
CHUNK_SIZE = 1024 * 256

# --- Observer window ---
WINDOW_SIZE = (300, 115)
WINDOW_POSITION = (300, 300)
PROGRESS_STEPS = 4

INITIAL_LABEL = "Downloading runtime"
ERROR_TITLE = "An error occurred"
ERROR_MESSAGE = "An error occurred while starting the application."

# --- Optional window artwork, looked up next to main.py ---
ICON_FILE_NAME = "icon.ico"
SPLASH_FILE_NAME = "background.png"

WINDOW_STYLE = (
    "QWidget{background:#101010;color:white;}"
    " QProgressBar{background:#1a1a1a;border:1px solid #2a2a2a;height:10px;}"
    " QProgressBar::chunk{background:#0078D7;}"
)
