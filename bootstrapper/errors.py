#===============================================================================
#  App_Bootstrapper | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Error taxonomy. Every kind ends up as the same generic FAILED signal for
#  the user; the kinds only matter for the log.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class BootstrapError(RuntimeError):
    """Base class for every failure the bootstrapper knows about."""


class ConfigError(BootstrapError):
    """A configuration value has the wrong type or shape."""


class FetchError(BootstrapError):
    """Network, HTTP status, or write failure while downloading."""


class InstallError(BootstrapError):
    """Archive extraction or package placement failed."""


class LaunchError(BootstrapError):
    """The application process could not be spawned."""


class ProbeFault(BootstrapError):
    """An artifact is still missing right after it was installed."""


class ChannelClosedError(BootstrapError):
    """A progress signal was sent after the terminal one."""
