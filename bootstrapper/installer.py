#===============================================================================
#  App_Bootstrapper | installer.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Extracts a downloaded runtime archive into its install folder and moves a
#  downloaded application package into place.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import shutil
import tarfile
import zipfile
from pathlib import Path

from .errors import InstallError

logger = logging.getLogger(__name__)

TAR_SUFFIXES = (".tar", ".tar.gz", ".tgz", ".tar.bz2", ".tar.xz")


def _inside(root: Path, member: str) -> bool:
    target = (root / member).resolve()
    return target == root or root in target.parents


def _extract_zip(archive: Path, install_dir: Path) -> int:
    root = install_dir.resolve()
    count = 0
    with zipfile.ZipFile(archive, "r") as z:
        for info in z.infolist():
            if not _inside(root, info.filename):
                raise InstallError(f"Archive entry escapes install folder: {info.filename}")
            extracted = z.extract(info, install_dir)
            # zipfile drops unix mode bits; the runtime binary needs its x bit back
            mode = (info.external_attr >> 16) & 0o777
            if mode and not info.is_dir() and os.name != "nt":
                os.chmod(extracted, mode)
            count += 1
    return count


def _extract_tar(archive: Path, install_dir: Path) -> int:
    root = install_dir.resolve()
    with tarfile.open(archive, "r:*") as t:
        members = t.getmembers()
        for m in members:
            if not _inside(root, m.name):
                raise InstallError(f"Archive entry escapes install folder: {m.name}")
        if hasattr(tarfile, "data_filter"):
            t.extractall(install_dir, filter="data")
        else:
            t.extractall(install_dir)
    return len(members)


def install_runtime(archive: Path, install_dir: Path) -> None:
    """Extract the runtime archive fully into install_dir.

    The format is read from the file content (download URLs often carry no
    suffix); the file name suffix is only consulted when sniffing fails.
    Partial extraction on failure is left as-is (no rollback).
    """
    name = archive.name.lower()
    logger.info("Extracting %s -> %s", archive, install_dir)
    try:
        install_dir.mkdir(parents=True, exist_ok=True)
        if zipfile.is_zipfile(archive):
            count = _extract_zip(archive, install_dir)
        elif tarfile.is_tarfile(archive):
            count = _extract_tar(archive, install_dir)
        elif name.endswith(".zip"):
            count = _extract_zip(archive, install_dir)
        elif name.endswith(TAR_SUFFIXES):
            count = _extract_tar(archive, install_dir)
        else:
            raise InstallError(f"Unsupported runtime archive format: {archive.name}")
    except (zipfile.BadZipFile, tarfile.TarError) as e:
        raise InstallError(f"Corrupt archive {archive}: {e}") from e
    except OSError as e:
        raise InstallError(f"Could not extract {archive}: {e}") from e

    logger.info("Extracted %d entries into %s", count, install_dir)
    try:
        archive.unlink()
    except OSError as e:
        logger.warning("Could not remove archive %s: %s", archive, e)


def install_application(package: Path, install_path: Path) -> None:
    """Move the downloaded package to its final path, replacing any old copy."""
    logger.info("Installing %s -> %s", package, install_path)
    try:
        install_path.parent.mkdir(parents=True, exist_ok=True)
        if install_path.exists():
            install_path.unlink()
        shutil.move(str(package), str(install_path))
    except OSError as e:
        raise InstallError(f"Could not place {package} at {install_path}: {e}") from e
