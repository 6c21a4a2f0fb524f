"""
Pytest configuration and shared fixtures.

Provides a config rooted in a temp directory and helpers for building a
fake runtime install / runtime archive.
"""

import os
import stat
import zipfile
from pathlib import Path

import pytest

from bootstrapper.models import BootstrapConfig

RUNTIME_EXE = "bin/run"


def make_config(root: Path, **overrides) -> BootstrapConfig:
    values = dict(
        title="Test Bootstrapper",
        runtime_url="https://downloads.test/runtime/rt.zip",
        application_url="https://downloads.test/app/app.jar",
        runtime_install_dir=root / "rt",
        application_install_path=root / "app" / "app.jar",
        launch_args=("-jar",),
        runtime_executable=RUNTIME_EXE,
        download_dir=root / "downloads",
        log_dir=root / "logs",
    )
    values.update(overrides)
    return BootstrapConfig(**values)


def install_fake_runtime(home: Path, relative: str = RUNTIME_EXE) -> Path:
    exe = home / relative
    exe.parent.mkdir(parents=True, exist_ok=True)
    exe.write_text("#!/bin/sh\nexit 0\n")
    exe.chmod(exe.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return exe


def install_fake_application(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"PK\x03\x04 fake jar")
    return path


def build_runtime_zip(dest: Path, top_folder: str = "", relative: str = RUNTIME_EXE) -> Path:
    """Write a zip holding an executable at <top_folder>/<relative>."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    name = f"{top_folder}/{relative}" if top_folder else relative
    with zipfile.ZipFile(dest, "w") as z:
        info = zipfile.ZipInfo(name)
        info.external_attr = (0o755 | stat.S_IFREG) << 16
        z.writestr(info, "#!/bin/sh\nexit 0\n")
        z.writestr(f"{top_folder}/release" if top_folder else "release", "VERSION=1\n")
    return dest


@pytest.fixture
def config(tmp_path):
    """A BootstrapConfig whose every path lives under tmp_path."""
    return make_config(tmp_path)


@pytest.fixture
def installed_config(tmp_path):
    """A config whose runtime and application are already installed."""
    cfg = make_config(tmp_path)
    install_fake_runtime(cfg.runtime_install_dir)
    install_fake_application(cfg.application_install_path)
    return cfg


posix_only = pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
