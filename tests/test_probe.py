"""
Tests for the environment probes.
"""

import os

from bootstrapper.probe import probe_application, probe_runtime

from conftest import install_fake_application, install_fake_runtime, posix_only


class TestProbeRuntime:
    """Tests for runtime discovery."""

    def test_missing_install_dir(self, config):
        assert not config.runtime_install_dir.exists()
        assert probe_runtime(config) is None

    def test_executable_at_top_level(self, config):
        exe = install_fake_runtime(config.runtime_install_dir)
        handle = probe_runtime(config)

        assert handle is not None
        assert handle.home == config.runtime_install_dir
        assert handle.executable == exe

    def test_executable_in_wrapped_folder(self, config):
        install_fake_runtime(config.runtime_install_dir / "jdk-17.0.2")
        handle = probe_runtime(config)

        assert handle is not None
        assert handle.home.name == "jdk-17.0.2"

    def test_first_subfolder_by_name_wins(self, config):
        install_fake_runtime(config.runtime_install_dir / "b-runtime")
        install_fake_runtime(config.runtime_install_dir / "a-runtime")

        assert probe_runtime(config).home.name == "a-runtime"

    def test_empty_install_dir(self, config):
        config.runtime_install_dir.mkdir(parents=True)
        (config.runtime_install_dir / "junk").mkdir()
        assert probe_runtime(config) is None

    @posix_only
    def test_non_executable_is_absent(self, config):
        exe = install_fake_runtime(config.runtime_install_dir)
        exe.chmod(0o644)
        assert probe_runtime(config) is None

    def test_repeated_probe_is_stable(self, config):
        install_fake_runtime(config.runtime_install_dir)
        assert probe_runtime(config) == probe_runtime(config)


class TestProbeApplication:
    """Tests for application discovery."""

    def test_absent(self, config):
        assert probe_application(config) is False

    def test_present(self, config):
        install_fake_application(config.application_install_path)
        assert probe_application(config) is True

    def test_empty_file_is_absent(self, config):
        config.application_install_path.parent.mkdir(parents=True)
        config.application_install_path.write_bytes(b"")
        assert probe_application(config) is False

    def test_directory_is_absent(self, config):
        os.makedirs(config.application_install_path)
        assert probe_application(config) is False
