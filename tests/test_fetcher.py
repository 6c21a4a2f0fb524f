"""
Tests for the HTTP fetcher.

requests.get is patched; no network access.
"""

from unittest.mock import patch

import pytest
import requests

from bootstrapper.errors import FetchError
from bootstrapper.fetcher import fetch


class FakeResponse:
    def __init__(self, status=200, chunks=(b"abc", b"", b"def"), fail_midway=False):
        self.status_code = status
        self.chunks = chunks
        self.fail_midway = fail_midway

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")

    def iter_content(self, chunk_size=1):
        for c in self.chunks:
            yield c
        if self.fail_midway:
            raise requests.exceptions.ConnectionError("connection reset")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class TestFetch:
    """Tests for fetch()."""

    def test_writes_body(self, tmp_path):
        dest = tmp_path / "dl" / "rt.zip"
        with patch("bootstrapper.fetcher.requests.get", return_value=FakeResponse()) as get:
            fetch("https://cdn.test/rt.zip", dest)

        assert dest.read_bytes() == b"abcdef"
        assert get.call_args.kwargs["stream"] is True

    def test_overwrites_previous_partial_file(self, tmp_path):
        dest = tmp_path / "rt.zip"
        dest.write_bytes(b"stale partial data that is longer")
        with patch("bootstrapper.fetcher.requests.get", return_value=FakeResponse(chunks=(b"new",))):
            fetch("https://cdn.test/rt.zip", dest)

        assert dest.read_bytes() == b"new"

    def test_http_error(self, tmp_path):
        dest = tmp_path / "rt.zip"
        with patch("bootstrapper.fetcher.requests.get", return_value=FakeResponse(status=404)):
            with pytest.raises(FetchError):
                fetch("https://cdn.test/rt.zip", dest)

        assert not dest.exists()

    def test_transport_error(self, tmp_path):
        dest = tmp_path / "rt.zip"
        with patch(
            "bootstrapper.fetcher.requests.get",
            side_effect=requests.exceptions.ConnectionError("unreachable"),
        ):
            with pytest.raises(FetchError):
                fetch("https://cdn.test/rt.zip", dest)

    def test_partial_download_removed(self, tmp_path):
        dest = tmp_path / "rt.zip"
        with patch("bootstrapper.fetcher.requests.get", return_value=FakeResponse(fail_midway=True)):
            with pytest.raises(FetchError):
                fetch("https://cdn.test/rt.zip", dest)

        assert not dest.exists()

    def test_write_failure(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        dest = blocker / "rt.zip"
        with patch("bootstrapper.fetcher.requests.get", return_value=FakeResponse()):
            with pytest.raises(FetchError):
                fetch("https://cdn.test/rt.zip", dest)
