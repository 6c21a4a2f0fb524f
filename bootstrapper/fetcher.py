#===============================================================================
#  App_Bootstrapper | fetcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Downloads a remote resource to a local file. The only module doing
#  network I/O.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path

import requests

from .constants import CHUNK_SIZE, CONNECT_TIMEOUT, READ_TIMEOUT
from .errors import FetchError

logger = logging.getLogger(__name__)

# NOTE:
# - No resume and no retry here. A prior partial file is overwritten.
# - Transport, status and write failures all become FetchError.


def fetch(url: str, destination: Path) -> None:
    """Stream url into destination."""
    logger.info("Downloading %s -> %s", url, destination)
    written = 0
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with requests.get(url, stream=True, timeout=(CONNECT_TIMEOUT, READ_TIMEOUT)) as r:
            r.raise_for_status()
            with open(destination, "wb") as f:
                for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
                        written += len(chunk)
    except requests.exceptions.RequestException as e:
        _discard(destination)
        raise FetchError(f"Download failed for {url}: {e}") from e
    except OSError as e:
        _discard(destination)
        raise FetchError(f"Could not write {destination}: {e}") from e

    logger.info("Downloaded %d bytes from %s", written, url)


def _discard(p: Path) -> None:
    try:
        p.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not remove partial download %s: %s", p, e)
