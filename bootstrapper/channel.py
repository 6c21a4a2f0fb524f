#===============================================================================
#  App_Bootstrapper | channel.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Single-producer / single-consumer handoff of progress signals from the
#  worker thread to the observer (window or console).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import queue
import threading
from typing import Callable, Iterator, Optional, Protocol, TextIO

from .errors import ChannelClosedError
from .models import ProgressSignal

logger = logging.getLogger(__name__)


class ProgressObserver(Protocol):
    def is_alive(self) -> bool:
        ...

    def on_progress(self, signal: ProgressSignal) -> None:
        ...


class ProgressChannel:
    """FIFO of progress signals plus an optional wake callback.

    send() enqueues first and wakes second, so every wake finds its payload.
    The observer drains exactly one payload per wake (drain_one), or blocks
    on receive() when no wake callback is used.
    """

    def __init__(self, wake: Optional[Callable[[], None]] = None):
        self._queue: "queue.Queue[ProgressSignal]" = queue.Queue()
        self._wake = wake
        self._lock = threading.Lock()
        self._terminated = False

    @property
    def terminated(self) -> bool:
        return self._terminated

    def send(self, signal: ProgressSignal) -> None:
        with self._lock:
            if self._terminated:
                raise ChannelClosedError(f"Signal {signal.name} sent after terminal signal")
            if signal.is_terminal:
                self._terminated = True
            self._queue.put(signal)
        logger.debug("Sent %s", signal.name)
        if self._wake is not None:
            self._wake()

    def receive(self, timeout: Optional[float] = None) -> ProgressSignal:
        """Block until the next signal. Raises queue.Empty on timeout."""
        return self._queue.get(timeout=timeout)

    def drain_one(self, observer: ProgressObserver) -> Optional[ProgressSignal]:
        """Consume one payload and hand it to the observer if it is still alive."""
        try:
            signal = self._queue.get_nowait()
        except queue.Empty:
            logger.warning("Wake without payload")
            return None
        if observer.is_alive():
            observer.on_progress(signal)
        else:
            logger.debug("Observer gone; dropped %s", signal.name)
        return signal

    def __iter__(self) -> Iterator[ProgressSignal]:
        """Yield signals in order up to and including the terminal one."""
        while True:
            signal = self.receive()
            yield signal
            if signal.is_terminal:
                return


class ConsoleObserver:
    """Headless observer: prints one line per signal."""

    def __init__(self, channel: ProgressChannel, stream: Optional[TextIO] = None):
        self.channel = channel
        self.stream = stream
        self.last: Optional[ProgressSignal] = None

    def is_alive(self) -> bool:
        return True

    def on_progress(self, signal: ProgressSignal) -> None:
        self.last = signal
        if signal is ProgressSignal.FAILED:
            text = "Failed: an error occurred while starting the application."
        elif signal is ProgressSignal.COMPLETED:
            text = "Application started."
        else:
            text = f"{signal.label}..."
        print(text, file=self.stream, flush=True)

    def run(self) -> ProgressSignal:
        """Consume signals until the terminal one and return it."""
        for signal in self.channel:
            self.on_progress(signal)
            if signal.is_terminal:
                return signal
        raise ChannelClosedError("Progress stream ended without a terminal signal")
