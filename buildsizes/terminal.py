"""Terminal helpers for the command line session.

Owns the loading animation shown while build sizes are computed, including
cursor hide/show so an interrupted run leaves the terminal usable.
"""

from __future__ import annotations

import threading
from typing import TextIO

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_LINE = "\x1b[2K"
LOADING_FRAMES = ("🔨 ", "📏 ")
DOTS_PER_FRAME = 10


class LoadingIndicator:
    """Background-thread loading animation (icon followed by dots).

    Does nothing unless ``stream`` is a TTY. Use as a context manager so the
    line is cleared and the cursor restored on every exit path.
    """

    def __init__(self, stream: TextIO, *, enabled: bool = True, interval_seconds: float = 0.1) -> None:
        self.stream = stream
        self.enabled = enabled and stream.isatty()
        self.interval_seconds = interval_seconds
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def _worker(self) -> None:
        count = 0
        while not self._stop.wait(self.interval_seconds):
            if count % (DOTS_PER_FRAME + 1) == 0:
                self._write(f"{CLEAR_LINE}\r{LOADING_FRAMES[count % len(LOADING_FRAMES)]}")
            else:
                self._write(".")
            count += 1

    def start(self) -> None:
        if not self.enabled or self._thread is not None:
            return
        self._stop.clear()
        self._write(f"{HIDE_CURSOR}\r")
        self._thread = threading.Thread(target=self._worker, name="build-sizes-loading", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        self._write(f"{CLEAR_LINE}\r{SHOW_CURSOR}")

    def __enter__(self) -> LoadingIndicator:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


__all__ = [
    "HIDE_CURSOR",
    "SHOW_CURSOR",
    "CLEAR_LINE",
    "LoadingIndicator",
]
