"""Terminal output helpers: coloured status lines and a progress spinner."""

from __future__ import annotations

import os
import sys
import threading

_CODES = {
    "red": "31",
    "green": "32",
    "blue": "34",
    "bold": "1",
}
_RESET = "\x1b[0m"
_CLEAR_LINE = "\r\x1b[2K"


def _colors_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force and force != "0":
        return True
    if "NO_COLOR" in os.environ or os.environ.get("CLICOLOR") == "0":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def style(text: object, color: str | None = None, bold: bool = False) -> str:
    """Return ``text`` wrapped in ANSI codes when colour output is enabled."""
    text = str(text)
    if not _colors_enabled():
        return text
    codes = []
    if color is not None:
        codes.append(_CODES[color])
    if bold:
        codes.append(_CODES["bold"])
    if not codes:
        return text
    prefix = "".join(f"\x1b[{code}m" for code in codes)
    return f"{prefix}{text}{_RESET}"


def bold(text: object) -> str:
    """Return ``text`` in bold when colour output is enabled."""
    return style(text, bold=True)


def warn(message: str) -> None:
    """Print a red warning line."""
    marker = "!" if _no_emoji() else "⚠️ "
    print(f"{style(marker, 'red')} {style(message, 'red')}")


def success(message: str) -> None:
    """Print a green success line."""
    marker = "✓" if _no_emoji() else "✅"
    print(f"{style(marker, 'green')} {style(message, 'green')}")


class Spinner:
    """A spinner that shows a message on a terminal while work is under way.

    Nothing is drawn when the stream is not a terminal.
    """

    FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"

    def __init__(self, message: str = "", stream=None, interval: float = 0.1):
        self._stream = sys.stderr if stream is None else stream
        isatty = getattr(self._stream, "isatty", None)
        self._enabled = bool(isatty and isatty())
        self._message = message
        self._interval = interval
        self._frame = 0
        self._finished = False
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        if self._enabled:
            with self._lock:
                self._draw()
            self._thread = threading.Thread(target=self._tick, daemon=True)
            self._thread.start()

    @property
    def message(self) -> str:
        return self._message

    @property
    def finished(self) -> bool:
        return self._finished

    def set_message(self, message: str) -> None:
        """Replace the message shown next to the spinner."""
        with self._lock:
            self._message = message
            if self._enabled and not self._finished:
                self._draw()

    def finish_and_clear(self) -> None:
        """Stop the spinner and erase its line."""
        with self._lock:
            if self._finished:
                return
            self._finished = True
            if self._enabled:
                self._stream.write(_CLEAR_LINE)
                self._stream.flush()
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> "Spinner":
        return self

    def __exit__(self, *args) -> None:
        self.finish_and_clear()

    def _tick(self) -> None:
        while not self._stop.wait(self._interval):
            with self._lock:
                if self._finished:
                    return
                self._frame = (self._frame + 1) % len(self.FRAMES)
                self._draw()

    def _draw(self) -> None:
        self._stream.write(f"{_CLEAR_LINE}{self.FRAMES[self._frame]} {self._message}")
        self._stream.flush()