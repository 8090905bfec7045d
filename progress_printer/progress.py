from __future__ import annotations

import os
import sys
import time
from datetime import timedelta

from .defaults import (
    CLEAR_LINE_END,
    CLEAR_LINE_START,
    DEFAULT_THROTTLE_INTERVAL_S,
    WARMUP_SECONDS,
)


def _now() -> float:
    return time.monotonic()


def _terminal_width(stream) -> int:
    """
    Column count of `stream` when it is an interactive terminal, else 0.
    """
    try:
        if not stream.isatty():
            return 0
        return os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return 0


def _as_seconds(duration: float | timedelta) -> float:
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


def printer(total: int, prefix: object) -> Printer:
    """
    Create a progress printer for `total` steps (0 = unknown) labelled `prefix`.

    Use print()/update() from the loop; the completed line is written once the
    printer is closed, leaves a `with` block, or is garbage collected.
    """
    return Printer(total, prefix)


class Printer:
    """
    Single-line progress status on stderr, with a permanent final line on stdout.

    Printing is throttled: before speed is known, nothing is printed until
    `throttle_interval` has elapsed; afterwards a skip count derived from the
    observed speed keeps the output near one line per interval.
    """

    def __init__(self, total: int, prefix: object, *, stream=None, out=None) -> None:
        self.stream = stream if stream is not None else sys.stderr
        self.out = out if out is not None else sys.stdout
        # 0 means do not truncate
        self.term_width = _terminal_width(self.stream)
        self._total = max(0, int(total))
        self._prefix = str(prefix)
        self.throttle_interval = DEFAULT_THROTTLE_INTERVAL_S
        self._throttle_current = 0
        self._throttle_max = 0
        self.start = _now()
        self._finished = False

    @property
    def total(self) -> int:
        return self._total

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def finished(self) -> bool:
        return self._finished

    def set_throttle_interval(self, duration: float | timedelta) -> None:
        """
        Set the minimum interval between 2 prints (seconds or timedelta).
        """
        self._check_open()
        self.throttle_interval = _as_seconds(duration)

    def update(self, current: int) -> None:
        self.print(current, "")

    def print(self, current: int, message: object = "") -> None:
        """
        Print the progress at step `current` followed by `message`.
        """
        self._check_open()
        if self._throttled(current):
            return

        status, text = self._fit(self._status(current), str(message))
        try:
            self.stream.write(f"\r{status}{text}{CLEAR_LINE_END}")
            self.stream.flush()
        except (OSError, ValueError):
            pass

    def close(self) -> None:
        """
        Write the completed line. Only the first call has any effect.
        """
        if self._finished:
            return
        self._finished = True

        if self._total == 0:
            line = self._prefix
        else:
            line = f"[{self._total}/{self._total}] {self._prefix}"
        self.out.write(f"{CLEAR_LINE_START}\r{line}\n")
        self.out.flush()

    def _check_open(self) -> None:
        if self._finished:
            raise RuntimeError(f"progress printer {self._prefix!r} is already finished")

    def _throttled(self, current: int) -> bool:
        if self._throttle_max == 0:
            # no speed info yet, use time
            if _now() - self.start < self.throttle_interval:
                return True
            # assumes step 0 happened near start
            self._throttle_max = current + 1
            return False

        if self._throttle_current < self._throttle_max:
            self._throttle_current += 1
            return True
        self._throttle_current = 0
        return False

    def _status(self, current: int) -> str:
        if self._total == 0:
            return f"{current} {self._prefix} "

        status = f"[{current}/{self._total}] {self._prefix}: "
        elapsed = _now() - self.start
        if elapsed > WARMUP_SECONDS:
            percentage = current / self._total * 100
            speed = current / elapsed  # steps/second
            self._throttle_max = int(self.throttle_interval * speed)
            eta = (self._total - current) / speed if speed > 0 else float("inf")
            status += f"{percentage:.2f}% "
            status += f"ETA {eta:.2f}s "
        return status

    def _fit(self, status: str, text: str) -> tuple[str, str]:
        width = self.term_width
        if width <= 0:
            return status, text

        # keep the tail: counters and ETA end the status, a path ends the message
        if len(status) >= width:
            status = status[len(status) - width + 1:]
        remaining = max(0, width - len(status) - 1)
        if len(text) > remaining:
            text = text[len(text) - remaining:]
        return status, text

    def __enter__(self) -> Printer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        # streams may already be gone at interpreter shutdown
        try:
            self.close()
        except (AttributeError, OSError, ValueError):
            pass

    def __repr__(self) -> str:
        return (
            f"Printer(total={self._total}, prefix={self._prefix!r}, term_width={self.term_width}, "
            f"throttle_interval={self.throttle_interval}, throttle_current={self._throttle_current}, "
            f"throttle_max={self._throttle_max}, finished={self._finished})"
        )
