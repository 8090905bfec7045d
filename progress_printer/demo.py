from __future__ import annotations

import time
from dataclasses import dataclass

from .progress import Printer, printer


@dataclass
class DemoResult:
    name: str
    steps: int
    elapsed: float


def with_messages(steps: int, delay_s: float, *, throttle_interval: float | None = None) -> DemoResult:
    """
    Slow loop with a per-step message, e.g. the file currently being worked on.
    """
    start = time.monotonic()
    with printer(steps, "Doing something") as progress:
        if throttle_interval is not None:
            progress.set_throttle_interval(throttle_interval)

        for i in range(steps):
            time.sleep(delay_s)
            progress.print(i, f"current step: {i}")

    return DemoResult("messages", steps, time.monotonic() - start)


def _run(progress: Printer, steps: int, throttle_interval: float | None) -> None:
    if throttle_interval is not None:
        progress.set_throttle_interval(throttle_interval)
    for i in range(steps):
        progress.update(i)


def reassign(*, throttle_interval: float | None = None) -> DemoResult:
    """
    Three printers disposed three ways: rebinding, del, and a with block.
    """
    start = time.monotonic()

    progress = printer(10, "One")
    _run(progress, 10, throttle_interval)
    # rebinding drops the last reference, which writes "[10/10] One" first
    progress = printer(20, "Two")
    _run(progress, 20, throttle_interval)
    # finishing by hand
    del progress

    with printer(20, "Three") as progress2:
        _run(progress2, 20, throttle_interval)

    return DemoResult("reassign", 50, time.monotonic() - start)
