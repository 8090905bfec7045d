from __future__ import annotations

from dataclasses import dataclass

from .defaults import DEFAULT_DEMO_DELAY_MS, DEFAULT_DEMO_STEPS, DEFAULT_THROTTLE_INTERVAL_S

DEMOS: tuple[str, ...] = ("messages", "reassign")


@dataclass(frozen=True)
class DemoConfig:
    demos: tuple[str, ...]
    steps: int
    delay_s: float
    throttle_interval: float
    show_report: bool = True

    @classmethod
    def defaults(cls) -> "DemoConfig":
        return cls(
            demos=DEMOS,
            steps=DEFAULT_DEMO_STEPS,
            delay_s=DEFAULT_DEMO_DELAY_MS / 1000.0,
            throttle_interval=DEFAULT_THROTTLE_INTERVAL_S,
        )

    @classmethod
    def from_args(cls, args) -> "DemoConfig":
        base = cls.defaults()
        demos = base.demos if args.demo == "all" else (args.demo,)

        steps = base.steps if args.steps is None else max(0, int(args.steps))
        delay_s = base.delay_s if args.delay_ms is None else max(0, int(args.delay_ms)) / 1000.0
        throttle = base.throttle_interval if args.throttle_ms is None else max(0, int(args.throttle_ms)) / 1000.0

        return cls(
            demos=demos,
            steps=steps,
            delay_s=delay_s,
            throttle_interval=throttle,
            show_report=not args.no_report,
        )
