import argparse
import datetime
import time

from .config import DEMOS, DemoConfig
from .demo import reassign, with_messages
from .report import print_report_rich


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="progress-printer-demo",
        description="Run the progress printer usage demos.",
    )
    parser.add_argument("--demo", choices=("all",) + DEMOS, default="all", help="Which demo to run.")
    parser.add_argument("--steps", type=int, default=None, help="Steps in the messages demo.")
    parser.add_argument("--delay-ms", type=int, default=None, help="Sleep per step in the messages demo.")
    parser.add_argument("--throttle-ms", type=int, default=None, help="Minimum interval between two printed updates.")
    parser.add_argument("--no-report", action="store_true", help="Skip the summary table at the end.")
    return parser.parse_args(argv)


def run(argv=None) -> None:
    cfg = DemoConfig.from_args(_parse_args(argv))

    start = time.time()
    results = []

    try:
        for name in cfg.demos:
            if name == "messages":
                results.append(with_messages(cfg.steps, cfg.delay_s, throttle_interval=cfg.throttle_interval))
            elif name == "reassign":
                results.append(reassign(throttle_interval=cfg.throttle_interval))
    except KeyboardInterrupt:
        print("\nStopped.")
        return

    if cfg.show_report:
        summary = {
            "demos": cfg.demos,
            "steps": cfg.steps,
            "delay_ms": int(cfg.delay_s * 1000),
            "throttle_ms": int(cfg.throttle_interval * 1000),
        }
        print_report_rich(summary=summary, results=results)

    elapsed = datetime.timedelta(seconds=int(time.time() - start))
    print("\nTime elapsed:", elapsed)


if __name__ == "__main__":
    run()
