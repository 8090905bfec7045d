DEFAULT_THROTTLE_INTERVAL_S: float = 0.05  # min seconds between two printed updates
WARMUP_SECONDS: float = 2.0  # no percentage/ETA before this, speed is too noisy

CLEAR_LINE_END: str = "\x1b[0K"
CLEAR_LINE_START: str = "\x1b[1K"

DEFAULT_DEMO_STEPS: int = 500
DEFAULT_DEMO_DELAY_MS: int = 10
