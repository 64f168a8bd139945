"""Runtime settings for the Ratings domain.

Values are read from the environment once, at import time. The Protean
infrastructure (databases, brokers, event store) is configured separately in
``domain.toml`` next to ``domain.py``.
"""

import os


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


# Accepted rating bound, inclusive on both ends
RATING_MIN = _int_from_env("RATING_MIN", 1)
RATING_MAX = _int_from_env("RATING_MAX", 10)

if RATING_MIN > RATING_MAX:
    raise ValueError(f"RATING_MIN ({RATING_MIN}) must not exceed RATING_MAX ({RATING_MAX})")
