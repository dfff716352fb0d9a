import os
from typing import Optional

SIZE = 4
WIN_VALUE = 2048
FOUR_PROBABILITY = 0.1  # chance that a spawned tile is a 4 instead of a 2
START_TILES = 2

SEED_ENV = 'SLIDE2048_SEED'


def seed_from_env() -> Optional[int]:
    """Read the RNG seed from SLIDE2048_SEED, or None when unset or blank."""
    raw = os.environ.get(SEED_ENV, '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{SEED_ENV} must be an integer, got {raw!r}") from None
