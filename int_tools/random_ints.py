"""Uniform random integers."""
import random
from typing import Optional


def random_int(
    low: int,
    high: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> int:
    """Pick an integer uniformly from ``[low, high]``, both ends included.

    Called with a single bound the range is ``[0, low]``. Pass ``rng`` to draw
    from a seeded generator.
    """
    if high is None:
        low, high = 0, low
    if low > high:
        low, high = high, low
    source = rng if rng is not None else random
    return source.randint(low, high)
