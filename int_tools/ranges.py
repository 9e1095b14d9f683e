"""Finite integer ranges with an arbitrary step."""
from typing import Iterator, List, Optional, Tuple

from .errors import InfiniteRangeError


def _bounds(start: int, stop: Optional[int], step: int) -> Tuple[int, int]:
    if stop is None:
        start, stop = 0, start
    if step == 0 and start != stop:
        raise InfiniteRangeError(
            f"A step of 0 never reaches {stop} from {start}."
        )
    return start, stop


def _walk(start: int, stop: int, step: int) -> Iterator[int]:
    if step == 0:
        return
    current = start
    if step < 0:
        while current > stop:
            yield current
            current += step
    else:
        while current < stop:
            yield current
            current += step


def range_iter(start: int, stop: Optional[int] = None, step: int = 1) -> Iterator[int]:
    """Lazily yield the values of ``int_range``.

    The bounds are validated when this function is called, not on the first
    ``next``.
    """
    start, stop = _bounds(start, stop, step)
    return _walk(start, stop, step)


def int_range(start: int, stop: Optional[int] = None, step: int = 1) -> List[int]:
    """Build the integers from ``start`` (inclusive) to ``stop`` (exclusive).

    With a single argument the range runs from 0 up to ``start``. A step that
    points away from ``stop`` produces an empty list; a zero step with distinct
    bounds raises ``InfiniteRangeError``.
    """
    return list(range_iter(start, stop, step))
