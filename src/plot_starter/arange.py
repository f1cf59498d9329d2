import math
from typing import Iterator, Optional, Tuple

from loguru import logger


class ARange:
    """
    Lazy stream of evenly spaced floats, as produced by `arange()`.

    Each value is the previous one plus ``step``; the stream stops at the first
    value strictly greater than the end of the span. The iterator is one-shot:
    build a new one with `arange()` to start over.
    """

    def __init__(self, span: Tuple[float, float], step: float):
        self.start, self.end = float(span[0]), float(span[1])
        self.step = float(step)
        self._previous: Optional[float] = None
        self._exhausted = not self._is_valid()

    def _is_valid(self) -> bool:
        if not (math.isfinite(self.step) and self.step > 0):
            logger.warning(
                f"arange step must be positive and finite, got {self.step}. Yielding nothing."
            )
            return False
        if not (math.isfinite(self.start) and math.isfinite(self.end)):
            logger.warning(
                f"arange span must have finite bounds, got ({self.start}, {self.end}). Yielding nothing."
            )
            return False
        if self.start > self.end:
            logger.warning(
                f"arange span is empty: start {self.start} > end {self.end}. Yielding nothing."
            )
            return False
        return True

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        if self._exhausted:
            raise StopIteration
        if self._previous is None:
            self._previous = self.start
            return self.start
        value = self._previous + self.step
        if value <= self._previous:
            logger.warning(
                f"arange step {self.step} is below float resolution at {self._previous}. Stopping."
            )
            self._exhausted = True
            raise StopIteration
        if value > self.end:
            self._exhausted = True
            raise StopIteration
        self._previous = value
        return value

    def __repr__(self) -> str:
        return f"ARange(({self.start}, {self.end}), {self.step})"


def arange(span: Tuple[float, float], step: float) -> ARange:
    """
    Create a stream of floats from ``span[0]`` to ``span[1]`` spaced by ``step``.

    Parameters
    ----------
    span : Tuple[float, float]
        ``(start, end)`` bounds. ``end`` is included only if reached exactly.
    step : float
        Spacing between consecutive values. Must be positive.

    Returns
    -------
    ARange
        Lazy iterator over the values. Empty when ``step`` is not positive and
        finite or when ``start > end``.

    Examples
    --------
    >>> list(arange((0.0, 1.0), 0.5))
    [0.0, 0.5, 1.0]
    """
    return ARange(span, step)
