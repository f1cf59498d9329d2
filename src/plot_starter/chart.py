from typing import Any, Callable, Tuple

from .arange import arange
from .color import Color
from .plotter import Plotter, Points


class Chart:
    """
    Handle to one chart of a `Plotter`.

    Created with ``Chart.on(plotter)`` and customised by chaining `data()`,
    `time_series()` and `color()`. Every call writes straight into the plotter;
    the handle only remembers its id.

    Examples
    --------
    >>> import math
    >>> plotter = Plotter()
    >>> Chart.on(plotter).time_series(0.1, (-10.0, 10.0), math.sin).color(Color.RED)  # doctest: +SKIP
    """

    def __init__(self, plotter: Plotter, chart_id: int):
        self.plotter = plotter
        self.id = chart_id

    @classmethod
    def on(cls, plotter: Plotter) -> "Chart":
        """Create a new chart on ``plotter``."""
        return cls(plotter, plotter.next_id())

    def data(self, points: Points) -> "Chart":
        """
        Set the points of the chart.

        Parameters
        ----------
        points : Points
            (x, y) pairs, either an iterable of tuples or an ``(n, 2)`` array.
        """
        self.plotter.data(self.id, points)
        return self

    def time_series(
        self, step: float, span: Tuple[float, float], f: Callable[[float], float]
    ) -> "Chart":
        """
        Set the points from a step, a span and a function.

        x runs over ``arange(span, step)`` and y is ``f(x)`` for each sample.

        Parameters
        ----------
        step : float
            Spacing between x samples.
        span : Tuple[float, float]
            ``(start, end)`` of the x samples.
        f : Callable[[float], float]
            Called once per sample, in order.
        """
        return self.data([(x, f(x)) for x in arange(span, step)])

    def color(self, color: Any) -> "Chart":
        """Set the line color. Accepts a `Color` or anything `Color.parse` does."""
        self.plotter.color(self.id, Color.parse(color))
        return self

    def __repr__(self) -> str:
        return f"Chart(id={self.id})"
