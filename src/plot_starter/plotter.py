from typing import Dict, Iterable, List, Optional, Tuple, Union

import numpy as np
from loguru import logger

from .app import PlotterApp
from .color import Color
from .errors import PlotterConsumedError

Points = Union[np.ndarray, Iterable[Tuple[float, float]]]


def _as_points(points: Points) -> np.ndarray:
    """
    Normalise (x, y) pairs to an ``(n, 2)`` float64 array.

    Raises
    ------
    ValueError
        If the input cannot be shaped into (x, y) pairs.
    """
    if not isinstance(points, np.ndarray):
        points = list(points)
    arr = np.array(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(
            f"Chart data must be a sequence of (x, y) pairs. Got array of shape {arr.shape}."
        )
    return arr


class ChartData:
    """Points and color of one chart. Unset fields keep their defaults."""

    def __init__(self, data: Optional[np.ndarray] = None, color: Color = Color.TRANSPARENT):
        self.data = data if data is not None else np.empty((0, 2), dtype=np.float64)
        self.color = color

    def __repr__(self) -> str:
        return f"ChartData(points={len(self.data)}, color={self.color.to_hex()})"


class Plotter:
    """
    Entry point for creating charts and displaying them in a window.

    A Plotter holds every chart attached with `Chart.on()`, keyed by an id
    allocated in increasing order from zero. Charts are written through their
    `Chart` handles; `present()` then hands all of them to the window in one go
    and the Plotter cannot be used again.

    Not thread safe.
    """

    DEFAULT_TITLE = "plot_starter"
    DEFAULT_INNER_SIZE = (1280.0, 800.0)  # window content size in pixels

    def __init__(self):
        self._next_id = 0
        self._charts: Dict[int, ChartData] = {}
        self._consumed = False

    def __len__(self) -> int:
        return len(self._charts)

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else f"{len(self._charts)} charts"
        return f"Plotter({state})"

    @property
    def consumed(self) -> bool:
        """True once `take()` or `present()` has been called."""
        return self._consumed

    def _check_not_consumed(self) -> None:
        if self._consumed:
            raise PlotterConsumedError(
                "Plotter has already been presented. Create a new Plotter for another window."
            )

    def ids(self) -> List[int]:
        """Ids of the charts that have data or a color set."""
        return sorted(self._charts)

    def next_id(self) -> int:
        """Allocate the next unused chart id."""
        self._check_not_consumed()
        ret = self._next_id
        self._next_id = ret + 1
        return ret

    def data(self, chart_id: int, points: Points) -> None:
        """
        Replace the points of chart ``chart_id``, creating the chart if needed.

        A newly created chart gets ``Color.TRANSPARENT``.
        """
        self._check_not_consumed()
        arr = _as_points(points)
        chart = self._charts.get(chart_id)
        if chart is not None:
            chart.data = arr
        else:
            self._charts[chart_id] = ChartData(arr, Color.TRANSPARENT)
        logger.debug(f"Chart {chart_id}: set {len(arr)} points")

    def color(self, chart_id: int, color: Color) -> None:
        """Replace the color of chart ``chart_id``, creating the chart with no points if needed."""
        self._check_not_consumed()
        chart = self._charts.get(chart_id)
        if chart is not None:
            chart.color = color
        else:
            self._charts[chart_id] = ChartData(color=color)
        logger.debug(f"Chart {chart_id}: set color {color.to_hex()}")

    def take(self) -> Dict[int, ChartData]:
        """
        Hand over all charts and retire this Plotter.

        Returns
        -------
        Dict[int, ChartData]
            Every chart written so far, keyed by id.

        Raises
        ------
        PlotterConsumedError
            If the charts were already taken.
        """
        self._check_not_consumed()
        self._consumed = True
        charts, self._charts = self._charts, {}
        return charts

    def present(
        self,
        title: Optional[str] = None,
        inner_size: Optional[Tuple[float, float]] = None,
    ) -> None:
        """
        Display the charts in a native window and block until it is closed.

        This consumes the Plotter, even when the window fails to open.

        Parameters
        ----------
        title : Optional[str], default=None
            Window title. Uses ``DEFAULT_TITLE`` if None.
        inner_size : Optional[Tuple[float, float]], default=None
            Window content size (width, height) in pixels. Uses
            ``DEFAULT_INNER_SIZE`` if None.

        Raises
        ------
        PresentError
            If the window cannot be created.
        PlotterConsumedError
            If the Plotter was already presented.
        """
        charts = self.take()
        app = PlotterApp(
            charts,
            title=title if title is not None else self.DEFAULT_TITLE,
            inner_size=inner_size if inner_size is not None else self.DEFAULT_INNER_SIZE,
        )
        app.run()
