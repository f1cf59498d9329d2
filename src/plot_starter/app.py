from typing import TYPE_CHECKING, Dict, Optional, Tuple

import matplotlib as mpl
import matplotlib.pyplot as plt
import numpy as np
from loguru import logger
from matplotlib.backend_bases import FigureManagerBase

from .color import Color
from .errors import PresentError

if TYPE_CHECKING:
    from .plotter import ChartData


class PlotterApp:
    """
    Draws the charts taken from a `Plotter` in a matplotlib window.

    One line per chart, all on a single axes. Charts whose color is
    transparent take the next color of matplotlib's property cycle.
    """

    def __init__(
        self,
        charts: Dict[int, "ChartData"],
        title: str,
        inner_size: Tuple[float, float],
    ):
        self.charts = charts
        self.title = title
        self.inner_size = inner_size

        self.fig: Optional[mpl.figure.Figure] = None
        self.ax: Optional[mpl.axes.Axes] = None

    def _create_window(self) -> None:
        dpi = mpl.rcParams["figure.dpi"]
        width, height = self.inner_size
        try:
            self.fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        except Exception as e:
            raise PresentError(f"Could not create plot window: {e}") from e

        manager = self.fig.canvas.manager
        # Non-interactive backends (Agg, pdf, ...) only provide the base manager.
        if manager is None or type(manager) is FigureManagerBase:
            plt.close(self.fig)
            self.fig = None
            raise PresentError(
                f"Matplotlib backend '{mpl.get_backend()}' cannot open a window. "
                "Select an interactive backend, e.g. MPLBACKEND=TkAgg."
            )
        manager.set_window_title(self.title)
        self.ax = self.fig.add_subplot()

    def line(self, ax: mpl.axes.Axes, data: np.ndarray, color: Color) -> None:
        """Issue one polyline draw for a chart."""
        kwargs = {} if color.is_transparent() else {"color": color.to_rgba()}
        ax.plot(data[:, 0], data[:, 1], **kwargs)

    def update(self, ax: mpl.axes.Axes) -> None:
        """Draw every chart onto ``ax``."""
        for chart_id in sorted(self.charts):
            chart = self.charts[chart_id]
            logger.debug(f"Drawing chart {chart_id}: {len(chart.data)} points, color {chart.color.to_hex()}")
            self.line(ax, chart.data, chart.color)
        ax.grid(True)

    def run(self) -> None:
        """
        Open the window, draw the charts and block until the window is closed.

        Raises
        ------
        PresentError
            If the window cannot be created.
        """
        logger.info(f"Opening '{self.title}' window with {len(self.charts)} charts")
        self._create_window()
        self.update(self.ax)
        plt.show(block=True)
        logger.info(f"'{self.title}' window closed")
