"""
plot_starter: quickly plot data in a native window.

Attach line charts to a Plotter, then present them with matplotlib.

    from plot_starter import Plotter, Chart, Color, arange

    plotter = Plotter()
    Chart.on(plotter).data((x, math.sin(x)) for x in arange((-10.0, 10.0), 0.1)).color(Color.RED)
    plotter.present()
"""

from plot_starter.arange import ARange, arange
from plot_starter.chart import Chart
from plot_starter.color import Color
from plot_starter.errors import PlotStarterError, PlotterConsumedError, PresentError
from plot_starter.log import configure_logging
from plot_starter.plotter import ChartData, Plotter

__all__ = [
    # Plotting
    "Plotter",
    "Chart",
    "ChartData",
    "Color",
    # Sampling
    "arange",
    "ARange",
    # Errors
    "PlotStarterError",
    "PlotterConsumedError",
    "PresentError",
    # Logging
    "configure_logging",
]
