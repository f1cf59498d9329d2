class PlotStarterError(RuntimeError):
    """Base class for plot_starter errors."""


class PlotterConsumedError(PlotStarterError):
    """Raised when a Plotter is used after its charts were taken for presentation."""


class PresentError(PlotStarterError):
    """Raised when the plot window cannot be created."""
