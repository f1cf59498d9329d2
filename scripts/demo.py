import math

from plot_starter import Chart, Color, Plotter, arange, configure_logging

# --- User configuration dictionary ---
CONFIG = {
    "LOG_LEVEL": "INFO",  # logging level: DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL
    "STEP": 0.1,  # x spacing of the samples
    "SPAN": (-10.0, 10.0),  # x range of the samples
    "TITLE": "plot_starter",  # window title
}


def main() -> None:
    """
    Plot a sine and an offset sine in one window.
    """
    configure_logging(CONFIG.get("LOG_LEVEL", "INFO"))

    plotter = Plotter()

    Chart.on(plotter).time_series(CONFIG["STEP"], CONFIG["SPAN"], math.sin).color(
        Color.RED
    )

    Chart.on(plotter).data(
        (x, 3.0 + math.sin(x)) for x in arange(CONFIG["SPAN"], CONFIG["STEP"])
    ).color(Color.ORANGE)

    plotter.present(title=CONFIG["TITLE"])


if __name__ == "__main__":
    main()
