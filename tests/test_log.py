import sys

import pytest
from loguru import logger

from plot_starter import Plotter, configure_logging


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_configure_logging_filters_below_level(capsys, restore_logger) -> None:
    configure_logging("warning")

    plotter = Plotter()
    plotter.data(0, [(0.0, 0.0)])
    logger.warning("window backend missing")

    err = capsys.readouterr().err
    assert "Chart 0: set 1 points" not in err
    assert "window backend missing" in err
    assert "WARNING" in err


def test_configure_logging_debug_shows_registry_writes(capsys, restore_logger) -> None:
    configure_logging("DEBUG")

    Plotter().data(0, [(0.0, 0.0), (1.0, 1.0)])

    assert "Chart 0: set 2 points" in capsys.readouterr().err
