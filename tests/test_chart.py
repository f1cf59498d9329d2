import math

import numpy as np
import pytest

from plot_starter import Chart, Color, Plotter, arange


def test_each_chart_gets_a_new_id() -> None:
    plotter = Plotter()
    charts = [Chart.on(plotter) for _ in range(4)]
    assert [chart.id for chart in charts] == [0, 1, 2, 3]


def test_chaining_returns_same_handle() -> None:
    plotter = Plotter()
    chart = Chart.on(plotter)
    assert chart.data([(0.0, 1.0)]) is chart
    assert chart.color(Color.RED) is chart
    assert chart.time_series(0.5, (0.0, 1.0), math.sin) is chart


def test_chained_writes_land_in_plotter() -> None:
    plotter = Plotter()
    Chart.on(plotter).data([(0.0, 0.0), (1.0, 1.0)]).color(Color.RED)
    Chart.on(plotter).color("orange")

    charts = plotter.take()
    np.testing.assert_array_equal(charts[0].data, [[0.0, 0.0], [1.0, 1.0]])
    assert charts[0].color == Color.RED
    assert charts[1].data.shape == (0, 2)
    assert charts[1].color == Color.ORANGE


def test_independent_handles_share_plotter() -> None:
    plotter = Plotter()
    a = Chart.on(plotter)
    b = Chart.on(plotter)
    b.color(Color.BLUE)
    a.data([(1.0, 1.0)])
    b.data([(2.0, 2.0)])

    charts = plotter.take()
    assert charts[0].color == Color.TRANSPARENT
    np.testing.assert_array_equal(charts[1].data, [[2.0, 2.0]])
    assert charts[1].color == Color.BLUE


def test_time_series_matches_data_over_arange() -> None:
    plotter = Plotter()
    Chart.on(plotter).time_series(0.1, (-10.0, 10.0), math.sin)
    Chart.on(plotter).data((x, math.sin(x)) for x in arange((-10.0, 10.0), 0.1))

    charts = plotter.take()
    np.testing.assert_array_equal(charts[0].data, charts[1].data)


def test_time_series_calls_function_per_sample() -> None:
    calls = []

    def square(x: float) -> float:
        calls.append(x)
        return x * x

    plotter = Plotter()
    Chart.on(plotter).time_series(0.5, (0.0, 1.0), square)

    assert calls == [0.0, 0.5, 1.0]
    np.testing.assert_array_equal(plotter.take()[0].data, [[0.0, 0.0], [0.5, 0.25], [1.0, 1.0]])


def test_time_series_with_degenerate_step_sets_empty_data() -> None:
    plotter = Plotter()
    Chart.on(plotter).time_series(0.0, (0.0, 1.0), math.sin)
    assert plotter.take()[0].data.shape == (0, 2)


def test_invalid_color_raises() -> None:
    plotter = Plotter()
    with pytest.raises(ValueError):
        Chart.on(plotter).color("not-a-color")
