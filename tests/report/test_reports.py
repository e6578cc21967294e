# tests/report/test_reports.py
import struct
from pathlib import Path

from ft_linreg.report.equation import EquationReport
from ft_linreg.report.regression_plot import RegressionPlotReport, default_plot_name
from ft_linreg.training.context import SampleSeries
from ft_linreg.training.engines.train_result import LinearModel


def png_size(path: Path):
    with open(path, "rb") as f:
        header = f.read(24)
    assert header[:8] == b"\x89PNG\r\n\x1a\n"
    return struct.unpack(">II", header[16:24])


def make_samples() -> SampleSeries:
    return SampleSeries(x=[1.0, 2.0, 3.0], y=[2.0, 4.0, 6.0], x_name="km", y_name="price")


def test_equation_format():
    text = EquationReport().render(make_samples(), LinearModel(a=2.0, b=0.5))

    assert text == "y = 2.0x, + 0.5"


def test_equation_keeps_negative_intercept():
    text = EquationReport().render(make_samples(), LinearModel(a=-0.0214, b=8499.6))

    assert text == "y = -0.0214x, + 8499.6"


def test_default_plot_name():
    assert default_plot_name(make_samples()) == "price_vs_km.png"


def test_plot_written_with_requested_size(tmp_path):
    out = tmp_path / "nested" / "fit.png"
    path = RegressionPlotReport(out, width=640, height=480).render(
        make_samples(), LinearModel(a=2.0, b=0.0)
    )

    assert path == out
    assert out.exists()
    assert png_size(out) == (640, 480)


def test_plot_default_size(tmp_path):
    out = tmp_path / "fit.png"
    RegressionPlotReport(out).render(make_samples(), LinearModel(a=2.0, b=0.0))

    assert png_size(out) == (800, 600)


def test_linear_model_predict():
    model = LinearModel(a=2.0, b=1.0)

    assert model.predict([0.0, 3.0]).tolist() == [1.0, 7.0]
