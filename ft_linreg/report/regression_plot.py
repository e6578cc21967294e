# ft_linreg/report/regression_plot.py
from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from ft_linreg.report.base import Report
from ft_linreg.training.context import SampleSeries
from ft_linreg.training.engines.train_result import LinearModel
from ft_linreg.utils.filesystem import FileSystem


def default_plot_name(samples: SampleSeries) -> str:
    return samples.title.replace(" ", "_") + ".png"


class RegressionPlotReport(Report):
    """
    原始散点（红）+ 拟合直线（蓝），直线在原始 x 的 min / max 处取值。
    """

    def __init__(self, output_path, width: int = 800, height: int = 600, dpi: int = 100):
        self._path = Path(output_path)
        self.width = width
        self.height = height
        self.dpi = dpi

    def render(self, samples: SampleSeries, model: LinearModel) -> Path:
        x_min, x_max = float(samples.x.min()), float(samples.x.max())
        line_x = [x_min, x_max]

        fig = plt.figure(figsize=(self.width / self.dpi, self.height / self.dpi), dpi=self.dpi)
        try:
            plt.scatter(samples.x, samples.y, s=25, c="red")
            plt.plot(line_x, model.predict(line_x), c="blue")
            plt.title(samples.title)
            plt.xlabel(samples.x_name)
            plt.ylabel(samples.y_name)
            plt.tight_layout()
            plt.savefig(FileSystem.ensure_parent(self._path), dpi=self.dpi)
        finally:
            plt.close(fig)

        return self._path
