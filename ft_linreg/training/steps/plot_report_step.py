# ft_linreg/training/steps/plot_report_step.py
from __future__ import annotations

from pathlib import Path

from ft_linreg import logs
from ft_linreg.config.plot_config import PlotConfig
from ft_linreg.pipeline.step import PipelineStep
from ft_linreg.report.regression_plot import RegressionPlotReport, default_plot_name
from ft_linreg.training.context import TrainingContext


class PlotReportStep(PipelineStep):
    """
    PlotReportStep（FINAL）

    - 原始散点 + 原始单位的拟合直线 → PNG
    - plot.enabled=False 时跳过（不是错误）
    """

    def __init__(self, cfg: PlotConfig, inst=None):
        super().__init__(inst)
        self.cfg = cfg

    def run(self, ctx: TrainingContext) -> TrainingContext:
        if not self.cfg.enabled:
            logs.info(f"[{self.step_name}] plot disabled -> skip")
            return ctx

        if self.cfg.output_path:
            path = Path(self.cfg.output_path)
        else:
            path = Path(self.cfg.output_dir) / default_plot_name(ctx.samples)

        report = RegressionPlotReport(path, width=self.cfg.width, height=self.cfg.height)

        with self.timed():
            ctx.plot_path = report.render(ctx.samples, ctx.result.model)

        logs.info(f"[{self.step_name}] plot saved: {ctx.plot_path}")
        return ctx
