# ft_linreg/training/steps/model_report_step.py
from __future__ import annotations

from ft_linreg import logs
from ft_linreg.pipeline.step import PipelineStep
from ft_linreg.report.equation import EquationReport
from ft_linreg.training.context import TrainingContext


class ModelReportStep(PipelineStep):
    """
    ModelReportStep（FINAL）

    - produces ctx.equation
    - Does NOT modify model
    """

    def __init__(self, *, report: EquationReport | None = None, inst=None):
        super().__init__(inst)
        self.report = report or EquationReport()

    def run(self, ctx: TrainingContext) -> TrainingContext:
        ctx.equation = self.report.render(ctx.samples, ctx.result.model)
        logs.info(f"[{self.step_name}] {ctx.equation}")
        return ctx
