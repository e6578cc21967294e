# ft_linreg/training/steps/normalize_step.py
from __future__ import annotations

from ft_linreg import logs
from ft_linreg.pipeline.step import PipelineStep
from ft_linreg.training.context import SampleSeries, TrainingContext
from ft_linreg.training.engines.normalize_engine import NormalizeEngine


class NormalizeStep(PipelineStep):
    """
    NormalizeStep（FINAL）

    Contract:
    - consumes ctx.samples（不修改）
    - produces ctx.normalized / ctx.norm_state
    """

    def __init__(self, *, engine: NormalizeEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: TrainingContext) -> TrainingContext:
        samples = ctx.samples

        with self.timed():
            x, y, state = self.engine.fit(samples.x, samples.y)

        ctx.normalized = SampleSeries(x=x, y=y, x_name=samples.x_name, y_name=samples.y_name)
        ctx.norm_state = state

        logs.info(f"[{self.step_name}] state={state}")
        return ctx
