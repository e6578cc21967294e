# ft_linreg/training/steps/dataset_load_step.py
from __future__ import annotations

from ft_linreg import logs
from ft_linreg.pipeline.step import PipelineStep
from ft_linreg.training.context import TrainingContext
from ft_linreg.training.engines.dataset_load_engine import DatasetLoadEngine
from ft_linreg.utils.errors import UserInputError


class DatasetLoadStep(PipelineStep):
    """
    DatasetLoadStep（FINAL）

    Contract:
    - consumes ctx.cfg.data
    - produces ctx.samples
    """

    def __init__(self, *, engine: DatasetLoadEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: TrainingContext) -> TrainingContext:
        path = ctx.cfg.data.path
        if not path:
            raise UserInputError("No dataset path configured")

        with self.timed():
            ctx.samples = self.engine.load(path)

        self.inst.metrics.record("rows", len(ctx.samples))
        logs.info(f"[{self.step_name}] {ctx.samples.title} rows={len(ctx.samples)}")
        return ctx
