# ft_linreg/training/pipeline.py
from __future__ import annotations

from typing import List

from ft_linreg import logs
from ft_linreg.config.app_config import AppConfig
from ft_linreg.observability.instrumentation import Instrumentation
from ft_linreg.pipeline.step import PipelineStep
from ft_linreg.training.context import TrainingContext


class TrainingPipeline:
    """
    TrainingPipeline（FINAL / FROZEN）

    Semantics:
    - Pipeline owns step order and the context
    - Steps execute semantics
    - 任何 Step 抛错都直接中断 run，不暴露部分模型
    """

    def __init__(
            self,
            *,
            steps: List[PipelineStep],
            inst: Instrumentation,
            cfg: AppConfig,
    ):
        self.steps = steps
        self.inst = inst
        self.cfg = cfg

    def run(self, run_id: str) -> TrainingContext:
        logs.info(f"[TrainingPipeline] START run_id={run_id}")

        ctx = TrainingContext(
            run_id=run_id,
            cfg=self.cfg,
            inst=self.inst,
        )

        for step in self.steps:
            ctx = step.run(ctx)

        ctx.metrics = self.inst.metrics.snapshot()
        self.inst.generate_timeline_report(run_id)

        logs.info("[TrainingPipeline] DONE")
        return ctx
