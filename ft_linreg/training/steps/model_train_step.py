# ft_linreg/training/steps/model_train_step.py
from __future__ import annotations

from ft_linreg.config.training_config import EpochsPolicyConfig, TrainingConfig
from ft_linreg.pipeline.step import PipelineStep
from ft_linreg.training.context import TrainingContext
from ft_linreg.training.engines.gradient_descent_train_engine import (
    ConvergenceThreshold,
    FixedEpochs,
    GradientDescentTrainEngine,
    StoppingPolicy,
)


def resolve_stopping_policy(cfg: TrainingConfig) -> StoppingPolicy:
    policy = cfg.policy
    if isinstance(policy, EpochsPolicyConfig):
        return FixedEpochs(n_epochs=policy.n_epochs)
    return ConvergenceThreshold(d_rms=policy.d_rms, max_iterations=policy.max_iterations)


class ModelTrainStep(PipelineStep):
    """
    ModelTrainStep（FINAL）

    Contract:
    - consumes ctx.normalized / ctx.norm_state
    - produces ctx.result（原始单位 + 归一化空间的模型）
    """

    def __init__(self, cfg: TrainingConfig, inst=None):
        super().__init__(inst)
        self.policy = resolve_stopping_policy(cfg)
        self.engine = GradientDescentTrainEngine(
            learning_rate=cfg.learning_rate,
            history_every=cfg.history_every,
        )

    def run(self, ctx: TrainingContext) -> TrainingContext:
        with self.timed():
            result = self.engine.train(
                x=ctx.normalized.x,
                y=ctx.normalized.y,
                policy=self.policy,
                state=ctx.norm_state,
            )

        ctx.result = result
        self.inst.metrics.record_result(result)
        return ctx
