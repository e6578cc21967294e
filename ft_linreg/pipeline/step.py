# ft_linreg/pipeline/step.py
from __future__ import annotations

from abc import ABC, abstractmethod

from ft_linreg.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep(ABC):
    """
    Pipeline Step 基类

    职责（唯一）：
      1. 执行一段语义（load / normalize / train / report）
      2. 提供 Step 级时间语义边界

    规则：
      - Step 只读写 ctx，不持有跨 run 的状态
      - Instrumentation 是可选横切关注点
      - Step 行为不依赖 inst 是否存在
    """

    def __init__(self, inst: Instrumentation | None = None):
        # 永远保证 inst 可用（No-op 语义）
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        """默认使用类名作为 Step 名称。"""
        return self.__class__.__name__

    def timed(self):
        """Step 级 timer，写入 timeline。"""
        return self.inst.timer(self.step_name)

    @abstractmethod
    def run(self, ctx):
        ...
