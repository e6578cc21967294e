# ft_linreg/training/engines/train_result.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Tuple

import numpy as np

StopReason = Literal["epochs", "converged", "diverged", "max_iterations"]


@dataclass(frozen=True)
class LinearModel:
    """y = a * x + b（训练结束后只读）"""

    a: float = 0.0
    b: float = 0.0

    def predict(self, x):
        return self.a * np.asarray(x, dtype=np.float64) + self.b


@dataclass(frozen=True)
class TrainResult:
    """
    TrainResult（FINAL / FROZEN）

    语义：
    - 一次完整训练的纯内存态结果
    - 不包含任何 I/O 语义
    - model 为原始单位，normalized_model 为归一化空间
    """

    model: LinearModel
    normalized_model: LinearModel
    iterations: int
    final_error: float
    stop_reason: StopReason
    learning_rate: float
    history: Tuple[Tuple[int, float], ...] = field(default_factory=tuple)
