# ft_linreg/config/training_config.py
from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field


class EpochsPolicyConfig(BaseModel):
    """固定轮数：恰好 n_epochs 次更新，无提前退出"""

    kind: Literal["epochs"] = "epochs"
    n_epochs: int = Field(10000, ge=0)


class ThresholdPolicyConfig(BaseModel):
    """
    误差增量阈值：prev_error - error < d_rms 时停止。

    max_iterations=None 表示不设上限（与原始循环一致）。
    """

    kind: Literal["threshold"] = "threshold"
    d_rms: float = Field(1e-10, gt=0)
    max_iterations: Optional[int] = Field(None, gt=0)


class TrainingConfig(BaseModel):
    """
    TrainingConfig（FINAL / FROZEN）
    """

    # "maxabs": 共享 scale，截距可还原到原始单位
    # "affine": 联合 min-max 映射到 [-1, 1]
    normalization: Literal["maxabs", "affine"] = "maxabs"

    # None → policy 默认值（epochs: 0.001, threshold: 0.01）
    learning_rate: Optional[float] = Field(None, gt=0)

    policy: Union[EpochsPolicyConfig, ThresholdPolicyConfig] = Field(
        default_factory=ThresholdPolicyConfig,
        discriminator="kind",
    )

    # 每隔多少次迭代记录一次误差
    history_every: int = Field(1000, ge=1)
