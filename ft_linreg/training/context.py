# ft_linreg/training/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

from ft_linreg.training.engines.normalize_engine import NormalizationState
from ft_linreg.training.engines.train_result import TrainResult


@dataclass(frozen=True, eq=False)
class SampleSeries:
    """
    原始样本（构造后只读）

    - x / y 等长、非空、全部为有限实数
    - x_name / y_name 来自 CSV 表头
    """

    x: np.ndarray
    y: np.ndarray
    x_name: str = "x"
    y_name: str = "y"

    def __post_init__(self):
        x = np.array(self.x, dtype=np.float64)
        y = np.array(self.y, dtype=np.float64)
        if x.shape != y.shape:
            raise ValueError(f"x / y length mismatch: {x.shape[0]} != {y.shape[0]}")
        x.setflags(write=False)
        y.setflags(write=False)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __len__(self) -> int:
        return int(self.x.size)

    @property
    def title(self) -> str:
        return f"{self.y_name} vs {self.x_name}"


@dataclass
class TrainingContext:
    """
    TrainingContext（FINAL / FROZEN）

    Semantics:
    - One context == one training run
    - Step 之间唯一通信载体，只存事实 / 中间态
    """

    # -------------------------
    # Identity (FROZEN)
    # -------------------------
    run_id: str

    # -------------------------
    # Static bindings
    # -------------------------
    cfg: Any
    inst: Any

    # -------------------------
    # Data layer
    # -------------------------
    samples: Optional[SampleSeries] = None
    normalized: Optional[SampleSeries] = None
    norm_state: Optional[NormalizationState] = None

    # -------------------------
    # Result layer
    # -------------------------
    result: Optional[TrainResult] = None
    equation: Optional[str] = None
    plot_path: Optional[Path] = None
    metrics: Dict[str, Any] = field(default_factory=dict)  # run 结束时由 inst.metrics 拷贝
