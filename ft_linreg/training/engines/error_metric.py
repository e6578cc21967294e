# ft_linreg/training/engines/error_metric.py
from __future__ import annotations

from typing import Sequence

import numpy as np

from ft_linreg.utils.errors import EmptyDatasetError


def mean_squared_error(x: Sequence[float], y: Sequence[float], a: float, b: float) -> float:
    """
    mean((a * x_i + b - y_i) ** 2)

    训练期间只能传入归一化后的 x / y。
    """
    xs = np.asarray(x, dtype=np.float64)
    ys = np.asarray(y, dtype=np.float64)

    if xs.shape != ys.shape:
        raise ValueError(f"x / y length mismatch: {xs.shape[0]} != {ys.shape[0]}")
    if xs.size == 0:
        raise EmptyDatasetError("mean squared error of an empty dataset")

    residual = a * xs + b - ys
    return float(np.mean(residual * residual))
