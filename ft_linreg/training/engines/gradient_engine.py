# ft_linreg/training/engines/gradient_engine.py
from __future__ import annotations

from typing import Callable, Tuple

# 前向差分步长（固定常数）
FINITE_DIFFERENCE_STEP = 1e-10


def estimate_gradient(
    f: Callable[[float, float], float],
    a: float,
    b: float,
    h: float = FINITE_DIFFERENCE_STEP,
) -> Tuple[float, float]:
    """
    单侧前向差分估计 (df/da, df/db)：

        df/da ≈ (f(a + h, b) - f(a, b)) / h
        df/db ≈ (f(a, b + h) - f(a, b)) / h

    f 返回 NaN / inf 时原样传播。
    """
    if h == 0:
        raise ValueError("finite difference step must be nonzero")

    base = f(a, b)
    df_da = (f(a + h, b) - base) / h
    df_db = (f(a, b + h) - base) / h

    return df_da, df_db
