# ft_linreg/training/engines/normalize_engine.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence, Tuple

import numpy as np

from ft_linreg.utils.errors import DegenerateRangeError, EmptyDatasetError

NormalizationMethod = Literal["maxabs", "affine"]


def _as_pair(x: Sequence[float], y: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    xs = np.asarray(x, dtype=np.float64)
    ys = np.asarray(y, dtype=np.float64)

    if xs.shape != ys.shape:
        raise ValueError(f"x / y length mismatch: {xs.shape[0]} != {ys.shape[0]}")
    if xs.size == 0:
        raise EmptyDatasetError("cannot normalize an empty series")

    return xs, ys


def normalize_combined_affine(
    x: Sequence[float], y: Sequence[float]
) -> Tuple[np.ndarray, np.ndarray]:
    """
    联合 min-max 映射到 [-1, 1]：

        v' = -1 + 2 * (v - min_combined) / (max_combined - min_combined)

    min / max 在 x、y 拼接后的序列上计算。
    """
    xs, ys = _as_pair(x, y)
    lo, hi = _combined_range(xs, ys)
    span = hi - lo

    return -1.0 + 2.0 * (xs - lo) / span, -1.0 + 2.0 * (ys - lo) / span


def normalize_combined_maxabs(
    x: Sequence[float], y: Sequence[float]
) -> Tuple[np.ndarray, np.ndarray, float]:
    """
    共享 scale 的 max-abs 缩放：

        scale = max(max|x_i|, max|y_i|)
        v'    = v / scale

    x、y 共用同一个 scale，斜率因此不随缩放改变。
    """
    xs, ys = _as_pair(x, y)
    scale = float(max(np.max(np.abs(xs)), np.max(np.abs(ys))))

    if scale == 0.0:
        raise DegenerateRangeError("every value is zero (scale == 0)")

    return xs / scale, ys / scale, scale


def denormalize_intercept(b: float, scale: float) -> float:
    return b * scale


def _combined_range(xs: np.ndarray, ys: np.ndarray) -> Tuple[float, float]:
    lo = float(min(xs.min(), ys.min()))
    hi = float(max(xs.max(), ys.max()))
    if hi == lo:
        raise DegenerateRangeError(f"all values equal {lo}")
    return lo, hi


@dataclass(frozen=True)
class NormalizationState:
    """
    归一化状态（构造数据集时计算一次，之后只读）

    - maxabs: scale
    - affine: lo / hi（联合最小 / 最大值）
    """

    method: NormalizationMethod
    scale: float = 1.0
    lo: float = -1.0
    hi: float = 1.0

    def denormalize(self, a: float, b: float) -> Tuple[float, float]:
        """
        归一化空间的 (a, b) → 原始单位的 (a, b)。

        两种方案都对 x、y 使用同一变换，斜率不变，只需还原截距。
        """
        if self.method == "maxabs":
            return a, denormalize_intercept(b, self.scale)

        # y = lo + span/2 * (a*x' + b + 1),  x' = -1 + 2*(x - lo)/span
        span = self.hi - self.lo
        return a, self.lo * (1.0 - a) + span * (1.0 + b - a) / 2.0


class NormalizeEngine:
    """
    NormalizeEngine（FINAL）

    Contract:
    - 输入为原始 x / y（不修改）
    - 输出为新的 float64 数组 + NormalizationState
    """

    def __init__(self, method: NormalizationMethod = "maxabs"):
        if method not in ("maxabs", "affine"):
            raise ValueError(f"Unknown normalization method: {method}")
        self.method = method

    def fit(
        self, x: Sequence[float], y: Sequence[float]
    ) -> Tuple[np.ndarray, np.ndarray, NormalizationState]:
        if self.method == "maxabs":
            xn, yn, scale = normalize_combined_maxabs(x, y)
            return xn, yn, NormalizationState(method="maxabs", scale=scale)

        xs, ys = _as_pair(x, y)
        lo, hi = _combined_range(xs, ys)
        xn, yn = normalize_combined_affine(xs, ys)
        return xn, yn, NormalizationState(method="affine", lo=lo, hi=hi)
