# ft_linreg/training/engines/gradient_descent_train_engine.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional, Sequence, Tuple, Union

import numpy as np

from ft_linreg import logs
from ft_linreg.training.engines.error_metric import mean_squared_error
from ft_linreg.training.engines.gradient_engine import estimate_gradient
from ft_linreg.training.engines.normalize_engine import NormalizationState
from ft_linreg.training.engines.train_result import LinearModel, StopReason, TrainResult


@dataclass(frozen=True)
class FixedEpochs:
    """恰好 n_epochs 次更新，没有提前退出"""

    n_epochs: int
    default_learning_rate: ClassVar[float] = 0.001

    def __post_init__(self):
        if self.n_epochs < 0:
            raise ValueError(f"n_epochs must be >= 0, got {self.n_epochs}")


@dataclass(frozen=True)
class ConvergenceThreshold:
    """
    prev_error - error < d_rms 时停止。

    误差上升时差值为负，同样触发停止（stop_reason="diverged"）。
    max_iterations=None 时循环没有上限。
    """

    d_rms: float
    max_iterations: Optional[int] = None
    default_learning_rate: ClassVar[float] = 0.01

    def __post_init__(self):
        if not self.d_rms > 0:
            raise ValueError(f"d_rms must be > 0, got {self.d_rms}")
        if self.max_iterations is not None and self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be > 0, got {self.max_iterations}")


StoppingPolicy = Union[FixedEpochs, ConvergenceThreshold]


def _readonly(values: Sequence[float]) -> np.ndarray:
    view = np.asarray(values, dtype=np.float64).view()
    view.setflags(write=False)
    return view


class GradientDescentTrainEngine:
    """
    GradientDescentTrainEngine（FINAL / FROZEN）

    Responsibility:
    - 在归一化后的 (x, y) 上用前向差分梯度做梯度下降
    - (a, b) 从 (0, 0) 开始，只在本 engine 内部被修改
    - 按 StoppingPolicy 停止，然后用 NormalizationState 还原

    Contract:
    - x / y 以只读视图持有，不修改调用方数据
    - EmptyDatasetError 在第一次更新之前抛出
    """

    def __init__(self, *, learning_rate: Optional[float] = None, history_every: int = 1000):
        if learning_rate is not None and not learning_rate > 0:
            raise ValueError(f"learning_rate must be > 0, got {learning_rate}")
        if history_every < 1:
            raise ValueError(f"history_every must be >= 1, got {history_every}")

        self.learning_rate = learning_rate
        self.history_every = history_every

    def train(
        self,
        *,
        x: Sequence[float],
        y: Sequence[float],
        policy: StoppingPolicy,
        state: Optional[NormalizationState] = None,
    ) -> TrainResult:
        if not isinstance(policy, (FixedEpochs, ConvergenceThreshold)):
            raise TypeError(f"Unknown stopping policy: {policy!r}")

        xs = _readonly(x)
        ys = _readonly(y)

        def loss(a: float, b: float) -> float:
            return mean_squared_error(xs, ys, a, b)

        lr = self.learning_rate if self.learning_rate is not None else policy.default_learning_rate

        # 任何参数更新之前先校验数据集
        initial_error = loss(0.0, 0.0)

        logs.info(
            f"[GradientDescent] START policy={policy} lr={lr} "
            f"n={xs.size} error={initial_error:.6e}"
        )

        if isinstance(policy, FixedEpochs):
            a, b, iterations, error, reason, history = self._run_fixed(loss, lr, policy)
        else:
            a, b, iterations, error, reason, history = self._run_threshold(
                loss, lr, policy, initial_error
            )

        if reason == "diverged":
            logs.warning(
                f"[GradientDescent] stopped on error increase at iteration={iterations} "
                f"error={error:.6e}"
            )

        normalized = LinearModel(a=a, b=b)
        if state is not None:
            model = LinearModel(*state.denormalize(a, b))
        else:
            model = normalized

        logs.info(
            f"[GradientDescent] DONE reason={reason} iterations={iterations} "
            f"error={error:.6e} a={model.a} b={model.b}"
        )

        return TrainResult(
            model=model,
            normalized_model=normalized,
            iterations=iterations,
            final_error=error,
            stop_reason=reason,
            learning_rate=lr,
            history=tuple(history),
        )

    # ------------------------------------------------------------------
    # Policies
    # ------------------------------------------------------------------
    def _run_fixed(self, loss, lr: float, policy: FixedEpochs):
        a, b = 0.0, 0.0
        history: List[Tuple[int, float]] = []

        for epoch in range(1, policy.n_epochs + 1):
            a, b = self._step(loss, a, b, lr)
            if epoch % self.history_every == 0:
                history.append((epoch, loss(a, b)))

        return a, b, policy.n_epochs, loss(a, b), "epochs", history

    def _run_threshold(self, loss, lr: float, policy: ConvergenceThreshold, initial_error: float):
        a, b = 0.0, 0.0
        prev_error = initial_error
        history: List[Tuple[int, float]] = []
        iterations = 0
        reason: StopReason

        while True:
            if policy.max_iterations is not None and iterations >= policy.max_iterations:
                reason = "max_iterations"
                error = prev_error
                break

            a, b = self._step(loss, a, b, lr)
            iterations += 1
            error = loss(a, b)

            if iterations % self.history_every == 0:
                history.append((iterations, error))

            if prev_error - error < policy.d_rms:
                reason = "diverged" if error > prev_error else "converged"
                break

            prev_error = error

        return a, b, iterations, error, reason, history

    @staticmethod
    def _step(loss, a: float, b: float, lr: float) -> Tuple[float, float]:
        grad_a, grad_b = estimate_gradient(loss, a, b)
        return a - grad_a * lr, b - grad_b * lr
