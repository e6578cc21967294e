#!filepath: ft_linreg/observability/metrics.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict

from ft_linreg import logs

if TYPE_CHECKING:
    from ft_linreg.training.engines.train_result import TrainResult


@dataclass
class MetricRecorder:
    """
    单次训练 run 的指标（唯一写入点）

    - Step 通过 record / record_result 写入
    - Pipeline 结束时 snapshot() 拷贝到 ctx.metrics，并交给 timeline 报告
    - 同名指标重复写入视为 Step 编排错误，记录 warning 后覆盖
    """

    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        if name in self.metrics:
            logs.warning(f"[Metric] {name} overwritten: {self.metrics[name]} -> {value}")
        self.metrics[name] = value
        logs.debug(f"[Metric] {name} = {value}")

    def record_result(self, result: TrainResult):
        self.record("iterations", result.iterations)
        self.record("final_error", result.final_error)
        self.record("stop_reason", result.stop_reason)
        self.record("learning_rate", result.learning_rate)

    def snapshot(self) -> Dict[str, Any]:
        return dict(self.metrics)
