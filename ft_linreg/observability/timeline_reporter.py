#!filepath: ft_linreg/observability/timeline_reporter.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ft_linreg import logs


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.6e}"
    return str(value)


class TimelineReporter:
    """
    单次 run 的收尾报告：
    - 每个 Step 的耗时与占比
    - 训练指标（rows / iterations / final_error / stop_reason ...）
    """

    def __init__(
        self,
        timeline: Mapping[str, float],
        run_id: str,
        metrics: Optional[Mapping[str, Any]] = None,
    ):
        self.timeline = timeline
        self.run_id = run_id
        self.metrics: Dict[str, Any] = dict(metrics or {})

    def lines(self) -> List[str]:
        total = sum(self.timeline.values())
        out = [f"[Timeline] ===== Training run {self.run_id} ====="]

        for name, sec in self.timeline.items():
            share = sec / total * 100 if total > 0 else 0.0
            out.append(f"[Timeline] {name:<20} {sec:>8.3f}s {share:>5.1f}%")
        out.append(f"[Timeline] {'total':<20} {total:>8.3f}s")

        for name, value in self.metrics.items():
            out.append(f"[Timeline] {name:<20} {_format_value(value)}")

        return out

    def print(self):
        for line in self.lines():
            logs.info(line)
