# ft_linreg/report/base.py
from __future__ import annotations
from abc import ABC, abstractmethod

from ft_linreg.training.context import SampleSeries
from ft_linreg.training.engines.train_result import LinearModel


class Report(ABC):
    """
    Report (FINAL / FROZEN)

    (SampleSeries, LinearModel) -> artifact (text, figure)

    Reports are read-only consumers of the trained model.
    Reports must not alter training or metrics.
    Deleting reports must not affect reproducibility.
    """

    @abstractmethod
    def render(self, samples: SampleSeries, model: LinearModel):
        ...
