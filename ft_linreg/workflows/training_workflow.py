# ft_linreg/workflows/training_workflow.py
from __future__ import annotations

from ft_linreg.config.app_config import AppConfig
from ft_linreg.observability.instrumentation import Instrumentation
from ft_linreg.training.engines.dataset_load_engine import DatasetLoadEngine
from ft_linreg.training.engines.normalize_engine import NormalizeEngine
from ft_linreg.training.pipeline import TrainingPipeline
from ft_linreg.training.steps.dataset_load_step import DatasetLoadStep
from ft_linreg.training.steps.model_report_step import ModelReportStep
from ft_linreg.training.steps.model_train_step import ModelTrainStep
from ft_linreg.training.steps.normalize_step import NormalizeStep
from ft_linreg.training.steps.plot_report_step import PlotReportStep


def build_training_pipeline(cfg: AppConfig | None = None, inst: Instrumentation | None = None) -> TrainingPipeline:
    """
    Training Workflow (FINAL / FROZEN)

    load -> normalize -> train -> equation -> plot
    """

    if cfg is None:
        cfg = AppConfig.load()
    if inst is None:
        inst = Instrumentation()

    return TrainingPipeline(
        steps=[
            DatasetLoadStep(engine=DatasetLoadEngine(delimiter=cfg.data.delimiter), inst=inst),
            NormalizeStep(engine=NormalizeEngine(cfg.training.normalization), inst=inst),
            ModelTrainStep(cfg.training, inst=inst),
            ModelReportStep(inst=inst),
            PlotReportStep(cfg.plot, inst=inst),
        ],
        inst=inst,
        cfg=cfg,
    )
