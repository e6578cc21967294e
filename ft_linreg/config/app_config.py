#!filepath: ft_linreg/config/app_config.py
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .data_config import DataConfig
from .plot_config import PlotConfig
from .training_config import TrainingConfig
from ft_linreg import logs


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    ft_linreg/config/app_config.py → ft_linreg/config → ft_linreg → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return str(Path(__file__).with_name("base.yml"))


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    training: TrainingConfig = Field(default_factory=TrainingConfig)
    plot: PlotConfig = Field(default_factory=PlotConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 ft_linreg/config/base.yml
        - 环境变量 FT_LINREG_DATASET / FT_LINREG_LOG_LEVEL 覆盖文件
        - 不依赖当前工作目录
        """
        root = project_root()

        # 1) 先加载 .env（在项目根目录下）
        load_dotenv(os.path.join(root, ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) 从 env 注入覆盖项
        dataset = os.getenv("FT_LINREG_DATASET")
        if dataset:
            raw.setdefault("data", {})["path"] = dataset

        level = os.getenv("FT_LINREG_LOG_LEVEL")
        if level:
            raw.setdefault("log", {})["level"] = level

        logs.debug(f"[AppConfig] loaded {path}")
        return cls(**raw)
