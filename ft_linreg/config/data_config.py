#!filepath: ft_linreg/config/data_config.py
from typing import Optional

from pydantic import BaseModel, Field


class DataConfig(BaseModel):
    # 两列 CSV：首行为表头（坐标轴名称）
    path: Optional[str] = None
    delimiter: str = Field(",", min_length=1, max_length=1)
