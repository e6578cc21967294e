#!filepath: ft_linreg/config/plot_config.py
from typing import Optional

from pydantic import BaseModel, Field


class PlotConfig(BaseModel):
    enabled: bool = True

    # None → "<y_name>_vs_<x_name>.png" under output_dir
    output_path: Optional[str] = None
    output_dir: str = "."

    # pixels
    width: int = Field(800, gt=0)
    height: int = Field(600, gt=0)
