#!filepath: ft_linreg/__init__.py

from .utils.logger import Logging, logs
from .utils.filesystem import FileSystem
from .config.app_config import AppConfig

__version__ = "0.1.0"

# alias 简化调用
fs = FileSystem

__all__ = [
    "logs", "Logging",
    "fs",
    "AppConfig",
    "__version__",
]
