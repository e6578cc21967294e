#!filepath: ft_linreg/utils/filesystem.py
from pathlib import Path

from ft_linreg import logs


class FileSystem:
    """
    文件系统工具（只保留训练 / 出图需要的部分）
    - 自动创建目录
    - 检查输入文件
    """

    @staticmethod
    def ensure_dir(path: str | Path) -> Path:
        """
        创建目录（如果不存在）
        """
        p = Path(path)
        if not p.exists():
            p.mkdir(parents=True, exist_ok=True)
            logs.debug(f"[FS] 创建目录: {p}")
        return p

    @staticmethod
    def ensure_parent(path: str | Path) -> Path:
        """
        确保输出文件的父目录存在，返回文件路径本身
        """
        p = Path(path)
        FileSystem.ensure_dir(p.parent)
        return p

    @staticmethod
    def require_file(path: str | Path) -> Path:
        p = Path(path)
        if not p.is_file():
            raise FileNotFoundError(f"Dataset file not found: {p}")
        return p
