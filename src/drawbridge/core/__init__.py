# src/drawbridge/core/__init__.py
"""
drawbridge 的核心套件。

此套件負責載入設定，並將答案紀錄串連到分組、索引與渲染子系統。
"""

from .config_loader import ConfigLoader
from .project_list import ProjectList

__all__ = [
    "ConfigLoader",
    "ProjectList",
]
