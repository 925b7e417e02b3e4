# src/drawbridge/__init__.py
"""
drawbridge：將設定精靈收集的專案答案分組為可瀏覽的樹狀結構與可選取的扁平索引。
"""

from .core import ConfigLoader, ProjectList
from .errors import (
    ConfigFileMissingError,
    ConfigValidationError,
    DrawbridgeError,
    ProjectListEmptyError,
    ProjectListIndexInvalidError,
)

__all__ = [
    "ConfigFileMissingError",
    "ConfigLoader",
    "ConfigValidationError",
    "DrawbridgeError",
    "ProjectList",
    "ProjectListEmptyError",
    "ProjectListIndexInvalidError",
]
