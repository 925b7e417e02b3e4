# src/drawbridge/utils/__init__.py
"""
通用工具函式套件。
"""

from .stdin_utils import query, query_int
from .value_utils import stringify_value

__all__ = [
    "query",
    "query_int",
    "stringify_value",
]
