# src/drawbridge/utils/stdin_utils.py
"""
提供從標準輸入讀取使用者回覆的工具函式。
"""

# 1. 標準庫導入
import re
from collections.abc import Callable

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

# 只接受 ASCII 數字，排除底線分隔與全形數字
_DECIMAL_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def query(question: str, input_func: Callable[[str], str] = input) -> str:
    """顯示問題並回傳去除前後空白的單行回覆。"""
    return input_func(f"{question} ").strip()


def query_int(question: str, input_func: Callable[[str], str] = input) -> int:
    """
    讀取一行並解析為十進位整數。

    Raises:
        ValueError: 回覆不是有效的整數。
    """
    text = query(question, input_func)
    if not _DECIMAL_INT_PATTERN.fullmatch(text):
        raise ValueError(f"無效的整數: {text!r}")
    return int(text, 10)
