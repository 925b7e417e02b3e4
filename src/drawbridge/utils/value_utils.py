# src/drawbridge/utils/value_utils.py
"""
提供答案值的字串化工具，用於分組標籤與排序比較。
"""

# 1. 標準庫導入
import math
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

# 超過此範圍的整數值浮點數改以科學記號表示
_FLOAT_PLAIN_LIMIT = 1e21


def stringify_value(value: Any) -> str:
    """
    將答案值轉換為固定的文字形式。此函式對任何輸入都不會失敗。

    Args:
        value: 答案值 (str / int / float / bool / None 或其他物件)。

    Returns:
        分組標籤與比較時使用的字串。None 會轉為空字串。
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _stringify_float(value)
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def _stringify_float(value: float) -> str:
    """浮點數的固定文字形式 (3.0 -> "3")。"""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer() and abs(value) < _FLOAT_PLAIN_LIMIT:
        return str(int(value))
    return repr(value)
