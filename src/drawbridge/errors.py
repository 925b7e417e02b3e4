# src/drawbridge/errors.py
"""
drawbridge 的自訂例外類別。
"""


class DrawbridgeError(Exception):
    """所有 drawbridge 例外的基底類別。"""


class ProjectListEmptyError(DrawbridgeError):
    """專案清單中沒有任何答案紀錄。"""


class ProjectListIndexInvalidError(DrawbridgeError):
    """選取的索引超出專案清單範圍。"""


class ConfigFileMissingError(DrawbridgeError):
    """找不到設定檔。"""


class ConfigValidationError(DrawbridgeError):
    """設定檔內容無法解析或未通過驗證。"""
