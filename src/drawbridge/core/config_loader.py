# src/drawbridge/core/config_loader.py
"""
負責載入、合併與驗證 drawbridge 設定檔中本套件會使用到的部分。
"""

# 1. 標準庫導入
import copy
import logging
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import yaml

# 3. 本專案導入
from drawbridge.errors import ConfigFileMissingError, ConfigValidationError

DEFAULT_CONFIG_PATH = Path("~/drawbridge.yaml")
MAX_GROUP_PRIORITY_KEYS = 4

DEFAULT_CONFIG: dict[str, Any] = {
    "options": {
        "config_dir": "~/.ssh/drawbridge",
        "pem_dir": "~/.ssh",
        "active_config_template": "default",
        "active_custom_templates": [],
        "ui_group_priority": ["environment", "username"],
        "ui_question_hidden": [],
    },
    "answers": [],
}

# 內部使用的鍵，輸出答案時會被隱藏
INTERNAL_QUESTION_KEYS: list[str] = [
    "config_dir",
    "pem_dir",
    "active_config_template",
    "active_custom_templates",
    "ui_group_priority",
    "ui_question_hidden",
    "pem_filepath",
    "filepath",
]


class ConfigLoader:
    """一個處理設定檔載入、預設值合併與驗證的類別。"""

    def __init__(self, config_path: Path | None = None, require_file: bool = False):
        self.config_path = (config_path or DEFAULT_CONFIG_PATH).expanduser()
        self.config: dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

        user_config = self._load_yaml(self.config_path, require_file)
        if user_config:
            self.config = self._merge_configs(self.config, user_config)
        self._validate_config()

    @staticmethod
    def _load_yaml(path: Path, require_file: bool) -> dict[str, Any] | None:
        """
        安全地載入一個 YAML 檔案。

        Raises:
            ConfigFileMissingError: require_file 為 True 且檔案不存在。
            ConfigValidationError: 檔案無法解析或頂層不是映射。
        """
        if not path.is_file():
            if require_file:
                raise ConfigFileMissingError(f"找不到設定檔: {path}")
            logging.info(f"在 {path} 找不到設定檔，將使用預設設定。")
            return None

        logging.info(f"正在載入設定檔: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logging.error(f"解析設定檔 '{path.name}' 時發生錯誤: {e}")
            raise ConfigValidationError(f"無法解析設定檔 '{path}': {e}") from e

        if content is None:
            return None
        if not isinstance(content, dict):
            raise ConfigValidationError(f"設定檔 '{path}' 的頂層必須是映射 (mapping)。")
        return content

    @staticmethod
    def _merge_configs(default: dict, user: dict) -> dict:
        """遞迴地合併使用者設定到預設設定中。"""
        for key, value in user.items():
            if isinstance(value, dict) and isinstance(default.get(key), dict):
                default[key] = ConfigLoader._merge_configs(default[key], value)
            else:
                default[key] = value
        return default

    def _validate_config(self):
        """檢查本套件會讀取的設定值；所有問題會一次列出。"""
        errors: list[str] = []
        options = self.config.get("options")
        if not isinstance(options, dict):
            errors.append("`options` 必須是映射。")
            options = {}

        for key in ("ui_group_priority", "ui_question_hidden"):
            value = options.get(key, [])
            if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                errors.append(f"`options.{key}` 必須是字串列表。")
            elif len(set(value)) != len(value):
                errors.append(f"`options.{key}` 不可包含重複的項目。")

        group_priority = options.get("ui_group_priority", [])
        if isinstance(group_priority, list) and len(group_priority) > MAX_GROUP_PRIORITY_KEYS:
            errors.append(f"`options.ui_group_priority` 最多只能有 {MAX_GROUP_PRIORITY_KEYS} 個項目。")

        answers = self.config.get("answers")
        if not isinstance(answers, list):
            errors.append("`answers` 必須是列表。")
        else:
            for i, answer in enumerate(answers):
                if not isinstance(answer, dict):
                    errors.append(f"`answers[{i}]` 必須是映射。")

        if errors:
            error_msg = "\n".join(f"- {e}" for e in errors)
            logging.error(f"設定檔 '{self.config_path}' 驗證失敗:\n{error_msg}")
            raise ConfigValidationError(f"驗證設定時發生錯誤:\n{error_msg}")

    @staticmethod
    def internal_question_keys() -> list[str]:
        """內部使用的鍵列表，輸出時可以過濾掉。"""
        return list(INTERNAL_QUESTION_KEYS)

    def get_group_priority(self) -> list[str]:
        return list(self.config["options"].get("ui_group_priority", []))

    def get_hidden_keys(self) -> list[str]:
        """使用者指定的隱藏鍵加上內部鍵。"""
        hidden = list(self.config["options"].get("ui_question_hidden", []))
        hidden.extend(k for k in self.internal_question_keys() if k not in hidden)
        return hidden

    def get_answers(self) -> list[dict[str, Any]]:
        return list(self.config.get("answers", []))
