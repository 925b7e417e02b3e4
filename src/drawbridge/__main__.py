# src/drawbridge/__main__.py
"""
drawbridge 主執行入口。
"""

# 1. 標準庫導入
import logging
import sys

# 2. 第三方庫導入
import yaml

# 3. 本專案導入
from drawbridge.core.config_loader import ConfigLoader
from drawbridge.core.project_list import ProjectList
from drawbridge.errors import DrawbridgeError

PROMPT_MESSAGE = "請輸入您想使用的 drawbridge 設定編號"


def main() -> int:
    """主函式，載入設定檔，讓使用者從分組後的專案清單中選取一組答案。"""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    if not root_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    try:
        config_loader = ConfigLoader()
        project_list = ProjectList.from_config(config_loader)
        if not project_list:
            logging.warning("設定檔中沒有任何答案紀錄，請先執行 `drawbridge create`。")
            return 0

        answer = project_list.prompt(PROMPT_MESSAGE)
    except DrawbridgeError as e:
        logging.error(f"執行失敗: {e}")
        return 1

    print(yaml.safe_dump(dict(answer), sort_keys=False, allow_unicode=True), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
