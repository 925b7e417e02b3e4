# src/drawbridge/core/project_list.py
"""
專案清單的對外介面：長度、依索引取得、互動式選取與樹狀輸出。

分組、扁平化與渲染會在第一次需要時執行並快取，
之後的呼叫都重複使用同一份結果。
"""

# 1. 標準庫導入
import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

# 2. 第三方庫導入
from rich.console import Console
from rich.tree import Tree

# 3. 本專案導入
from drawbridge.builders.group_builder import ProjectRecord, group_records
from drawbridge.builders.index_builder import flatten
from drawbridge.errors import ProjectListEmptyError, ProjectListIndexInvalidError
from drawbridge.renderers.tree_renderer import build_tree
from drawbridge.utils.stdin_utils import query_int

if TYPE_CHECKING:
    from drawbridge.core.config_loader import ConfigLoader

EMPTY_LIST_MESSAGE = "找不到任何答案紀錄，請先執行 `drawbridge create`。"


class ProjectList:
    """一組專案答案紀錄，依分組鍵呈現為樹狀結構與扁平索引。"""

    def __init__(
        self,
        projects: Iterable[Mapping[str, Any]],
        group_by_keys: Iterable[str] = (),
        hidden_keys: Iterable[str] = (),
        console: Console | None = None,
    ):
        self.projects: tuple[ProjectRecord, ...] = tuple(MappingProxyType(dict(p)) for p in projects)
        self.group_by_keys: list[str] = list(group_by_keys)
        self.hidden_keys: set[str] = set(hidden_keys)
        self.console = console or Console(highlight=False)

        self._grouped_list: tuple[ProjectRecord, ...] | None = None
        self._grouped_tree: Tree | None = None

    @classmethod
    def from_config(cls, config_loader: "ConfigLoader", console: Console | None = None) -> "ProjectList":
        """使用設定檔中的答案、分組優先順序與隱藏鍵建立專案清單。"""
        return cls(
            config_loader.get_answers(),
            group_by_keys=config_loader.get_group_priority(),
            hidden_keys=config_loader.get_hidden_keys(),
            console=console,
        )

    def __len__(self) -> int:
        return len(self.projects)

    def length(self) -> int:
        return len(self.projects)

    def get_all(self) -> list[ProjectRecord]:
        """依樹狀輸出的順序回傳所有紀錄 (快取索引的複本)。"""
        if not self.projects:
            return []
        self._init_groups()
        return list(self._grouped_list)

    def get_index(self, index_0based: int) -> ProjectRecord:
        """
        取得扁平索引中的單筆紀錄。

        Raises:
            ProjectListEmptyError: 清單中沒有任何紀錄。
            ProjectListIndexInvalidError: 索引不在 [0, length()) 範圍內。
        """
        if not self.projects:
            raise ProjectListEmptyError(EMPTY_LIST_MESSAGE)

        self._init_groups()

        if not 0 <= index_0based < len(self.projects):
            raise ProjectListIndexInvalidError(
                f"選取的編號 ({index_0based + 1}) 無效，必須介於 1-{len(self.projects)} 之間。"
            )
        return self._grouped_list[index_0based]

    def prompt(self, message: str, input_func: Callable[[str], str] = input) -> ProjectRecord:
        """
        輸出樹狀結構，並持續要求使用者輸入編號 (從 1 開始)，直到取得有效的選擇。

        Raises:
            ProjectListEmptyError: 清單中沒有任何紀錄 (此時不會讀取輸入)。
        """
        if not self.projects:
            raise ProjectListEmptyError(EMPTY_LIST_MESSAGE)

        self.print_tree()
        total = len(self.projects)

        while True:
            try:
                index_1based = query_int(f"{message} (1-{total}):", input_func)
            except ValueError as e:
                self.console.print(f"ERROR: {e}", style="bright_red", markup=False)
                continue

            if not 1 <= index_1based <= total:
                self.console.print(f"無效的選擇，必須介於 1-{total} 之間。", style="bright_red")
                continue

            return self._grouped_list[index_1based - 1]

    def print_tree(self, header: str = ""):
        """輸出分組後的樹狀結構。"""
        if header:
            logging.debug(f"輸出專案樹: {header}")
        self._init_groups()
        self.console.print(self._grouped_tree, soft_wrap=True)

    def _init_groups(self):
        """分組並建立扁平索引與樹狀結構；已快取時直接返回。"""
        if self._grouped_list is not None:
            return

        grouped = group_records(self.projects, self.group_by_keys)
        self._grouped_list = tuple(flatten(grouped, self.group_by_keys))
        self._grouped_tree = build_tree(grouped, self.group_by_keys, self.hidden_keys)
        logging.debug(f"已為 {len(self._grouped_list)} 筆專案紀錄建立分組快取。")
