# src/drawbridge/builders/group_builder.py
"""
提供專案答案的多層分組邏輯。

依照分組鍵的優先順序，將答案紀錄逐層放入以值為鍵的分支中；
分組鍵用盡時，路徑的最後一段是一個保留原始順序的葉節點清單。
"""

# 1. 標準庫導入
import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from drawbridge.utils.value_utils import stringify_value

ProjectRecord = Mapping[str, Any]


@dataclass
class Leaf:
    """分組鍵用盡後的終端桶，依紀錄存放順序保存答案。"""

    records: list[ProjectRecord] = field(default_factory=list)


@dataclass
class Branch:
    """以桶值 (字串) 對應子節點的分支，僅在仍有分組鍵時存在。"""

    children: dict[str, "Branch | Leaf"] = field(default_factory=dict)


GroupNode = Branch | Leaf


def bucket_path(record: ProjectRecord, group_keys: Sequence[str]) -> list[str]:
    """計算紀錄在各層的桶值；缺少或為 None 的值對應空字串。"""
    return [stringify_value(record.get(key)) for key in group_keys]


def group_records(records: Iterable[ProjectRecord], group_keys: Sequence[str]) -> GroupNode:
    """
    將答案紀錄依分組鍵建構為巢狀的分組結構。

    Args:
        records: 依存放順序排列的答案紀錄。
        group_keys: 依優先順序排列的分組鍵。

    Returns:
        若沒有分組鍵，回傳包含全部紀錄的單一 Leaf；否則回傳根 Branch。
    """
    if not group_keys:
        return Leaf(list(records))

    root = Branch()
    leaf_count = 0
    for record in records:
        *branch_values, leaf_value = bucket_path(record, group_keys)
        node = root
        for value in branch_values:
            child = node.children.get(value)
            if child is None:
                child = node.children[value] = Branch()
            node = child
        leaf = node.children.get(leaf_value)
        if leaf is None:
            leaf = node.children[leaf_value] = Leaf()
            leaf_count += 1
        leaf.records.append(record)

    logging.debug(f"依 {list(group_keys)} 分組完成，共 {leaf_count} 個葉節點。")
    return root
