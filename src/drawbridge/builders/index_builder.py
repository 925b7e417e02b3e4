# src/drawbridge/builders/index_builder.py
"""
提供分組結構的唯一遍歷順序，以及由此產生的扁平索引。

樹狀輸出與索引選取都必須使用同一個遍歷，
才能保證「樹上的第 N 項」永遠等於「索引中的第 N 項」。
"""

# 1. 標準庫導入
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from drawbridge.builders.group_builder import GroupNode, Leaf, ProjectRecord
from drawbridge.utils.value_utils import stringify_value


@dataclass(frozen=True)
class BranchVisit:
    """進入一個桶。holds_leaf 表示此桶的子節點是葉節點。"""

    depth: int
    group_key: str
    label: str
    holds_leaf: bool


@dataclass(frozen=True)
class RecordVisit:
    """輸出一筆紀錄；depth 為其葉節點所在的層級。"""

    depth: int
    record: ProjectRecord


def active_group_key(group_keys: Sequence[str]) -> str | None:
    """葉節點層級的分組鍵，即最後一個分組鍵。"""
    return group_keys[-1] if group_keys else None


def sort_leaf_records(records: Sequence[ProjectRecord], sort_key: str | None) -> list[ProjectRecord]:
    """
    依 sort_key 的值遞減排序葉節點紀錄 (穩定排序)。
    空值排在所有非空值之後；相等的值保持原有順序。
    """
    if sort_key is None:
        return list(records)

    def key(record: ProjectRecord) -> tuple[bool, str]:
        value = stringify_value(record.get(sort_key))
        return value != "", value

    return sorted(records, key=key, reverse=True)


def walk_group_tree(
    node: GroupNode, group_keys: Sequence[str], depth: int = 0
) -> Iterator[BranchVisit | RecordVisit]:
    """
    深度優先遍歷分組結構：分支依桶值遞增，葉節點依分組值遞減。
    """
    if isinstance(node, Leaf):
        for record in sort_leaf_records(node.records, active_group_key(group_keys)):
            yield RecordVisit(depth, record)
        return

    for label in sorted(node.children):
        child = node.children[label]
        yield BranchVisit(depth, group_keys[depth], label, isinstance(child, Leaf))
        yield from walk_group_tree(child, group_keys, depth + 1)


def flatten(node: GroupNode, group_keys: Sequence[str]) -> list[ProjectRecord]:
    """依遍歷順序回傳扁平的紀錄清單。"""
    return [step.record for step in walk_group_tree(node, group_keys) if isinstance(step, RecordVisit)]
