# src/drawbridge/builders/__init__.py
"""
建構器套件，負責將答案紀錄轉換為分組結構與扁平索引。
"""

from .group_builder import Branch, GroupNode, Leaf, ProjectRecord, group_records
from .index_builder import BranchVisit, RecordVisit, flatten, walk_group_tree

__all__ = [
    "Branch",
    "BranchVisit",
    "GroupNode",
    "Leaf",
    "ProjectRecord",
    "RecordVisit",
    "flatten",
    "group_records",
    "walk_group_tree",
]
