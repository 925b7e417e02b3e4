# src/drawbridge/renderers/tree_renderer.py
"""
將分組結構渲染為終端機中的文字樹。

分支標籤依層級著色，葉節點行顯示其在扁平索引中的編號 (從 1 開始)
與一段摘要字串。遍歷順序與 index_builder.flatten 完全相同。
"""

# 1. 標準庫導入
import io
from collections.abc import Collection, Sequence

# 2. 第三方庫導入
from rich.console import Console
from rich.text import Text
from rich.tree import Tree

# 3. 本專案導入
from drawbridge.builders.group_builder import GroupNode, ProjectRecord
from drawbridge.builders.index_builder import BranchVisit, RecordVisit, active_group_key, walk_group_tree
from drawbridge.utils.value_utils import stringify_value

TREE_HEADER = "Rendered Drawbridge Configs:"
ANSWER_SEPARATOR = ", "

_DEPTH_STYLES = ("red", "green", "cyan")


def style_for_depth(depth: int) -> str:
    """回傳分支標籤在指定層級的樣式；第 3 層以後不著色。"""
    if 0 <= depth < len(_DEPTH_STYLES):
        return _DEPTH_STYLES[depth]
    return ""


def answer_summary(
    record: ProjectRecord,
    highlight_key: str | None,
    group_keys: Collection[str],
    hidden_keys: Collection[str],
) -> Text:
    """
    建立葉節點的摘要：先是高亮的分組鍵，接著是其餘可見的鍵值。

    隱藏鍵、任何層級的分組鍵與高亮鍵本身都不會重複出現。
    """
    parts: list[Text] = []
    if highlight_key is not None:
        parts.append(Text(f"{highlight_key}: {stringify_value(record.get(highlight_key))}", style="blue"))

    for key, value in record.items():
        if key in hidden_keys or key in group_keys or key == highlight_key:
            continue
        parts.append(Text(f"{key}: {stringify_value(value)}"))

    return Text(ANSWER_SEPARATOR).join(parts)


def _branch_label(visit: BranchVisit) -> Text:
    return Text.assemble("[", (visit.label, style_for_depth(visit.depth)), f"]  {visit.group_key}")


def build_tree(node: GroupNode, group_keys: Sequence[str], hidden_keys: Collection[str]) -> Tree:
    """
    依遍歷順序建構 rich Tree。

    子節點為葉節點的桶不另外畫成分支，其值由每一行的高亮鍵顯示；
    空桶值 ("") 也不畫成分支，但其紀錄仍會出現在該路徑下。
    """
    tree = Tree(Text(TREE_HEADER))
    highlight_key = active_group_key(group_keys)
    parents: list[Tree] = [tree]
    number = 0

    for step in walk_group_tree(node, group_keys):
        if isinstance(step, BranchVisit):
            parent = parents[step.depth]
            if step.label and not step.holds_leaf:
                parent = parent.add(_branch_label(step))
            del parents[step.depth + 1 :]
            parents.append(parent)
        elif isinstance(step, RecordVisit):
            number += 1
            summary = answer_summary(step.record, highlight_key, group_keys, hidden_keys)
            parents[step.depth].add(Text.assemble((f"[{number}]", "yellow"), "  ", summary))

    return tree


def render_tree_text(tree: Tree, width: int = 200) -> str:
    """將 rich Tree 渲染為不含色彩控制碼的純文字。"""
    buffer = io.StringIO()
    console = Console(file=buffer, width=width, color_system=None, highlight=False)
    console.print(tree)
    return buffer.getvalue()
