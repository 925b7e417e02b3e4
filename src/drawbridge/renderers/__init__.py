# src/drawbridge/renderers/__init__.py
"""
渲染器套件，負責將分組結構視覺化為文字樹。
"""

from .tree_renderer import TREE_HEADER, answer_summary, build_tree, render_tree_text, style_for_depth

__all__ = [
    "TREE_HEADER",
    "answer_summary",
    "build_tree",
    "render_tree_text",
    "style_for_depth",
]
