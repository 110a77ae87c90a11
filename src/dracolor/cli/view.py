from typing import List, Sequence, Tuple

from prompt_toolkit.formatted_text import StyleAndTextTuples

from dracolor.cli.output_handler import COLUMN_HEADERS, RenderModel
from dracolor.cli.style import PADDING_X, border_style, header_style, row_style

TITLE = "Tell me what dracula color you need:"
HINT = "(esc to quit)"
PLACEHOLDER = "palette,shade"
INPUT_WIDTH = 20

# 圆角边框
_TOP = ("╭", "┬", "╮")
_MIDDLE = ("├", "┼", "┤")
_BOTTOM = ("╰", "┴", "╯")
_HORIZONTAL = "─"
_VERTICAL = "│"


def _column_widths(cells: Sequence[Sequence[str]]) -> List[int]:
    return [max(len(row[i]) for row in cells) + 2 * PADDING_X for i in range(len(cells[0]))]


def _rule(widths: Sequence[int], corners: Tuple[str, str, str], style: str) -> StyleAndTextTuples:
    left, joint, right = corners
    line = left + joint.join(_HORIZONTAL * w for w in widths) + right
    return [(style, line), ("", "\n")]


def _row(cells: Sequence[str], widths: Sequence[int], border: str, style: str) -> StyleAndTextTuples:
    pad = " " * PADDING_X
    fragments: StyleAndTextTuples = [(border, _VERTICAL)]
    for cell, width in zip(cells, widths):
        fragments.append((style, (pad + cell).ljust(width)))
        fragments.append((border, _VERTICAL))
    fragments.append(("", "\n"))
    return fragments


def render_table(model: RenderModel) -> StyleAndTextTuples:
    if not model.header_label:
        return []

    headers = (model.header_label,) + COLUMN_HEADERS
    widths = _column_widths([headers] + [tuple(r) for r in model.rows])
    border = border_style(model.accent_color)
    head = header_style(model.header_label, model.accent_color)

    fragments: StyleAndTextTuples = []
    fragments += _rule(widths, _TOP, border)
    fragments += _row(headers, widths, border, head)
    fragments += _rule(widths, _MIDDLE, border)
    for index, row in enumerate(model.rows):
        fragments += _row(tuple(row), widths, border, row_style(index))
    fragments += _rule(widths, _BOTTOM, border)
    return fragments


def render_error(model: RenderModel) -> StyleAndTextTuples:
    if not model.error_message:
        return []
    return [
        ("", "---\n"),
        ("class:error", model.error_message),
        ("", "\n---\n"),
    ]


def render_body(model: RenderModel) -> StyleAndTextTuples:
    """输入框下方的内容：错误信息 + 结果表格。"""
    return render_error(model) + render_table(model)
