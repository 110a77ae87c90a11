from typing import NamedTuple, Optional, Tuple

from dracolor.palette.resolver import (
    FullResult,
    ResolutionFailure,
    ResolutionResult,
    SingleResult,
)
from dracolor.palette.store import DEFAULT_SHADE

# 把解析结果投影成表格行，并生成交给界面层的 render model。

ROW_LABEL = "color"
COLUMN_HEADERS = ("weight", "value")


class DisplayRow(NamedTuple):
    label: str
    shade_key: str
    color: str


class RenderModel(NamedTuple):
    input_text: str
    error_message: str = ""
    header_label: str = ""
    rows: Tuple[DisplayRow, ...] = ()
    accent_color: str = ""


def project(result: Optional[ResolutionResult]) -> Tuple[DisplayRow, ...]:
    """按 shade 名做字符串排序（"100" < "50" < "DEFAULT"），不是数值排序。"""
    if isinstance(result, FullResult):
        return tuple(
            DisplayRow(ROW_LABEL, shade, result.palette[shade])
            for shade in sorted(result.palette)
        )
    if isinstance(result, SingleResult):
        return (DisplayRow(ROW_LABEL, result.shade_key, result.color),)
    return ()


def accent_color(result: Optional[ResolutionResult]) -> str:
    if isinstance(result, FullResult):
        return result.palette[DEFAULT_SHADE]
    if isinstance(result, SingleResult):
        return result.color
    return ""


def build_render_model(
    input_text: str,
    result: Optional[ResolutionResult],
    rows: Tuple[DisplayRow, ...] = (),
) -> RenderModel:
    if result is None:
        return RenderModel(input_text=input_text)
    if isinstance(result, ResolutionFailure):
        return RenderModel(input_text=input_text, error_message=result.message)
    if isinstance(result, (FullResult, SingleResult)):
        return RenderModel(
            input_text=input_text,
            header_label=result.palette_name,
            rows=rows,
            accent_color=accent_color(result),
        )
    raise TypeError(f"unexpected resolution result: {result!r}")
