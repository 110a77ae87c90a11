"""
终端配色工具。
直接使用 Dracula 调色盘：stdout 输出用 24-bit ANSI 前景色，
交互界面用 prompt_toolkit 的样式字符串。
"""

from typing import Dict, Optional, Tuple

from dracolor.palette.store import DRACULA_COLORS, is_hex_color

RESET = "\033[0m"

# 深色色板上的表头用浅色文字
_DARK_PALETTES = {"dark", "darker", "aro"}

LIGHT_TEXT = DRACULA_COLORS["dracula"]["50"]
DARK_TEXT = DRACULA_COLORS["darker"]["DEFAULT"]
ODD_ROW_BG = DRACULA_COLORS["darker"]["DEFAULT"]
EVEN_ROW_BG = DRACULA_COLORS["darker"]["700"]

PADDING_X = 1

APP_STYLE: Dict[str, str] = {
    "title": "",
    "placeholder": "#6272a4 italic",
    "hint": "#6272a4",
    "error": "#ff5555",
}


def hex_to_rgb(value: str) -> Optional[Tuple[int, int, int]]:
    if not is_hex_color(value):
        return None
    return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)


def _rgb_code(value: str) -> str:
    rgb = hex_to_rgb(value)
    if not rgb:
        return ""
    r, g, b = rgb
    return f"\033[38;2;{r};{g};{b}m"


def color_text(text: str, color: str) -> str:
    """按给定 hex 颜色渲染文本；颜色不合法则原样返回。"""
    code = _rgb_code(color)
    return f"{code}{text}{RESET}" if code else text


def dim_text(text: str) -> str:
    return color_text(text, DRACULA_COLORS["blue"]["DEFAULT"])


def header_text_color(palette_name: str) -> str:
    if palette_name in _DARK_PALETTES:
        return LIGHT_TEXT
    return DARK_TEXT


def header_style(palette_name: str, accent: str) -> str:
    return f"bold {header_text_color(palette_name)} bg:{accent}"


def row_style(index: int) -> str:
    # index 从 0 开始，与原表格一致：偶数行 darker.700，奇数行 darker.DEFAULT
    background = ODD_ROW_BG if index % 2 == 1 else EVEN_ROW_BG
    return f"{LIGHT_TEXT} bg:{background}"


def border_style(accent: str) -> str:
    return accent
