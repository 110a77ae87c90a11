import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv
from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style

from dracolor.cli.app import PaletteApp
from dracolor.cli.controller import Phase, Submit, initial_state, step
from dracolor.cli.style import APP_STYLE, color_text, dim_text
from dracolor.cli.view import render_body
from dracolor.errors import FatalIOFault
from dracolor.palette.store import DRACULA_COLORS, DEFAULT_SHADE, palette_names

logger = logging.getLogger(__name__)

EXIT_FATAL = 1
EXIT_UNRESOLVED = 2


def configure_logging(level: str, log_file: Optional[str] = None) -> None:
    """日志默认只输出 WARNING 以上，交互界面下建议写到文件。"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s: %(message)s",
        filename=log_file or None,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dracula 调色盘查询工具（palette 或 palette,shade）")
    parser.add_argument(
        "--query",
        help="直接查询一次并输出结果，例如 blue,500",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="列出所有色板名称",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("DRACOLOR_LOG_LEVEL", "WARNING"),
        help="日志级别，也可通过环境变量 DRACOLOR_LOG_LEVEL 配置",
    )
    parser.add_argument(
        "--log-file",
        default=os.getenv("DRACOLOR_LOG_FILE"),
        help="日志文件路径，也可通过环境变量 DRACOLOR_LOG_FILE 配置",
    )
    return parser


def list_palettes() -> None:
    for name in palette_names():
        print(color_text(name, DRACULA_COLORS[name][DEFAULT_SHADE]))
    print(dim_text("\n用法：palette 或 palette,shade"))


def run_query(text: str) -> int:
    state, model = step(initial_state(text), Submit())
    print_formatted_text(
        FormattedText(render_body(model)),
        style=Style.from_dict(APP_STYLE),
        end="",
    )
    return 0 if state.phase is Phase.RESOLVED else EXIT_UNRESOLVED


def main(argv: Optional[List[str]] = None) -> None:
    # 先加载 .env，命令行参数的默认值依赖环境变量
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    if args.list:
        list_palettes()
        return

    if args.query is not None:
        code = run_query(args.query)
        if code:
            sys.exit(code)
        return

    logger.debug("starting interactive session")
    try:
        PaletteApp().run()
    except FatalIOFault as e:
        print(f"Alas, there's been an error: {e}", file=sys.stderr)
        sys.exit(EXIT_FATAL)
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
