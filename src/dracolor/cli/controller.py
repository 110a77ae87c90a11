"""
交互状态机。
纯函数 step(state, event) -> (state, render model)，不依赖任何终端库，
由 prompt_toolkit 应用或测试直接驱动。
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Tuple, Union

from dracolor.cli.output_handler import (
    DisplayRow,
    RenderModel,
    build_render_model,
    project,
)
from dracolor.palette.query import parse
from dracolor.palette.resolver import ResolutionFailure, ResolutionResult, resolve
from dracolor.palette.store import DRACULA_COLORS, DraculaColors

logger = logging.getLogger(__name__)

CHAR_LIMIT = 156


class Phase(str, Enum):
    EDITING = "editing"
    RESOLVED = "resolved"
    FAILED = "failed"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class CharacterTyped:
    """输入变化；replace=True 时 text 为输入框的完整内容。"""

    text: str
    replace: bool = False


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


@dataclass(frozen=True)
class Other:
    """控制器不处理的按键，原样交给输入控件。"""

    payload: Any = None


Event = Union[CharacterTyped, Submit, Cancel, Other]


@dataclass(frozen=True)
class ControllerState:
    phase: Phase = Phase.EDITING
    input_text: str = ""
    result: Optional[ResolutionResult] = None
    rows: Tuple[DisplayRow, ...] = ()

    @property
    def terminated(self) -> bool:
        return self.phase is Phase.TERMINATED


def initial_state(input_text: str = "") -> ControllerState:
    return ControllerState(input_text=input_text[:CHAR_LIMIT])


def render(state: ControllerState) -> RenderModel:
    return build_render_model(state.input_text, state.result, state.rows)


def _submit(state: ControllerState, store: DraculaColors) -> ControllerState:
    result = resolve(parse(state.input_text), store)
    if isinstance(result, ResolutionFailure):
        # 失败时清掉上一次的表格，只保留错误信息
        return replace(state, phase=Phase.FAILED, result=result, rows=())
    return replace(state, phase=Phase.RESOLVED, result=result, rows=project(result))


def step(
    state: ControllerState,
    event: Event,
    store: DraculaColors = DRACULA_COLORS,
) -> Tuple[ControllerState, Optional[RenderModel]]:
    if state.terminated:
        return state, None

    if isinstance(event, Cancel):
        logger.debug("cancel received, terminating")
        return ControllerState(phase=Phase.TERMINATED), None

    if isinstance(event, Submit):
        new_state = _submit(state, store)
        logger.debug("submit %r -> %s", state.input_text, new_state.phase.value)
        return new_state, render(new_state)

    if isinstance(event, CharacterTyped):
        text = event.text if event.replace else state.input_text + event.text
        new_state = replace(state, phase=Phase.EDITING, input_text=text[:CHAR_LIMIT])
        return new_state, render(new_state)

    return state, None
