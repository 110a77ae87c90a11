"""
查询解析结果：Full / Single / Failure 三选一的判别联合。
解析失败是值而不是异常，由 controller 负责展示。
"""

import logging
from enum import Enum
from typing import Annotated, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dracolor.palette.query import Query
from dracolor.palette.store import DRACULA_COLORS, DraculaColors, is_hex_color

logger = logging.getLogger(__name__)


class FailureKind(str, Enum):
    UNKNOWN_PALETTE = "UnknownPalette"
    UNKNOWN_SHADE = "UnknownShade"


FAILURE_MESSAGES: Dict[FailureKind, str] = {
    FailureKind.UNKNOWN_PALETTE: "palette doesn't exist",
    FailureKind.UNKNOWN_SHADE: "shade doesn't exist",
}


class SingleResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["single"] = "single"
    palette_name: str
    shade_key: str
    color: str

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        if not is_hex_color(v):
            raise ValueError(f"color 必须是 #rrggbb: {v!r}")
        return v


class FullResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["full"] = "full"
    palette_name: str
    palette: Dict[str, str]

    @field_validator("palette")
    @classmethod
    def validate_palette(cls, v: Dict[str, str]) -> Dict[str, str]:
        bad = [shade for shade, color in v.items() if not is_hex_color(color)]
        if bad:
            raise ValueError(f"非法颜色值: {bad}")
        return v


class ResolutionFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    reason: FailureKind
    message: str


ResolutionResult = Annotated[
    Union[FullResult, SingleResult, ResolutionFailure],
    Field(discriminator="kind"),
]


def _fail(reason: FailureKind) -> ResolutionFailure:
    return ResolutionFailure(reason=reason, message=FAILURE_MESSAGES[reason])


def resolve(query: Query, store: DraculaColors = DRACULA_COLORS) -> ResolutionResult:
    """先查色板，再查 shade；色板不存在时永远不会报 shade 错误。"""
    palette = store.get(query.palette_name)
    if palette is None:
        logger.debug("unknown palette: %r", query.palette_name)
        return _fail(FailureKind.UNKNOWN_PALETTE)

    if not query.shade_key:
        return FullResult(palette_name=query.palette_name, palette=dict(palette))

    color = palette.get(query.shade_key)
    if color is None:
        logger.debug("unknown shade %r in palette %r", query.shade_key, query.palette_name)
        return _fail(FailureKind.UNKNOWN_SHADE)

    return SingleResult(
        palette_name=query.palette_name,
        shade_key=query.shade_key,
        color=color,
    )
