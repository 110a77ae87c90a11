from pydantic import BaseModel, ConfigDict, Field


class Query(BaseModel):
    model_config = ConfigDict(frozen=True)

    palette_name: str = Field(..., description="色板名，例如 blue")
    shade_key: str = Field(default="", description="shade 名，例如 500；为空表示整个色板")


def _trim(text: str) -> str:
    # 只去掉空格，保留 tab 等其他空白
    return text.strip(" ")


def parse(raw_input: str) -> Query:
    """把输入拆成 palette,shade；只看前两段，多余的逗号段直接忽略。"""
    segments = raw_input.split(",")
    if len(segments) > 1:
        return Query(palette_name=_trim(segments[0]), shade_key=_trim(segments[1]))
    return Query(palette_name=_trim(raw_input))
