import logging
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import BufferControl, FormattedTextControl
from prompt_toolkit.layout.processors import (
    BeforeInput,
    Processor,
    Transformation,
    TransformationInput,
)
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

from dracolor.cli.controller import (
    CHAR_LIMIT,
    Cancel,
    CharacterTyped,
    ControllerState,
    Event,
    Submit,
    initial_state,
    render,
    step,
)
from dracolor.cli.style import APP_STYLE
from dracolor.cli.view import HINT, INPUT_WIDTH, PLACEHOLDER, TITLE, render_body
from dracolor.errors import FatalIOFault
from dracolor.palette.store import DRACULA_COLORS, DraculaColors

logger = logging.getLogger(__name__)

PROMPT = "> "


class _Placeholder(Processor):
    """输入为空时显示灰色提示文字。"""

    def __init__(self, text: str):
        self.text = text

    def apply_transformation(self, ti: TransformationInput) -> Transformation:
        if ti.lineno == 0 and not ti.document.text:
            return Transformation(ti.fragments + [("class:placeholder", self.text)])
        return Transformation(ti.fragments)


class PaletteApp:
    """prompt_toolkit 界面：把按键转成 controller 事件，按 render model 重绘。"""

    def __init__(
        self,
        store: DraculaColors = DRACULA_COLORS,
        initial_text: str = "",
        input: Optional[Input] = None,
        output: Optional[Output] = None,
    ):
        self.store = store
        self.state: ControllerState = initial_state(initial_text)
        self.model = render(self.state)

        self.buffer = Buffer(
            document=Document(self.state.input_text),
            multiline=False,
            on_text_changed=self._on_text_changed,
        )
        self.application: Application = Application(
            layout=self._build_layout(),
            key_bindings=self._build_key_bindings(),
            style=Style.from_dict(APP_STYLE),
            full_screen=False,
            input=input,
            output=output,
        )

    def dispatch(self, event: Event) -> None:
        self.state, model = step(self.state, event, self.store)
        if model is not None:
            self.model = model
        if self.state.terminated and self.application.is_running:
            self.application.exit()

    def _on_text_changed(self, buffer: Buffer) -> None:
        if len(buffer.text) > CHAR_LIMIT:
            # 截断会再次触发本回调
            buffer.document = Document(buffer.text[:CHAR_LIMIT])
            return
        self.dispatch(CharacterTyped(buffer.text, replace=True))

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("enter")
        def _submit(event) -> None:
            self.dispatch(Submit())

        # 其余按键（方向键、退格等）交给 Buffer 自己处理
        # eager 会吞掉 Alt 组合键，Esc 直接退出
        @kb.add("escape", eager=True)
        @kb.add("c-c")
        def _cancel(event) -> None:
            self.dispatch(Cancel())

        return kb

    def _build_layout(self) -> Layout:
        input_window = Window(
            BufferControl(
                buffer=self.buffer,
                input_processors=[BeforeInput(PROMPT), _Placeholder(PLACEHOLDER)],
            ),
            height=1,
            width=len(PROMPT) + INPUT_WIDTH,
        )
        root = HSplit(
            [
                Window(FormattedTextControl(TITLE), height=1, style="class:title"),
                Window(height=1),
                input_window,
                Window(height=1),
                Window(FormattedTextControl(HINT), height=1, style="class:hint"),
                Window(FormattedTextControl(lambda: render_body(self.model))),
            ]
        )
        return Layout(root, focused_element=input_window)

    def run(self) -> ControllerState:
        try:
            self.application.run()
        except (OSError, EOFError) as e:
            logger.debug("run loop failed", exc_info=True)
            # stdin 不是终端时 prompt_toolkit 抛出不带信息的 EOFError
            raise FatalIOFault(str(e) or f"{type(e).__name__}: terminal not available") from e
        return self.state
