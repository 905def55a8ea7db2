"""Executable Textual app that hosts the editing core."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from rich.style import Style
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use jot_engine.adapters.textual.app"
    ) from exc

from jot_engine.config import parse_command_line
from jot_engine.events import is_printable
from jot_engine.keymaps import KeyStroke
from jot_engine.runtime import telemetry
from jot_engine.session import EditorSession
from jot_engine.viewport import Frame

from .controller import TextualJotAdapter, TextualUIHooks

MATCH_STYLE = Style(bgcolor="yellow", color="black")
SELECTED_STYLE = Style(bgcolor="red", color="white")
GUIDE_STYLE = Style(bgcolor="grey23")
CURSOR_STYLE = Style(reverse=True)
HEADER_STYLE = Style(bold=True)


def paint(frame: Frame, columns: int, rows: int) -> Text:
    """Turn a frame into one rich Text block of ``rows`` lines."""

    grid: List[Text] = [Text(" " * columns) for _ in range(rows)]

    def put(y: int, x: int, content: str, style: Style | None = None) -> None:
        if not 0 <= y < rows or x >= columns:
            return
        content = content[: columns - x]
        line = grid[y]
        plain = line.plain
        line.plain = plain[:x] + content + plain[x + len(content) :]
        if style is not None:
            line.stylize(style, x, x + len(content))

    def restyle(y: int, x: int, width: int, style: Style) -> None:
        if 0 <= y < rows and 0 <= x < columns and width > 0:
            grid[y].stylize(style, x, min(columns, x + width))

    for y, header in enumerate(frame.header):
        put(y, 0, header, HEADER_STYLE)
    for offset, prompt in enumerate(frame.prompt):
        put(frame.viewport.header_rows + offset, 0, prompt)
    for line in frame.lines:
        put(line.y, 0, line.label + line.text)
    for guide in frame.guides:
        restyle(guide.y, guide.x, 1, GUIDE_STYLE)
    for highlight in frame.highlights:
        style = SELECTED_STYLE if highlight.selected else MATCH_STYLE
        restyle(highlight.y, highlight.x, highlight.width, style)
    if frame.status:
        put(rows - 1, 0, frame.status)
    restyle(frame.cursor[1], frame.cursor[0], 1, CURSOR_STYLE)
    return Text("\n").join(grid)


class JotApp(App[None], inherit_bindings=False):
    """Full-screen Textual host painting frames from an EditorSession."""

    CSS = """
	Screen {
		layout: vertical;
		overflow: hidden;
	}

	#editor {
		height: 1fr;
		width: 1fr;
	}
	"""

    ENABLE_COMMAND_PALETTE = False

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualJotAdapter | None = None
        self._editor: Static | None = None
        self.logger = telemetry.get_logger("jot_engine.adapters.textual")

    def compose(self) -> ComposeResult:
        self._editor = Static("", id="editor")
        yield self._editor

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_frame=self._update_frame,
            request_exit=self.exit,
            log=self.logger.debug,
        )
        self.adapter = TextualJotAdapter(
            self.session, hooks, size=(self.size.width, self.size.height)
        )

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.width, event.size.height)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        key, text, modifiers = self._normalize_key(event)
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def _update_frame(self, frame: Frame) -> None:
        if self._editor:
            self._editor.update(paint(frame, self.size.width, self.size.height))

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Tuple[str, Optional[str], Tuple[str, ...]]:
        character = event.character
        if character and is_printable(character):
            return (character, character, ())
        stroke = KeyStroke.parse(event.key)
        return (stroke.key, None, stroke.modifiers)


def main(argv: Optional[Sequence[str]] = None) -> None:
    options = parse_command_line(argv)
    if options.path:
        session = EditorSession.open(options.path, config=options.config)
    else:
        session = EditorSession(config=options.config)
    JotApp(session).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
