from __future__ import annotations

from typing import Dict, List, Sequence

from jot_engine.config import EditorConfig
from jot_engine.events import Direction, EventKind, InputEvent
from jot_engine.keymaps import KeyInput
from jot_engine.session import EditorSession


class MemoryFiles:
    def __init__(self, files: Dict[str, List[str]] | None = None, *, fail: bool = False):
        self.files = dict(files or {})
        self.fail = fail

    def load(self, path: str) -> list[str]:
        return list(self.files.get(path, [""]))

    def save(self, path: str, lines: Sequence[str]) -> bool:
        if self.fail:
            return False
        self.files[path] = list(lines)
        return True


def send_text(session: EditorSession, text: str) -> None:
    for ch in text:
        session.handle_event(InputEvent.printable(ch))


def send(session: EditorSession, kind: EventKind) -> str:
    return session.handle_event(InputEvent.of(kind)).status


def test_typing_and_newline_edit_buffer() -> None:
    session = EditorSession(files=MemoryFiles())

    send_text(session, "hi")
    send(session, EventKind.NEWLINE)
    send_text(session, "there")

    assert session.buffer.lines == ("hi", "there")
    assert session.buffer.cursor == (1, 5)
    assert session.mode == "edit"


def test_undo_event_reverts_last_edit() -> None:
    session = EditorSession(lines=["abc"], files=MemoryFiles())
    session.handle_event(InputEvent.navigate(Direction.RIGHT))
    send(session, EventKind.DUPLICATE)

    assert send(session, EventKind.UNDO) == "undo"
    assert session.buffer.lines == ("abc",)
    assert session.buffer.cursor == (0, 1)
    assert send(session, EventKind.UNDO) == "nothing_to_undo"


def test_copy_paste_through_events() -> None:
    session = EditorSession(lines=["word", ""], files=MemoryFiles())
    copied: list[object] = []
    session.bus.subscribe("clipboard.copy", copied.append)

    send(session, EventKind.COPY)
    session.handle_event(InputEvent.navigate(Direction.DOWN))
    send(session, EventKind.PASTE)

    assert copied == ["word"]
    assert session.buffer.lines == ("word", "word")


def test_save_writes_to_path_or_default_name() -> None:
    files = MemoryFiles()
    session = EditorSession(lines=["a", "b"], path="notes.txt", files=files)

    assert send(session, EventKind.SAVE) == "saved"
    assert files.files["notes.txt"] == ["a", "b"]
    assert session.buffer.document.dirty is False

    untitled = EditorSession(lines=["x"], files=files)
    send(untitled, EventKind.SAVE)
    assert files.files["untitled.txt"] == ["x"]


def test_failed_save_reports_status() -> None:
    session = EditorSession(lines=["a"], path="ro.txt", files=MemoryFiles(fail=True))

    result = session.handle_event(InputEvent.of(EventKind.SAVE))

    assert result.status == "save_failed"
    assert session.running


def test_open_loads_through_file_store() -> None:
    files = MemoryFiles({"doc.txt": ["first", "second"]})

    session = EditorSession.open("doc.txt", files=files)

    assert session.buffer.lines == ("first", "second")
    assert session.frame(80, 24).header[0] == "Jot - doc.txt"


def test_quit_stops_session() -> None:
    session = EditorSession(files=MemoryFiles())

    assert send(session, EventKind.QUIT) == "quit"
    assert not session.running
    assert send(session, EventKind.NEWLINE) == "stopped"
    assert session.buffer.lines == ("",)


def test_escape_in_edit_mode_quits() -> None:
    session = EditorSession(files=MemoryFiles())

    send(session, EventKind.CANCEL)

    assert not session.running


def test_replace_flow_through_modes() -> None:
    session = EditorSession(lines=["the cat sat"], files=MemoryFiles())

    send(session, EventKind.REPLACE_START)
    assert session.mode == "replace"
    send_text(session, "at")
    assert send(session, EventKind.NEWLINE) == "replacement_phase"
    send_text(session, "og")
    assert send(session, EventKind.NEWLINE) == "replaced"
    assert session.buffer.lines == ("the cog sat",)

    assert send(session, EventKind.CANCEL) == "cancelled"
    assert session.mode == "edit"
    assert session.search is None
    assert session.manager.previous_mode == "replace"
    assert session.running


def test_find_mode_frame_shows_prompt_and_highlights() -> None:
    config = EditorConfig(show_guide_column=False)
    session = EditorSession(config=config, lines=["foo bar foo"], files=MemoryFiles())
    send(session, EventKind.SEARCH_START)
    send_text(session, "foo")

    frame = session.frame(40, 10)

    assert frame.prompt == ["Find: foo"]
    assert frame.cursor == (9, 2)
    assert [(h.x, h.y, h.selected) for h in frame.highlights] == [
        (3, 3, True),
        (11, 3, False),
    ]

    send(session, EventKind.NEWLINE)
    assert session.mode == "edit"
    assert session.buffer.cursor == (0, 0)
    assert session.frame(40, 10).prompt == []


def test_find_ignores_editing_commands() -> None:
    session = EditorSession(lines=["abc"], files=MemoryFiles())
    send(session, EventKind.SEARCH_START)

    assert send(session, EventKind.DUPLICATE) == "ignored"
    assert session.buffer.lines == ("abc",)


def test_handle_key_uses_config_flags() -> None:
    session = EditorSession(
        config=EditorConfig(unix_mode=True), lines=["line"], files=MemoryFiles()
    )

    assert session.handle_key(KeyInput("c", ("ctrl",))) is None
    result = session.handle_key(KeyInput("k", ("ctrl",)))
    assert result is not None and result.status == "copy"
    assert session.buffer.clipboard.paste() == "line"


def test_frame_scroll_is_stable_between_events() -> None:
    session = EditorSession(lines=[str(n) for n in range(40)], files=MemoryFiles())
    for _ in range(15):
        session.handle_event(InputEvent.navigate(Direction.DOWN))

    assert session.frame(80, 13).viewport.first_visible_row == 6

    for _ in range(3):
        session.handle_event(InputEvent.navigate(Direction.UP))
    assert session.frame(80, 13).viewport.first_visible_row == 6


def test_left_and_right_are_ignored_in_find_prompt() -> None:
    session = EditorSession(lines=["abc abc"], files=MemoryFiles())
    send(session, EventKind.SEARCH_START)
    send_text(session, "bc")

    for direction in (Direction.LEFT, Direction.RIGHT):
        result = session.handle_event(InputEvent.navigate(direction))
        assert result.status == "ignored"

    assert session.mode == "find"
    assert session.buffer.cursor == (0, 0)
    assert session.search is not None and session.search.query == "bc"
