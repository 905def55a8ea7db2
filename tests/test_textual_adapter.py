from __future__ import annotations

from typing import List, Sequence

from jot_engine.adapters.textual import TextualJotAdapter, TextualUIHooks
from jot_engine.session import EditorSession
from jot_engine.viewport import Frame


class NullFiles:
    def load(self, path: str) -> list[str]:
        return [""]

    def save(self, path: str, lines: Sequence[str]) -> bool:
        return True


def build_adapter(lines: List[str] | None = None):
    frames: List[Frame] = []
    statuses: List[str] = []
    events: List[tuple[str, object | None]] = []
    logs: List[str] = []
    exits: List[bool] = []

    hooks = TextualUIHooks(
        update_frame=frames.append,
        update_status=statuses.append,
        handle_event=lambda name, payload: events.append((name, payload)),
        request_exit=lambda: exits.append(True),
        log=logs.append,
    )
    session = EditorSession(lines=lines, files=NullFiles())
    adapter = TextualJotAdapter(session, hooks, size=(40, 12))
    return adapter, frames, statuses, events, logs, exits


def test_adapter_paints_initial_frame() -> None:
    _, frames, *_ = build_adapter(["hello"])

    assert len(frames) == 1
    assert frames[0].lines[0].text == "hello"


def test_printable_key_edits_and_refreshes() -> None:
    adapter, frames, statuses, _, logs, _ = build_adapter()

    result = adapter.handle_textual_key("x", text="x")

    assert result is not None and result.consumed
    assert adapter.session.buffer.lines == ("x",)
    assert statuses[-1] == "insert"
    assert frames[-1].lines[0].text == "x"
    assert any(entry.startswith("key ->") for entry in logs)
    assert any(entry.startswith("result <-") for entry in logs)


def test_unbound_key_is_ignored() -> None:
    adapter, frames, _, _, logs, _ = build_adapter()

    assert adapter.handle_textual_key("f5") is None
    assert len(frames) == 1
    assert logs[-1].startswith("ignored <-")


def test_bus_events_reach_host() -> None:
    adapter, _, _, events, _, _ = build_adapter(["abc"])

    adapter.handle_textual_key("c", modifiers=("ctrl",))
    adapter.handle_textual_key("f", modifiers=("ctrl",))
    adapter.handle_textual_key("escape")

    assert [name for name, _ in events] == [
        "clipboard.copy",
        "search.start",
        "search.end",
    ]
    assert events[0][1] == "abc"


def test_quit_requests_exit() -> None:
    adapter, _, _, events, _, exits = build_adapter()

    adapter.handle_textual_key("q", modifiers=("ctrl",))

    assert exits == [True]
    assert events[-1][0] == "session.quit"
    assert not adapter.session.running


def test_resize_recomputes_frame() -> None:
    adapter, frames, *_ = build_adapter([str(n) for n in range(50)])

    adapter.resize(20, 6)

    assert len(frames) == 2
    assert frames[-1].viewport.total_rows == 3
