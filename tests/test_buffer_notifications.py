from __future__ import annotations

from typing import List, Tuple

import pytest

from change_highlight.buffer import Buffer, BufferValidationError
from change_highlight.host import PostChange, PreChange


def record_changes(buffer: Buffer) -> List[Tuple[str, object]]:
    events: List[Tuple[str, object]] = []
    buffer.pre_change.add(lambda change: events.append(("pre", change)))
    buffer.post_change.add(lambda change: events.append(("post", change)))
    return events


def test_insert_emits_only_post_change() -> None:
    buffer = Buffer.from_text("hello")
    events = record_changes(buffer)

    buffer.insert_text(" world", at=5)

    assert buffer.text == "hello world"
    assert events == [("post", PostChange(5, 11, 0))]


def test_delete_emits_pre_then_post() -> None:
    buffer = Buffer.from_text("hello world")
    events = record_changes(buffer)

    buffer.delete_range(5, 11)

    assert buffer.text == "hello"
    assert events == [("pre", PreChange(5, 11)), ("post", PostChange(5, 5, 6))]


def test_pre_change_sees_text_before_edit() -> None:
    buffer = Buffer.from_text("abcdef")
    seen: List[str] = []
    buffer.pre_change.add(lambda change: seen.append(buffer.text[change.start : change.end]))

    buffer.replace_range(1, 4, "XY", label="replace")

    assert seen == ["bcd"]
    assert buffer.text == "aXYef"


def test_undo_redo_round_trip_emits_matching_changes() -> None:
    buffer = Buffer.from_text("hello")
    buffer.insert_text(" world", at=5)
    events = record_changes(buffer)

    buffer.undo()
    assert buffer.text == "hello"
    buffer.redo()
    assert buffer.text == "hello world"

    assert events == [
        ("pre", PreChange(5, 11)),
        ("post", PostChange(5, 5, 6)),
        ("post", PostChange(5, 11, 0)),
    ]


def test_undo_of_deletion_restores_text_as_insertion() -> None:
    buffer = Buffer.from_text("abcdef")
    buffer.delete_range(1, 4)
    events = record_changes(buffer)

    buffer.undo()

    assert buffer.text == "abcdef"
    assert events == [("post", PostChange(1, 4, 0))]


def test_undo_restores_point() -> None:
    buffer = Buffer.from_text("abc")
    buffer.state.set_point(3)
    buffer.insert_text("def")

    assert buffer.state.point == 6
    buffer.undo()
    assert buffer.state.point == 3
    buffer.redo()
    assert buffer.state.point == 6


def test_every_edit_advances_version() -> None:
    buffer = Buffer.from_text("abc")

    first = buffer.insert_text("d", at=3)
    second = buffer.delete_range(0, 1)
    undone = buffer.undo()

    assert (first.version, second.version) == (1, 2)
    assert undone is not None and undone.version == 3


def test_empty_history_is_a_noop() -> None:
    buffer = Buffer.from_text("abc")
    events = record_changes(buffer)

    assert buffer.undo() is None
    assert buffer.redo() is None
    assert events == []


def test_new_edit_discards_redo_tail() -> None:
    buffer = Buffer.from_text("")
    buffer.insert_text("one")
    buffer.undo()
    buffer.insert_text("two")

    assert buffer.redo() is None
    assert buffer.text == "two"


def test_multiline_offsets_count_newlines() -> None:
    buffer = Buffer.from_text("ab\ncd\n")

    assert len(buffer) == 6
    assert buffer.get_text(1, 4) == "b\nc"
    assert buffer.document.offset_to_cursor(4) == (1, 1)
    assert buffer.document.cursor_to_offset(1, 1) == 4


def test_out_of_range_edit_raises() -> None:
    buffer = Buffer.from_text("abc")

    with pytest.raises(BufferValidationError) as info:
        buffer.delete_range(1, 10)

    assert info.value.offset == 10
    assert buffer.text == "abc"
