import pytest

from akari_editor.buffer import HistoryStack


def test_history_is_capped_at_limit() -> None:
    history = HistoryStack(limit=50)
    for index in range(60):
        history.push_edit(f"edit-{index}")

    undo, redo = history.snapshot()
    assert history.undo_depth == 50
    assert undo[0] == "edit-10"
    assert undo[-1] == "edit-59"
    assert redo == ()


def test_undo_then_redo_walks_back_and_forth() -> None:
    history = HistoryStack()
    buffers = ["", "a", "ab", "abc"]
    current = buffers[0]
    for following in buffers[1:]:
        history.push_edit(current)
        current = following

    for expected in reversed(buffers[:-1]):
        current = history.undo(current)
        assert current == expected
    assert history.undo(current) is None

    for expected in buffers[1:]:
        current = history.redo(current)
        assert current == expected
    assert history.redo(current) is None


def test_new_edit_clears_redo() -> None:
    history = HistoryStack()
    history.push_edit("one")
    assert history.undo("two") == "one"
    assert history.can_redo()

    history.push_edit("one")

    assert not history.can_redo()
    assert history.redo_depth == 0


def test_redo_respects_cap() -> None:
    history = HistoryStack(limit=2)
    history.push_edit("a")
    history.push_edit("b")
    assert history.undo("c") == "b"

    assert history.redo("b") == "c"
    assert history.snapshot() == (("a", "b"), ())


def test_limit_must_be_positive() -> None:
    with pytest.raises(ValueError):
        HistoryStack(limit=0)


def test_clear_empties_both_stacks() -> None:
    history = HistoryStack()
    history.push_edit("x")
    history.undo("y")

    history.clear()

    assert not history.can_undo()
    assert not history.can_redo()
