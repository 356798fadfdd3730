# tests/test_storage.py

from __future__ import annotations

from pathlib import Path

import pytest

from models import Task
from storage import LoadError, SaveError, Storage, TodoError


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    store = Storage(tmp_path / "tasks.csv")
    tasks = [
        Task("buy milk"),
        Task("call mom, then dad", completed=True),
        Task('say "hi"'),
        Task("two\nlines", completed=True),
        Task(""),
    ]

    store.save_tasks(tasks)

    assert store.load_tasks() == tasks


def test_save_writes_one_plain_record_per_task(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    Storage(path).save_tasks([Task("a"), Task("b", completed=True), Task("c")])

    assert path.read_text() == "a,false\nb,true\nc,false\n"


def test_save_quotes_embedded_delimiters(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    Storage(path).save_tasks([Task("eggs, ham"), Task('the "best"')])

    assert path.read_text() == '"eggs, ham",false\n"the ""best""",false\n'


def test_save_is_idempotent(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    store = Storage(path)
    tasks = [Task("x, y", completed=True), Task("z")]

    store.save_tasks(tasks)
    first = path.read_bytes()
    store.save_tasks(tasks)

    assert path.read_bytes() == first


def test_save_truncates_previous_content(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    store = Storage(path)
    store.save_tasks([Task("a"), Task("b"), Task("c")])

    store.save_tasks([Task("only")])

    assert path.read_text() == "only,false\n"


def test_save_empty_list_leaves_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    store = Storage(path)
    store.save_tasks([])

    assert path.read_text() == ""
    assert store.load_tasks() == []


def test_missing_completion_field_reads_as_not_completed(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    path.write_text("water plants\nfeed cat,true\n")

    assert Storage(path).load_tasks() == [
        Task("water plants", completed=False),
        Task("feed cat", completed=True),
    ]


def test_only_literal_true_means_completed(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    path.write_text("a,TRUE\nb,yes\nc,false\nd,true\n")

    flags = [t.completed for t in Storage(path).load_tasks()]

    assert flags == [False, False, False, True]


def test_blank_lines_are_skipped(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    path.write_text("a,false\n\nb,true\n")

    assert [t.description for t in Storage(path).load_tasks()] == ["a", "b"]


def test_missing_file_is_a_load_error(tmp_path: Path) -> None:
    with pytest.raises(LoadError, match="cannot read"):
        Storage(tmp_path / "nope.csv").load_tasks()


def test_too_many_fields_is_a_load_error(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    path.write_text("ok,false\nbad,true,extra\n")

    with pytest.raises(LoadError, match=":2:"):
        Storage(path).load_tasks()


def test_unterminated_quote_is_a_load_error(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    path.write_text('"never closed,false\n')

    with pytest.raises(LoadError):
        Storage(path).load_tasks()


def test_unwritable_path_is_a_save_error(tmp_path: Path) -> None:
    # a directory cannot be opened for writing
    store = Storage(tmp_path)

    with pytest.raises(SaveError) as info:
        store.save_tasks([Task("a")])

    assert isinstance(info.value, TodoError)


def test_non_utf8_file_is_a_load_error(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    path.write_bytes(b"caf\xe9,false\n")

    with pytest.raises(LoadError, match="not valid UTF-8"):
        Storage(path).load_tasks()


def test_very_long_description_round_trips(tmp_path: Path) -> None:
    store = Storage(tmp_path / "tasks.csv")
    tasks = [Task("x" * 200_000, completed=True)]

    store.save_tasks(tasks)

    assert store.load_tasks() == tasks
