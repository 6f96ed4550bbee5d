# tests/test_mapping.py

from __future__ import annotations

import pytest

from toado.errors import MappingError
from toado.mapping import decode_int, decode_status, decode_str
from toado.model.item_status import ItemStatus
from toado.server import Server


def _insert_raw_task(server: Server, priority: object, status: object) -> None:
    server.connection.execute(
        "INSERT INTO tasks(name, priority, status) VALUES(?, ?, ?);",
        ("raw", priority, status),
    )


def test_unknown_status_code_decodes_to_archived(server: Server) -> None:
    _insert_raw_task(server, 1, 7)
    (task,) = server.select_tasks()
    assert task["status"] is ItemStatus.ARCHIVED


def test_unknown_status_code_is_not_strict_failure(strict_server: Server) -> None:
    _insert_raw_task(strict_server, 1, 42)
    (task,) = strict_server.select_tasks()
    assert task["status"] is ItemStatus.ARCHIVED


def test_lenient_mapping_leaves_bad_field_absent(server: Server) -> None:
    _insert_raw_task(server, "high", 0)
    (task,) = server.select_tasks()
    assert task["name"] == "raw"
    assert task["priority"] is None
    assert task["status"] is ItemStatus.INCOMPLETE


def test_strict_mapping_raises(strict_server: Server) -> None:
    _insert_raw_task(strict_server, "high", 0)
    with pytest.raises(MappingError) as exc_info:
        strict_server.select_tasks()
    assert exc_info.value.column == "priority"
    assert exc_info.value.value == "high"


def test_decoders() -> None:
    assert decode_int(3) == 3
    assert decode_str("x") == "x"
    assert decode_status(1) is ItemStatus.COMPLETE
    with pytest.raises(TypeError):
        decode_int(True)
    with pytest.raises(TypeError):
        decode_int("3")
    with pytest.raises(TypeError):
        decode_str(3)


def test_item_status_codes() -> None:
    assert [status.code for status in ItemStatus] == [0, 1, 2]
    assert ItemStatus.from_code(-1) is ItemStatus.ARCHIVED
    assert str(ItemStatus.COMPLETE) == "complete"
