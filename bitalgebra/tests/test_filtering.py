import logging

import pytest

from bitalgebra.client import Client
from bitalgebra.core import BitOperationData
from bitalgebra.filtering import Filter, bit_operation_with_data, candidate_list
from bitalgebra.store import MemoryStore

from .conftest import members


class FlakyStore(MemoryStore):
    """A store failing once it has written `limit` bits."""

    def __init__(self, limit: int) -> None:
        super().__init__()
        self.limit = limit
        self.writes = 0

    def setbit(self, name: str, offset: int, value: int) -> int:
        if self.writes == self.limit:
            raise ConnectionError("connection lost")
        self.writes += 1
        return super().setbit(name, offset, value)


def test_candidate_list():
    assert candidate_list(3) == [3]
    assert candidate_list([3, 1]) == [3, 1]
    assert candidate_list((3, 1)) == [3, 1]
    assert candidate_list(range(2)) == [0, 1]


def test_select(abc, store):
    result = bit_operation_with_data(abc, Filter.SELECT, [2, 3, 4])
    assert isinstance(result, BitOperationData)
    assert result.ids == [2, 3]
    assert result.key == "ev_bitop_data-AND_2-3-4"
    assert members(store, result.key) == {2, 3}


def test_reject_keeps_candidates_absent_from_subject(abc, store):
    result = bit_operation_with_data(abc, Filter.REJECT, [2, 3, 4])
    assert result.ids == [4]
    assert result.key == "ev_bitop_data-MINUS_2-3-4"
    assert members(store, result.key) == {4}


def test_candidate_order_is_preserved(abc):
    assert bit_operation_with_data(abc, Filter.SELECT, [3, 0, 1]).ids == [3, 1]
    assert bit_operation_with_data(abc, Filter.REJECT, [9, 2, 5]).ids == [9, 5]


def test_single_id(abc):
    assert bit_operation_with_data(abc, Filter.SELECT, 2).ids == [2]
    assert bit_operation_with_data(abc, Filter.SELECT, 7).ids == []
    assert bit_operation_with_data(abc, Filter.SELECT, 7).key == "ev_bitop_data-AND_7"


def test_one_probe_per_candidate_one_write_per_survivor(abc, store):
    bit_operation_with_data(abc, Filter.SELECT, [2, 4, 3])
    assert store.calls == [
        ("getbit", "ev_abc", 2),
        ("getbit", "ev_abc", 4),
        ("getbit", "ev_abc", 3),
        ("setbit", "ev_bitop_data-AND_2-4-3", 2, 1),
        ("setbit", "ev_bitop_data-AND_2-4-3", 3, 1),
    ]


def test_no_survivors_writes_nothing(abc, store):
    result = bit_operation_with_data(abc, Filter.SELECT, [7, 8])
    assert result.ids == []
    assert result.key not in store


def test_failure_leaves_partial_result():
    store = FlakyStore(limit=5)
    for id in (1, 2, 3):
        store.setbit("ev_abc", id, 1)
    subject = Client(store, namespace="ev").bitset("ev_abc")

    with pytest.raises(ConnectionError):
        bit_operation_with_data(subject, Filter.SELECT, [1, 2, 3])

    assert set(store.bitmaps["ev_bitop_data-AND_1-2-3"]) == {1, 2}


def test_filter_logs_destination(abc, caplog):
    caplog.set_level(logging.DEBUG, logger="bitalgebra.filtering")
    bit_operation_with_data(abc, Filter.REJECT, [1, 9])
    assert "ev_bitop_data-MINUS_1-9" in caplog.text
