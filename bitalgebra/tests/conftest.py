from __future__ import annotations

from typing import Iterable

import pytest

from bitalgebra.client import Client
from bitalgebra.core import BitOperation
from bitalgebra.store import MemoryStore


def populate(store: MemoryStore, key: str, ids: Iterable[int]) -> None:
    for id in ids:
        store.setbit(key, id, 1)


def members(store: MemoryStore, key: str) -> set[int]:
    return set(store.bitmaps.get(key, ()))


class RecordingStore(MemoryStore):
    """A store remembering every command it was sent."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple] = []

    def getbit(self, name: str, offset: int) -> int:
        self.calls.append(("getbit", name, offset))
        return super().getbit(name, offset)

    def setbit(self, name: str, offset: int, value: int) -> int:
        self.calls.append(("setbit", name, offset, value))
        return super().setbit(name, offset, value)

    def bitcount(self, key: str) -> int:
        self.calls.append(("bitcount", key))
        return super().bitcount(key)

    def bitop(self, operation: str, dest: str, *keys: str) -> int:
        self.calls.append(("bitop", operation, dest, *keys))
        return super().bitop(operation, dest, *keys)


@pytest.fixture  # type: ignore[misc]
def store() -> RecordingStore:
    store = RecordingStore()
    populate(store, "ev_day1", [10, 20, 30])
    populate(store, "ev_day2", [20, 30, 40])
    populate(store, "ev_abc", [1, 2, 3])
    store.calls.clear()
    return store


@pytest.fixture  # type: ignore[misc]
def client(store: RecordingStore) -> Client:
    return Client(store, namespace="ev")


@pytest.fixture  # type: ignore[misc]
def day1(client: Client) -> BitOperation:
    return client.bitset("ev_day1")


@pytest.fixture  # type: ignore[misc]
def day2(client: Client) -> BitOperation:
    return client.bitset("ev_day2")


@pytest.fixture  # type: ignore[misc]
def abc(client: Client) -> BitOperation:
    return client.bitset("ev_abc")
