"""Curried, pipeable forms of the bitset operations.

Each function takes the operand first and the bitset last, so that it can be
partially applied and chained with the right shift operator::

    >>> from bitalgebra import Client, MemoryStore
    >>> from bitalgebra.api import complement, intersect, union
    >>> client = Client(MemoryStore(), namespace="ev")
    >>> day1, day2 = client.bitset("ev_day1"), client.bitset("ev_day2")
    >>> (day1 >> union(day2) >> complement).key
    'ev_bitop_NOT_ev_bitop_OR_ev_day1-ev_day2'
    >>> day1 >> intersect([1, 2])
    BitOperationData(key='ev_bitop_data-AND_1-2', ids=[])

"""

from __future__ import annotations

import inspect
from typing import Mapping

import toolz
from public import private, public

from .client import Client
from .core import BitOperation, BitOperations
from .protocols import BitStore
from .typehints import Id, Ids


@private  # type: ignore[misc]
class shiftable(toolz.curry):
    """Shiftable curry."""

    @property
    def __signature__(self) -> inspect.Signature:
        return inspect.signature(self.func)  # pragma: no cover

    def __rrshift__(self, other: BitOperations) -> shiftable:
        return self(other)


@public  # type: ignore[misc]
def connect(
    store: BitStore,
    namespace: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Client:
    """Construct a :class:`~bitalgebra.client.Client`.

    Parameters
    ----------
    store
        The store holding the bitmaps.
    namespace
        Prefix of derived keys. Read from the ``BITALGEBRA_NAMESPACE``
        environment variable when not given.
    environ
        Environment to read the namespace from, :data:`os.environ` by
        default.

    """
    if namespace is None:
        return Client.from_env(store, environ)
    return Client(store, namespace=namespace)


@public  # type: ignore[misc]
@shiftable
def complement(bitset: BitOperations) -> BitOperation:
    """Return the bitwise NOT of `bitset`."""
    return bitset.complement()


@public  # type: ignore[misc]
@shiftable
def xor(other: BitOperations, bitset: BitOperations) -> BitOperation:
    """Return the ids in exactly one of `bitset` and `other`."""
    return bitset.xor(other)


@public  # type: ignore[misc]
@shiftable
def union(other: BitOperations, bitset: BitOperations) -> BitOperation:
    """Return the ids in either `bitset` or `other`."""
    return bitset.union(other)


@public  # type: ignore[misc]
@shiftable
def intersect(other: BitOperations | Ids, bitset: BitOperations) -> BitOperations:
    """Return the ids in both `bitset` and `other`."""
    return bitset.intersect(other)


@public  # type: ignore[misc]
@shiftable
def difference(other: BitOperations | Ids, bitset: BitOperations) -> BitOperations:
    """Return `bitset` minus `other`.

    When `other` holds ids, the result holds the ids of `other` that are
    absent from `bitset`.

    """
    return bitset.difference(other)


@public  # type: ignore[misc]
def include(*ids: Id) -> shiftable:
    """Return a function checking whether `ids` are members of a bitset."""
    return shiftable(lambda bitset: bitset.include(*ids))
