"""Store-backed bitsets and the algebra over them.

Every operation on a bitset is delegated to the store and materialized under
a derived key; the result is a new bitset supporting the same operations, so
expressions can be chained to any depth::

    >>> from bitalgebra import Client, MemoryStore
    >>> client = Client(MemoryStore(), namespace="ev")
    >>> day1, day2 = client.bitset("ev_day1"), client.bitset("ev_day2")
    >>> (day1 & day2).key
    'ev_bitop_AND_ev_day1-ev_day2'
    >>> (day1 | day2).key
    'ev_bitop_OR_ev_day1-ev_day2'

Binary operators accept either another bitset or literal ids. Bitsets are
combined with a single store-side composition; ids are probed one by one
(see :mod:`bitalgebra.filtering`).

"""

from __future__ import annotations

import collections.abc
import functools
import typing
from typing import Any, Iterator, Sequence

from .composition import BitOp, bit_operation
from .errors import UnsupportedOperandError
from .filtering import Filter, bit_operation_with_data
from .probe import getbit
from .protocols import BitStore
from .typehints import Id, Ids

if typing.TYPE_CHECKING:
    from .client import Client


class BitOperations:
    """Operations shared by every store-backed bitset.

    Attributes
    ----------
    client
        The :class:`~bitalgebra.client.Client` holding the store and the key
        namespace.
    key
        The key of the bitmap in the store.

    """

    __slots__ = "client", "key"

    def __init__(self, client: Client, key: str) -> None:
        self.client = client
        self.key = key

    @property
    def store(self) -> BitStore:
        return self.client.store

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BitOperations):
            return NotImplemented
        return self.key == other.key and self.store is other.store

    def __hash__(self) -> int:
        return hash(self.key)

    def include(self, *ids: Id) -> bool | list[bool]:
        """Check whether `ids` are members of the bitset.

        Returns a single :class:`bool` for one id and a list aligned with
        `ids` otherwise.

        """
        result = [getbit(self.store, self.key, id) for id in ids]
        return result[0] if len(result) == 1 else result

    def __contains__(self, id: Id) -> bool:
        return getbit(self.store, self.key, id)

    def reset(self) -> None:
        """Delete the bitset from the store."""
        self.store.delete(self.key)

    def length(self) -> int:
        """Return the number of ids in the bitset."""
        return self.store.bitcount(self.key)

    def complement(self) -> BitOperation:
        """Return the bitwise NOT of the bitset.

        The store complements every bit it tracks for the key, so ids past
        the last populated byte are not members of the result.

        """
        return bit_operation(self.client, BitOp.NOT, [self.key])

    __neg__ = __invert__ = complement

    def _xor_bitset(self, other: BitOperations) -> BitOperation:
        return bit_operation(self.client, BitOp.XOR, [self.key, other.key])

    def _union_bitset(self, other: BitOperations) -> BitOperation:
        return bit_operation(self.client, BitOp.OR, [self.key, other.key])

    def _intersect_bitset(self, other: BitOperations) -> BitOperation:
        return bit_operation(self.client, BitOp.AND, [self.key, other.key])

    def _intersect_ids(self, ids: Ids) -> BitOperationData:
        return bit_operation_with_data(self, Filter.SELECT, ids)

    def _difference_bitset(self, other: BitOperations) -> BitOperation:
        # the store has no set-minus operation
        return self ^ (self & other)

    def _difference_ids(self, ids: Ids) -> BitOperationData:
        return bit_operation_with_data(self, Filter.REJECT, ids)

    def xor(self, other: BitOperations) -> BitOperation:
        """Return the ids in exactly one of the bitset and `other`."""
        return supported("xor", other, xor_operand(other, self))

    def union(self, other: BitOperations) -> BitOperation:
        """Return the ids in either the bitset or `other`."""
        return supported("union", other, union_operand(other, self))

    def intersect(self, other: BitOperations | Ids) -> BitOperations:
        """Return the ids in both the bitset and `other`.

        If `other` is an id or a sequence of ids, the result is a
        :class:`BitOperationData` holding the ids of `other` that are in the
        bitset, in the order given.

        """
        return supported("intersect", other, intersect_operand(other, self))

    def difference(self, other: BitOperations | Ids) -> BitOperations:
        """Return the bitset minus `other`.

        If `other` is an id or a sequence of ids, the result is a
        :class:`BitOperationData` holding the ids of `other` that are *not*
        in the bitset, in the order given.

        """
        return supported("difference", other, difference_operand(other, self))

    def __xor__(self, other: Any) -> BitOperation:
        return xor_operand(other, self)

    def __or__(self, other: Any) -> BitOperation:
        return union_operand(other, self)

    __add__ = __or__

    def __and__(self, other: Any) -> BitOperations:
        return intersect_operand(other, self)

    def __sub__(self, other: Any) -> BitOperations:
        return difference_operand(other, self)


class BitOperation(BitOperations):
    """A bitset stored under `key`."""

    __slots__ = ()


class BitOperationData(BitOperations):
    """A bitset derived from a list of ids, remembering the ids that survived.

    Equality and iteration use :attr:`ids`, so the result of filtering can be
    compared with a plain list.

    """

    __slots__ = ("ids",)

    def __init__(self, client: Client, key: str, ids: Sequence[Id]) -> None:
        super().__init__(client, key)
        self.ids = list(ids)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, ids={self.ids!r})"

    def __eq__(self, other: Any) -> bool:
        return self.ids == getattr(other, "ids", other)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[Id]:
        return iter(self.ids)


def supported(operation: str, operand: Any, result: Any) -> Any:
    if result is NotImplemented:
        raise UnsupportedOperandError(operation, operand)
    return result


# Operand dispatch. Each function takes the operand first so that it can be
# dispatched on; anything not registered has no defined result.


@functools.singledispatch
def xor_operand(other: Any, bitset: BitOperations) -> Any:
    return NotImplemented


@xor_operand.register(BitOperations)
def _(other: BitOperations, bitset: BitOperations) -> BitOperation:
    return bitset._xor_bitset(other)


@functools.singledispatch
def union_operand(other: Any, bitset: BitOperations) -> Any:
    return NotImplemented


@union_operand.register(BitOperations)
def _(other: BitOperations, bitset: BitOperations) -> BitOperation:
    return bitset._union_bitset(other)


@functools.singledispatch
def intersect_operand(other: Any, bitset: BitOperations) -> Any:
    return NotImplemented


@intersect_operand.register(BitOperations)
def _(other: BitOperations, bitset: BitOperations) -> BitOperation:
    return bitset._intersect_bitset(other)


@intersect_operand.register(int)
@intersect_operand.register(collections.abc.Sequence)
def _(other: Ids, bitset: BitOperations) -> BitOperationData:
    return bitset._intersect_ids(other)


@functools.singledispatch
def difference_operand(other: Any, bitset: BitOperations) -> Any:
    return NotImplemented


@difference_operand.register(BitOperations)
def _(other: BitOperations, bitset: BitOperations) -> BitOperation:
    return bitset._difference_bitset(other)


@difference_operand.register(int)
@difference_operand.register(collections.abc.Sequence)
def _(other: Ids, bitset: BitOperations) -> BitOperationData:
    return bitset._difference_ids(other)


@intersect_operand.register(bool)
@intersect_operand.register(str)
@intersect_operand.register(bytes)
@difference_operand.register(bool)
@difference_operand.register(str)
@difference_operand.register(bytes)
def _(other: Any, bitset: BitOperations) -> Any:
    # not ids, though bool is an int and str and bytes are sequences
    return NotImplemented
