"""An in-memory implementation of :class:`~bitalgebra.protocols.BitStore`.

:class:`MemoryStore` mirrors the bitmap commands of a Redis server closely
enough to run the algebra without one: bitmaps grow a byte at a time, a
composition pads its sources to the longest of them, and ``NOT`` flips every
bit of the source's last byte, used or not.

"""

from __future__ import annotations

import functools
import operator
from typing import Callable, MutableMapping

from .bitset import BitSet

MAX_OFFSET = 2 ** 32

BINARY_OPERATIONS: dict[str, Callable[[BitSet, BitSet], BitSet]] = {
    "AND": operator.and_,
    "OR": operator.or_,
    "XOR": operator.xor,
}


def check_offset(offset: int) -> None:
    if not 0 <= offset < MAX_OFFSET:
        raise ValueError("bit offset is not an integer or out of range")


class MemoryStore:
    """A dictionary of bitmaps keyed by name."""

    __slots__ = ("bitmaps",)

    def __init__(self) -> None:
        self.bitmaps: MutableMapping[str, BitSet] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self.bitmaps)!r})"

    def __contains__(self, name: str) -> bool:
        return name in self.bitmaps

    def getbit(self, name: str, offset: int) -> int:
        check_offset(offset)
        bitmap = self.bitmaps.get(name)
        return int(bitmap is not None and offset in bitmap)

    def setbit(self, name: str, offset: int, value: int) -> int:
        check_offset(offset)
        if value not in (0, 1):
            raise ValueError("bit is not an integer or out of range")
        bitmap = self.bitmaps.setdefault(name, BitSet())
        previous = int(offset in bitmap)
        if value:
            bitmap.add(offset)
        else:
            bitmap.discard(offset)
        return previous

    def bitcount(self, key: str) -> int:
        bitmap = self.bitmaps.get(key)
        return 0 if bitmap is None else len(bitmap)

    def bitop(self, operation: str, dest: str, *keys: str) -> int:
        """Store `operation` over `keys` in `dest` and return its byte length.

        Missing keys behave as empty bitmaps. A result with no bytes deletes
        `dest` instead of storing an empty bitmap.

        Raises
        ------
        ValueError
            If `operation` is unknown, no source key is given, or ``NOT`` is
            given more than one source key.

        """
        operation = operation.upper()
        if not keys:
            raise ValueError("wrong number of arguments for 'bitop' command")

        sources = [self.bitmaps.get(key, BitSet()) for key in keys]
        if operation == "NOT":
            if len(sources) != 1:
                raise ValueError("BITOP NOT must be called with a single source key.")
            (source,) = sources
            result = ~source
        else:
            try:
                function = BINARY_OPERATIONS[operation]
            except KeyError:
                raise ValueError("syntax error") from None
            first, *rest = sources
            result = functools.reduce(function, rest, first.copy())

        if not result.nbytes:
            self.bitmaps.pop(dest, None)
        else:
            self.bitmaps[dest] = result
        return result.nbytes

    def delete(self, *names: str) -> int:
        return sum(self.bitmaps.pop(name, None) is not None for name in names)
