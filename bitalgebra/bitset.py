"""An in-memory bitmap of unsigned integers with a byte-granular width."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, MutableSet


def popcount(bits: int) -> int:
    """Return the number of set bits in `bits`."""
    return bin(bits).count("1")


class BitSet(MutableSet[int]):
    """A bitmap of unsigned integers.

    Besides its members a :class:`BitSet` remembers how many bytes a
    key-value store would need to hold it: the smallest whole number of
    bytes covering the highest offset ever touched, whether that offset was
    set or cleared. The width is what :meth:`__invert__` complements over
    and what the binary operators pad to.

    """

    __slots__ = "bits", "len", "nbytes"

    def __init__(self, bits: Iterable[int] = (), *, nbytes: int = 0) -> None:
        """Construct a bitset."""
        self.bits = 0
        self.len = 0
        self.nbytes = nbytes

        for bit in bits:
            self.add(bit)

    @classmethod
    def from_int(cls, bits: int, *, nbytes: int) -> BitSet:
        """Construct a bitset directly from an integer mask."""
        bitset = cls(nbytes=nbytes)
        bitset.bits = bits
        bitset.len = popcount(bits)
        return bitset

    def copy(self) -> BitSet:
        """Return a copy of the bitset."""
        return self.from_int(self.bits, nbytes=self.nbytes)

    @property
    def nbits(self) -> int:
        """Return the number of addressable bits."""
        return 8 * self.nbytes

    def __contains__(self, bit: Any) -> bool:
        """Check whether `bit` is in the set."""
        return (self.bits >> bit) & 1 == 1

    def __iter__(self) -> Iterator[int]:
        """Iterate over the elements of the set."""
        return filter(self.__contains__, range(self.bits.bit_length()))

    def __len__(self) -> int:
        """Return the number of set bits."""
        return self.len

    def __repr__(self) -> str:
        """Return the string representation of a bitset."""
        values = str(set(self)) if self else ""
        return f"{self.__class__.__name__}({values})"

    def touch(self, bit: int) -> None:
        """Widen the bitset so that `bit` is addressable.

        Raises
        ------
        ValueError
            If `bit` is negative

        """
        if bit < 0:
            raise ValueError(f"bit not greater than or equal to 0, bit == {bit}")
        self.nbytes = max(self.nbytes, bit // 8 + 1)

    def add(self, bit: int) -> None:
        """Add `bit` to the set.

        Raises
        ------
        ValueError
            If `bit` is negative

        """
        self.touch(bit)
        self.len += bit not in self
        self.bits |= 1 << bit

    def discard(self, bit: int) -> None:
        """Remove `bit` from the set, widening it to cover `bit`.

        Raises
        ------
        ValueError
            If `bit` is negative

        """
        self.touch(bit)
        self.len -= bit in self
        self.bits &= ~(1 << bit)

    def __and__(self, other: Any) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        nbytes = max(self.nbytes, other.nbytes)
        return self.from_int(self.bits & other.bits, nbytes=nbytes)

    def __or__(self, other: Any) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        nbytes = max(self.nbytes, other.nbytes)
        return self.from_int(self.bits | other.bits, nbytes=nbytes)

    def __xor__(self, other: Any) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        nbytes = max(self.nbytes, other.nbytes)
        return self.from_int(self.bits ^ other.bits, nbytes=nbytes)

    def __invert__(self) -> BitSet:
        """Complement every addressable bit, including unused trailing ones."""
        mask = (1 << self.nbits) - 1
        return self.from_int(~self.bits & mask, nbytes=self.nbytes)
