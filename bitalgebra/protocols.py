"""Protocols describing the collaborators of bitalgebra."""

import abc

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class BitStore(Protocol):
    """A key-value store holding bitmaps.

    The method names and signatures follow the redis-py client, so a
    ``redis.Redis`` connection can be used wherever a :class:`BitStore` is
    expected.

    """

    @abc.abstractmethod
    def getbit(self, name: str, offset: int) -> int:
        """Return the bit at `offset` of `name`, 0 if it was never set."""

    @abc.abstractmethod
    def setbit(self, name: str, offset: int, value: int) -> int:
        """Set the bit at `offset` of `name` to `value`, return the old bit."""

    @abc.abstractmethod
    def bitcount(self, key: str) -> int:
        """Return the number of bits set to 1 in `key`."""

    @abc.abstractmethod
    def bitop(self, operation: str, dest: str, *keys: str) -> int:
        """Store `operation` applied over `keys` in `dest`."""

    @abc.abstractmethod
    def delete(self, *names: str) -> int:
        """Delete `names`, returning how many of them existed."""
