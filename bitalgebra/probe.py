"""Reading single bits out of a store."""

from .protocols import BitStore


def getbit(store: BitStore, key: str, offset: int) -> bool:
    """Return whether the bit at `offset` of `key` is set."""
    return store.getbit(key, offset) == 1
