"""The entry point binding a store to a key namespace."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence, Union

from .config import DEFAULT_NAMESPACE, namespace_from_env
from .core import BitOperation, BitOperationData
from .naming import destination_key
from .protocols import BitStore
from .typehints import Id


class Client:
    """A store together with the namespace of the keys it derives.

    Attributes
    ----------
    store
        Anything implementing :class:`~bitalgebra.protocols.BitStore`, such
        as a ``redis.Redis`` connection or a
        :class:`~bitalgebra.store.MemoryStore`.
    namespace
        Prefix of every key derived by a bit operation.

    """

    __slots__ = "store", "namespace"

    def __init__(self, store: BitStore, *, namespace: str = DEFAULT_NAMESPACE) -> None:
        self.store = store
        self.namespace = namespace

    @classmethod
    def from_env(
        cls, store: BitStore, environ: Mapping[str, str] | None = None
    ) -> Client:
        """Construct a client whose namespace is read from the environment."""
        return cls(store, namespace=namespace_from_env(environ))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.store!r}, namespace={self.namespace!r})"

    def bitset(self, key: str) -> BitOperation:
        """Return a handle to the bitset stored under `key`."""
        return BitOperation(self, key)

    def bitset_with_data(self, key: str, ids: Sequence[Id]) -> BitOperationData:
        """Return a handle to the bitset under `key` derived from `ids`."""
        return BitOperationData(self, key, ids)

    def destination_key(self, kind: str, operands: Iterable[Union[str, int]]) -> str:
        """Return the key the result of `kind` over `operands` is stored under."""
        return destination_key(self.namespace, kind, operands)
