"""Whole-key boolean composition of bitsets."""

from __future__ import annotations

import enum
import logging
import typing
from typing import Sequence

if typing.TYPE_CHECKING:
    from .client import Client
    from .core import BitOperation

logger = logging.getLogger(__name__)


@enum.unique
class BitOp(enum.Enum):
    """The boolean operations a store can compose keys with."""

    NOT = "NOT"
    AND = "AND"
    OR = "OR"
    XOR = "XOR"


def bit_operation(client: Client, kind: BitOp, keys: Sequence[str]) -> BitOperation:
    """Compose `keys` with `kind` into a new bitset.

    The result is written under a key derived from `kind` and `keys`, in the
    order given, overwriting whatever was stored there. ``NOT`` takes exactly
    one key. Errors raised by the store propagate unchanged.

    """
    keys = list(keys)
    dest = client.destination_key(kind.value, keys)
    logger.debug("BITOP %s %s <- %d key(s)", kind.value, dest, len(keys))
    client.store.bitop(kind.value, dest, *keys)
    return client.bitset(dest)
