"""Composition of a bitset with a literal list of ids."""

from __future__ import annotations

import enum
import functools
import logging
import typing
from typing import Iterable, Iterator, Sequence

import toolz

from .naming import data_kind
from .probe import getbit
from .typehints import Id, Probe

if typing.TYPE_CHECKING:
    from .core import BitOperationData, BitOperations

logger = logging.getLogger(__name__)


@enum.unique
class Filter(enum.Enum):
    """How candidate ids are kept when filtered against a bitset.

    ``SELECT`` keeps the candidates present in the bitset. ``REJECT`` keeps
    the candidates *absent* from the bitset; it does not compute the members
    of the bitset missing from the candidates.

    """

    SELECT = "AND"
    REJECT = "MINUS"

    def retain(self, probe: Probe, ids: Iterable[Id]) -> Iterator[Id]:
        if self is Filter.SELECT:
            return filter(probe, ids)
        return toolz.remove(probe, ids)


@functools.singledispatch
def candidate_list(candidates: Sequence[Id]) -> list[Id]:
    """Return `candidates` as a list, wrapping a single id."""
    return list(candidates)


@candidate_list.register(int)
def _(candidates: Id) -> list[Id]:
    return [candidates]


def bit_operation_with_data(
    subject: BitOperations, kind: Filter, candidates: Id | Sequence[Id]
) -> BitOperationData:
    """Filter `candidates` against `subject` into a new bitset.

    The destination key is named after the unfiltered candidates. Every
    candidate costs one read of `subject`; every surviving candidate costs
    one write of the destination. Nothing makes those round trips atomic:
    a failure midway leaves the bits written so far in place.

    """
    ids = candidate_list(candidates)
    client = subject.client
    dest = client.destination_key(data_kind(kind.value), ids)
    probe = toolz.curry(getbit, client.store, subject.key)
    survivors = list(kind.retain(probe, ids))
    logger.debug(
        "%s %s: %d of %d candidate(s) kept",
        kind.name,
        dest,
        len(survivors),
        len(ids),
    )
    for id in survivors:
        client.store.setbit(dest, id, 1)
    return client.bitset_with_data(dest, survivors)
