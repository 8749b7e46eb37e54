"""Deterministic names for derived bitsets."""

from __future__ import annotations

from typing import Iterable, Union

BIT_OPERATION_PREFIX = "bitop"
DATA_PREFIX = "data"


def data_kind(kind: str) -> str:
    """Return the kind used to name a composition against a list of ids."""
    return f"{DATA_PREFIX}-{kind}"


def destination_key(
    namespace: str, kind: str, operands: Iterable[Union[str, int]]
) -> str:
    """Return the key a bit operation stores its result under.

    Parameters
    ----------
    namespace
        Prefix shared by every key of the application.
    kind
        The operation, e.g. ``"AND"`` or ``"data-MINUS"``.
    operands
        Source keys or ids. They are joined in the order given, so swapping
        the operands of a commutative operation yields a different key.

    Examples
    --------
    >>> destination_key("ev", "OR", ["ev_day1", "ev_day2"])
    'ev_bitop_OR_ev_day1-ev_day2'
    >>> destination_key("ev", data_kind("AND"), [3, 1])
    'ev_bitop_data-AND_3-1'

    """
    return "_".join(
        (namespace, BIT_OPERATION_PREFIX, kind, "-".join(map(str, operands)))
    )
