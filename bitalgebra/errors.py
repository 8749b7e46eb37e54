"""Exceptions raised by bitalgebra.

Errors raised by the store itself are never wrapped; they reach the caller
as the store raised them.
"""


class BitAlgebraError(Exception):
    """Base class for bitalgebra errors."""


class UnsupportedOperandError(BitAlgebraError, TypeError):
    """Raised when an operand is neither a bitset nor a list of ids."""

    def __init__(self, operation: str, operand: object) -> None:
        super().__init__(
            f"unsupported operand for {operation}: {type(operand).__name__!r}"
        )
        self.operation = operation
        self.operand = operand
