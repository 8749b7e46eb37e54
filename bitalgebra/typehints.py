"""Various type definitions used throughout bitalgebra."""

from typing import Callable, Sequence, Union

Id = int
Ids = Union[Id, Sequence[Id]]

Probe = Callable[[Id], bool]

