"""Top-level package for bitalgebra."""

import importlib.metadata

from bitalgebra.api import *  # noqa: F401,F403
from bitalgebra.client import Client  # noqa: F401
from bitalgebra.core import BitOperation, BitOperationData  # noqa: F401
from bitalgebra.errors import UnsupportedOperandError  # noqa: F401
from bitalgebra.store import MemoryStore  # noqa: F401

__version__ = importlib.metadata.version(__name__)
