"""Configuration of the key namespace."""

from __future__ import annotations

import os
from typing import Mapping

DEFAULT_NAMESPACE = "bitalgebra"
NAMESPACE_ENV_VAR = "BITALGEBRA_NAMESPACE"


def namespace_from_env(environ: Mapping[str, str] | None = None) -> str:
    """Return the namespace configured in `environ`.

    Falls back to :data:`DEFAULT_NAMESPACE` when the variable is unset or
    blank. `environ` defaults to :data:`os.environ`.

    """
    if environ is None:
        environ = os.environ
    namespace = environ.get(NAMESPACE_ENV_VAR, "").strip()
    return namespace or DEFAULT_NAMESPACE
