"""Environment-driven configuration for gtree."""

import os
from typing import Mapping, Optional

# Relative target paths are resolved against this directory when it is set
BASE_PATH_ENV_VAR = "GTREE_BASE_PATH"


def get_base_path(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the configured base path, or None when it is unset or empty.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Example:
        >>> get_base_path({"GTREE_BASE_PATH": "/workspace/project"})
        '/workspace/project'
        >>> get_base_path({"GTREE_BASE_PATH": ""}) is None
        True
    """
    if environ is None:
        environ = os.environ
    return environ.get(BASE_PATH_ENV_VAR) or None
