from __future__ import annotations
import os


# Defaults
_DEFAULT_PRINT_DEPTH = 1000
_DEFAULT_RECURSION_LIMIT = 20000


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= 0 else default


def get_print_depth() -> int:
    """Maximum number of list elements rendered before the ellipsis marker."""
    return int_from_env('JAM_PRINT_DEPTH', _DEFAULT_PRINT_DEPTH)


def get_recursion_limit() -> int:
    """Minimum Python recursion limit in effect while a program is evaluated."""
    return int_from_env('JAM_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)
