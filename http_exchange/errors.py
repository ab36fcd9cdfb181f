"""Error kinds raised while building request values.

Resolution failures are contract violations at the call site and are raised
synchronously; nothing here is retried. ``ERROR_CODES`` is the single source
of truth for the code attached to each failure mode in log records.
"""

from __future__ import annotations

import logging


logger = logging.getLogger(__name__)

ERROR_CODES = {
    "missing_value": "ARG_MISSING_VALUE",
    "missing_name": "ARG_NAME_UNAVAILABLE",
    "not_a_mapping": "ARG_NOT_A_MAPPING",
    "arity_mismatch": "ARG_COUNT_MISMATCH",
    "unexpanded_variable": "URI_VARIABLE_UNBOUND",
    "empty_optional": "OPTIONAL_EMPTY",
    "unresolved_parameter": "PARAM_UNRESOLVED",
    "not_convertible": "ARG_NOT_CONVERTIBLE",
}


class IllegalArgumentError(ValueError):
    """Raised when an argument violates the required/optional contract."""

    def __init__(self, message: str, *, code: str = ERROR_CODES["missing_value"]) -> None:
        super().__init__(message)
        self.code = code


class IllegalStateError(RuntimeError):
    """Raised when no configured resolver accepts a parameter."""

    def __init__(self, message: str, *, code: str = ERROR_CODES["unresolved_parameter"]) -> None:
        super().__init__(message)
        self.code = code


def illegal_argument(kind: str, message: str) -> IllegalArgumentError:
    """Build an ``IllegalArgumentError`` for ``kind`` and log it once."""
    code = ERROR_CODES[kind]
    logger.info("error_handler.handle", extra={"code": code, "detail": message})
    return IllegalArgumentError(message, code=code)


__all__ = [
    "ERROR_CODES",
    "IllegalArgumentError",
    "IllegalStateError",
    "illegal_argument",
]
