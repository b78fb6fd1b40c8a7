"""Exception hierarchy for upshot."""

from __future__ import annotations


class UpshotError(Exception):
    """Base exception for all upshot errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(UpshotError):
    """Configuration validation or resolution failed."""


class ArgumentNullError(UpshotError, ValueError):
    """A required argument was ``None``."""

    def __init__(self, param_name: str, *, hint: str | None = None) -> None:
        super().__init__(
            f"Value cannot be None (parameter {param_name!r})", hint=hint
        )
        self.param_name = param_name


class UnsupportedOperationError(UpshotError, TypeError):
    """An operator was applied that results deliberately do not support."""


# --- Actionable Hints ---

HINTS = {
    "invert": "Use `not result` or result.is_error() to negate a result.",
    "wrap": "Pass a Result, ResultValue, bool, exception or None.",
}


def materialize_error(error: BaseException | None) -> BaseException:
    """Return *error*, or a freshly synthesized generic error when it is ``None``.

    The synthesized instance is never stored on a result; every call that
    needs one builds its own.
    """
    if error is not None:
        return error

    from upshot.config import current_config

    return Exception(current_config().synthesized_error_message)
