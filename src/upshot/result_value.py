"""Value-carrying result: ``Ok(value)`` or ``Error(exception)``."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Final, NoReturn

from upshot._base import ResultBase, describe_error, type_name
from upshot.errors import ArgumentNullError, materialize_error
from upshot.result import Result

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

logger = logging.getLogger(__name__)

_OK_SEED: Final = "upshot.ok"


@dataclasses.dataclass(frozen=True, slots=True, eq=False, repr=False)
class ResultValue[T](ResultBase):
    """The outcome of an operation that produces a ``T`` on success.

    A failure may be created without an error; readers that promise an
    error then receive a synthesized generic ``Exception``. ``ResultValue()``
    without a factory is such a failure.

    A success hashes its payload, so hashing ``ResultValue.ok([1])`` raises
    ``TypeError`` like hashing the list itself would.

    Example:
        def parse_port(text: str) -> ResultValue[int]:
            if not text.isdigit():
                return ResultValue.error(ValueError(f"not a port: {text!r}"))
            return ResultValue.ok(int(text))

        port = parse_port(raw)
        if port:
            bind(port.ok_value_or_raise())
    """

    _ok: bool = False
    _value: T | None = None
    _error: BaseException | None = None

    def __post_init__(self) -> None:
        if self._ok and self._error is not None:
            raise ValueError("A successful ResultValue cannot carry an error")
        if not self._ok and self._value is not None:
            raise ValueError("A failed ResultValue cannot carry a value")

    # --- Construction ---

    @classmethod
    def ok(cls, value: T) -> ResultValue[T]:
        """Return a success carrying *value*."""
        return cls(True, value, None)

    @classmethod
    def error(cls, error: BaseException | None = None) -> ResultValue[T]:
        """Return a failure carrying *error*, which may be None."""
        return cls(False, None, error)

    @classmethod
    def not_null(cls, value: T | None) -> ResultValue[T]:
        """Return ``ok(value)``, or a failure with ``ArgumentNullError`` for None."""
        if value is not None:
            return cls.ok(value)
        return cls.error(ArgumentNullError("value"))

    @classmethod
    def wrap(cls, obj: ResultValue[T] | T | BaseException | None) -> ResultValue[T]:
        """Convert a bare value or error into a result.

        Exceptions and None (the absent error) become failures; any other
        object becomes a success. Results are returned unchanged.
        """
        if isinstance(obj, ResultValue):
            return obj
        if obj is None or isinstance(obj, BaseException):
            return cls.error(obj)
        return cls.ok(obj)

    def to_result(self) -> Result:
        """Drop the value, keeping only success or the failure's error."""
        if self._ok:
            return Result.ok()
        return Result.error(self._error)

    # --- Inspection ---

    def is_ok(self) -> bool:
        """Return True when this is a success."""
        return self._ok

    def _attached_errors(self) -> tuple[BaseException, ...]:
        if self._ok or self._error is None:
            return ()
        return (self._error,)

    def try_get_value(self) -> tuple[bool, T | None]:
        """Return ``(is_ok, value)``; the value is None for a failure."""
        return self._ok, self._value

    def try_get_error(self) -> tuple[bool, BaseException | None]:
        """Return ``(is_error, error)``; the error is never None for a failure."""
        if self._ok:
            return False, None
        return True, materialize_error(self._error)

    def inspect_ok(self) -> tuple[bool, T | None, BaseException]:
        """Return ``(is_ok, value, error)`` with the error always populated.

        The error slot holds the attached error, or a synthesized one when
        none is attached, whichever branch this result is on.
        """
        return self._ok, self._value, materialize_error(self._error)

    def inspect_error(self) -> tuple[bool, BaseException, T | None]:
        """Return ``(is_error, error, value)``; dual of ``inspect_ok``."""
        return not self._ok, materialize_error(self._error), self._value

    # --- Extraction ---

    def ok_value_or_raise(self) -> T:
        """Return the value, or raise the failure's error."""
        if not self._ok:
            self._raise()
        return self._value  # type: ignore[return-value]

    def raise_if_error(self) -> None:
        """Raise the failure's error; do nothing on success."""
        if not self._ok:
            self._raise()

    def _raise(self) -> NoReturn:
        error = materialize_error(self._error)
        logger.debug("Raising %s from failed ResultValue", type(error).__name__)
        raise error

    def match[R](
        self, on_ok: Callable[[T], R], on_error: Callable[[BaseException], R]
    ) -> R:
        """Call exactly one of the callbacks and return what it returns."""
        if self._ok:
            return on_ok(self._value)  # type: ignore[arg-type]
        return on_error(materialize_error(self._error))

    # --- Dunder protocol ---

    def __iter__(self) -> Iterator[T]:
        if self._ok:
            yield self._value  # type: ignore[misc]

    def _equals_result(self, other: ResultBase) -> bool:
        if not isinstance(other, ResultValue):
            return self._ok == other.is_ok()
        if self._ok and other._ok:
            return bool(self._value == other._value)
        return self._ok == other._ok

    def _equals_value(self, other: object) -> bool:
        return self._ok and bool(self._value == other)

    def __hash__(self) -> int:
        if self._ok:
            return hash((_OK_SEED, self._value))
        return 0

    def __format__(self, format_spec: str) -> str:
        if self._ok:
            rendered = _render(self._value, format_spec)
            return f"Ok<{type_name(type(self._value))}>({rendered})"
        return f"Error({describe_error(materialize_error(self._error))})"

    def __str__(self) -> str:
        return format(self, "")


def _render(value: object, format_spec: str) -> str:
    # Payloads that reject the spec render as plain str().
    if format_spec:
        try:
            return format(value, format_spec)
        except (TypeError, ValueError):
            pass
    return str(value)
