"""Value-less result: success, or a failure carrying zero or more errors."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Final

from upshot._base import ResultBase, describe_error
from upshot.errors import HINTS, materialize_error

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True, eq=False, repr=False)
class Result(ResultBase):
    """The outcome of an operation that produces no value.

    ``Result()`` without a factory is a failure with no attached error;
    use ``Result.ok()`` for success.

    Example:
        def save(path) -> Result:
            if not path.parent.exists():
                return Result.error(FileNotFoundError(path.parent))
            ...
            return Result.ok()

        if not (outcome := save(path)):
            log(outcome.all_errors())
    """

    _ok: bool = False
    _errors: tuple[BaseException, ...] = ()

    def __post_init__(self) -> None:
        errors = tuple(self._errors)
        if self._ok and errors:
            raise ValueError("A successful Result cannot carry errors")
        object.__setattr__(self, "_errors", errors)

    # --- Construction ---

    @classmethod
    def ok(cls) -> Result:
        """Return the shared success instance."""
        return _OK

    @classmethod
    def error(cls, error: BaseException | None = None) -> Result:
        """Return a failure with one error, or none when *error* is None."""
        return cls(False, () if error is None else (error,))

    @classmethod
    def errors(cls, errors: Iterable[BaseException | None]) -> Result:
        """Return a failure carrying every error in order.

        Duplicates are kept; ``None`` entries are skipped.
        """
        return cls(False, tuple(e for e in errors if e is not None))

    @classmethod
    def from_bool(cls, flag: bool) -> Result:
        return _OK if flag else cls.error()

    @classmethod
    def wrap(cls, obj: object) -> Result:
        """Convert a result, bool, exception or None into a ``Result``.

        Raises:
            TypeError: If *obj* has none of those types.
        """
        from upshot.result_value import ResultValue

        if isinstance(obj, Result):
            return obj
        if isinstance(obj, ResultValue):
            return obj.to_result()
        if isinstance(obj, bool):
            return cls.from_bool(obj)
        if obj is None or isinstance(obj, BaseException):
            return cls.error(obj)
        raise TypeError(
            f"Cannot convert {type(obj).__name__} to Result. {HINTS['wrap']}"
        )

    # --- Inspection ---

    def is_ok(self) -> bool:
        """Return True when this is a success."""
        return self._ok

    def _attached_errors(self) -> tuple[BaseException, ...]:
        return self._errors

    def all_errors(self) -> tuple[BaseException, ...]:
        """Return the errors of a failure, or an empty tuple on success.

        A failure without attached errors reports one synthesized error.
        """
        if self._ok:
            return ()
        return self._errors or (materialize_error(None),)

    def try_get_error(self) -> tuple[bool, BaseException | None]:
        """Return ``(is_error, error)``.

        The error is never None for a failure. Several attached errors are
        reported together as a ``BaseExceptionGroup``.
        """
        if self._ok:
            return False, None
        return True, self._single_error()

    def _single_error(self) -> BaseException:
        if len(self._errors) > 1:
            return BaseExceptionGroup(
                f"{len(self._errors)} errors", list(self._errors)
            )
        return materialize_error(self._errors[0] if self._errors else None)

    # --- Extraction ---

    def raise_if_error(self) -> None:
        """Raise the error of a failure; do nothing on success."""
        if self._ok:
            return
        error = self._single_error()
        logger.debug("Raising %s from failed Result", type(error).__name__)
        raise error

    def match[R](
        self, on_ok: Callable[[], R], on_error: Callable[[BaseException], R]
    ) -> R:
        """Call ``on_ok()`` or ``on_error(error)`` and return its result."""
        if self._ok:
            return on_ok()
        return on_error(self._single_error())

    # --- Dunder protocol ---

    def __hash__(self) -> int:
        return 1 if self._ok else 0

    def __format__(self, format_spec: str) -> str:
        if self._ok:
            return "Ok()"
        described = ", ".join(describe_error(e) for e in self.all_errors())
        return f"Error({described})"

    def __str__(self) -> str:
        return format(self, "")


_OK: Final[Result] = Result(True, ())
