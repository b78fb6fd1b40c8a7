"""Behavior shared by both result facets.

Truthiness, the equality dispatch and the OR/AND/XOR combinators are
implemented once here against ``is_ok()``; ``Result`` and ``ResultValue``
only supply their discriminant, their attached errors and the parts of
equality that depend on a payload.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any, NoReturn

from upshot.config import current_config
from upshot.errors import HINTS, UnsupportedOperationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from upshot.result import Result


class ResultBase:
    """Common base of ``Result`` and ``ResultValue``."""

    __slots__ = ()

    def is_ok(self) -> bool:
        raise NotImplementedError

    def is_error(self) -> bool:
        """Return True when this is a failure."""
        return not self.is_ok()

    def _attached_errors(self) -> tuple[BaseException, ...]:
        """Errors actually stored on the result; nothing is synthesized."""
        raise NotImplementedError

    def _equals_result(self, other: ResultBase) -> bool:
        return self.is_ok() == other.is_ok()

    def _equals_value(self, other: object) -> Any:
        return NotImplemented

    # --- Truthiness ---

    def __bool__(self) -> bool:
        return self.is_ok()

    def __invert__(self) -> NoReturn:
        raise UnsupportedOperationError(
            f"Cannot apply ~ to a {type(self).__name__}", hint=HINTS["invert"]
        )

    # --- Equality ---

    def __eq__(self, other: object) -> Any:
        if isinstance(other, ResultBase):
            return self._equals_result(other)
        if isinstance(other, bool):
            return other == self.is_ok()
        # None is the absent error reference
        if other is None or isinstance(other, BaseException):
            return self.is_error()
        return self._equals_value(other)

    # --- Combinators ---

    def __or__(self, other: object) -> Any:
        return _combine(operator.or_, self, other)

    def __ror__(self, other: object) -> Any:
        return _combine(operator.or_, other, self)

    def __and__(self, other: object) -> Any:
        return _combine(operator.and_, self, other)

    def __rand__(self, other: object) -> Any:
        return _combine(operator.and_, other, self)

    def __xor__(self, other: object) -> Any:
        return _combine(operator.xor, self, other)

    def __rxor__(self, other: object) -> Any:
        return _combine(operator.xor, other, self)

    # --- Formatting ---

    def __repr__(self) -> str:
        return str(self)


def _flag(operand: object) -> bool | None:
    if isinstance(operand, ResultBase):
        return operand.is_ok()
    if isinstance(operand, bool):
        return operand
    return None


def _combine(
    op: Callable[[bool, bool], bool], left: object, right: object
) -> Result | bool | Any:
    """Apply a boolean operator to two operands read through their truthiness.

    Two results combine into a ``Result`` whose failure carries the attached
    errors of both operands in order. A ``bool`` on either side gives a
    ``bool``.
    """
    lhs = _flag(left)
    rhs = _flag(right)
    if lhs is None or rhs is None:
        return NotImplemented

    outcome = op(lhs, rhs)
    if not (isinstance(left, ResultBase) and isinstance(right, ResultBase)):
        return outcome

    from upshot.result import Result

    if outcome:
        return Result.ok()
    return Result.errors((*left._attached_errors(), *right._attached_errors()))


def type_name(cls: type) -> str:
    """Render *cls* for ``Ok<...>`` and ``[...]`` labels."""
    if current_config().qualified_type_names:
        return f"{cls.__module__}.{cls.__qualname__}"
    return cls.__name__


def describe_error(error: BaseException) -> str:
    return f"[{type_name(type(error))}]: {error}"
