"""Bridges between exception-raising code and results, and batch helpers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from upshot.result import Result
from upshot.result_value import ResultValue

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

logger = logging.getLogger(__name__)


def try_call[T](fn: Callable[..., T], *args: Any, **kwargs: Any) -> ResultValue[T]:
    """Call *fn* and capture its outcome.

    Returns ``ResultValue.ok(fn(*args, **kwargs))``, or a failure holding the
    raised ``Exception``. ``BaseException`` subclasses that are not
    ``Exception`` (``KeyboardInterrupt``, ``SystemExit``) propagate.

    Example:
        port = try_call(int, os.environ.get("PORT", ""))
    """
    try:
        return ResultValue.ok(fn(*args, **kwargs))
    except Exception as exc:
        logger.debug("Captured %s from %r", type(exc).__name__, fn)
        return ResultValue.error(exc)


def values[T](results: Iterable[ResultValue[T]]) -> Iterator[T]:
    """Lazily yield the value of every successful result, in order."""
    for result in results:
        yield from result


def partition[T](
    results: Iterable[ResultValue[T]],
) -> tuple[list[T], list[BaseException]]:
    """Split results into success values and failure errors.

    Failures without an attached error contribute a synthesized error.
    """
    oks: list[T] = []
    errors: list[BaseException] = []
    for result in results:
        is_error, error = result.try_get_error()
        if is_error:
            errors.append(error)  # type: ignore[arg-type]
        else:
            oks.extend(result)
    return oks, errors


def all_ok(results: Iterable[Result | ResultValue[Any]]) -> Result:
    """Fold results into one ``Result``.

    Success when every result succeeded (vacuously for no results);
    otherwise a failure carrying the attached errors of every failed
    result, in order.
    """
    failed = False
    errors: list[BaseException] = []
    for result in results:
        if result.is_ok():
            continue
        failed = True
        errors.extend(result._attached_errors())
    return Result.errors(errors) if failed else Result.ok()
