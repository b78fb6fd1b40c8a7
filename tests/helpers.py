"""Shared sample results and hypothesis strategies.

Keep this file tiny: one canonical set of results that every law is
checked against, plus strategies that generate more of them.
"""

from __future__ import annotations

from hypothesis import strategies as st

from upshot import Result, ResultValue

EXC = Exception()
EXCS = [EXC, EXC]

#: One of each construction path of the value-less facet.
RESULTS: list[Result] = [
    Result(),
    Result.from_bool(True),
    Result.from_bool(False),
    Result.wrap(EXC),
    Result.ok(),
    Result.error(EXC),
    Result.errors(EXCS),
    Result.error(None),
]

#: One of each construction path of the value-carrying facet.
VALUE_RESULTS: list[ResultValue[int]] = [
    ResultValue(),
    ResultValue.ok(5),
    ResultValue.ok(0),
    ResultValue.error(EXC),
    ResultValue.error(None),
    ResultValue.wrap(7),
    ResultValue.wrap(EXC),
    ResultValue.not_null(None),
]

ALL_RESULTS: list[Result | ResultValue[int]] = [*RESULTS, *VALUE_RESULTS]


def ids(results: list) -> list[str]:
    return [
        f"{i}-{type(r).__name__}-{'ok' if r.is_ok() else 'error'}"
        for i, r in enumerate(results)
    ]


errors = st.one_of(
    st.none(),
    st.builds(ValueError, st.text(max_size=10)),
    st.builds(KeyError, st.integers()),
    st.just(EXC),
)

value_results = st.one_of(
    st.builds(ResultValue.ok, st.integers()),
    st.builds(ResultValue.error, errors),
    st.just(ResultValue()),
)

void_results = st.one_of(
    st.just(Result.ok()),
    st.builds(Result.error, errors),
    st.builds(Result.errors, st.lists(errors, max_size=3)),
    st.just(Result()),
)

any_results = st.one_of(value_results, void_results)
