from __future__ import annotations

import pytest

from upshot import config_scope
from upshot.errors import (
    ArgumentNullError,
    ConfigurationError,
    UnsupportedOperationError,
    UpshotError,
    materialize_error,
)

pytestmark = pytest.mark.unit


def test_subclass_hierarchy() -> None:
    """Library errors are catchable as UpshotError and as their builtin kin."""
    assert issubclass(ConfigurationError, UpshotError)
    assert issubclass(ArgumentNullError, UpshotError)
    assert issubclass(ArgumentNullError, ValueError)
    assert issubclass(UnsupportedOperationError, UpshotError)
    assert issubclass(UnsupportedOperationError, TypeError)


def test_hint_defaults_to_none() -> None:
    err = UpshotError("fail")

    assert str(err) == "fail"
    assert err.hint is None


def test_argument_null_error_names_parameter() -> None:
    err = ArgumentNullError("value", hint="pass something")

    assert str(err) == "Value cannot be None (parameter 'value')"
    assert err.param_name == "value"
    assert err.hint == "pass something"


def test_materialize_returns_attached_error_itself() -> None:
    err = ValueError("bad")

    assert materialize_error(err) is err


def test_materialize_synthesizes_generic_error() -> None:
    error = materialize_error(None)

    assert type(error) is Exception
    assert error.args == ("Error",)


def test_materialize_builds_a_new_error_each_time() -> None:
    assert materialize_error(None) is not materialize_error(None)


def test_materialize_uses_configured_message() -> None:
    with config_scope(synthesized_error_message="Unknown"):
        assert str(materialize_error(None)) == "Unknown"
