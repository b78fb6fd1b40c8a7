"""upshot: success-or-error result values for Python.

Public API:
    - ResultValue: outcome carrying a value on success
    - Result: value-less outcome, optionally carrying several errors
    - try_call(), values(), partition(), all_ok(): bridges and batch helpers
    - config_scope(), resolve_config(): configuration
"""

from __future__ import annotations

import logging

from upshot.config import FrozenConfig, config_scope, resolve_config
from upshot.errors import (
    ArgumentNullError,
    ConfigurationError,
    UnsupportedOperationError,
    UpshotError,
    materialize_error,
)
from upshot.functions import all_ok, partition, try_call, values
from upshot.result import Result
from upshot.result_value import ResultValue

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("upshot")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("upshot").addHandler(logging.NullHandler())

__all__ = [
    "ArgumentNullError",
    "ConfigurationError",
    "FrozenConfig",
    "Result",
    "ResultValue",
    "UnsupportedOperationError",
    "UpshotError",
    "all_ok",
    "config_scope",
    "materialize_error",
    "partition",
    "resolve_config",
    "try_call",
    "values",
]
