"""Configuration schema and resolution for upshot.

Resolve once, freeze, then read:
- ``Settings`` is the pydantic schema (fields, defaults, validation)
- ``FrozenConfig`` is the immutable runtime payload
- ``config_scope`` sets an ambient config for a block of code

Precedence is defaults < ``UPSHOT_*`` environment variables < overrides.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
import logging
import os
import threading
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from upshot.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping
    from types import TracebackType

logger = logging.getLogger(__name__)

ENV_PREFIX = "UPSHOT_"

# --- Schema (pydantic wall) ---


class Settings(BaseModel):
    """Pydantic schema for configuration validation and defaults."""

    #: Message of the generic error synthesized for failures without one.
    synthesized_error_message: str = Field(default="Error", min_length=1)
    #: Render ``Ok<module.QualName>(...)`` instead of ``Ok<Name>(...)``.
    qualified_type_names: bool = Field(default=False)

    model_config = {"extra": "forbid"}

    @field_validator("synthesized_error_message", mode="before")
    @classmethod
    def normalize_message(cls, v: Any) -> Any:
        """Trim surrounding whitespace on the synthesized error message."""
        if isinstance(v, str):
            return v.strip()
        return v


# --- Immutable runtime payload ---


@dataclass(frozen=True)
class FrozenConfig:
    """Validated configuration read by results at runtime."""

    synthesized_error_message: str = "Error"
    qualified_type_names: bool = False


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[FrozenConfig | None] = contextvars.ContextVar(
    "upshot_ambient_config", default=None
)

_DOTENV_LOADED: bool = False
_DEFAULT: FrozenConfig | None = None
_DEFAULT_LOCK = threading.Lock()


class ConfigScope:
    """Context manager for temporarily setting the ambient configuration."""

    def __init__(self, cfg: FrozenConfig):
        self._token: contextvars.Token[FrozenConfig | None] | None = None
        self._cfg = cfg

    def __enter__(self) -> FrozenConfig:
        self._token = _AMBIENT.set(self._cfg)
        return self._cfg

    def __exit__(
        self,
        _: type[BaseException] | None,
        __: BaseException | None,
        ___: TracebackType | None,
    ) -> Literal[False]:
        if self._token is not None:
            _AMBIENT.reset(self._token)
        return False


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | FrozenConfig | None = None,
    **overrides: object,
) -> Generator[FrozenConfig]:
    """Run a block of code with a specific configuration.

    Args:
        cfg_or_overrides: Either a FrozenConfig to use directly, or a mapping
            of overrides to apply during resolution.
        **overrides: Additional override values (merged with cfg_or_overrides
            if it's a mapping).

    Yields:
        The FrozenConfig active in this scope.

    Example:
        with config_scope(synthesized_error_message="Unknown failure"):
            str(ResultValue.error())  # "Error([Exception]: Unknown failure)"
    """
    if isinstance(cfg_or_overrides, FrozenConfig):
        cfg = cfg_or_overrides
    else:
        combined_overrides = {**(cfg_or_overrides or {}), **overrides}
        cfg = resolve_config(overrides=combined_overrides)

    with ConfigScope(cfg):
        yield cfg


def _try_load_dotenv() -> None:
    """Load a ``.env`` file once per process."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    from dotenv import load_dotenv

    load_dotenv()
    _DOTENV_LOADED = True


def load_env() -> dict[str, Any]:
    """Read ``UPSHOT_*`` variables for fields known to ``Settings``.

    Values stay strings; pydantic coerces them during validation.
    """
    config: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        if field_name in Settings.model_fields:
            config[field_name] = value
    return config


# --- Public resolution API ---


def resolve_config(overrides: Mapping[str, Any] | None = None) -> FrozenConfig:
    """Resolve configuration from all sources into a FrozenConfig.

    Raises:
        ConfigurationError: If configuration validation fails.
    """
    _try_load_dotenv()

    merged: dict[str, Any] = {**load_env(), **(overrides or {})}

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        loc = ".".join(str(part) for part in err.get("loc", ()))
        msg = err.get("msg")
        if msg and msg.startswith("Value error, "):
            msg = msg[13:]
        raise ConfigurationError(
            f"Configuration validation failed: {loc}: {msg}",
            hint=f"Check {ENV_PREFIX}{loc.upper()} or the override passed for {loc!r}.",
        ) from e

    frozen = FrozenConfig(
        synthesized_error_message=settings.synthesized_error_message,
        qualified_type_names=settings.qualified_type_names,
    )
    logger.debug("Resolved config: %s", frozen)
    return frozen


def current_config() -> FrozenConfig:
    """Return the ambient config, else the process-wide default.

    The default is resolved on first use and cached until
    ``reset_config_cache()``. An invalid environment falls back to the
    built-in defaults with a warning, so rendering and raising results
    never fail on configuration.
    """
    ambient = _AMBIENT.get()
    if ambient is not None:
        return ambient

    global _DEFAULT
    if _DEFAULT is None:
        with _DEFAULT_LOCK:
            if _DEFAULT is None:
                try:
                    _DEFAULT = resolve_config()
                except ConfigurationError as e:
                    logger.warning("Using default config: %s", e)
                    _DEFAULT = FrozenConfig()
    return _DEFAULT


def reset_config_cache() -> None:
    """Forget the cached default so the next read resolves it again."""
    global _DEFAULT
    with _DEFAULT_LOCK:
        _DEFAULT = None
