from __future__ import annotations

import logging

import pytest

import upshot

pytestmark = pytest.mark.unit


@pytest.mark.smoke
def test_public_surface_is_importable() -> None:
    for name in upshot.__all__:
        assert getattr(upshot, name) is not None


def test_library_logger_is_silent_by_default() -> None:
    handlers = logging.getLogger("upshot").handlers

    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_version_is_a_string() -> None:
    assert isinstance(upshot.__version__, str)
