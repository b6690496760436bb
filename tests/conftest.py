# mimetable:header:start
#
#   project      : MimeTable
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Pytest configuration for the MimeTable test suite.

Sets up logging at TRACE level for the whole run and provides registry
fixtures. Tests that install a process-wide registry must request
`restore_default_registry` so later tests see the bundled table again.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from mimetable.config import logging
from mimetable.constants import LOG_LEVEL_ENV_VAR
from mimetable.registry.registry import MimeTypeRegistry, reset_registry

F = TypeVar("F", bound=Callable[..., object])


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", pytest.hookimpl(*args, **kwargs)(func))

    return _decorator


@pytest.fixture(autouse=True)
def silence_mimetable_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the log level is not forced via the environment during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the environment variable.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log everything (TRACE and up) while the suite runs.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture(scope="session")
def registry() -> MimeTypeRegistry:
    """A registry built from the bundled dataset, shared by the session."""
    return MimeTypeRegistry.bundled()


@pytest.fixture
def restore_default_registry() -> Iterator[None]:
    """Forget the process-wide registry after the test."""
    yield
    reset_registry()


def make_registry(text: str, **kwargs: Any) -> MimeTypeRegistry:
    """Build a registry from inline dataset text.

    Args:
        text (str): Dataset in ``mime.types`` format.
        **kwargs (Any): Forwarded to `MimeTypeRegistry.from_lines`.

    Returns:
        MimeTypeRegistry: The registry.
    """
    return MimeTypeRegistry.from_lines(text.splitlines(), **kwargs)
