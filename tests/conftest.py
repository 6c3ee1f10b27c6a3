# topmark:header:start
#
#   project      : rpf
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Pytest configuration for the rpf test suite.

Sets up verbose logging for test runs, keeps the developer's color and log-level
environment from leaking into assertions, and provides helpers for the two ways
process termination is tested:

- in-process, with ``os._exit`` replaced by an exception (`no_exit`);
- out-of-process, by running a snippet in a fresh interpreter (`run_python`).
"""

from __future__ import annotations

import os
import subprocess
import sys
from typing import TYPE_CHECKING, NoReturn

import pytest

from rpf.config import logging

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

pytest_plugins = ["rpf.testing.fixtures"]

_ENV_KNOBS: tuple[str, ...] = ("FORCE_COLOR", "NO_COLOR", "RPF_LOG_LEVEL")


class ProcessExit(Exception):
    """Raised in place of ``os._exit`` so a test can observe the exit code."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure color and log-level knobs from the developer's shell do not apply.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in _ENV_KNOBS:
        monkeypatch.delenv(name, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def no_exit(monkeypatch: pytest.MonkeyPatch) -> type[ProcessExit]:
    """Replace ``os._exit`` with a function raising `ProcessExit`.

    Returns:
        type[ProcessExit]: The exception class to pass to ``pytest.raises``.
    """

    def _fake_exit(code: int) -> NoReturn:
        raise ProcessExit(code)

    monkeypatch.setattr(os, "_exit", _fake_exit)
    return ProcessExit


@pytest.fixture
def run_python() -> Callable[..., subprocess.CompletedProcess[str]]:
    """Return a helper running a Python snippet in a fresh interpreter.

    The child gets the current environment minus the color and log-level knobs,
    plus any ``env`` overrides passed to the helper.
    """

    def _run(
        code: str, *, env: Mapping[str, str] | None = None
    ) -> subprocess.CompletedProcess[str]:
        child_env: dict[str, str] = {
            k: v for k, v in os.environ.items() if k not in _ENV_KNOBS
        }
        child_env.update(env or {})
        return subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            env=child_env,
            check=False,
            timeout=60,
        )

    return _run
