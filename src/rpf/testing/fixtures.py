# topmark:header:start
#
#   project      : rpf
#   file         : fixtures.py
#   file_relpath : src/rpf/testing/fixtures.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Pytest fixtures for tests that use the filesystem harness.

Enable them from a ``conftest.py``:

```python
pytest_plugins = ["rpf.testing.fixtures"]
```
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from rpf.console import Console

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def scratch_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside a fresh, disposable working directory.

    Relative paths handed to the harness then land in a directory pytest removes
    on its own, so a test that fails before its `remove` leaves nothing behind.

    Args:
        tmp_path (Path): Pytest's per-test temporary directory.
        monkeypatch (pytest.MonkeyPatch): Used to change the working directory.

    Returns:
        Path: The scratch directory, which is also the current working directory.
    """
    area: Path = tmp_path / "scratch-area"
    area.mkdir()
    monkeypatch.chdir(area)
    return area


@pytest.fixture
def memory_console() -> Console:
    """Return a colorless console writing to in-memory streams.

    Read the output back with ``console.out.getvalue()`` / ``console.err.getvalue()``.
    """
    return Console(enable_color=False, out=io.StringIO(), err=io.StringIO())
