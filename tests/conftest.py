"""Global pytest configuration for SCRIVENER.

Tests get a default mark from the top-level directory they live in
(`tests/unit/` → ``unit``, and so on) unless they carry that mark already.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from scrivener.config import FSYNC_ENV, LINE_SEPARATOR_ENV

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKERS = ("unit", "contract", "integration")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the directory's default mark to every collected item."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        for name in DIRECTORY_MARKERS:
            if TESTS_ROOT / name in path.parents:
                if not any(marker.name == name for marker in item.iter_markers()):
                    item.add_marker(getattr(pytest.mark, name))


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear SCRIVENER_* variables so the runner's environment cannot leak in."""
    for name in (LINE_SEPARATOR_ENV, FSYNC_ENV):
        monkeypatch.delenv(name, raising=False)
