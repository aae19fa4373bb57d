"""Fixtures for integration tests against a real headless browser."""

from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Protocol

import pytest
from playwright.async_api import Error as PlaywrightError

from page_test_runner.renderers.playwright import PlaywrightConfig, PlaywrightRenderer

RUNNER_PAGE = """<!DOCTYPE html>
<html>
<head>
<script>
  var done = false;
  window.G_testRunner = {{
    isFinished: function() {{ return done; }},
    isSuccess: function() {{ return {success}; }},
    getReport: function() {{ return {report}; }}
  }};
  {script}
</script>
</head>
<body></body>
</html>
"""


class WritePageFn(Protocol):
    """Protocol for test page creation function."""

    def __call__(
        self,
        name: str,
        *,
        success: bool = True,
        finishes: bool = True,
        report: str = "",
        extra_script: str = "",
    ) -> Path:
        """Write a test page and return its path."""


@pytest.fixture
async def renderer() -> AsyncGenerator[PlaywrightRenderer]:
    """Launch headless Chromium, skipping when it is not installed."""
    manager = PlaywrightRenderer.from_config(PlaywrightConfig())
    try:
        renderer = await manager.__aenter__()
    except PlaywrightError as e:
        pytest.skip(f"No Playwright browser available: {e.message}")
    yield renderer
    await manager.__aexit__(None, None, None)


@pytest.fixture
def write_page(tmp_path: Path) -> WritePageFn:
    """Return a function to write pages that fake the in-page test runner."""

    def _write(
        name: str,
        *,
        success: bool = True,
        finishes: bool = True,
        report: str = "",
        extra_script: str = "",
    ) -> Path:
        script = "setTimeout(function() { done = true; }, 50);" if finishes else ""
        path = tmp_path / name
        path.write_text(
            RUNNER_PAGE.format(
                success="true" if success else "false",
                report=repr(report),
                script=script + extra_script,
            )
        )
        return path

    return _write
