"""Playwright renderer module."""

from page_test_runner.renderers.playwright.config import PlaywrightConfig
from page_test_runner.renderers.playwright.manifest import playwright_manifest
from page_test_runner.renderers.playwright.renderer import (
    PlaywrightPageHandle,
    PlaywrightRenderer,
)

__all__ = [
    "PlaywrightConfig",
    "PlaywrightPageHandle",
    "PlaywrightRenderer",
    "playwright_manifest",
]
