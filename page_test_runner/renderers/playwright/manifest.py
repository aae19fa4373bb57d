"""Playwright renderer manifest."""

from page_test_runner.renderers.manifest import RendererManifest
from page_test_runner.renderers.playwright.config import PlaywrightConfig
from page_test_runner.renderers.playwright.renderer import PlaywrightRenderer

playwright_manifest = RendererManifest(
    config_cls=PlaywrightConfig,
    renderer_factory=PlaywrightRenderer.from_config,
)
