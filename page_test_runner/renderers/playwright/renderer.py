"""Playwright renderer implementation."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

from playwright.async_api import (
    Browser,
    BrowserContext,
    Page,
    Request,
    async_playwright,
)
from playwright.async_api import Error as PlaywrightError

from page_test_runner.errors import NavigationError, ResourceError
from page_test_runner.renderers.base import ErrorCallback, PageHandle, Renderer
from page_test_runner.renderers.playwright.config import PlaywrightConfig

log = logging.getLogger(__name__)


class PlaywrightPageHandle(PageHandle):
    """A page in its own browser context."""

    def __init__(self, context: BrowserContext, page: Page) -> None:
        self._context = context
        self._page = page
        self._closed = False

    def listen(
        self,
        *,
        on_error: ErrorCallback[NavigationError],
        on_resource_error: ErrorCallback[ResourceError],
    ) -> None:
        """Forward page errors and failed requests to the callbacks."""

        def _on_page_error(error: PlaywrightError) -> None:
            on_error(NavigationError(error.stack or error.message))

        def _on_request_failed(request: Request) -> None:
            on_resource_error(ResourceError(f"{request.url} {request.failure}"))

        self._page.on("pageerror", _on_page_error)
        self._page.on("requestfailed", _on_request_failed)

    async def open(self, locator: str) -> None:
        """Navigate and wait for the load event without a Playwright timeout."""
        try:
            await self._page.goto(locator, wait_until="load", timeout=0)
        except PlaywrightError as e:
            raise NavigationError(e.message) from e

    async def evaluate(self, expression: str) -> Any:
        """Evaluate the expression in the page's main frame."""
        return await self._page.evaluate(expression)

    async def close(self) -> None:
        """Close the page's browser context once."""
        if self._closed:
            return
        self._closed = True
        try:
            await self._context.close()
        except PlaywrightError as e:
            log.debug("Browser context already gone: %s", e.message)

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._closed


@dataclass(frozen=True, kw_only=True)
class PlaywrightRenderer(Renderer):
    """Renderer backed by a Playwright-launched browser."""

    config: PlaywrightConfig
    browser: Browser = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: PlaywrightConfig
    ) -> AsyncGenerator["PlaywrightRenderer", None]:
        """Create renderer with managed browser lifecycle."""
        async with async_playwright() as playwright:
            browser_type = getattr(playwright, config.browser)
            log.info(
                "Launching browser: browser=%s, headless=%s",
                config.browser,
                config.headless,
            )
            browser = await browser_type.launch(
                headless=config.headless, args=list(config.launch_args)
            )
            try:
                yield cls(config=config, browser=browser)
            finally:
                await browser.close()

    async def new_page(self) -> PlaywrightPageHandle:
        """Open a page in a fresh browser context."""
        context = await self.browser.new_context()
        page = await context.new_page()
        return PlaywrightPageHandle(context, page)
