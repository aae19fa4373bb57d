"""Sequential runner for a batch of test pages."""

import logging
import sys
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

from page_test_runner.errors import NoTestsError
from page_test_runner.models.config import RunConfig
from page_test_runner.models.result import PageResult, RunResult
from page_test_runner.renderers.base import Renderer
from page_test_runner.test_page import TestPage

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Runner:
    """Runs test pages one after another on a single renderer."""

    renderer: Renderer
    config: RunConfig = field(default_factory=RunConfig)
    output: TextIO = field(default_factory=lambda: sys.stdout, repr=False)

    async def run(self, locators: Sequence[str]) -> RunResult:
        """Run every locator in order and aggregate the results.

        Pages never overlap: each page is closed before the next one opens.
        A failing page never stops the run.

        Args:
            locators: Test page locators, in the order to run them

        Returns:
            The results of every page, in run order

        Raises:
            NoTestsError: If no locators were given

        """
        if not locators:
            raise NoTestsError

        # TODO: pages could run concurrently in separate browser contexts.
        queue = deque(locators)
        results: list[PageResult] = []

        log.info("Running %d test page(s)...", len(queue))
        while queue:
            locator = queue.popleft()
            result = await self._run_one(locator)
            results.append(result)

        return RunResult(results=results)

    async def _run_one(self, locator: str) -> PageResult:
        result = await TestPage(locator, self.renderer, self.config).run()

        if result.report:
            print(result.report, file=self.output)

        log.info(
            "Test completed: page=%s status=%s duration=%.1fs",
            locator,
            result.status,
            result.duration,
        )
        return result
