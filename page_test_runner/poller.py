"""Polling of the in-page test framework until it reports completion."""

import asyncio
import logging
import math
from dataclasses import dataclass
from typing import Literal

from page_test_runner.errors import AssertionFailureError, RunTimeoutError
from page_test_runner.renderers.base import PageHandle

log = logging.getLogger(__name__)


def runner_query(runner_global: str, method: str) -> str:
    """Build an expression calling a method on the global test-runner object.

    The expression yields a falsy value when the object or method is absent.
    """
    runner = f"window.{runner_global}"
    return f"() => {runner} && {runner}.{method} && {runner}.{method}()"


@dataclass(frozen=True, kw_only=True)
class CompletionPoller:
    """Waits for the in-page test framework to finish."""

    page: PageHandle
    run_timeout: float
    poll_interval: float = 0.2
    runner_global: str = "G_testRunner"

    @property
    def max_retries(self) -> int:
        """Number of re-checks allowed before giving up."""
        return math.ceil(self.run_timeout / self.poll_interval)

    def _query(self, method: str) -> str:
        return runner_query(self.runner_global, method)

    async def wait(self) -> Literal["passed", "abandoned"]:
        """Poll until the framework finishes.

        Returns:
            "passed" if the framework finished successfully, "abandoned" if
            the page was closed before it finished

        Raises:
            AssertionFailureError: If the framework finished with failures
            RunTimeoutError: If the retry budget ran out first

        """
        retries_left = self.max_retries

        while True:
            if self.page.closed:
                log.debug("Page closed while polling, giving up quietly")
                return "abandoned"

            if await self.page.evaluate(self._query("isFinished")):
                if await self.page.evaluate(self._query("isSuccess")):
                    return "passed"
                raise AssertionFailureError("Failure")

            if retries_left <= 0:
                raise RunTimeoutError("Timeout")

            retries_left -= 1
            await asyncio.sleep(self.poll_interval)
