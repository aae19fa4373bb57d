"""Models for test page results."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

type FailureReason = Literal[
    "navigation-error",
    "resource-error",
    "load-timeout",
    "assertion-failure",
    "timeout",
    "error",
]


@dataclass(frozen=True, kw_only=True)
class PageResult:
    """Outcome of running a single test page."""

    __test__ = False

    locator: str
    status: Literal["success", "failure"]
    duration: float
    reason: FailureReason | None = None
    message: str | None = None
    report: str = ""

    @property
    def success(self) -> bool:
        """Whether the page passed."""
        return self.status == "success"


@dataclass(frozen=True, kw_only=True)
class RunResult:
    """Aggregate of a batch of test pages, in the order they were run."""

    results: Sequence[PageResult]

    @property
    def attempted(self) -> Sequence[str]:
        """Locators that were run."""
        return [result.locator for result in self.results]

    @property
    def failed(self) -> Sequence[str]:
        """Locators that failed, in run order."""
        return [result.locator for result in self.results if not result.success]

    @property
    def success(self) -> bool:
        """True when at least one page ran and none failed."""
        return bool(self.results) and not self.failed
