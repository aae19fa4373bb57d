"""Errors raised while running test pages."""

from page_test_runner.models.result import FailureReason


class PageError(Exception):
    """A failure of a single test page, tagged with its reason."""

    reason: FailureReason = "error"


class NavigationError(PageError):
    """The page failed to load or raised an uncaught error."""

    reason: FailureReason = "navigation-error"


class ResourceError(PageError):
    """A sub-resource failed to load while the page was loading."""

    reason: FailureReason = "resource-error"


class LoadTimeoutError(PageError):
    """The page did not finish loading within the load deadline."""

    reason: FailureReason = "load-timeout"


class AssertionFailureError(PageError):
    """The in-page test framework finished and reported failure."""

    reason: FailureReason = "assertion-failure"


class RunTimeoutError(PageError):
    """The in-page test framework did not finish within the run deadline."""

    reason: FailureReason = "timeout"


class NoTestsError(Exception):
    """Raised when a run is started without any test pages."""

    def __init__(self) -> None:
        super().__init__("No tests to run")
