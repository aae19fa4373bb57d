"""Abstract base classes for headless renderers and their pages."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from page_test_runner.errors import NavigationError, ResourceError

type ErrorCallback[E: Exception] = Callable[[E], None]


class PageHandle(ABC):
    """A single renderer page owned by one test page run.

    Renderer-level failures are surfaced through two signals registered with
    ``listen``: page errors (navigation failures and uncaught in-page errors)
    and resource errors (a sub-resource failed to load). Either may fire at
    any time, including after ``open`` has returned.
    """

    @abstractmethod
    def listen(
        self,
        *,
        on_error: ErrorCallback[NavigationError],
        on_resource_error: ErrorCallback[ResourceError],
    ) -> None:
        """Register the page error and resource error callbacks."""

    @abstractmethod
    async def open(self, locator: str) -> None:
        """Navigate to the locator and return once the page has loaded.

        Implementations impose no deadline of their own; the caller does.

        Raises:
            NavigationError: If the page could not be loaded

        """

    @abstractmethod
    async def evaluate(self, expression: str) -> Any:
        """Evaluate a read-only JavaScript expression in the page context."""

    @abstractmethod
    async def close(self) -> None:
        """Release the page. Calling it again is a no-op."""

    @property
    @abstractmethod
    def closed(self) -> bool:
        """Whether the page has been released."""


class Renderer(ABC):
    """Factory for pages of a running headless renderer."""

    @abstractmethod
    async def new_page(self) -> PageHandle:
        """Create a fresh, isolated page."""
