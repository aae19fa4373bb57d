"""Tests for the completion poller."""

import pytest

from page_test_runner.errors import AssertionFailureError, RunTimeoutError
from page_test_runner.poller import CompletionPoller, runner_query
from page_test_runner.testing.fakes import FakePageHandle


def make_poller(page: FakePageHandle, run_timeout: float = 0.1) -> CompletionPoller:
    """Create a poller with a short interval."""
    return CompletionPoller(page=page, run_timeout=run_timeout, poll_interval=0.01)


def test_runner_query_guards_missing_object() -> None:
    """Builds an expression that tolerates an absent runner object."""
    assert runner_query("G_testRunner", "isFinished") == (
        "() => window.G_testRunner && window.G_testRunner.isFinished"
        " && window.G_testRunner.isFinished()"
    )


@pytest.mark.parametrize(
    ("run_timeout", "poll_interval", "expected"),
    [
        (10.0, 0.2, 50),
        (1.0, 0.3, 4),
        (0.1, 0.2, 1),
    ],
)
def test_max_retries_rounds_up(
    run_timeout: float, poll_interval: float, expected: int
) -> None:
    """Retry budget is the run deadline divided by the interval, rounded up."""
    poller = CompletionPoller(
        page=FakePageHandle(), run_timeout=run_timeout, poll_interval=poll_interval
    )

    assert poller.max_retries == expected


class TestWait:
    """Tests for CompletionPoller.wait."""

    async def test_returns_passed_when_finished_immediately(self) -> None:
        """Returns after a single check when the tests already finished."""
        page = FakePageHandle(finished_after=0, passed=True)

        assert await make_poller(page).wait() == "passed"
        assert page.completion_checks == 1

    async def test_polls_until_finished(self) -> None:
        """Keeps checking until the framework reports finished."""
        page = FakePageHandle(finished_after=3, passed=True)

        assert await make_poller(page).wait() == "passed"
        assert page.completion_checks == 4

    async def test_raises_assertion_failure(self) -> None:
        """Raises when the framework finished with failures."""
        page = FakePageHandle(finished_after=1, passed=False)

        with pytest.raises(AssertionFailureError) as exc_info:
            await make_poller(page).wait()

        assert exc_info.value.reason == "assertion-failure"

    async def test_raises_timeout_when_never_finished(self) -> None:
        """Raises once the retry budget is exhausted."""
        page = FakePageHandle(finished_after=None)
        poller = make_poller(page, run_timeout=0.05)

        with pytest.raises(RunTimeoutError) as exc_info:
            await poller.wait()

        assert exc_info.value.reason == "timeout"
        assert page.completion_checks == poller.max_retries + 1

    async def test_missing_runner_object_times_out(self) -> None:
        """An absent runner object reads as not finished."""
        page = FakePageHandle(runner_present=False)

        with pytest.raises(RunTimeoutError):
            await make_poller(page, run_timeout=0.05).wait()

        assert not any("isSuccess" in e for e in page.evaluations)

    async def test_stops_quietly_when_page_closed(self) -> None:
        """Returns abandoned without querying a closed page."""
        page = FakePageHandle(finished_after=None)
        await page.close()

        assert await make_poller(page).wait() == "abandoned"
        assert page.evaluations == []

    async def test_uses_configured_runner_global(self) -> None:
        """Queries the configured global object name."""
        page = FakePageHandle(finished_after=0)
        poller = CompletionPoller(
            page=page, run_timeout=0.1, poll_interval=0.01, runner_global="myRunner"
        )

        await poller.wait()

        assert all("window.myRunner" in e for e in page.evaluations)
