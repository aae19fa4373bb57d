"""Run configuration shared by the runner, test pages and discovery."""

from pydantic import Field

from page_test_runner.models.base import Model


class RunConfig(Model):
    """Deadlines and in-page contract settings for a test run."""

    load_timeout: float = Field(
        default=5.0, gt=0, description="Seconds allowed for a page to load"
    )
    run_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seconds allowed for the in-page tests to finish after load",
    )
    poll_interval: float = Field(
        default=0.2, gt=0, description="Seconds between completion checks"
    )
    runner_global: str = Field(
        default="G_testRunner",
        pattern=r"^[A-Za-z_$][A-Za-z0-9_$]*$",
        description="Name of the global test-runner object in the page",
    )
    test_suffix: str = Field(
        default="_test.html", min_length=1, description="Test file name suffix"
    )
