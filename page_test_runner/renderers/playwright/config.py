"""Configuration for the Playwright renderer."""

from collections.abc import Sequence
from typing import Literal

from pydantic import BaseModel, Field


class PlaywrightConfig(BaseModel):
    """Configuration for the Playwright renderer."""

    browser: Literal["chromium", "firefox", "webkit"] = "chromium"
    headless: bool = True
    launch_args: Sequence[str] = Field(default_factory=list)
