"""Renderer manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from pydantic import BaseModel

from page_test_runner.renderers.base import Renderer


@dataclass(frozen=True, kw_only=True)
class RendererManifest[ConfigT: BaseModel]:
    """Manifest describing a renderer plugin.

    The manifest contains references to the configuration class and the
    renderer factory function for lazy loading of renderers based on their key.
    """

    config_cls: type[ConfigT]
    renderer_factory: Callable[[ConfigT], AbstractAsyncContextManager[Renderer]]
