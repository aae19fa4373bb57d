"""Loading of renderers from entry points."""

from importlib.metadata import entry_points
from typing import Any

from page_test_runner.renderers.manifest import RendererManifest

ENTRY_POINT_GROUP = "page_test_runner.renderers"


class RendererNotFoundError(Exception):
    """Raised when a renderer is not found."""


def load_renderer_manifest(key: str) -> RendererManifest[Any]:
    """Load a renderer manifest by key.

    Args:
        key: The renderer key as registered in pyproject.toml
             (e.g., "playwright")

    Returns:
        The renderer manifest instance

    Raises:
        RendererNotFoundError: If no renderer with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: RendererManifest[Any] = entry.load()
            return manifest

    available = [e.name for e in entries]
    raise RendererNotFoundError(
        f"Renderer '{key}' not found. Available renderers: {available}"
    )
