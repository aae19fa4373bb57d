"""Discover test pages on disk and turn them into loadable locators."""

import logging
from collections import deque
from collections.abc import Sequence
from pathlib import Path, PureWindowsPath
from urllib.parse import quote

log = logging.getLogger(__name__)


def find_test_files(
    paths: Sequence[str | Path],
    suffix: str = "_test.html",
    cwd: Path | None = None,
) -> Sequence[Path]:
    """Expand files and directories into the test files to run.

    Directories are walked recursively, skipping hidden entries, and their
    contents keep their sorted position relative to the other arguments.
    Only files whose name ends with the suffix are kept.

    Args:
        paths: Files and directories, relative ones resolved against cwd
        suffix: Test file name suffix
        cwd: Base directory (default: the current working directory); also
            searched when no paths are given

    Returns:
        Absolute paths of the matching test files, in discovery order

    """
    base = cwd if cwd is not None else Path.cwd()
    pending = deque(base / path for path in paths) if paths else deque([base])
    tests: list[Path] = []

    while pending:
        path = pending.popleft()
        if path.is_dir():
            children = sorted(
                child for child in path.iterdir() if not child.name.startswith(".")
            )
            pending.extendleft(reversed(children))
        elif path.name.endswith(suffix):
            tests.append(path)

    log.debug("Discovered %d test file(s)", len(tests))
    return tests


def to_locator(path: str | Path) -> str:
    """Convert an absolute file path into a URL the renderer can load.

    URLs are returned unchanged. POSIX paths become ``file:///path`` and
    Windows paths ``file:///C:/path`` with forward slashes.

    Raises:
        ValueError: If the path is relative

    """
    text = str(path)
    if "://" in text:
        return text
    if text.startswith("/"):
        return "file://" + quote(text)
    if not PureWindowsPath(text).is_absolute():
        raise ValueError(f"Cannot build a locator from relative path '{text}'")
    return "file:///" + quote(text.replace("\\", "/"), safe="/:")
