"""CLI entry point for running in-page test files in a headless browser."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from page_test_runner.discovery import find_test_files, to_locator
from page_test_runner.models.config import RunConfig
from page_test_runner.models.result import RunResult
from page_test_runner.renderers.loading import (
    RendererNotFoundError,
    load_renderer_manifest,
)
from page_test_runner.runner import Runner

STATUS_SYMBOLS = {
    "success": "✅",
    "failure": "❌",
    "error": "❗",
    "timeout": "⏱️",
    "load-timeout": "⏱️",
}


def log_results_summary(log: logging.Logger, run_result: RunResult) -> None:
    """Log a per-page summary followed by the overall outcome."""
    log.info("=" * 80)
    log.info("Test Results Summary:")
    log.info("=" * 80)

    for result in run_result.results:
        symbol = STATUS_SYMBOLS.get(result.reason or "", STATUS_SYMBOLS[result.status])
        log.info(
            "%s %s: %s (%.2fs)",
            symbol,
            result.locator,
            result.reason or result.status,
            result.duration,
        )
        if result.message:
            log.info("  Message: %s", result.message)

    if run_result.failed:
        log.error("Failed tests:\n%s", "\n".join(run_result.failed))
    else:
        log.info("All passed")


def format_output(run_result: RunResult) -> dict[str, Any]:
    """Format run results for JSON output."""
    results = [
        {
            "locator": result.locator,
            "status": result.status,
            "reason": result.reason,
            "duration": result.duration,
            "message": result.message,
        }
        for result in run_result.results
    ]
    return {
        "total": len(results),
        "passed": sum(1 for r in results if r["status"] == "success"),
        "failed": sum(1 for r in results if r["status"] == "failure"),
        "results": results,
    }


async def run(
    paths: Sequence[str],
    renderer_key: str = "playwright",
    renderer_config_json: str = "{}",
    config: RunConfig | None = None,
    json_output: Path | None = None,
) -> int:
    """Discover and run test pages and return the exit code."""
    log = logging.getLogger("page_test_runner")
    config = config or RunConfig()

    test_files = find_test_files(paths, config.test_suffix)
    if not test_files:
        log.error("No tests to run")
        return 1

    locators = [to_locator(path) for path in test_files]

    log.info("Loading renderer: %s", renderer_key)
    try:
        manifest = load_renderer_manifest(renderer_key)
    except RendererNotFoundError as e:
        log.error("%s", e)
        return 1

    renderer_config = manifest.config_cls(**json.loads(renderer_config_json))

    async with manifest.renderer_factory(renderer_config) as renderer:
        runner = Runner(renderer=renderer, config=config)
        run_result = await runner.run(locators)

    log_results_summary(log, run_result)

    if json_output is not None:
        json_output.write_text(json.dumps(format_output(run_result), indent=2))

    return 0 if run_result.success else 1


def main() -> None:
    """CLI entry point."""
    defaults = RunConfig()
    parser = argparse.ArgumentParser(
        description="Run *_test.html files in a headless browser"
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Test files or directories (default: the current directory)",
    )
    parser.add_argument(
        "--renderer",
        default="playwright",
        help="Renderer key (default: playwright)",
    )
    parser.add_argument(
        "--renderer-config",
        default="{}",
        help='JSON configuration for the renderer, e.g. {"browser": "firefox"}',
    )
    parser.add_argument(
        "--load-timeout",
        type=float,
        default=defaults.load_timeout,
        help="Seconds allowed for each page to load",
    )
    parser.add_argument(
        "--run-timeout",
        type=float,
        default=defaults.run_timeout,
        help="Seconds allowed for each page's tests to finish",
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=defaults.poll_interval,
        help="Seconds between completion checks",
    )
    parser.add_argument(
        "--runner-global",
        default=defaults.runner_global,
        help="Name of the global test-runner object in the page",
    )
    parser.add_argument(
        "--suffix",
        default=defaults.test_suffix,
        help="Test file name suffix",
    )
    parser.add_argument(
        "--json-output",
        type=Path,
        default=None,
        help="Write a JSON summary of the results to this file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = RunConfig(
        load_timeout=args.load_timeout,
        run_timeout=args.run_timeout,
        poll_interval=args.poll_interval,
        runner_global=args.runner_global,
        test_suffix=args.suffix,
    )

    exit_code = asyncio.run(
        run(
            paths=args.paths,
            renderer_key=args.renderer,
            renderer_config_json=args.renderer_config,
            config=config,
            json_output=args.json_output,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
