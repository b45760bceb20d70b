"""Base API utilities for termlink commands."""

import functools
import sys
from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

import click

from .display.CLIDisplay import CLIDisplay
from .StageResult import StageResult

F = TypeVar("F", bound=Callable[..., StageResult])


def _run_single_execution(func: F, args: tuple, kwargs: dict, display: Any, display_format: str) -> None:
    """Run command once and display result.

    Stage 1 (Announce) happens before any work starts.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)


def handle_stage_result(func: F) -> Callable[..., None]:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout as JSON or YAML)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()

        # Walk up context tree to find display_format set by the main callback
        display_format = "yaml"
        ctx = click.get_current_context(silent=True)
        while ctx:
            if isinstance(ctx.obj, dict) and ctx.obj.get("display_format") in ("json", "yaml"):
                display_format = ctx.obj["display_format"]
                break
            ctx = ctx.parent

        _run_single_execution(func, args, kwargs, display, display_format)

    return wrapper
