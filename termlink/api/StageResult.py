"""Result object shared by the termlinkc link commands."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

# Generator driving a command: yields (fraction done, progress message)
ProgressCallback = Callable[["StageResult"], Iterator[tuple[float, str]]]


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands to the CLI runner.

    ``announce`` is shown before any work runs. Iterating ``progress_callback``
    does the work and must leave ``result`` (one-line summary), ``output``
    (the schema dump printed to stdout) and ``success`` (exit status) filled in.
    """

    announce: str
    progress_callback: ProgressCallback
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

    def complete(self, message: str, output: dict, success: bool) -> None:
        """Record the final summary, output payload and outcome in one step."""
        self.result = message
        self.output = output
        self.success = success
