"""CLI display implementation using Rich library."""

import json
import sys
from typing import Any

import yaml
from rich.console import Console
from rich.json import JSON
from rich.syntax import Syntax


class CLIDisplay:
    """Status messages go to stderr, data output to stdout."""

    def __init__(self, stdout: Any = None, stderr: Any = None):
        self.console = Console(file=stdout or sys.stdout)
        self.stderr_console = Console(file=stderr or sys.stderr)

    def status(self, message: str) -> None:
        self.stderr_console.print(f"[blue]i[/blue] {message}")

    def success(self, message: str) -> None:
        self.stderr_console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, details: str = "") -> None:
        self.stderr_console.print(f"[red]✗[/red] {message}")
        if details:
            self.stderr_console.print(f"  [dim]{details}[/dim]")

    def info(self, message: str) -> None:
        self.stderr_console.print(message)

    def json_output(self, data: dict[str, Any], format: str = "json") -> None:
        """Print command output to stdout as YAML or JSON.

        Args:
            data: Data to output
            format: Output format - "yaml" or "json"
        """
        if format == "yaml":
            yaml_str = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)

            # Only use syntax highlighting on an interactive terminal
            if self.console.is_terminal:
                self.console.print(Syntax(yaml_str, "yaml", theme="monokai", line_numbers=False))
            else:
                self.console.print(yaml_str, end="", markup=False, highlight=False, soft_wrap=True)
            return

        self.console.print(JSON(json.dumps(data, indent=2, default=str)), soft_wrap=True)
