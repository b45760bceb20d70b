"""Link Typer app factory."""

import sys

import typer

from termlink.api.base import handle_stage_result
from termlink.api.link.cmd_resolve import cmd_resolve
from termlink.api.link.cmd_scan import cmd_scan


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Detect and resolve terminal links",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="scan")
    def scan_cmd(
        path: str | None = typer.Argument(None, help="File to scan (reads stdin when omitted)"),
        platform: str | None = typer.Option(None, "--platform", "-p", help="Platform family: linux, mac or windows"),
        workspace: str | None = typer.Option(None, "--workspace", "-w", help="Workspace root for ./ and ../ paths"),
        validate: bool = typer.Option(True, "--validate/--no-validate", help="Check that local paths exist"),
    ) -> None:
        """Scan terminal output for links."""
        text = sys.stdin.read() if path is None else None
        handle_stage_result(cmd_scan)(path=path, text=text, platform=platform, workspace=workspace, validate=validate)

    @app.command(name="resolve")
    def resolve_cmd(
        link_text: str = typer.Argument(..., metavar="TEXT", help="Link text to resolve"),
        platform: str | None = typer.Option(None, "--platform", "-p", help="Platform family: linux, mac or windows"),
        workspace: str | None = typer.Option(None, "--workspace", "-w", help="Workspace root for ./ and ../ paths"),
    ) -> None:
        """Resolve a link to an existing file."""
        handle_stage_result(cmd_resolve)(link=link_text, platform=platform, workspace=workspace)

    return app
