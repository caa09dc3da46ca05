"""
awesome-tree CLI

Usage:
    awesome-tree summary
    awesome-tree tree [--json]
    awesome-tree --timeout 2 --verbose tree
"""

import asyncio
import json
import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from .config import RemoteEndpoint
from .errors import AwesomeTreeError, DecodeError
from .models import Awesome, connect
from .snapshot import TreeSnapshot, snapshot

logger = logging.getLogger(__name__)

EXIT_TRANSPORT = 4
EXIT_DECODE = 3


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def _fail(error: AwesomeTreeError, output_json: bool = False) -> None:
    """Report an error and exit with the code for its kind."""
    logger.debug(f"Aborting on {error.code.name}: {error.context}")
    if output_json:
        click.echo(json.dumps({"error": error.to_dict()}, indent=2))
    else:
        console = _console()
        console.print(f"[red]Error: {escape(error.message)}[/red]")
        if error.suggestion:
            console.print(f"[dim]{escape(error.suggestion)}[/dim]")
    sys.exit(EXIT_DECODE if isinstance(error, DecodeError) else EXIT_TRANSPORT)


async def collect_summary(awesome: Awesome) -> list:
    """Build the per-screen report lines."""
    lines = []
    for output in await awesome.outputs():
        tag_count = await output.workspace_count()
        lines.append(f"There are {tag_count} tags on screen {output.index}")

        for workspace in await output.workspaces():
            for window in await workspace.windows():
                lines.append(f"Client {await window.window_class()} on tag {workspace.index}")
    return lines


def render_tree(snap: TreeSnapshot) -> Tree:
    root = Tree("[bold cyan]awesome[/bold cyan]")
    for output in snap.outputs:
        screen_node = root.add(
            f"[bold]screen {output.index}[/bold] [dim]({output.window_count} clients)[/dim]"
        )
        for ws in output.workspaces:
            tag_node = screen_node.add(f"tag {ws.index}: [green]{escape(ws.name)}[/green]")
            for win in ws.windows:
                tag_node.add(
                    f"[yellow]{escape(win.window_class)}[/yellow] {escape(win.name)} "
                    f"[dim]0x{win.x_window_id:x}[/dim]"
                )
    return root


@click.group()
@click.option('--timeout', type=float, default=None, help='D-Bus call timeout in seconds')
@click.option('--verbose', '-v', is_flag=True, help='Log every evaluated expression')
@click.pass_context
def cli(ctx: click.Context, timeout: Optional[float], verbose: bool):
    """Inspect awesome's screens, tags and clients over D-Bus."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    ctx.ensure_object(dict)
    try:
        ctx.obj["endpoint"] = RemoteEndpoint(timeout=timeout)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--timeout")


@cli.command()
@click.pass_context
def summary(ctx: click.Context):
    """
    Print tag counts per screen and the class of every client.
    """
    async def run() -> list:
        awesome = await connect(ctx.obj["endpoint"])
        return await collect_summary(awesome)

    try:
        lines = asyncio.run(run())
    except AwesomeTreeError as e:
        _fail(e)

    console = _console()
    for line in lines:
        console.print(escape(line))


@cli.command()
@click.option('--json', 'output_json', is_flag=True, help='Output JSON instead of a tree')
@click.pass_context
def tree(ctx: click.Context, output_json: bool):
    """
    Show the full screen/tag/client hierarchy.
    """
    async def run() -> TreeSnapshot:
        awesome = await connect(ctx.obj["endpoint"])
        return await snapshot(awesome)

    try:
        snap = asyncio.run(run())
    except AwesomeTreeError as e:
        _fail(e, output_json)

    if output_json:
        click.echo(json.dumps(snap.model_dump(), indent=2))
    else:
        _console().print(render_tree(snap))


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
