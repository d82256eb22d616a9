"""Explorer CLI.

Runs the daemon and exposes the tree builder and content resolver from the
command line, printing the same JSON the HTTP endpoints return.
"""

import asyncio
import json
import sys
from pathlib import Path

import click

from explorer_library.content import ContentResolver
from explorer_library.events import LoggingEventReporter
from explorer_library.events import RecordingEventReporter
from explorer_library.models import RootSpec
from explorer_library.models import TraversalOptions
from explorer_library.tree import TreeBuilder

from .config import create_default_config
from .config import get_config_path
from .models.files import EntryResponse
from .models.files import FileContentResponse


def _echo_json(data: object) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@click.group()
def cli():
    """Explorer - read-only view of local directory trees."""
    pass


@cli.command()
@click.option("--host", default=None, help="Listen address (default: from config)")
@click.option("--port", type=int, default=None, help="Listen port (default: from config)")
def serve(host: str | None, port: int | None):
    """Start the explorerd daemon."""
    from .__main__ import run

    try:
        run(host=host, port=port)
    except KeyboardInterrupt:
        sys.exit(0)


@cli.command()
@click.argument("path", type=click.Path(file_okay=False))
@click.option("--label", default=None, help="Name for the root entry (default: 0)")
@click.option("--ignore", "ignore", multiple=True, help="Bare name to hide at every depth (repeatable)")
@click.option("--no-ids", is_flag=True, help="Leave out entry ids")
@click.option("--no-sort", is_flag=True, help="Keep directory order instead of folders-first by name")
@click.option("--verbose", "-v", is_flag=True, help="Report unreadable entries on stderr")
def tree(path: str, label: str | None, ignore: tuple[str, ...], no_ids: bool, no_sort: bool, verbose: bool):
    """Print the tree below PATH as JSON."""
    reporter = RecordingEventReporter(forward=LoggingEventReporter() if verbose else None)
    builder = TreeBuilder(
        options=TraversalOptions(include_ids=not no_ids, sort_entries=not no_sort),
        reporter=reporter,
    )
    spec = RootSpec(path=path, label=label, ignore_names=frozenset(ignore))

    root = asyncio.run(builder.build_root(spec))
    _echo_json(EntryResponse.from_entry(root).to_json())

    if reporter.events:
        click.echo(f"{len(reporter.events)} entries could not be read", err=True)


@cli.command()
@click.argument("file_path")
@click.option("--html", "escape", is_flag=True, help="HTML-escape the content")
def cat(file_path: str, escape: bool):
    """Print FILE_PATH's content as JSON."""
    resolver = ContentResolver(reporter=RecordingEventReporter())
    content = asyncio.run(resolver.read_file_content(file_path, escape=escape))

    if content is None:
        click.echo("Error: File not found", err=True)
        sys.exit(1)

    _echo_json(FileContentResponse.from_content(content).model_dump(mode="json"))


@cli.command("init-config")
@click.option("--path", "config_path", type=click.Path(dir_okay=False), default=None, help="Where to write")
def init_config(config_path: str | None):
    """Write the default configuration file."""
    target = Path(config_path) if config_path else get_config_path()
    existed = target.exists()
    create_default_config(target)

    if existed:
        click.echo(f"Config already exists: {target}")
    else:
        click.echo(f"Created config: {target}")


if __name__ == "__main__":
    cli()
