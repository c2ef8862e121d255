"""Journalon CLI - journals kept in hashkeep."""

import json
import logging
import sys
from pathlib import Path

import click

from .adapters import FileIndexStore, HashkeepAdapter
from .config import Config, load_config
from .core.journal import Journal, format_entry_date, format_timestamp
from .errors import ConflictError, JournalonError
from .files import read_export, write_export
from .repository import JournalRepository


def get_repository(config: Config) -> JournalRepository:
    """Build a repository from config."""
    return JournalRepository(
        object_store=HashkeepAdapter.from_config(config),
        index=FileIndexStore(config.data_path),
    )


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _journal_summary(journal: Journal) -> dict:
    return {
        "id": journal.id,
        "title": journal.title,
        "entries": len(journal.entries),
        "created_at": format_timestamp(journal.created_at),
        "modified_at": format_timestamp(journal.modified_at),
    }


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option()
@click.pass_context
def main(ctx, debug: bool):
    """Journalon - journals kept in a remote content-addressed store."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )
    ctx.ensure_object(dict)
    if "repo" not in ctx.obj:
        ctx.obj["repo"] = get_repository(load_config())


@main.command()
@click.argument("title")
@click.pass_obj
def new(obj, title: str):
    """Create a new journal."""
    try:
        journal = obj["repo"].create(title)
    except JournalonError as e:
        _fail(e)
    click.echo(f"Created journal {journal.id}")


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_journals(obj, as_json: bool):
    """List journals, most recently modified first."""
    try:
        journals = obj["repo"].list_all()
    except JournalonError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps([_journal_summary(j) for j in journals], indent=2))
        return

    if not journals:
        click.echo("No journals yet.")
        return

    for journal in journals:
        click.echo(
            f"{journal.id}  {journal.title} "
            f"({len(journal.entries)} entries, modified {format_entry_date(journal.modified_at)})"
        )


@main.command()
@click.argument("journal_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def show(obj, journal_id: str, as_json: bool):
    """Show a journal and its entries."""
    try:
        journal = obj["repo"].get(journal_id)
    except JournalonError as e:
        _fail(e)

    if journal is None:
        click.echo(f"Journal {journal_id} is not accessible from this device.", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(journal.to_exported().to_dict(), indent=2))
        return

    click.echo(f"# {journal.title}\n")
    if not journal.entries:
        click.echo("No entries yet.")
        return

    for entry in journal.entries:
        click.echo(f"[{entry.id}] {format_entry_date(entry.timestamp)}")
        click.echo(f"  {entry.content}\n")


@main.command()
@click.argument("journal_id")
@click.argument("title")
@click.pass_obj
def rename(obj, journal_id: str, title: str):
    """Change a journal's title."""
    try:
        obj["repo"].rename(journal_id, title)
    except JournalonError as e:
        _fail(e)
    click.echo(f"Renamed journal to {title!r}")


@main.command()
@click.argument("journal_id")
@click.argument("content")
@click.pass_obj
def add(obj, journal_id: str, content: str):
    """Add an entry to a journal."""
    try:
        entry = obj["repo"].add_entry(journal_id, content)
    except JournalonError as e:
        _fail(e)
    click.echo(f"Added entry {entry.id}")


@main.command()
@click.argument("journal_id")
@click.argument("entry_id")
@click.argument("content")
@click.pass_obj
def edit(obj, journal_id: str, entry_id: str, content: str):
    """Replace the content of an entry."""
    try:
        obj["repo"].update_entry(journal_id, entry_id, content)
    except JournalonError as e:
        _fail(e)
    click.echo(f"Updated entry {entry_id}")


@main.command("rm")
@click.argument("journal_id")
@click.argument("entry_id")
@click.pass_obj
def remove_entry(obj, journal_id: str, entry_id: str):
    """Delete an entry from a journal."""
    try:
        obj["repo"].delete_entry(journal_id, entry_id)
    except JournalonError as e:
        _fail(e)
    click.echo(f"Deleted entry {entry_id}")


@main.command()
@click.argument("journal_id")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_obj
def delete(obj, journal_id: str, yes: bool):
    """Forget a journal on this device. The remote copy stays in hashkeep."""
    if not yes and not click.confirm(
        f"Forget journal {journal_id}? You will lose access unless you exported it."
    ):
        return
    try:
        obj["repo"].delete(journal_id)
    except JournalonError as e:
        _fail(e)
    click.echo(f"Deleted journal {journal_id}")


@main.command()
@click.argument("journal_id")
@click.option("--output", "-o", "output_dir", default=".", help="Directory to write to")
@click.pass_obj
def export(obj, journal_id: str, output_dir: str):
    """Export a journal to a JSON file (without its private key)."""
    repo = obj["repo"]
    try:
        journal = repo.get(journal_id)
        if journal is None:
            click.echo(f"Journal {journal_id} is not accessible from this device.", err=True)
            sys.exit(1)
        path = write_export(repo.export(journal), Path(output_dir))
    except JournalonError as e:
        _fail(e)
    click.echo(f"Exported to {path}")


@main.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--overwrite", is_flag=True, help="Replace an existing journal with the same ID")
@click.pass_obj
def import_cmd(obj, path: str, overwrite: bool):
    """Import a journal from a JSON export file."""
    repo = obj["repo"]
    try:
        exported = read_export(path)
        try:
            journal = repo.import_journal(exported, overwrite=overwrite)
        except ConflictError:
            if not click.confirm(
                f"Journal {exported.title!r} already exists. Overwrite it?"
            ):
                click.echo("Import cancelled.")
                return
            journal = repo.import_journal(exported, overwrite=True)
    except JournalonError as e:
        _fail(e)

    if journal.id == exported.id:
        click.echo(f"Overwrote journal {journal.id}")
    else:
        click.echo(f"Imported as new journal {journal.id}")
