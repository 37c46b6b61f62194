"""Add entry command."""

import click
from shoplist.cli.error_handling import handle_domain_error, warn_if_unsaved
from shoplist.domain.errors import ValidationError, blank_entry_pending


@click.command("add")
@click.pass_context
def add_entry(ctx):
    """Add a new blank row to the list.

    Only one blank row can be pending at a time; fill it in with 'edit'
    before adding another.

    Examples:
        shoplist add
        shoplist edit 3 name milk
    """
    list_store = ctx.obj["list_store"]

    entry = list_store.add_entry()
    if entry is None:
        handle_domain_error(ctx, ValidationError(blank_entry_pending()))
        return

    position = next(
        index for index, item in enumerate(list_store.display_order(), start=1) if item.id == entry.id
    )
    click.echo(f"Added blank row at position {position}")
    warn_if_unsaved(list_store)


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_entry)
