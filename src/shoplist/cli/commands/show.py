"""List viewing command."""

import click
from shoplist.domain.entities import Entry
from shoplist.utils.currency import format_currency


def format_entry_row(position: int, entry: Entry) -> str:
    """Render one entry as a table row.

    Zero-valued entries are marked with "*" as still needing a price.
    """
    marker = "*" if entry.value == 0 else " "
    return (
        f"{marker}{position:<4} {entry.name:<30} {format_currency(entry.value):>16} "
        f"{entry.quantity:>6}"
    )


@click.command("show")
@click.pass_context
def show_list(ctx):
    """Show the list with items that have a price first."""
    list_store = ctx.obj["list_store"]

    click.echo(f"Total: {format_currency(list_store.total())}")

    entries = list_store.display_order()
    if not entries:
        click.echo("No entries added")
        return

    click.echo("-" * 60)
    click.echo(f" {'#':<4} {'Name':<30} {'Value':>16} {'Qty.':>6}")
    click.echo("-" * 60)
    for position, entry in enumerate(entries, start=1):
        click.echo(format_entry_row(position, entry))


def register_commands(cli):
    """Register show command with main CLI."""
    cli.add_command(show_list)
