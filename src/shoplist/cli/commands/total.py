"""Total command."""

import click
from shoplist.utils.currency import format_currency


@click.command("total")
@click.pass_context
def show_total(ctx):
    """Show the list total (value times quantity, summed)."""
    list_store = ctx.obj["list_store"]
    click.echo(f"Total: {format_currency(list_store.total())}")


def register_commands(cli):
    """Register total command with main CLI."""
    cli.add_command(show_total)
