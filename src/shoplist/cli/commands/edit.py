"""Edit entry command."""

import click
from shoplist.cli.commands.show import format_entry_row
from shoplist.cli.error_handling import handle_domain_error, warn_if_unsaved
from shoplist.domain.errors import DomainError
from shoplist.domain.list_store import EDITABLE_FIELDS
from shoplist.utils.currency import format_currency


@click.command("edit")
@click.argument("position", type=int)
@click.argument("field", type=click.Choice(EDITABLE_FIELDS, case_sensitive=False))
@click.argument("raw_input", metavar="INPUT")
@click.pass_context
def edit_entry(ctx, position: int, field: str, raw_input: str):
    """Edit one field of the row shown at POSITION by 'show'.

    Values are typed as digits and read as cents, so "1250" and "R$ 12,50"
    both mean 12.50. Quantities must be whole numbers.

    Examples:
        shoplist edit 1 name milk
        shoplist edit 1 value 1250
        shoplist edit 1 quantity 2
    """
    list_store = ctx.obj["list_store"]

    try:
        entry = list_store.edit_field_at(position - 1, field.lower(), raw_input)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    # The row may move once it has a price
    new_position = next(
        index for index, item in enumerate(list_store.display_order(), start=1) if item.id == entry.id
    )
    click.echo(format_entry_row(new_position, entry))
    click.echo(f"Total: {format_currency(list_store.total())}")
    warn_if_unsaved(list_store)


def register_commands(cli):
    """Register edit command with main CLI."""
    cli.add_command(edit_entry)
