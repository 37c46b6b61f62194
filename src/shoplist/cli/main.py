"""Main CLI entry point."""

import click
from shoplist.database.factories import create_sqlite_store
from shoplist.domain.errors import StorageError
from shoplist.domain.list_store import DEFAULT_STORAGE_KEY, ListStore
from shoplist.utils.log_config import configure_logging

# Import and register all commands at module level
from shoplist.cli.commands import add, edit, show, total


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides SHOPLIST_DB_PATH environment variable)",
    envvar="SHOPLIST_DB_PATH",
)
@click.option(
    "--key",
    default=DEFAULT_STORAGE_KEY,
    show_default=True,
    help="Storage key the list is kept under",
    envvar="SHOPLIST_KEY",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug events to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, key: str, verbose: bool):
    """Shoplist - Shopping list with running total.

    Keep a list of items with a price and a quantity. The list is saved
    after every change and the total is always up to date.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)

    # Load the list only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            store = create_sqlite_store(database_path=db_path)
        except StorageError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        store.connect()
        ctx.call_on_close(store.disconnect)

        list_store = ListStore(store, key=key)
        list_store.load()
        ctx.obj["list_store"] = list_store


# Register all commands
show.register_commands(cli)
add.register_commands(cli)
edit.register_commands(cli)
total.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
