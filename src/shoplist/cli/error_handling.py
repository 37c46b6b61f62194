"""CLI error handling helpers."""

import click

from shoplist.domain.errors import DomainError
from shoplist.domain.list_store import ListStore


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def warn_if_unsaved(list_store: ListStore) -> None:
    """Warn when the last write to the store failed."""
    if list_store.last_persist_error is not None:
        click.echo(
            f"Warning: changes could not be saved ({list_store.last_persist_error})",
            err=True,
        )
