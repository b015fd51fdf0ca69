"""storeverify CLI: register, verify and inspect stores from the shell."""

from __future__ import annotations

import logging
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from storeverify import __version__
from storeverify.config import ConfigError, load_settings
from storeverify.errors import StoreVerificationError
from storeverify.service import StoreVerificationService
from storeverify.storage import StateFileError

console = Console()

DEFAULT_STATE_FILE = ".storeverify/state.json"


def _fail(ctx: click.Context, err: StoreVerificationError) -> NoReturn:
    console.print(f"[red]\\[{err.code.name}][/] {err.message}")
    ctx.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--state-file", "-s", default=None, help="JSON state file (default: .storeverify/state.json)")
@click.option("--config", "-c", "config_path", default=None, help="YAML config file")
@click.option("--verbose", "-v", is_flag=True, help="Log every state change")
@click.pass_context
def main(ctx: click.Context, state_file: str | None, config_path: str | None, verbose: bool):
    """storeverify: admin-gated registry of stores.

    Anyone can register a store; only the current admin can mark a store
    verified or hand admin rights to someone else.
    """
    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        raise click.UsageError(str(e))

    settings.state_file = state_file or settings.state_file or DEFAULT_STATE_FILE

    logging.basicConfig(
        level="INFO" if verbose else settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )

    try:
        ctx.obj = StoreVerificationService.from_settings(settings)
    except (StateFileError, ValueError) as e:
        raise click.ClickException(str(e))


# ── Stores ───────────────────────────────────────────────────────────


@main.command()
@click.argument("name")
@click.argument("address")
@click.option("--as", "caller", required=True, help="Principal registering the store")
@click.pass_context
def register(ctx: click.Context, name: str, address: str, caller: str):
    """Register a new store owned by the --as principal."""
    service: StoreVerificationService = ctx.obj
    try:
        store_id = service.register_store(name, address, caller)
    except StoreVerificationError as e:
        _fail(ctx, e)
    except OSError as e:
        raise click.ClickException(f"Could not save state: {e}")
    console.print(f"  Registered store [cyan]{store_id}[/] ([yellow]unverified[/])")


@main.command()
@click.argument("store_id", type=int)
@click.option("--as", "caller", required=True, help="Principal requesting verification")
@click.pass_context
def verify(ctx: click.Context, store_id: int, caller: str):
    """Mark a store verified. Must be run as the current admin."""
    service: StoreVerificationService = ctx.obj
    try:
        service.verify_store(store_id, caller)
    except StoreVerificationError as e:
        _fail(ctx, e)
    except OSError as e:
        raise click.ClickException(f"Could not save state: {e}")
    console.print(f"  Store [cyan]{store_id}[/] is [green]verified[/]")


@main.command()
@click.argument("store_id", type=int)
@click.pass_context
def show(ctx: click.Context, store_id: int):
    """Show a store record."""
    service: StoreVerificationService = ctx.obj
    store = service.get_store(store_id)

    if store is None:
        console.print(f"[yellow]No store with id {store_id}.[/]")
        return

    table = Table(title=f"Store {store.id}", show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")
    table.add_row("Name", store.name)
    table.add_row("Address", store.address)
    table.add_row("Owner", store.owner)
    table.add_row("Verified", "[green]Y[/]" if store.verified else "[red]N[/]")
    console.print(table)


@main.command()
@click.argument("store_id", type=int)
@click.pass_context
def status(ctx: click.Context, store_id: int):
    """Print whether a store is verified. Fails for unknown stores."""
    service: StoreVerificationService = ctx.obj
    try:
        verified = service.is_store_verified(store_id)
    except StoreVerificationError as e:
        _fail(ctx, e)
    console.print("[green]verified[/]" if verified else "[yellow]unverified[/]")


# ── Admin ────────────────────────────────────────────────────────────


@main.command(name="set-admin")
@click.argument("new_admin")
@click.option("--as", "caller", required=True, help="Principal of the current admin")
@click.pass_context
def set_admin(ctx: click.Context, new_admin: str, caller: str):
    """Transfer admin rights to NEW_ADMIN."""
    service: StoreVerificationService = ctx.obj
    try:
        service.set_admin(new_admin, caller)
    except StoreVerificationError as e:
        _fail(ctx, e)
    except OSError as e:
        raise click.ClickException(f"Could not save state: {e}")
    console.print(f"  Admin is now [cyan]{new_admin}[/]")


@main.command()
@click.pass_context
def admin(ctx: click.Context):
    """Print the current admin principal."""
    service: StoreVerificationService = ctx.obj
    console.print(service.current_admin())


if __name__ == "__main__":
    main()
