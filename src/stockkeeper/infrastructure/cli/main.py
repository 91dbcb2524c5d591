import click

from stockkeeper.infrastructure.bootstrap import (
    DEFAULT_FILE_NAME,
    FILE_ENV_VAR,
    configure_logging,
    inventory_repository,
)
from stockkeeper.infrastructure.cli.console import ClickConsole
from stockkeeper.infrastructure.cli.session import (
    Session,
    load_inventory,
    save_inventory,
)


@click.command()
@click.option(
    "--file",
    "file_path",
    envvar=FILE_ENV_VAR,
    type=click.Path(),
    default=DEFAULT_FILE_NAME,
    show_default=True,
    help="Inventory storage file.",
)
@click.option("--verbose", is_flag=True, help="Log debug details to stderr.")
def cli(file_path: str, verbose: bool) -> None:
    """Stock Keeper: interactive inventory tracker"""
    configure_logging(verbose)
    console = ClickConsole()
    repo = inventory_repository(file_path)

    inventory = load_inventory(repo, console)
    Session(inventory, console).run()
    save_inventory(repo, inventory, console)
