"""Click-based entry point for the Entity Manager."""

import sys

import click

from .. import __version__
from ..core.config import get_env_config
from ..core.exceptions import AuthConfigError
from ..utils.display_utils import clear_screen, print_success
from ..utils.logging_utils import configure_logging
from ..utils.rich_utils import get_console, install_rich_tracebacks
from .commands import run_loop
from .session import Session


@click.command()
@click.version_option(__version__, prog_name="entitymgr")
def cli() -> None:
    """Entity Manager - interactive Microsoft Graph user management.

    Reads TENANT_ID, CLIENT_ID, CLIENT_SECRET, TENANT_NAME and
    EXTENSION_APP_ID from the environment or a .env file.
    """
    configure_logging()
    console = get_console()

    clear_screen(console)
    print_success(console, "Welcome to the Entity Manager")
    print_success(console, 'Type "help" for a list of commands')

    try:
        credentials = get_env_config()
    except AuthConfigError as e:
        click.secho(f"Authentication configuration error: {e}", fg="red", err=True)
        sys.exit(1)

    session = Session(credentials=credentials, console=console)
    session.authenticate()
    run_loop(session)
    sys.exit(0)


def main() -> None:
    """Main entry point for the CLI application."""
    # Enable pretty tracebacks
    install_rich_tracebacks()
    cli()


if __name__ == "__main__":
    main()
