"""Command handlers for the interactive loop."""

from collections.abc import Callable

from ..core.exceptions import EntityManagerError
from ..models.user import UserSpecification
from ..operations.specification_ops import (
    build_applicant_specification,
    build_entity_specification,
)
from ..operations.user_ops import add_user, list_users
from ..utils.display_utils import print_error, print_json, print_payload, print_success
from ..utils.logging_utils import get_logger
from .session import Session

PROMPT = "ready> "

HELP_LINES = (
    "list - list all entities",
    "add-applicant - add an applicant",
    "add-entity - add an entity",
    "quit - quit the program",
)

logger = get_logger(__name__)


class CommandHandler:
    """Dispatches REPL lines to command handlers.

    Errors from the tool's own hierarchy (for example a missing
    EXTENSION_APP_ID) are reported and the loop continues. Network and
    decode failures are not caught.
    """

    def __init__(self, session: Session):
        self.session = session
        self._commands: dict[str, Callable[[], None]] = {
            "help": self.handle_help,
            "list": self.handle_list,
            "add-applicant": self.handle_add_applicant,
            "add-entity": self.handle_add_entity,
            "quit": self.handle_quit,
        }

    def dispatch(self, line: str) -> bool:
        """Run the command on one input line.

        Args:
            line: Raw input line; surrounding whitespace is ignored

        Returns:
            bool: False once the session has exited, True otherwise
        """
        command = line.strip()
        handler = self._commands.get(command)
        if handler is None:
            print_error(self.session.console, "Invalid command")
            return self.session.is_ready

        try:
            handler()
        except EntityManagerError as e:
            logger.error(f"Command {command} failed: {e}", extra={"command": command})
            print_error(self.session.console, str(e))

        return self.session.is_ready

    def _echo(self, command: str) -> None:
        print_success(self.session.console, command)

    def handle_help(self) -> None:
        for line in HELP_LINES:
            print_success(self.session.console, line)

    def handle_list(self) -> None:
        self._echo("list")
        users = list_users(self.session.current_token())
        print_json(self.session.console, users)

    def handle_add_applicant(self) -> None:
        """Prompt for an applicant, create it, and print payload and response."""
        self._echo("add-applicant")
        extension_app_id = self.session.credentials.require_extension_app_id()

        name = self.session.ask(" Name: ")
        email = self.session.ask(" Email: ")
        password = self.session.ask("Applicant Password: ")

        specification = build_applicant_specification(
            name,
            password,
            email,
            extension_app_id,
            tenant_name=self.session.credentials.tenant_name,
        )
        self._submit(specification)

    def handle_add_entity(self) -> None:
        """Prompt for an entity account, create it, and print payload and response."""
        self._echo("add-entity")
        extension_app_id = self.session.credentials.require_extension_app_id()

        name = self.session.ask(" Name: ")
        email = self.session.ask(" Email: ")
        entity_name = self.session.ask("Entity Name: ")
        entity_id = self.session.ask("Entity Id: ")
        password = self.session.ask("Password: ")

        specification = build_entity_specification(
            name,
            password,
            email,
            entity_name,
            entity_id,
            extension_app_id,
            tenant_name=self.session.credentials.tenant_name,
        )
        self._submit(specification)

    def _submit(self, specification: UserSpecification) -> None:
        print_payload(self.session.console, specification.to_dict())
        result = add_user(self.session.current_token(), specification)
        print_json(self.session.console, result)

    def handle_quit(self) -> None:
        self._echo("quit")
        self.session.close()


def run_loop(session: Session, handler: CommandHandler | None = None) -> None:
    """Read and dispatch lines until the session exits.

    End of input and Ctrl-C both end the session as ``quit`` would.
    """
    session.require_ready()
    handler = handler or CommandHandler(session)

    while session.is_ready:
        # Sub-prompts inside a command can hit end of input too
        try:
            handler.dispatch(session.ask(PROMPT))
        except EOFError:
            session.close()
            break
        except KeyboardInterrupt:
            print_error(session.console, "\nOperation interrupted by user.")
            session.close()
            break
