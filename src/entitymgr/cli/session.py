"""Session state shared by the command loop."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from rich.console import Console

from ..core.auth import get_access_token
from ..core.exceptions import EntityManagerError
from ..models.config import Credentials
from ..models.token import Token
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


class SessionState(Enum):
    """Lifecycle of an interactive session."""

    AWAITING_TOKEN = "awaiting_token"
    READY = "ready"
    EXITED = "exited"


@dataclass
class Session:
    """Everything a command needs: credentials, token, and terminal I/O.

    Built once at startup and handed to the command handler.
    """

    credentials: Credentials
    console: Console
    prompt: Callable[[str], str] = input
    token: Token | None = None
    state: SessionState = SessionState.AWAITING_TOKEN

    def authenticate(self) -> Token:
        """Fetch a token with the session credentials and enter READY."""
        self.token = get_access_token(self.credentials)
        if self.state is SessionState.AWAITING_TOKEN:
            self.state = SessionState.READY
        return self.token

    def current_token(self) -> Token:
        """Return the session token, fetching a new one once it has expired."""
        if self.token is None:
            return self.authenticate()
        if self.token.is_expired():
            logger.info("Access token expired, requesting a new one")
            return self.authenticate()
        return self.token

    def ask(self, question: str) -> str:
        """Ask the operator a question and return the raw answer."""
        return self.prompt(question)

    def close(self) -> None:
        self.state = SessionState.EXITED

    @property
    def is_ready(self) -> bool:
        return self.state is SessionState.READY

    def require_ready(self) -> None:
        if not self.is_ready:
            raise EntityManagerError(
                "Session is not ready", details=f"State: {self.state.value}"
            )
