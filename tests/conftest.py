from io import StringIO
from unittest.mock import MagicMock, patch

import pytest

from entitymgr.cli.session import Session, SessionState
from entitymgr.models.config import Credentials
from entitymgr.models.token import Token
from entitymgr.utils.rich_utils import create_console

ENV_VARS = ("TENANT_ID", "CLIENT_ID", "CLIENT_SECRET", "TENANT_NAME", "EXTENSION_APP_ID")

APP_ID = "11111111-2222-3333-4444-555555555555"


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove Graph variables and run from a directory without a .env file."""
    for name in ENV_VARS:
        # setenv first so values loaded from a .env file are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def mock_response():
    """Create a mock response object for requests."""
    response = MagicMock()
    response.status_code = 200
    response.json = MagicMock(return_value={})
    return response


@pytest.fixture
def mock_requests(mock_response):
    """Patch requests in the HTTP helper every Graph call goes through."""
    with patch("entitymgr.utils.request_utils.requests") as mock:
        import requests

        mock.exceptions = requests.exceptions
        mock.request.return_value = mock_response
        yield mock


@pytest.fixture
def token():
    return Token(
        token_type="Bearer",
        access_token="test_token",
        expires_in=3599,
        ext_expires_in=3599,
    )


@pytest.fixture
def credentials():
    return Credentials(
        tenant_id="tenant-id",
        client_id="client-id",
        client_secret="client-secret",
        tenant_name="contoso",
        extension_app_id=APP_ID,
    )


@pytest.fixture
def console():
    return create_console(file=StringIO(), width=200, color_system=None)


class ScriptedPrompt:
    """Answers prompts from a list and records the questions asked."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.questions = []

    def __call__(self, question):
        self.questions.append(question)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def make_session(credentials, console, token):
    """Build a READY session answering prompts from the given lines."""

    def factory(answers=(), creds=None):
        prompt = ScriptedPrompt(answers)
        session = Session(
            credentials=creds or credentials,
            console=console,
            prompt=prompt,
            token=token,
            state=SessionState.READY,
        )
        return session

    return factory
