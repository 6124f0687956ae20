"""Entity Manager - interactive Microsoft Graph user management."""

__version__ = "1.0.0"

from .core.auth import get_access_token, request_token  # noqa: E402
from .core.config import get_env_config  # noqa: E402
from .core.exceptions import (  # noqa: E402
    AuthConfigError,
    ConfigurationError,
    EntityManagerError,
)
from .models import (  # noqa: E402
    Credentials,
    ObjectIdentity,
    PasswordProfile,
    Token,
    UserSpecification,
)
from .operations import (  # noqa: E402
    add_extension_attribute_to_user,
    add_user,
    build_applicant_specification,
    build_entity_specification,
    create_user_specification,
    extension_attribute_name,
    list_users,
)

__all__ = [
    # Core
    "get_access_token",
    "request_token",
    "get_env_config",
    # Exceptions
    "EntityManagerError",
    "AuthConfigError",
    "ConfigurationError",
    # Models
    "Credentials",
    "Token",
    "ObjectIdentity",
    "PasswordProfile",
    "UserSpecification",
    # Operations
    "list_users",
    "add_user",
    "create_user_specification",
    "add_extension_attribute_to_user",
    "extension_attribute_name",
    "build_applicant_specification",
    "build_entity_specification",
]
