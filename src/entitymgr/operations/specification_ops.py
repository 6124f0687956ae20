"""Builders for user-creation payloads and their extension attributes."""

import os

from ..models.user import ObjectIdentity, PasswordProfile, UserSpecification
from ..utils.logging_utils import get_logger

# Embedded in place of a missing TENANT_NAME
UNSET_TENANT_NAME = "undefined"

ACCOUNT_TYPE_APPLICANT = "Applicant"
ACCOUNT_TYPE_ENTITY = "Entity"

logger = get_logger(__name__)


def _resolve_tenant_name(tenant_name: str | None) -> str:
    if tenant_name:
        return tenant_name
    # An empty TENANT_NAME is set, and is embedded as given
    env_value = os.getenv("TENANT_NAME")
    if env_value is not None:
        return env_value
    logger.warning(
        f"TENANT_NAME not set, using '{UNSET_TENANT_NAME}' in the principal name"
    )
    return UNSET_TENANT_NAME


def create_user_specification(
    display_name: str,
    password: str,
    email: str,
    tenant_name: str | None = None,
) -> UserSpecification:
    """Build the payload for a local account that signs in with an email address.

    The principal name is the email with its first ``@`` replaced by ``_``,
    followed by ``#EXT#@<tenant>.onmicrosoft.com``. The email itself is kept
    unmodified as the identity's ``issuerAssignedId``.

    Args:
        display_name: Display name of the user
        password: Initial password
        email: Sign-in email address
        tenant_name: Tenant name, defaults to TENANT_NAME from the environment

    Returns:
        UserSpecification: New specification without extension attributes
    """
    domain = f"{_resolve_tenant_name(tenant_name)}.onmicrosoft.com"
    return UserSpecification(
        account_enabled=True,
        display_name=display_name,
        user_principal_name=f"{email.replace('@', '_', 1)}#EXT#@{domain}",
        password_profile=PasswordProfile(
            password=password, force_change_password_next_sign_in=False
        ),
        identities=[
            ObjectIdentity(
                sign_in_type="emailAddress",
                issuer=domain,
                issuer_assigned_id=email,
            )
        ],
    )


def extension_attribute_name(extension_app_id: str, attribute: str) -> str:
    """Return the Graph field name of a directory extension attribute."""
    return f"extension_{extension_app_id.replace('-', '')}_{attribute}"


def add_extension_attribute_to_user(
    specification: UserSpecification,
    extension_app_id: str,
    attribute: str,
    value: str,
) -> UserSpecification:
    """Set a directory extension attribute on a specification.

    The specification is modified in place and returned so calls can be
    chained. Setting the same attribute again overwrites the old value.
    """
    specification.set_extension(extension_attribute_name(extension_app_id, attribute), value)
    return specification


def build_applicant_specification(
    name: str,
    password: str,
    email: str,
    extension_app_id: str,
    tenant_name: str | None = None,
) -> UserSpecification:
    """Build an Applicant account flagged for migration."""
    specification = create_user_specification(name, password, email, tenant_name)
    add_extension_attribute_to_user(
        specification, extension_app_id, "accountType", ACCOUNT_TYPE_APPLICANT
    )
    add_extension_attribute_to_user(
        specification, extension_app_id, "migrationRequired", "true"
    )
    return specification


def build_entity_specification(
    name: str,
    password: str,
    email: str,
    entity_name: str,
    entity_id: str,
    extension_app_id: str,
    tenant_name: str | None = None,
) -> UserSpecification:
    """Build an Entity account flagged for migration and tagged with its entity."""
    specification = create_user_specification(name, password, email, tenant_name)
    add_extension_attribute_to_user(
        specification, extension_app_id, "accountType", ACCOUNT_TYPE_ENTITY
    )
    add_extension_attribute_to_user(
        specification, extension_app_id, "migrationRequired", "true"
    )
    add_extension_attribute_to_user(
        specification, extension_app_id, "entityName", entity_name
    )
    add_extension_attribute_to_user(specification, extension_app_id, "entityId", entity_id)
    return specification
