"""Directory operations and payload builders."""

from entitymgr.operations.specification_ops import (
    add_extension_attribute_to_user,
    build_applicant_specification,
    build_entity_specification,
    create_user_specification,
    extension_attribute_name,
)
from entitymgr.operations.user_ops import add_user, list_users

__all__ = [
    "add_user",
    "list_users",
    "add_extension_attribute_to_user",
    "build_applicant_specification",
    "build_entity_specification",
    "create_user_specification",
    "extension_attribute_name",
]
