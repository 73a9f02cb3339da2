# geohub/core/permissions.py
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geohub.core.security import TokenIdentity
    from geohub.resources.models import Resource


class Capability(str, Enum):
    CREATE_POST = "create_post"
    REPLY_TO_POST = "reply_to_post"
    POST_JOB = "post_job"
    CREATE_EVENT = "create_event"
    REGISTER_EVENT = "register_event"
    UPLOAD_RESOURCE = "upload_resource"
    SEND_MESSAGE = "send_message"


# every authenticated member gets the basic set
MEMBER_CAPABILITIES: frozenset[Capability] = frozenset(Capability)


def has_permission(identity: TokenIdentity | None, capability: Capability) -> bool:
    if identity is None:
        return False
    return capability in MEMBER_CAPABILITIES


def can_delete_resource(identity: TokenIdentity, resource: Resource) -> bool:
    # only the uploader
    return resource.uploaded_by_id == identity.user_id
