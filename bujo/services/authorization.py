"""
Authorization service.

Decides whether a requester may operate on a piece of content.
The check either returns silently or raises UnauthorizedError; it
never answers with a boolean so callers cannot forget to act on it.
"""

import logging
from typing import Iterable, Optional

from bujo.config import settings
from bujo.core.constants import ContentType, Operation
from bujo.core.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


class AuthorizationService:
    """
    Ownership-based authorization.

    A requester may operate on content they own. Users listed as
    admins may operate on anything.

    Example:
        auth = AuthorizationService()
        auth.check_authorized_to_operate_on_content(
            "alice", "bob", ContentType.LABEL, Operation.DELETE, 7
        )  # raises UnauthorizedError
    """

    def __init__(self, admin_users: Optional[Iterable[str]] = None):
        if admin_users is None:
            admin_users = settings.admin_users
        self.admin_users = frozenset(admin_users)

    def is_admin(self, user: str) -> bool:
        return user in self.admin_users

    def check_authorized_to_operate_on_content(
        self,
        owner: str,
        requester: str,
        content_type: ContentType,
        operation: Operation,
        content_id: int,
    ) -> None:
        """
        Raise unless requester may perform operation on the content.

        Args:
            owner: Owner of the content
            requester: User attempting the operation
            content_type: Kind of content (label, task, ...)
            operation: Attempted operation
            content_id: Id of the content, for the error message

        Raises:
            UnauthorizedError: requester is neither the owner nor an admin
        """
        if requester == owner or self.is_admin(requester):
            return

        logger.info(
            "Denied %s on %s %s to %s (owner %s)",
            operation.value, content_type.value, content_id, requester, owner,
        )
        raise UnauthorizedError(
            f"User {requester} cannot {operation.value} "
            f"{content_type.value} {content_id} owned by {owner}",
            requester=requester,
            content_id=content_id,
        )
