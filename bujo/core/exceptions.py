"""
Domain errors.

All three are terminal for the current operation: the enclosing unit
of work rolls back and the caller translates them into a response.
"""


class BujoError(Exception):
    """Base class for errors raised by the label data-access layer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(BujoError):
    """A referenced id does not exist."""


class ResourceAlreadyExistsError(BujoError):
    """A (name, owner) uniqueness rule would be violated."""


class UnauthorizedError(BujoError):
    """The requester may not perform the operation on the content."""

    def __init__(self, message: str, requester: str = None, content_id=None):
        super().__init__(message)
        self.requester = requester
        self.content_id = content_id
