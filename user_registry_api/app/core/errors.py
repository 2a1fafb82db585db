"""
Error types raised by the user store.

Every error carries a ``kind`` tag.  The HTTP layer selects the
response status from the kind alone, so new error classes only need
to pick one of the existing kinds to be mapped correctly.
"""

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    FORM = "form"
    INTERNAL = "internal"


class UserStoreError(Exception):
    """Base class for errors raised by :class:`UserStore`."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(UserStoreError):
    """No record matches the requested id."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, user_id: str = "") -> None:
        super().__init__(f"User {user_id!r} not found")
        self.user_id = user_id


class FormError(UserStoreError):
    """Submitted input failed validation.

    ``message`` is meant for the client and is returned verbatim as the
    response body.
    """

    kind = ErrorKind.FORM


class ContractError(UserStoreError):
    """A caller broke the store's calling contract.

    Raised for programming errors rather than bad user input, hence the
    ``INTERNAL`` kind.
    """

    kind = ErrorKind.INTERNAL
