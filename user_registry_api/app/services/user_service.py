"""
Business logic for users.

The ``UserStore`` keeps user records in an in-memory list, in
insertion order, and provides create/read/update/delete operations.
Input forms are plain mappings (usually decoded JSON); they are
checked in a fixed order: key presence, then value type, then email
format.  Every failure is raised as a :mod:`core.errors` exception at
the point of detection and nothing is modified before validation has
finished.

The store is not thread safe.  One instance is created per
application and all requests are expected to reach it from a single
thread of control.
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..core.errors import ContractError, FormError, NotFoundError
from ..schemas.user import UserRead

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(
    r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}",
    re.IGNORECASE | re.ASCII,
)

FIELD_LABELS = {"name": "Name", "email": "Email"}


def is_valid_email(email: str) -> bool:
    """Return ``True`` if ``email`` looks like ``local@domain.tld``."""
    return EMAIL_PATTERN.fullmatch(email) is not None


class UserStore:
    """In-memory collection of user records."""

    def __init__(self, users: Optional[Iterable[UserRead]] = None) -> None:
        self._users: List[UserRead] = list(users or [])

    def __len__(self) -> int:
        return len(self._users)

    def compute_next_id(self) -> str:
        """Return the highest existing id plus one, as a string.

        Recomputed from the records on every call, so ids freed by a
        delete at the top of the range are handed out again.
        """
        max_id = max((int(user.id) for user in self._users), default=0)
        return str(max_id + 1)

    def get_index(self, user_id: str) -> int:
        """Return the position of the record with ``user_id``.

        Ids are compared as strings: ``"01"`` does not match ``"1"``.
        """
        for idx, user in enumerate(self._users):
            if user.id == user_id:
                return idx
        raise NotFoundError(user_id)

    def get_by_id(self, user_id: str) -> UserRead:
        return self._users[self.get_index(user_id)]

    def list_all(self) -> List[UserRead]:
        return list(self._users)

    def create(self, form: Mapping[str, Any]) -> UserRead:
        """Validate ``form``, store a new record and return it."""
        if "name" not in form:
            raise FormError("Missing name")
        if "email" not in form:
            raise FormError("Missing email")

        fields = self.preprocess(form)
        user = UserRead(id=self.compute_next_id(), **fields)
        self._users.append(user)
        logger.info("Created user %s", user.id)
        return user

    def update(self, user_id: str, form: Mapping[str, Any]) -> UserRead:
        """Merge the fields present in ``form`` into an existing record.

        When ``form`` has no email, the record's current email is what
        gets validated.
        """
        user = self.get_by_id(user_id)
        fields = self.preprocess(form, fallback_email=user.email)
        for key, value in fields.items():
            setattr(user, key, value)
        logger.info("Updated user %s (%s)", user_id, ", ".join(sorted(fields)) or "no fields")
        return user

    def delete(self, user_id: str) -> None:
        idx = self.get_index(user_id)
        del self._users[idx]
        logger.info("Deleted user %s", user_id)

    @staticmethod
    def preprocess(form: Mapping[str, Any], fallback_email: Optional[str] = None) -> Dict[str, str]:
        """Type-check, trim and validate the user fields of ``form``.

        Returns only the fields present in ``form``.  The email that is
        validated is the submitted one if any, otherwise
        ``fallback_email``.

        Raises
        ------
        FormError
            A field is not a string, the name is blank or the email is
            malformed.
        ContractError
            Neither ``form`` nor ``fallback_email`` provides an email.
        """
        fields: Dict[str, str] = {}
        for key, label in FIELD_LABELS.items():
            if key not in form:
                continue
            value = form[key]
            if not isinstance(value, str):
                raise FormError(f"{label} must be a string")
            fields[key] = value.strip()

        if "name" in fields and not fields["name"]:
            raise FormError("Missing name")

        email = fields.get("email", fallback_email)
        if email is None:
            raise ContractError("Either form.email or email must be provided")
        if not is_valid_email(email):
            raise FormError("Invalid email")
        return fields
