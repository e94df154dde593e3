# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Draft validation.
Pure function, no I/O. First failing rule per field wins.
"""

import re
from typing import Iterable, Optional

from user_directory.models.domain import FormDraft, UserId, UserRecord
from user_directory.repositories.roster_repository import same_id

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

NAME_REQUIRED = "Name is required"
EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Invalid email format"
EMAIL_EXISTS = "Email already exists"


def email_taken(email: str, roster: Iterable[UserRecord], exclude_id: Optional[UserId] = None) -> bool:
    probe = email.strip().lower()
    return any(
        u.email.lower() == probe
        for u in roster
        if exclude_id is None or not same_id(u.id, exclude_id)
    )


def validate(
    draft: FormDraft,
    roster: Iterable[UserRecord],
    exclude_id: Optional[UserId] = None,
) -> dict[str, str]:
    """
    Return field -> message for every failing field; empty when submittable.
    exclude_id lets an existing record keep its own email on update.
    """
    errors: dict[str, str] = {}

    if not draft.name.strip():
        errors["name"] = NAME_REQUIRED

    if not draft.email.strip():
        errors["email"] = EMAIL_REQUIRED
    elif not EMAIL_PATTERN.search(draft.email):
        errors["email"] = EMAIL_INVALID
    elif email_taken(draft.email, roster, exclude_id):
        errors["email"] = EMAIL_EXISTS

    return errors
