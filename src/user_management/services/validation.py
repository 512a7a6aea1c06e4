from __future__ import annotations

import re
from typing import Optional

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")

NAME_REQUIRED = "Name is required."
INVALID_EMAIL = "Invalid email format."


def is_valid_email(email: Optional[str]) -> bool:
    if not email or not email.strip():
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_user(name: Optional[str], email: Optional[str]) -> Optional[str]:
    """Return the first validation message for a user candidate, or ``None``."""
    if not name or not name.strip():
        return NAME_REQUIRED
    if not is_valid_email(email):
        return INVALID_EMAIL
    return None
