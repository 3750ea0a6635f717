"""
Password strength validation.
Ensures users create secure passwords.
"""
import re
from typing import Tuple

MIN_LENGTH = 12


def validate_password_strength(password: str) -> Tuple[bool, str]:
    """
    Validate password strength.

    Requirements:
    - Minimum 12 characters
    - At least one uppercase letter
    - At least one lowercase letter
    - At least one digit
    - At least one special character (!@#$%^&*-+=_?.)

    Returns:
        Tuple of (is_valid, error_message)
    """
    if len(password) < MIN_LENGTH:
        return False, f"Password must be at least {MIN_LENGTH} characters long"

    if not re.search(r'[A-Z]', password):
        return False, "Password must contain at least one uppercase letter"

    if not re.search(r'[a-z]', password):
        return False, "Password must contain at least one lowercase letter"

    if not re.search(r'[0-9]', password):
        return False, "Password must contain at least one digit"

    if not re.search(r'[!@#$%^&*\-+=_?.]', password):
        return False, "Password must contain at least one special character (!@#$%^&*-+=_?.)"

    return True, ""
