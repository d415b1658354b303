"""
Password Policy Validation

Requirements:
- Minimum 6 characters
- Maximum 72 bytes (bcrypt limit)
- Not whitespace only
- Not in common password blocklist
"""
from typing import Tuple, List

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72

COMMON_PASSWORDS = {
    "123456", "1234567", "12345678", "123456789", "1234567890", "654321",
    "password", "password1", "qwerty", "qwerty123", "abc123", "111111",
    "letmein", "welcome", "monkey", "dragon", "iloveyou", "admin123",
}


def validate_password(password: str) -> Tuple[bool, List[str]]:
    """
    Validate password against security policy.

    Args:
        password: The password to validate

    Returns:
        Tuple of (is_valid, list_of_error_messages)
    """
    errors = []

    if len(password) < MIN_PASSWORD_LENGTH:
        errors.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        errors.append(f"Password must not exceed {MAX_PASSWORD_BYTES} bytes (bcrypt limit)")

    if password and not password.strip():
        errors.append("Password must not be only whitespace")

    if password.lower() in COMMON_PASSWORDS:
        errors.append("Password is too common, please choose a stronger password")

    return len(errors) == 0, errors
