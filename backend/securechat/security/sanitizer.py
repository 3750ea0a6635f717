"""
Input validation for user-supplied strings.

Rejects:
- Null bytes and control characters (tab/newline/CR allowed in message text)
- Path traversal in filenames
- Script/XSS payloads in usernames

Message content is validated but never rewritten: the stored text is exactly
what the sender submitted.
"""
import re
from typing import Optional

MAX_CONTENT_LENGTH = 5000


class InputSanitizer:
    """Validates and sanitizes user input."""

    NULL_BYTE_PATTERN = re.compile(r'\x00')
    CONTROL_CHAR_PATTERN = re.compile(r'[\x00-\x08\x0b-\x0c\x0e-\x1f\x7f]')  # Except \t, \n, \r
    LINE_BREAK_PATTERN = re.compile(r'[\t\n\r]')
    PATH_TRAVERSAL_PATTERN = re.compile(r'\.\.[/\\]')
    SCRIPT_PATTERN = re.compile(r'<script|javascript:|onerror|onclick|<iframe|<embed', re.IGNORECASE)
    USERNAME_PATTERN = re.compile(r'^[a-zA-Z0-9_\-]+$')

    @staticmethod
    def sanitize_string(value: str, max_length: Optional[int] = None, allow_newlines: bool = False) -> str:
        """
        Validate string input.

        Raises:
            ValueError: If input contains dangerous patterns
        """
        if not isinstance(value, str):
            raise ValueError("Input must be string")

        if InputSanitizer.NULL_BYTE_PATTERN.search(value):
            raise ValueError("Null bytes not allowed")

        if InputSanitizer.CONTROL_CHAR_PATTERN.search(value):
            raise ValueError("Control characters not allowed")

        if not allow_newlines and InputSanitizer.LINE_BREAK_PATTERN.search(value):
            raise ValueError("Line breaks not allowed")

        if max_length and len(value) > max_length:
            raise ValueError(f"Input exceeds max length of {max_length}")

        return value

    @staticmethod
    def sanitize_username(value: str) -> str:
        """Validate username format (alphanumeric + underscore/dash)."""
        value = value.strip()
        if len(value) < 3:
            raise ValueError("Username must be at least 3 characters")

        sanitized = InputSanitizer.sanitize_string(value, max_length=64)

        if InputSanitizer.SCRIPT_PATTERN.search(sanitized):
            raise ValueError("Script/XSS patterns not allowed")

        if not InputSanitizer.USERNAME_PATTERN.match(sanitized):
            raise ValueError("Username must contain only alphanumeric, dash, underscore")

        return sanitized

    @staticmethod
    def sanitize_content(value: str) -> str:
        """Validate message content (newlines allowed, text kept as-is)."""
        return InputSanitizer.sanitize_string(value, max_length=MAX_CONTENT_LENGTH, allow_newlines=True)

    @staticmethod
    def sanitize_filename(filename: str) -> str:
        """Prevent path traversal in filenames."""
        if not filename or len(filename) > 255:
            raise ValueError("Invalid filename length")

        if InputSanitizer.PATH_TRAVERSAL_PATTERN.search(filename):
            raise ValueError("Path traversal not allowed")

        # Drop any directory components
        filename = filename.replace('\\', '/').split('/')[-1]

        if '..' in filename:
            raise ValueError("Path traversal not allowed")

        # Allow alphanumeric, dot, dash, underscore, space, parentheses
        filename = re.sub(r'[^a-zA-Z0-9._\-() ]', '', filename)

        filename = re.sub(r'[ ]{2,}', ' ', filename)
        filename = re.sub(r'[.]{2,}', '.', filename)
        filename = filename.strip(' .')

        if not filename:
            raise ValueError("Filename becomes empty after sanitization")

        return filename
