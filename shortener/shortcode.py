"""Short code generation utilities."""

import secrets
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate random short codes for URLs."""

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9

    # Extra characters accepted in user supplied codes
    CUSTOM_EXTRA_CHARS = "-_"

    def __init__(self, default_length: int = 7):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
        """
        if default_length < 1:
            raise ValueError("default_length must be positive")
        self.default_length = default_length

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Every character is drawn independently and uniformly from the
        alphabet using the OS CSPRNG, so codes are not predictable from
        previously issued ones.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        length = length or self.default_length
        return ''.join(secrets.choice(self.BASE62_CHARS) for _ in range(length))

    @property
    def code_space(self) -> int:
        """Number of distinct codes of the default length."""
        return len(self.BASE62_CHARS) ** self.default_length

    @staticmethod
    def is_valid_format(code: str, allow_custom: bool = False) -> bool:
        """Check if code has valid format.

        Args:
            code: Code to validate
            allow_custom: Also accept '-' and '_' (user supplied codes)

        Returns:
            True if valid format
        """
        if not code:
            return False
        allowed = ShortCodeGenerator.BASE62_CHARS
        if allow_custom:
            allowed += ShortCodeGenerator.CUSTOM_EXTRA_CHARS
        return all(c in allowed for c in code)
