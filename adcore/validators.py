"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/validators.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Syntactic validation of logins, names, passwords and
                directory identifiers. Every check returns a
                ValidationResult carrying its own error message, so
                concurrent callers never observe each other's errors.
------------------------------------------------------------------------------
"""

from typing import Iterable, List

from adcore.logger import get_logger
from adcore.models.identity import Identity
from adcore.models.results import ValidationResult
from adcore.name_normalizer import NameNormalizer
from adcore.utils.validation import (
    LOGIN_CHARS_RE,
    NAME_INVALID_CHAR_RE,
    NETBIOS_CHARS_RE,
    is_domain_name,
)

logger = get_logger("validation")


class DataValidator:
    """
    Stateless validators. Results are truthy on success:

        result = DataValidator.is_valid_login(login)
        if not result:
            show_error(result.error)
    """

    MAX_LOGIN_LENGTH = 20
    MAX_FULL_NAME_LENGTH = 64
    MAX_SERVER_NAME_LENGTH = 15  # NetBIOS
    DEFAULT_PASSWORD_MIN_LENGTH = 8

    @classmethod
    def is_valid_login(cls, login: str) -> ValidationResult:
        """Non-empty, at most 20 chars of [A-Za-z0-9_-], starting with a letter."""
        if not login:
            return ValidationResult.failure("Login cannot be empty")
        if len(login) > cls.MAX_LOGIN_LENGTH:
            return ValidationResult.failure(
                f"Login cannot be longer than {cls.MAX_LOGIN_LENGTH} characters")
        if not LOGIN_CHARS_RE.match(login):
            return ValidationResult.failure(
                "Login can only contain letters, numbers, underscores, and hyphens")
        if not login[0].isalpha():
            return ValidationResult.failure("Login must start with a letter")
        return ValidationResult.success()

    @classmethod
    def is_valid_full_name(cls, full_name: str) -> ValidationResult:
        """First and last name, letters plus space/apostrophe/hyphen only."""
        if not full_name or not full_name.strip():
            return ValidationResult.failure("Name cannot be empty")
        if len(full_name) > cls.MAX_FULL_NAME_LENGTH:
            return ValidationResult.failure(
                f"Name is too long (max {cls.MAX_FULL_NAME_LENGTH} characters)")
        if len(full_name.split()) < 2:
            return ValidationResult.failure("Full name must contain both first and last names")
        if NAME_INVALID_CHAR_RE.search(full_name):
            return ValidationResult.failure("Name contains invalid characters")
        return ValidationResult.success()

    @classmethod
    def is_valid_password(cls, password: str,
                          min_length: int = DEFAULT_PASSWORD_MIN_LENGTH) -> ValidationResult:
        """Minimum length plus at least one uppercase, lowercase and digit."""
        if not password:
            return ValidationResult.failure("Password cannot be empty")
        if len(password) < min_length:
            return ValidationResult.failure(
                f"Password must be at least {min_length} characters long")

        has_upper = any(c.isupper() for c in password)
        has_lower = any(c.islower() for c in password)
        has_digit = any(c.isdigit() for c in password)
        if not (has_upper and has_lower and has_digit):
            return ValidationResult.failure(
                "Password must contain at least one uppercase letter, "
                "one lowercase letter, and one digit")
        return ValidationResult.success()

    @classmethod
    def is_valid_server_name(cls, server_name: str) -> ValidationResult:
        """NetBIOS computer name rules."""
        if not server_name:
            return ValidationResult.failure("Server name cannot be empty")
        if len(server_name) > cls.MAX_SERVER_NAME_LENGTH:
            return ValidationResult.failure(
                f"Server name cannot be longer than {cls.MAX_SERVER_NAME_LENGTH} characters")
        if not NETBIOS_CHARS_RE.match(server_name):
            return ValidationResult.failure(
                "Server name can only contain letters, numbers, and hyphens")
        if server_name.startswith("-") or server_name.endswith("-"):
            return ValidationResult.failure("Server name cannot start or end with a hyphen")
        return ValidationResult.success()

    @staticmethod
    def is_valid_domain_name(domain_name: str) -> ValidationResult:
        if not domain_name:
            return ValidationResult.failure("Domain name cannot be empty")
        if not is_domain_name(domain_name):
            return ValidationResult.failure("Invalid domain name format")
        return ValidationResult.success()

    @staticmethod
    def is_valid_distinguished_name(dn: str) -> ValidationResult:
        """Shallow LDAP DN check: needs at least one '=' and one ','."""
        if not dn:
            return ValidationResult.failure("Distinguished name cannot be empty")
        if "=" not in dn or "," not in dn:
            return ValidationResult.failure(
                "Distinguished name must be in LDAP format "
                "(e.g., CN=User,OU=Users,DC=example,DC=com)")
        return ValidationResult.success()

    @staticmethod
    def is_valid_ukrainian_name(name: str) -> ValidationResult:
        if NameNormalizer.is_valid_ukrainian_name(name):
            return ValidationResult.success()
        return ValidationResult.failure(
            "Name must consist of Ukrainian letters, spaces, apostrophes and hyphens")

    @staticmethod
    def validate_batch(identities: Iterable[Identity]) -> ValidationResult:
        """
        Checks a list of parsed identities before accounts are created.

        Returns:
            Success if the list is non-empty and every identity is valid,
            otherwise a multi-line error naming each rejected entry.
        """
        identities = list(identities)
        if not identities:
            return ValidationResult.failure("No users to validate")

        invalid: List[str] = [
            f"{identity.original_name}: {identity.validation_error or 'invalid'}"
            for identity in identities if not identity.is_valid
        ]
        if invalid:
            logger.info(f"{len(invalid)} of {len(identities)} users failed validation")
            return ValidationResult.failure(
                "The following users are invalid:\n" + "\n".join(invalid))
        return ValidationResult.success()
