"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/login_generator.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Derives directory login names (initial(s) + transliterated
                last name) and resolves collisions against a caller supplied
                existence check.
------------------------------------------------------------------------------
"""

from typing import Callable, Optional

from adcore.logger import get_logger
from adcore.name_normalizer import NameNormalizer
from adcore.transliterator import Transliterator

logger = get_logger("login")

ExistsPredicate = Callable[[str], bool]


class LoginGenerator:
    """
    Builds logins of the form '<initials><lastname>' in lowercase Latin,
    e.g. 'Іван Петренко' -> 'ipetrenko', 'Анна-Марія Коваль' -> 'amkoval'.
    """

    MAX_LOGIN_LENGTH: int = 20
    DIGIT_PREFIX: str = "u"
    DEFAULT_MAX_ATTEMPTS: int = 1000

    def __init__(
        self,
        max_length: int = MAX_LOGIN_LENGTH,
        prefix: str = "",
        suffix: str = "",
        allow_compound_names: bool = True,
        compound_delimiter: str = "-",
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        """
        Args:
            max_length: Hard cap for the login length.
            prefix: Fixed text placed before every derived login.
            suffix: Fixed text placed after every derived login.
            allow_compound_names: Use one initial per segment of 'Анна-Марія'.
            compound_delimiter: Separator of compound first names.
            max_attempts: How many numeric suffixes resolve_unique() tries.
        """
        self.max_length = max(1, int(max_length))
        self.prefix = prefix or ""
        self.suffix = suffix or ""
        self.allow_compound_names = allow_compound_names
        self.compound_delimiter = compound_delimiter or "-"
        self.max_attempts = max(0, int(max_attempts))

    @classmethod
    def from_config(cls, config) -> "LoginGenerator":
        """Creates a generator from the 'NameProcessing' settings of an AppConfig."""
        return cls(
            max_length=config.get_max_login_length(),
            prefix=config.get_login_prefix(),
            suffix=config.get_login_suffix(),
            allow_compound_names=config.get_allow_compound_names(),
            compound_delimiter=config.get_compound_name_delimiter(),
            max_attempts=config.get_login_retry_limit(),
        )

    def initials(self, first_name: str) -> str:
        """First letter of the first name, or of each segment of a compound one."""
        if not first_name:
            return ""
        if self.allow_compound_names and self.compound_delimiter in first_name:
            segments = NameNormalizer.split_compound(first_name, self.compound_delimiter)
            return "".join(seg[0] for seg in segments)
        return first_name[0]

    def derive_login(self, first_name: str, last_name: str) -> str:
        """
        Derives the base login for a person.

        Args:
            first_name: First name, any spelling.
            last_name: Last name, may contain spaces, hyphens or apostrophes.

        Returns:
            The sanitized login candidate (not yet checked for uniqueness).
        """
        first = NameNormalizer.normalize(first_name)
        last = NameNormalizer.normalize(last_name)

        initials_latin = Transliterator.to_latin(self.initials(first))
        last_latin = Transliterator.to_latin(last)

        candidate = Transliterator.strip_accents(
            f"{self.prefix}{initials_latin}{last_latin}{self.suffix}"
        )
        login = self.sanitize(candidate)
        logger.debug(f"Derived login '{login}' from '{first} {last}'")
        return login

    def sanitize(self, candidate: str) -> str:
        """
        Reduces a candidate to a directory-safe login: letters and digits
        only, lowercase, capped at max_length, never starting with a digit.
        """
        cleaned = "".join(ch for ch in (candidate or "").lower() if ch.isalnum())
        cleaned = cleaned[:self.max_length]
        if cleaned and cleaned[0].isdigit():
            cleaned = (self.DIGIT_PREFIX + cleaned)[:self.max_length]
        return cleaned

    def _with_suffix(self, base_login: str, number: int) -> str:
        tail = str(number)
        return base_login[:max(0, self.max_length - len(tail))] + tail

    def resolve_unique(
        self,
        base_login: str,
        exists: ExistsPredicate,
        max_attempts: Optional[int] = None,
    ) -> Optional[str]:
        """
        Finds the first free login among base, base1, base2, ...

        Args:
            base_login: The derived login.
            exists: Directory lookup answering 'is this login taken'.
            max_attempts: Override for the number of numeric suffixes tried.

        Returns:
            A login the predicate reports as free, or None once the
            suffixes are exhausted.
        """
        limit = self.max_attempts if max_attempts is None else max(0, int(max_attempts))

        if not exists(base_login):
            return base_login

        for number in range(1, limit + 1):
            candidate = self._with_suffix(base_login, number)
            if not exists(candidate):
                logger.info(f"Login '{base_login}' is taken, using '{candidate}'")
                return candidate

        logger.error(f"No free login for '{base_login}' after {limit} suffixes")
        return None
