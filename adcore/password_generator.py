"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/password_generator.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Policy driven password generation and policy checks.
                Builds the character set from the enabled categories, draws
                from a secure random source and rejects candidates missing a
                required category or containing trivially guessable runs.
------------------------------------------------------------------------------
"""

import string
from typing import List, Optional, Tuple

from adcore.logger import get_logger, log_generated_password
from adcore.models.policy import PasswordPolicy
from adcore.random_source import RandomSource, detect_random_source
from adcore.strength import PasswordStrengthScorer

logger = get_logger("password")

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()-_=+[]{}|;:,.<>?"

# Checked case-insensitively
WEAK_SEQUENCES = ("123", "abc", "password", "admin", "qwerty")

CATEGORY_LOWER = "lower"
CATEGORY_UPPER = "upper"
CATEGORY_DIGIT = "digit"
CATEGORY_SYMBOL = "symbol"


def char_category(ch: str) -> str:
    """Classifies a character; anything not lower/upper/digit is a symbol."""
    if ch.islower():
        return CATEGORY_LOWER
    if ch.isupper():
        return CATEGORY_UPPER
    if ch.isdigit():
        return CATEGORY_DIGIT
    return CATEGORY_SYMBOL


class PasswordPolicyEngine:
    """
    Generates and checks passwords against a PasswordPolicy.
    The random source is chosen once at construction; see
    adcore.random_source for the fallback behaviour.
    """

    DEFAULT_MAX_ATTEMPTS: int = 1000

    def __init__(self, random_source: Optional[RandomSource] = None,
                 max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> None:
        """
        Args:
            random_source: Explicit source (tests inject a seeded one).
            max_attempts: Cap of the rejection sampling loop in generate().
        """
        self.random_source: RandomSource = random_source or detect_random_source()
        self.max_attempts = max(1, int(max_attempts))

    @staticmethod
    def _category_pools(policy: PasswordPolicy) -> List[Tuple[str, str]]:
        """
        Enabled categories with their characters, exclusions removed.
        Pools may be empty if the exclusions consumed a whole category.
        """
        enabled = (
            (policy.include_lowercase, CATEGORY_LOWER, LOWERCASE),
            (policy.include_uppercase, CATEGORY_UPPER, UPPERCASE),
            (policy.include_numbers, CATEGORY_DIGIT, DIGITS),
            (policy.include_symbols, CATEGORY_SYMBOL, SYMBOLS),
        )
        return [
            (name, "".join(c for c in chars if c not in policy.exclude_chars))
            for flag, name, chars in enabled if flag
        ]

    @classmethod
    def required_pools(cls, policy: PasswordPolicy) -> List[Tuple[str, str]]:
        """Categories a password must cover when require_each_type is set."""
        if not policy.require_each_type:
            return []
        return [(name, pool) for name, pool in cls._category_pools(policy) if pool]

    @classmethod
    def build_character_set(cls, policy: PasswordPolicy) -> str:
        """
        Returns the characters a password for this policy is drawn from.
        Never empty: falls back to the lowercase alphabet (still honouring
        exclusions, unless they remove every letter).
        """
        charset = "".join(pool for _, pool in cls._category_pools(policy))
        if charset:
            return charset

        fallback = "".join(c for c in LOWERCASE if c not in policy.exclude_chars)
        if not fallback:
            logger.warning("Password policy excludes every usable character; ignoring exclusions")
            return LOWERCASE
        logger.warning("Password policy enables no usable category; using lowercase letters")
        return fallback

    @staticmethod
    def contains_weak_sequence(password: str) -> bool:
        lowered = (password or "").lower()
        return any(seq in lowered for seq in WEAK_SEQUENCES)

    @staticmethod
    def _covers(password: str, required: List[Tuple[str, str]]) -> bool:
        present = {char_category(c) for c in password}
        return all(name in present for name, _ in required)

    @classmethod
    def has_required_types(cls, password: str, policy: PasswordPolicy) -> bool:
        """True if every enabled (and not fully excluded) category occurs."""
        return cls._covers(password, cls.required_pools(policy))

    @classmethod
    def meets_policy(cls, password: str, policy: PasswordPolicy) -> bool:
        """
        Checks a generated or operator supplied password.

        Args:
            password: The password to check.
            policy: The policy to check against.

        Returns:
            True if length, exclusions, required categories and the weak
            sequence blacklist are all satisfied.
        """
        if password is None:
            return False
        if not policy.min_length <= len(password) <= policy.max_length:
            return False
        if any(c in policy.exclude_chars for c in password):
            return False
        if policy.require_each_type and not cls.has_required_types(password, policy):
            return False
        return not cls.contains_weak_sequence(password)

    def _draw(self, length: int, charset: str) -> str:
        rng = self.random_source
        return "".join(rng.choice(charset) for _ in range(length))

    def _construct(self, length: int, charset: str, required: List[Tuple[str, str]]) -> str:
        """One pick per required category, the rest from charset, shuffled."""
        rng = self.random_source
        picks = [rng.choice(pool) for _, pool in required][:length]
        picks += [rng.choice(charset) for _ in range(length - len(picks))]
        return "".join(rng.sample(picks, len(picks)))

    def _acceptable(self, candidate: str, required: List[Tuple[str, str]]) -> bool:
        return self._covers(candidate, required) and not self.contains_weak_sequence(candidate)

    def generate(self, policy: Optional[PasswordPolicy] = None) -> str:
        """
        Generates one password.

        Args:
            policy: The policy to follow; defaults to PasswordPolicy().

        Returns:
            The password. If rejection sampling hits max_attempts the
            password is assembled category by category instead.
        """
        policy = policy or PasswordPolicy()
        charset = self.build_character_set(policy)
        required = self.required_pools(policy)
        length = self.random_source.randint(policy.min_length, policy.max_length)

        password = ""
        for _ in range(self.max_attempts):
            password = self._draw(length, charset)
            if self._acceptable(password, required):
                break
        else:
            logger.warning(
                f"Rejection sampling exhausted after {self.max_attempts} attempts "
                f"(length={length}, categories={len(required)}); assembling password"
            )
            if length < len(required):
                logger.error(
                    f"Length {length} cannot hold {len(required)} required categories; "
                    "password will not meet the policy"
                )
            for _ in range(self.max_attempts):
                password = self._construct(length, charset, required)
                if not self.contains_weak_sequence(password):
                    break

        log_generated_password(password, PasswordStrengthScorer.score(password), self.random_source.name)
        return password

    def generate_batch(self, count: int, policy: Optional[PasswordPolicy] = None) -> List[str]:
        """Generates 'count' independent passwords."""
        return [self.generate(policy) for _ in range(max(0, count))]
