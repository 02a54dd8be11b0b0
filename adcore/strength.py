"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/strength.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Heuristic 0-100 password strength score shown to operators
                next to generated and manually entered passwords.
------------------------------------------------------------------------------
"""

from collections import Counter


class PasswordStrengthScorer:
    """
    Additive scoring: length and character diversity earn points, runs of
    the same character class and repeated characters cost points.
    """

    LENGTH_WEIGHT = 4
    LOWER_BONUS = 5
    UPPER_BONUS = 5
    DIGIT_BONUS = 5
    SYMBOL_BONUS = 10
    MIDDLE_BONUS = 2
    CONSECUTIVE_PENALTY = 2

    WEAK_BELOW = 40
    MEDIUM_BELOW = 70

    @classmethod
    def score(cls, password: str) -> int:
        """
        Calculates the strength of a password.

        Args:
            password: The password to rate.

        Returns:
            An integer between 0 and 100.
        """
        if not password:
            return 0

        strength = len(password) * cls.LENGTH_WEIGHT

        if any(c.islower() for c in password):
            strength += cls.LOWER_BONUS
        if any(c.isupper() for c in password):
            strength += cls.UPPER_BONUS
        if any(c.isdigit() for c in password):
            strength += cls.DIGIT_BONUS
        if any(not c.isalpha() and not c.isdigit() for c in password):
            strength += cls.SYMBOL_BONUS

        # Digits and symbols away from the edges
        for c in password[1:-1]:
            if not c.isalpha():
                strength += cls.MIDDLE_BONUS

        for prev, cur in zip(password, password[1:]):
            if prev.islower() and cur.islower():
                strength -= cls.CONSECUTIVE_PENALTY
            if prev.isupper() and cur.isupper():
                strength -= cls.CONSECUTIVE_PENALTY
            if prev.isdigit() and cur.isdigit():
                strength -= cls.CONSECUTIVE_PENALTY

        for occurrences in Counter(password).values():
            if occurrences > 1:
                strength -= occurrences - 1

        return max(0, min(100, strength))

    @classmethod
    def label(cls, score: int) -> str:
        """Maps a score to 'weak', 'medium' or 'strong'."""
        if score < cls.WEAK_BELOW:
            return "weak"
        if score < cls.MEDIUM_BELOW:
            return "medium"
        return "strong"
