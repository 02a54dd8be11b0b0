"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/name_normalizer.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Canonicalization of free-form Ukrainian personal names.
                Handles whitespace, apostrophe variants, hyphenated compound
                names and capitalization, and splits a normalized name into
                an Identity.
------------------------------------------------------------------------------
"""

import re
from typing import List

from adcore.logger import get_logger
from adcore.models.identity import Identity

logger = get_logger("names")

# Right single quotation mark, modifier letter apostrophe, modifier letter prime
APOSTROPHE_VARIANTS = "’ʼʹ"

UKRAINIAN_LETTERS = frozenset(
    "АаБбВвГгҐґДдЕеЄєЖжЗзИиІіЇїЙйКкЛлМмНнОоПпРрСсТтУуФфХхЦцЧчШшЩщЬьЮюЯя"
)
# Allowed in a name without counting as letters; any whitespace is allowed too
NAME_SEPARATORS = frozenset("'-’ʹ")


class NameNormalizer:
    """
    Normalizes personal names entered by operators or returned by external
    name-parsing services.
    """

    _APOSTROPHE_RE = re.compile(f"[{APOSTROPHE_VARIANTS}]")
    _HYPHEN_SPACING_RE = re.compile(r"\s*-\s*")

    @classmethod
    def normalize(cls, raw_name: str) -> str:
        """
        Returns the canonical spelling of a name.

        'ІВАН   петренко' -> 'Іван Петренко'
        'анна - марія'    -> 'Анна-Марія'
        """
        if not raw_name:
            return ""

        text = cls._APOSTROPHE_RE.sub("'", raw_name)
        text = " ".join(text.split())
        text = cls._HYPHEN_SPACING_RE.sub("-", text)

        words = [cls._capitalize_compound(word) for word in text.split(" ") if word]
        return " ".join(words)

    @staticmethod
    def _capitalize_compound(word: str, delimiter: str = "-") -> str:
        """Capitalizes every hyphen segment of a word independently."""
        segments = word.split(delimiter)
        return delimiter.join(seg[:1].upper() + seg[1:].lower() for seg in segments)

    @staticmethod
    def split_compound(name: str, delimiter: str = "-") -> List[str]:
        """
        Splits a compound name ('Анна-Марія') into its segments.
        Empty segments produced by stray delimiters are dropped.
        """
        if not name:
            return []
        return [seg.strip() for seg in name.split(delimiter) if seg.strip()]

    @staticmethod
    def is_valid_ukrainian_name(name: str) -> bool:
        """
        True if the name consists of Ukrainian letters only (plus spaces,
        apostrophes and hyphens) and contains at least one letter.
        """
        if not name:
            return False

        has_letter = False
        for ch in name:
            if ch.isspace() or ch in NAME_SEPARATORS:
                continue
            if ch == "ʼ":
                # Part of the alphabet, but not a letter on its own
                continue
            if ch not in UKRAINIAN_LETTERS:
                return False
            has_letter = True
        return has_letter

    @staticmethod
    def parse_identity(original: str, normalized: str) -> Identity:
        """
        Splits a normalized name into first name and (possibly multi-word)
        last name.

        Args:
            original: The raw input as entered.
            normalized: The output of normalize().

        Returns:
            An Identity; invalid with an explanation if the split failed.
        """
        identity = Identity(original_name=original or "", normalized_name=normalized or "")
        parts = (normalized or "").split()

        if len(parts) < 2:
            identity.mark_invalid("Invalid name format: could not split into first and last name")
            logger.debug(f"Rejected name '{original}': fewer than two parts")
            return identity

        first_name = parts[0]
        last_name = " ".join(parts[1:])
        if not first_name or not last_name:
            identity.mark_invalid("Invalid name format: first or last name is empty")
            return identity

        identity.first_name = first_name
        identity.last_name = last_name
        identity.is_valid = True
        identity.validation_error = None
        return identity
