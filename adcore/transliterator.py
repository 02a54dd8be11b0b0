"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/transliterator.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Bidirectional Ukrainian Cyrillic <-> Latin transliteration.
                Forward mapping follows the national romanization table used
                for login names; the reverse mapping resolves multi-letter
                Latin sequences before single letters.
------------------------------------------------------------------------------
"""

import unicodedata
from types import MappingProxyType
from typing import Mapping, Optional

# Order matters for the reverse table: the first Cyrillic letter listed for a
# Latin value becomes its canonical reverse mapping (G -> Г, Y -> И).
_UKR_TO_LATIN = {
    "А": "A", "Б": "B", "В": "V", "Г": "G", "Ґ": "G", "Д": "D",
    "Е": "E", "Є": "Ye", "Ж": "Zh", "З": "Z", "И": "Y", "І": "I",
    "Ї": "Yi", "Й": "Y", "К": "K", "Л": "L", "М": "M", "Н": "N",
    "О": "O", "П": "P", "Р": "R", "С": "S", "Т": "T", "У": "U",
    "Ф": "F", "Х": "Kh", "Ц": "Ts", "Ч": "Ch", "Ш": "Sh", "Щ": "Shch",
    "Ь": "", "Ю": "Yu", "Я": "Ya",
    "а": "a", "б": "b", "в": "v", "г": "g", "ґ": "g", "д": "d",
    "е": "e", "є": "ye", "ж": "zh", "з": "z", "и": "y", "і": "i",
    "ї": "yi", "й": "y", "к": "k", "л": "l", "м": "m", "н": "n",
    "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "kh", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "shch",
    "ь": "", "ю": "yu", "я": "ya",
}

UKR_TO_LATIN: Mapping[str, str] = MappingProxyType(_UKR_TO_LATIN)


class Transliterator:
    """
    Stateless transliteration helpers.
    The reverse table is derived from the forward one on first use and is
    shared read-only afterwards.
    """

    _reverse: Optional[Mapping[str, str]] = None
    _max_sequence: int = 1

    @staticmethod
    def to_latin(text: str) -> str:
        """
        Transliterates Ukrainian Cyrillic to Latin.
        Characters without a mapping (spaces, punctuation, apostrophes,
        Latin letters) are passed through unchanged.
        """
        if not text:
            return ""
        return "".join(UKR_TO_LATIN.get(ch, ch) for ch in text)

    @staticmethod
    def strip_accents(text: str) -> str:
        """
        Removes combining marks from Latin text ('Müller' -> 'Muller').
        Must run after to_latin(): decomposing 'й' or 'ї' would lose the
        letter identity.
        """
        decomposed = unicodedata.normalize("NFD", text or "")
        return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")

    @classmethod
    def get_reverse_table(cls) -> Mapping[str, str]:
        """Lazy build of the Latin -> Cyrillic table."""
        if cls._reverse is None:
            reverse = {}
            for cyr, lat in _UKR_TO_LATIN.items():
                if not lat:
                    continue
                # Title case ('Shch') and all caps ('SHCH') spellings of capitals
                variants = [lat, lat.upper()] if cyr.isupper() else [lat]
                for variant in variants:
                    reverse.setdefault(variant, cyr)
            cls._max_sequence = max(len(k) for k in reverse)
            cls._reverse = MappingProxyType(reverse)
        return cls._reverse

    @classmethod
    def to_cyrillic(cls, text: str) -> str:
        """
        Transliterates Latin text back to Ukrainian Cyrillic.
        At every position the longest known Latin sequence wins, so 'Shch'
        becomes 'Щ' instead of 'Сх' + 'ч'. Lossy for letters that share a
        romanization (Г/Ґ, И/Й); unknown characters pass through.
        """
        if not text:
            return ""
        table = cls.get_reverse_table()
        result = []
        i = 0
        while i < len(text):
            for size in range(min(cls._max_sequence, len(text) - i), 0, -1):
                chunk = text[i:i + size]
                if chunk in table:
                    result.append(table[chunk])
                    i += size
                    break
            else:
                result.append(text[i])
                i += 1
        return "".join(result)
