"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/models/identity.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Defines the Identity data model for a person that is about to
                receive a directory account. Holds the raw and normalized
                name, the parsed first/last name and the derived login.
------------------------------------------------------------------------------
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Identity(BaseModel):
    """
    Canonical identity built from free-form name input.
    The login is derived and only authoritative once uniqueness against the
    directory has been resolved.
    """
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    # Name exactly as entered by the operator
    original_name: str = Field("", alias="originalName")

    # Whitespace/apostrophe/capitalization normalized name
    normalized_name: str = Field("", alias="normalizedName")

    first_name: str = Field("", alias="firstName")

    # May contain several words ("Квітка-Основ'яненко", "Де Ла Круз")
    last_name: str = Field("", alias="lastName")

    generated_login: Optional[str] = Field(None, alias="generatedLogin")

    is_valid: bool = Field(False, alias="isValid")
    validation_error: Optional[str] = Field(None, alias="validationError")

    @property
    def display_name(self) -> str:
        """Returns 'First Last' or the normalized name if parsing failed."""
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.normalized_name or self.original_name

    def mark_invalid(self, reason: str) -> None:
        """Flags the identity as unusable for account creation."""
        self.is_valid = False
        self.validation_error = reason

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Identity":
        """
        Loads a record in the structured name-normalization format:
        {"original", "normalized", "firstName", "lastName", "login"}.

        The record is taken as-is; callers are expected to re-check it
        through the pipeline before trusting it.
        """
        return cls(
            original_name=str(record.get("original") or ""),
            normalized_name=str(record.get("normalized") or ""),
            first_name=str(record.get("firstName") or ""),
            last_name=str(record.get("lastName") or ""),
            generated_login=record.get("login") or None,
            is_valid=bool(record.get("firstName") and record.get("lastName")),
        )
