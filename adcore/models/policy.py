"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/models/policy.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Password policy model. Mirrors the 'password_policy' section
                of the application configuration and is read-only to the
                password engine.
------------------------------------------------------------------------------
"""

from typing import Any, FrozenSet

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PasswordPolicy(BaseModel):
    """
    Describes the acceptable shape of a generated password.
    Field names accept both snake_case and the camelCase keys used by the
    JSON configuration ('minLength', 'excludeChars', ...).
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    min_length: int = Field(12, alias="minLength")
    max_length: int = Field(16, alias="maxLength")
    include_uppercase: bool = Field(True, alias="includeUppercase")
    include_lowercase: bool = Field(True, alias="includeLowercase")
    include_numbers: bool = Field(True, alias="includeNumbers")
    include_symbols: bool = Field(True, alias="includeSymbols")

    # Look-alike characters are excluded by default
    exclude_chars: FrozenSet[str] = Field(frozenset("0O1lI"), alias="excludeChars")
    require_each_type: bool = Field(True, alias="requireEachType")

    @field_validator("exclude_chars", mode="before")
    @classmethod
    def split_exclude_chars(cls, v: Any) -> FrozenSet[str]:
        """Accepts a plain string ('0O1lI') or any iterable of characters."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            return frozenset(v)
        chars = set()
        for item in v:
            chars.update(str(item))
        return frozenset(chars)

    @model_validator(mode="after")
    def check_length_bounds(self) -> "PasswordPolicy":
        if self.min_length <= 0 or self.max_length <= 0:
            raise ValueError("Password lengths must be positive")
        if self.min_length > self.max_length:
            raise ValueError(
                f"minLength ({self.min_length}) must not exceed maxLength ({self.max_length})"
            )
        return self

    @property
    def has_any_category(self) -> bool:
        return (self.include_lowercase or self.include_uppercase
                or self.include_numbers or self.include_symbols)

    def to_config_dict(self) -> dict:
        """Serializes to the camelCase layout of the configuration file."""
        data = self.model_dump(by_alias=True)
        data["excludeChars"] = "".join(sorted(self.exclude_chars))
        return data
