"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/models/results.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Result values returned by validators and the identity
                pipeline instead of shared last-error state.
------------------------------------------------------------------------------
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

from adcore.models.identity import Identity


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a single validation call.
    Truthy when the value passed, otherwise 'error' explains why.
    """
    ok: bool
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(True)

    @classmethod
    def failure(cls, error: str) -> "ValidationResult":
        return cls(False, error)


class AccountDraft(BaseModel):
    """Everything the directory collaborator needs to create one account."""
    identity: Identity
    password: Optional[str] = Field(None, repr=False)
    strength: int = 0
    distinguished_name: Optional[str] = None
