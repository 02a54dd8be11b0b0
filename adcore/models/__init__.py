"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/models/__init__.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Package initializer for core data models. Exports Identity,
                PasswordPolicy and the result types for easy access.
------------------------------------------------------------------------------
"""

from .identity import Identity
from .policy import PasswordPolicy
from .results import ValidationResult, AccountDraft
