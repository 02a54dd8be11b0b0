"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/__init__.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Core logic package for ADUserManager. Contains name
                normalization, transliteration, login derivation, password
                generation/scoring and validation modules.
------------------------------------------------------------------------------
"""
