"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/utils/validation.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Low level syntax helpers for directory related strings
                (logins, NetBIOS names, DNS domains, distinguished names).
------------------------------------------------------------------------------
"""

import re

LOGIN_CHARS_RE = re.compile(r"^[a-zA-Z0-9_-]+$")
NETBIOS_CHARS_RE = re.compile(r"^[a-zA-Z0-9-]+$")
DOMAIN_RE = re.compile(
    r"^(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?$",
    re.IGNORECASE,
)
# Anything besides letters, whitespace, apostrophe and hyphen
NAME_INVALID_CHAR_RE = re.compile(r"[^\w\s'-]|[\d_]")


def is_domain_name(domain: str) -> bool:
    """
    Simplified DNS name check: at least two dot separated labels of
    letters/digits with inner hyphens.
    """
    if not domain:
        return False
    return bool(DOMAIN_RE.match(domain))


def domain_to_dn(domain: str) -> str:
    """
    Converts a DNS domain to its LDAP form.
    'corp.example.local' -> 'DC=corp,DC=example,DC=local'
    """
    labels = [label.strip() for label in (domain or "").split(".") if label.strip()]
    return ",".join(f"DC={label}" for label in labels)


def escape_dn_value(value: str) -> str:
    """
    Escapes an RDN attribute value (RFC 4514) so that e.g. a login with a
    comma cannot break the distinguished name.
    """
    if not value:
        return ""
    escaped = re.sub(r'([,+"\\<>;=])', r"\\\1", value)
    if escaped[0] in " #":
        escaped = "\\" + escaped
    if escaped.endswith(" ") and not escaped.endswith("\\ "):
        escaped = escaped[:-1] + "\\ "
    return escaped
