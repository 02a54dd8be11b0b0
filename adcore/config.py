"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/config.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Manages application configuration using QSettings. Provides
                the password policy, name processing and directory settings
                consumed by the core engine and standardizes config/data
                paths across platforms (XDG standards on Linux).
------------------------------------------------------------------------------
"""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError
from PyQt6.QtCore import QSettings, QStandardPaths

from adcore.logger import get_logger
from adcore.models.policy import PasswordPolicy

logger = get_logger("config")

# QSettings hands back strings for booleans on INI/registry backends
_TRUE_VALUES = ("1", "true", "yes", "on")


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


class AppConfig:
    """
    Manages application configuration using QSettings.
    Singleton-like usage via class methods or single instance.
    """

    # Keys (Simple names, groups handled in methods)
    KEY_MAX_LOGIN_LENGTH: str = "max_login_length"
    KEY_LOGIN_PREFIX: str = "login_prefix"
    KEY_LOGIN_SUFFIX: str = "login_suffix"
    KEY_ALLOW_COMPOUND: str = "allow_compound_names"
    KEY_COMPOUND_DELIMITER: str = "compound_name_delimiter"
    KEY_LOGIN_RETRY_LIMIT: str = "login_retry_limit"
    KEY_AD_DOMAIN: str = "domain"
    KEY_USERS_CONTAINER: str = "users_container"
    KEY_LOG_LEVEL: str = "log_level"
    KEY_LOG_COMPONENTS: str = "log_components"

    GROUP_POLICY: str = "PasswordPolicy"
    GROUP_NAMES: str = "NameProcessing"
    GROUP_DIRECTORY: str = "Directory"
    GROUP_LOGGING: str = "Logging"

    # Policy keys keep the camelCase spelling of the JSON configuration
    POLICY_INT_KEYS = ("minLength", "maxLength")
    POLICY_BOOL_KEYS = (
        "includeUppercase", "includeLowercase", "includeNumbers",
        "includeSymbols", "requireEachType",
    )

    # Defaults
    DEFAULT_MAX_LOGIN_LENGTH: int = 20
    DEFAULT_LOGIN_RETRY_LIMIT: int = 1000
    DEFAULT_AD_DOMAIN: str = "example.local"
    DEFAULT_USERS_CONTAINER: str = "CN=Users"

    APP_ID: str = "adusermanager"
    _active_profile: Optional[str] = None

    def __init__(self, profile: Optional[str] = None) -> None:
        """
        Initializes the configuration manager.

        Args:
            profile: Optional profile name (e.g. 'dev', 'test').
                    If provided, all paths and settings are isolated (e.g. adusermanager-dev).
        """
        # If no profile provided, use the last active one (Global Singleton-like)
        if profile is None:
            profile = AppConfig._active_profile
        else:
            AppConfig._active_profile = profile

        self.profile = profile
        self.active_id = self.APP_ID
        if profile:
            self.active_id = f"{self.APP_ID}-{profile}"

        self.settings = QSettings(self.active_id, self.active_id)

    def get_data_dir(self) -> Path:
        """
        Directory for the log file, one per profile:
        ~/.local/share/adusermanager[-profile]/
        """
        base_path = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
        data_dir = Path(base_path) / self.active_id
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def _get_setting(self, group: str, key: str, default: Any = None) -> Any:
        """
        Helper to retrieve a setting value from a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            default: The default value if not found.

        Returns:
            The retrieved value or default.
        """
        if group:
            self.settings.beginGroup(group)
        val = self.settings.value(key, default)
        if group:
            self.settings.endGroup()
        return val

    def _set_setting(self, group: str, key: str, value: Any) -> None:
        """
        Helper to save a setting value into a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            value: The value to save.
        """
        if isinstance(value, str):
            value = value.strip()

        if group:
            self.settings.beginGroup(group)
        self.settings.setValue(key, value)
        if group:
            self.settings.endGroup()

    def get_password_policy(self) -> PasswordPolicy:
        """
        Builds the password policy from the stored settings.
        Missing keys fall back to the policy defaults; an inconsistent
        stored policy (e.g. minLength > maxLength) is ignored as a whole.

        Returns:
            The configured PasswordPolicy.
        """
        data: dict = {}
        self.settings.beginGroup(self.GROUP_POLICY)
        try:
            for key in self.POLICY_INT_KEYS:
                if self.settings.contains(key):
                    data[key] = self.settings.value(key)
            for key in self.POLICY_BOOL_KEYS:
                if self.settings.contains(key):
                    data[key] = _to_bool(self.settings.value(key))
            if self.settings.contains("excludeChars"):
                # INI backends may hand back a list if the value held commas
                data["excludeChars"] = self.settings.value("excludeChars")
        finally:
            self.settings.endGroup()

        try:
            return PasswordPolicy.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Stored password policy is invalid, using defaults: {e.errors()}")
            return PasswordPolicy()

    def set_password_policy(self, policy: PasswordPolicy) -> None:
        """
        Saves the password policy.

        Args:
            policy: The policy to persist.
        """
        # Written without _set_setting: stripping would drop an excluded space
        self.settings.beginGroup(self.GROUP_POLICY)
        for key, value in policy.to_config_dict().items():
            self.settings.setValue(key, value)
        self.settings.endGroup()

    def get_max_login_length(self) -> int:
        """Retrieves the maximum login length (sAMAccountName limit)."""
        return int(self._get_setting(self.GROUP_NAMES, self.KEY_MAX_LOGIN_LENGTH, self.DEFAULT_MAX_LOGIN_LENGTH))

    def set_max_login_length(self, length: int) -> None:
        """Saves the maximum login length."""
        self._set_setting(self.GROUP_NAMES, self.KEY_MAX_LOGIN_LENGTH, int(length))

    def get_login_prefix(self) -> str:
        """Retrieves the fixed text prepended to every login."""
        return str(self._get_setting(self.GROUP_NAMES, self.KEY_LOGIN_PREFIX, "") or "")

    def set_login_prefix(self, prefix: str) -> None:
        """Saves the login prefix."""
        self._set_setting(self.GROUP_NAMES, self.KEY_LOGIN_PREFIX, prefix)

    def get_login_suffix(self) -> str:
        """Retrieves the fixed text appended to every login."""
        return str(self._get_setting(self.GROUP_NAMES, self.KEY_LOGIN_SUFFIX, "") or "")

    def set_login_suffix(self, suffix: str) -> None:
        """Saves the login suffix."""
        self._set_setting(self.GROUP_NAMES, self.KEY_LOGIN_SUFFIX, suffix)

    def get_allow_compound_names(self) -> bool:
        """Whether compound first names contribute one initial per segment."""
        return _to_bool(self._get_setting(self.GROUP_NAMES, self.KEY_ALLOW_COMPOUND, True))

    def set_allow_compound_names(self, allow: bool) -> None:
        """Saves the compound name handling flag."""
        self._set_setting(self.GROUP_NAMES, self.KEY_ALLOW_COMPOUND, bool(allow))

    def get_compound_name_delimiter(self) -> str:
        """Retrieves the delimiter separating compound name segments."""
        return str(self._get_setting(self.GROUP_NAMES, self.KEY_COMPOUND_DELIMITER, "-") or "-")

    def set_compound_name_delimiter(self, delimiter: str) -> None:
        """Saves the compound name delimiter."""
        self._set_setting(self.GROUP_NAMES, self.KEY_COMPOUND_DELIMITER, delimiter)

    def get_login_retry_limit(self) -> int:
        """Retrieves how many numeric suffixes are tried for a taken login."""
        return int(self._get_setting(self.GROUP_NAMES, self.KEY_LOGIN_RETRY_LIMIT, self.DEFAULT_LOGIN_RETRY_LIMIT))

    def set_login_retry_limit(self, limit: int) -> None:
        """Saves the login retry limit."""
        self._set_setting(self.GROUP_NAMES, self.KEY_LOGIN_RETRY_LIMIT, int(limit))

    def get_ad_domain(self) -> str:
        """Retrieves the DNS name of the directory domain."""
        return str(self._get_setting(self.GROUP_DIRECTORY, self.KEY_AD_DOMAIN, self.DEFAULT_AD_DOMAIN))

    def set_ad_domain(self, domain: str) -> None:
        """Saves the directory domain."""
        self._set_setting(self.GROUP_DIRECTORY, self.KEY_AD_DOMAIN, domain)

    def get_users_container(self) -> str:
        """Retrieves the RDN path new accounts are created in."""
        return str(self._get_setting(self.GROUP_DIRECTORY, self.KEY_USERS_CONTAINER, self.DEFAULT_USERS_CONTAINER))

    def set_users_container(self, container: str) -> None:
        """Saves the users container."""
        self._set_setting(self.GROUP_DIRECTORY, self.KEY_USERS_CONTAINER, container)

    def get_log_level(self) -> str:
        """Retrieves the global log level."""
        return str(self._get_setting(self.GROUP_LOGGING, self.KEY_LOG_LEVEL, "WARNING"))

    def set_log_level(self, level: str) -> None:
        """Saves the global log level."""
        self._set_setting(self.GROUP_LOGGING, self.KEY_LOG_LEVEL, level.upper())

    def get_log_components(self) -> dict:
        """Retrieves a dictionary of component-specific log levels."""
        raw = str(self._get_setting(self.GROUP_LOGGING, self.KEY_LOG_COMPONENTS, "{}"))
        try:
            components = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Ignoring malformed log component levels: {raw!r}")
            return {}
        return components if isinstance(components, dict) else {}

    def set_log_components(self, components: dict) -> None:
        """Saves a dictionary of component-specific log levels."""
        self._set_setting(self.GROUP_LOGGING, self.KEY_LOG_COMPONENTS, json.dumps(components))

    def get_log_file_path(self) -> Path:
        """Returns the absolute path to the log file."""
        return self.get_data_dir() / "app.log"
