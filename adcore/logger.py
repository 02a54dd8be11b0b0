"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/logger.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Centralized logging system for ADUserManager.
                Supports console/file output, component-specific levels
                and secret masking for credential related debug output.
------------------------------------------------------------------------------
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Union

# Every module logs below this name: 'adusermanager.login', 'adusermanager.password', ...
APP_LOGGER_NAME = "adusermanager"

DEFAULT_FORMAT = "%(asctime)s [%(levelname).4s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

Level = Union[str, int]


def _resolve_level(level: Level) -> Optional[int]:
    """'debug', 'DEBUG' or logging.DEBUG -> 10; None for unknown names."""
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).strip().upper(), None)
    return value if isinstance(value, int) else None


def setup_logging(
    level: Level = "WARNING",
    log_file: Optional[str] = None,
    component_levels: Optional[Dict[str, Level]] = None
) -> None:
    """
    Configures the 'adusermanager' logger tree. Safe to call again, e.g.
    after the CLI has parsed --log-level: previous handlers are closed.

    Args:
        level: Level of the whole tree; unknown names fall back to WARNING.
        log_file: Optional file receiving the same records as stderr.
        component_levels: Per component overrides, e.g. {'password': 'DEBUG'}.
    """
    app_logger = logging.getLogger(APP_LOGGER_NAME)

    for handler in app_logger.handlers[:]:
        app_logger.removeHandler(handler)
        handler.close()

    numeric_level = _resolve_level(level)
    app_logger.setLevel(numeric_level if numeric_level is not None else logging.WARNING)

    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    # stdout carries the batch rows, diagnostics go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding="utf-8")
        file_handler.setFormatter(formatter)
        app_logger.addHandler(file_handler)

    if numeric_level is None:
        app_logger.warning(f"Unknown log level {level!r}, using WARNING")

    for component, cmp_level in (component_levels or {}).items():
        set_component_level(component, cmp_level)


def get_logger(name: str) -> logging.Logger:
    """'login' and 'adusermanager.login' both name the login component logger."""
    if name.startswith(APP_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")


def set_component_level(component: str, level: Level) -> bool:
    """
    Overrides the level of one component ('NOTSET' hands it back to the
    tree level). Returns False, and logs, if the level name is unknown.
    """
    numeric_level = _resolve_level(level)
    if numeric_level is None:
        logging.getLogger(APP_LOGGER_NAME).warning(
            f"Ignoring unknown level {level!r} for component '{component}'")
        return False
    logger = get_logger(component)
    logger.setLevel(numeric_level)
    logger.propagate = True
    return True


def mask_secret(secret: Optional[str], visible: int = 2) -> str:
    """
    Masks a password for log output, keeping only the first characters.

    Args:
        secret: The clear text secret.
        visible: Number of leading characters left readable.

    Returns:
        A masked representation such as 'Ab**********'.
    """
    if not secret:
        return "<empty>"
    if len(secret) <= visible:
        return "*" * len(secret)
    return secret[:visible] + "*" * (len(secret) - visible)


def log_generated_password(password: str, strength: int, source: str) -> None:
    """
    Audit record for a generated credential.
    Logged at DEBUG level on 'adusermanager.password.audit'; the password
    itself is always masked.
    """
    logger = get_logger("password.audit")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"Generated password {mask_secret(password)} "
            f"(length={len(password)}, strength={strength}, source={source})"
        )
