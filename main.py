"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           main.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Batch entry point. Reads a list of names, prints normalized
                identities with unique logins and, optionally, generated
                passwords with their strength score.
------------------------------------------------------------------------------
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Set

from PyQt6.QtCore import QCoreApplication

from adcore.config import AppConfig
from adcore.logger import get_logger, setup_logging
from adcore.pipeline import IdentityPipeline
from adcore.strength import PasswordStrengthScorer
from adcore.validators import DataValidator


def load_existing_logins(path: Optional[str]) -> Set[str]:
    """
    Reads logins known to exist in the directory (one per line).
    Stands in for a live directory lookup when running offline.
    """
    if not path:
        return set()
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return {line.strip().lower() for line in lines if line.strip()}


def read_names(path: Optional[str]) -> List[str]:
    if path and path != "-":
        return Path(path).read_text(encoding="utf-8").splitlines()
    return sys.stdin.read().splitlines()


def main(argv: Optional[List[str]] = None) -> int:
    """
    ADUserManager Entry Point.
    Initializes configuration and logging, then runs the identity pipeline.
    """
    parser = argparse.ArgumentParser(description="ADUserManager - name normalization and credential generation")
    parser.add_argument("names", nargs="?", help="File with one name per line ('-' or omitted: stdin)")
    parser.add_argument("-P", "--profile", type=str, help="Application profile for isolation (e.g. 'dev', 'test')")
    parser.add_argument("-e", "--existing", type=str, help="File with logins that already exist in the directory")
    parser.add_argument("-p", "--passwords", action="store_true", help="Generate a password for every valid user")
    parser.add_argument("-g", "--generate", type=int, metavar="N", help="Only generate N passwords and exit")
    parser.add_argument("--log-level", type=str, help="Override the configured log level")
    args = parser.parse_args(argv)

    app_id = "adusermanager"
    if args.profile:
        app_id = f"adusermanager-{args.profile}"
    QCoreApplication.setApplicationName(app_id)

    app_config = AppConfig(profile=args.profile)

    setup_logging(
        level=args.log_level or app_config.get_log_level(),
        log_file=str(app_config.get_log_file_path()),
        component_levels=app_config.get_log_components()
    )
    logger = get_logger("core")
    logger.info(f"ADUserManager started (Profile: {args.profile or 'default'})")

    pipeline = IdentityPipeline(config=app_config)
    policy = app_config.get_password_policy()
    if not pipeline.password_engine.random_source.is_secure:
        print("WARNING: passwords are generated without a secure random source", file=sys.stderr)

    if args.generate is not None:
        for password in pipeline.password_engine.generate_batch(args.generate, policy):
            score = PasswordStrengthScorer.score(password)
            print(f"{password}\t{score}\t{PasswordStrengthScorer.label(score)}")
        return 0

    existing = load_existing_logins(args.existing)
    identities = pipeline.process_batch(read_names(args.names), exists=lambda login: login.lower() in existing)

    for identity in identities:
        if not identity.is_valid:
            print(f"{identity.original_name}\t-\t-\tERROR: {identity.validation_error}")
            continue

        row = [identity.original_name, identity.normalized_name, identity.generated_login]
        if args.passwords:
            draft = pipeline.prepare_account(identity, policy)
            row += [draft.password, str(draft.strength), draft.distinguished_name]
        print("\t".join(row))

    batch_check = DataValidator.validate_batch(identities)
    if not batch_check:
        print(batch_check.error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
