"""
------------------------------------------------------------------------------
Project:        ADUserManager
File:           adcore/pipeline.py
Version:        1.0.0
Producer:       ADUserManager Team
Description:    Coordinator for turning raw name lists into identities and
                account drafts: normalization, parsing, login derivation and
                collision resolution, password generation and DN building.
------------------------------------------------------------------------------
"""

from typing import Callable, Iterable, List, Optional, Set, Union

from adcore.config import AppConfig
from adcore.logger import get_logger
from adcore.login_generator import LoginGenerator
from adcore.models.identity import Identity
from adcore.models.policy import PasswordPolicy
from adcore.models.results import AccountDraft
from adcore.name_normalizer import NameNormalizer
from adcore.password_generator import PasswordPolicyEngine
from adcore.strength import PasswordStrengthScorer
from adcore.utils.validation import domain_to_dn, escape_dn_value
from adcore.validators import DataValidator

logger = get_logger("pipeline")

ExistsPredicate = Callable[[str], bool]


def _nothing_exists(_login: str) -> bool:
    return False


class IdentityPipeline:
    """
    Coordinator for identity normalization and account preparation.
    The directory is only reached through the 'exists' predicate passed to
    process()/process_batch().
    """

    def __init__(self, config: Optional[AppConfig] = None,
                 login_generator: Optional[LoginGenerator] = None,
                 password_engine: Optional[PasswordPolicyEngine] = None) -> None:
        self.config = config if config else AppConfig()
        self.login_generator = login_generator if login_generator else LoginGenerator.from_config(self.config)
        self.password_engine = password_engine if password_engine else PasswordPolicyEngine()

    def process(self, raw_name: str, exists: Optional[ExistsPredicate] = None,
                taken: Optional[Set[str]] = None) -> Identity:
        """
        Runs one raw name through the whole chain.

        Args:
            raw_name: Name as typed or pasted by the operator.
            exists: Directory lookup; None means no account exists yet.
            taken: Logins already assigned by the caller (e.g. earlier in a batch).

        Returns:
            The Identity; on failure is_valid is False and validation_error
            says which step failed.
        """
        exists = exists or _nothing_exists
        taken = taken if taken is not None else set()

        normalized = NameNormalizer.normalize(raw_name)
        identity = NameNormalizer.parse_identity(raw_name, normalized)
        if not identity.is_valid:
            return identity

        base_login = self.login_generator.derive_login(identity.first_name, identity.last_name)
        check = DataValidator.is_valid_login(base_login)
        if not check:
            identity.mark_invalid(f"Cannot derive login from '{normalized}': {check.error}")
            logger.warning(identity.validation_error)
            return identity

        login = self.login_generator.resolve_unique(
            base_login, lambda candidate: candidate in taken or exists(candidate)
        )
        if login is None:
            identity.mark_invalid(
                f"No free login for '{base_login}' after "
                f"{self.login_generator.max_attempts} attempts")
            return identity

        identity.generated_login = login
        taken.add(login)
        return identity

    def process_batch(self, raw_names: Union[str, Iterable[str]],
                      exists: Optional[ExistsPredicate] = None) -> List[Identity]:
        """
        Processes a list of names (or a multi-line text block).
        Blank lines are skipped; two people with the same derived login in
        one batch receive distinct logins.
        """
        if isinstance(raw_names, str):
            raw_names = raw_names.splitlines()

        taken: Set[str] = set()
        identities = [
            self.process(name, exists, taken)
            for name in raw_names if name and name.strip()
        ]
        logger.info(
            f"Processed {len(identities)} names, "
            f"{sum(1 for i in identities if i.is_valid)} valid"
        )
        return identities

    def revalidate(self, identity: Identity, exists: Optional[ExistsPredicate] = None,
                   taken: Optional[Set[str]] = None) -> Identity:
        """
        Re-runs a record produced by an external name-parsing service
        through the local chain. Its login is recomputed, never copied.
        """
        source = identity.normalized_name or identity.original_name
        checked = self.process(source, exists, taken)
        checked.original_name = identity.original_name or source
        if identity.generated_login and checked.generated_login != identity.generated_login:
            logger.debug(
                f"Replaced external login '{identity.generated_login}' "
                f"with '{checked.generated_login}'"
            )
        return checked

    def build_distinguished_name(self, login: str, users_container: Optional[str] = None,
                                 domain: Optional[str] = None) -> str:
        """
        'ipetrenko' -> 'CN=ipetrenko,CN=Users,DC=example,DC=local'
        Container and domain default to the 'Directory' settings.
        """
        container = self.config.get_users_container() if users_container is None else users_container
        domain = self.config.get_ad_domain() if domain is None else domain
        parts = [f"CN={escape_dn_value(login)}"]
        if container:
            parts.append(container.strip(","))
        domain_dn = domain_to_dn(domain)
        if domain_dn:
            parts.append(domain_dn)
        return ",".join(parts)

    def prepare_account(self, identity: Identity, policy: Optional[PasswordPolicy] = None,
                        users_container: Optional[str] = None,
                        domain: Optional[str] = None) -> AccountDraft:
        """
        Generates a password and the target DN for a valid identity.
        Invalid identities come back as drafts without password or DN.
        """
        if not identity.is_valid or not identity.generated_login:
            return AccountDraft(identity=identity)

        policy = policy or self.config.get_password_policy()
        password = self.password_engine.generate(policy)
        dn = self.build_distinguished_name(identity.generated_login, users_container, domain)

        dn_check = DataValidator.is_valid_distinguished_name(dn)
        if not dn_check:
            logger.warning(f"Generated DN for '{identity.generated_login}' looks wrong: {dn_check.error}")

        return AccountDraft(
            identity=identity,
            password=password,
            strength=PasswordStrengthScorer.score(password),
            distinguished_name=dn,
        )
