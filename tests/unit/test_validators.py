from concurrent.futures import ThreadPoolExecutor

import pytest
from adcore.models.identity import Identity
from adcore.models.results import ValidationResult
from adcore.validators import DataValidator


class TestLogin:

    @pytest.mark.parametrize("login", ["ipetrenko", "i_petrenko-2", "A" * 20])
    def test_valid(self, login):
        result = DataValidator.is_valid_login(login)
        assert result
        assert result.error is None

    @pytest.mark.parametrize("login, error", [
        ("", "Login cannot be empty"),
        ("a" * 21, "Login cannot be longer than 20 characters"),
        ("i.petrenko", "Login can only contain letters, numbers, underscores, and hyphens"),
        ("іпетренко", "Login can only contain letters, numbers, underscores, and hyphens"),
        ("1petrenko", "Login must start with a letter"),
        ("_petrenko", "Login must start with a letter"),
    ])
    def test_invalid(self, login, error):
        result = DataValidator.is_valid_login(login)
        assert not result
        assert result.error == error


class TestFullName:

    @pytest.mark.parametrize("name", ["Іван Петренко", "Мар'яна Квітка-Основ'яненко", "John Smith"])
    def test_valid(self, name):
        assert DataValidator.is_valid_full_name(name)

    @pytest.mark.parametrize("name, error", [
        ("", "Name cannot be empty"),
        ("   ", "Name cannot be empty"),
        ("Іван " + "а" * 64, "Name is too long (max 64 characters)"),
        ("Іван", "Full name must contain both first and last names"),
        ("Іван Петренко2", "Name contains invalid characters"),
        ("Іван П_тренко", "Name contains invalid characters"),
        ("Іван Петренко!", "Name contains invalid characters"),
    ])
    def test_invalid(self, name, error):
        assert DataValidator.is_valid_full_name(name).error == error


class TestPassword:

    def test_valid(self):
        assert DataValidator.is_valid_password("Abcdefg1")

    def test_custom_min_length(self):
        result = DataValidator.is_valid_password("Abcdefg1", min_length=12)
        assert result.error == "Password must be at least 12 characters long"

    @pytest.mark.parametrize("password", ["abcdefg1", "ABCDEFG1", "Abcdefgh"])
    def test_missing_class(self, password):
        result = DataValidator.is_valid_password(password)
        assert not result
        assert "at least one uppercase letter" in result.error

    def test_empty(self):
        assert DataValidator.is_valid_password("").error == "Password cannot be empty"


class TestServerName:

    @pytest.mark.parametrize("name", ["DC01", "file-srv", "a" * 15])
    def test_valid(self, name):
        assert DataValidator.is_valid_server_name(name)

    @pytest.mark.parametrize("name, error", [
        ("", "Server name cannot be empty"),
        ("a" * 16, "Server name cannot be longer than 15 characters"),
        ("dc_01", "Server name can only contain letters, numbers, and hyphens"),
        ("-dc01", "Server name cannot start or end with a hyphen"),
        ("dc01-", "Server name cannot start or end with a hyphen"),
    ])
    def test_invalid(self, name, error):
        assert DataValidator.is_valid_server_name(name).error == error


class TestDirectoryNames:

    @pytest.mark.parametrize("domain", ["example.local", "corp.example.ua", "a-b.c1.org"])
    def test_valid_domain(self, domain):
        assert DataValidator.is_valid_domain_name(domain)

    @pytest.mark.parametrize("domain, error", [
        ("", "Domain name cannot be empty"),
        ("localhost", "Invalid domain name format"),
        ("-bad.example", "Invalid domain name format"),
        ("bad..example", "Invalid domain name format"),
    ])
    def test_invalid_domain(self, domain, error):
        assert DataValidator.is_valid_domain_name(domain).error == error

    def test_distinguished_name(self):
        assert DataValidator.is_valid_distinguished_name("CN=User,OU=Users,DC=example,DC=com")
        assert DataValidator.is_valid_distinguished_name("").error == "Distinguished name cannot be empty"
        assert "LDAP format" in DataValidator.is_valid_distinguished_name("CN=User").error

    def test_ukrainian_name(self):
        assert DataValidator.is_valid_ukrainian_name("Ґанна Їжакевич")
        assert DataValidator.is_valid_ukrainian_name("Ґанна\u00a0Їжакевич")
        assert not DataValidator.is_valid_ukrainian_name("\t  ")
        assert not DataValidator.is_valid_ukrainian_name("Hanna")


class TestValidateBatch:

    def test_empty(self):
        assert DataValidator.validate_batch([]).error == "No users to validate"

    def test_all_valid(self):
        identities = [Identity(original_name="Іван Петренко", is_valid=True)]
        assert DataValidator.validate_batch(identities)

    def test_lists_each_invalid_entry(self):
        identities = [
            Identity(original_name="Іван Петренко", is_valid=True),
            Identity(original_name="Іван", validation_error="could not split"),
            Identity(original_name="???"),
        ]
        result = DataValidator.validate_batch(identities)
        assert not result
        assert result.error == (
            "The following users are invalid:\n"
            "Іван: could not split\n"
            "???: invalid"
        )


def test_results_are_independent_across_threads():
    logins = ["", "ipetrenko", "1abc", "a" * 30, "good_one"] * 200

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(DataValidator.is_valid_login, logins))

    for login, result in zip(logins, results):
        assert result == DataValidator.is_valid_login(login)


def test_validation_result_helpers():
    assert ValidationResult.success() == ValidationResult(True)
    failure = ValidationResult.failure("nope")
    assert not failure
    assert failure.error == "nope"
