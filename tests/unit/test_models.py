import pytest
from pydantic import ValidationError

from adcore.models import AccountDraft, Identity, PasswordPolicy


class TestIdentity:

    def test_aliases(self):
        identity = Identity(firstName="Іван", lastName="Петренко", isValid=True)
        assert identity.first_name == "Іван"
        assert identity.model_dump(by_alias=True)["lastName"] == "Петренко"

    def test_display_name(self):
        assert Identity(first_name="Іван", last_name="Петренко").display_name == "Іван Петренко"
        assert Identity(normalized_name="Петренко").display_name == "Петренко"

    def test_mark_invalid(self):
        identity = Identity(is_valid=True)
        identity.mark_invalid("broken")
        assert not identity.is_valid
        assert identity.validation_error == "broken"

    def test_assignment_is_validated(self):
        identity = Identity()
        with pytest.raises(ValidationError):
            identity.first_name = None

    def test_from_record(self):
        identity = Identity.from_record({
            "original": "петренко іван",
            "normalized": "Іван Петренко",
            "firstName": "Іван",
            "lastName": "Петренко",
            "login": "ipetrenko",
        })
        assert identity.original_name == "петренко іван"
        assert identity.generated_login == "ipetrenko"
        assert identity.is_valid

    def test_from_incomplete_record(self):
        identity = Identity.from_record({"original": "???", "firstName": "", "lastName": None})
        assert not identity.is_valid
        assert identity.last_name == ""
        assert identity.generated_login is None


class TestPasswordPolicy:

    def test_defaults(self):
        policy = PasswordPolicy()
        assert (policy.min_length, policy.max_length) == (12, 16)
        assert policy.exclude_chars == frozenset("0O1lI")
        assert policy.require_each_type
        assert policy.has_any_category

    def test_from_config_keys(self):
        policy = PasswordPolicy.model_validate({
            "minLength": 8, "maxLength": 10, "excludeChars": "abc", "unknownKey": 1
        })
        assert policy.min_length == 8
        assert policy.exclude_chars == frozenset("abc")

    def test_exclude_chars_from_list(self):
        assert PasswordPolicy(exclude_chars=["ab", "c"]).exclude_chars == frozenset("abc")
        assert PasswordPolicy(exclude_chars=None).exclude_chars == frozenset()

    def test_to_config_dict(self):
        data = PasswordPolicy().to_config_dict()
        assert data["excludeChars"] == "01IOl"
        assert data["minLength"] == 12
        assert data["requireEachType"] is True

    @pytest.mark.parametrize("kwargs", [
        {"min_length": 20, "max_length": 10},
        {"min_length": 0},
        {"max_length": -1},
    ])
    def test_invalid_bounds(self, kwargs):
        with pytest.raises(ValidationError):
            PasswordPolicy(**kwargs)

    def test_frozen(self):
        policy = PasswordPolicy()
        with pytest.raises(ValidationError):
            policy.min_length = 4

    def test_no_category(self):
        policy = PasswordPolicy(include_uppercase=False, include_lowercase=False,
                                include_numbers=False, include_symbols=False)
        assert not policy.has_any_category


def test_account_draft_hides_password():
    draft = AccountDraft(identity=Identity(), password="Tr7!kGm#pQ4z", strength=81)
    assert "Tr7!kGm#pQ4z" not in repr(draft)
    assert draft.password == "Tr7!kGm#pQ4z"
