import pytest
from adcore.strength import PasswordStrengthScorer


@pytest.mark.parametrize("password, expected", [
    ("", 0),
    ("a", 9),
    ("aaaa", 12),
    ("abab", 13),
    ("Ab1!", 43),
    ("Tr7!kGm#pQ4z", 81),
    ("Aa1!" * 10, 100),
])
def test_score(password, expected):
    assert PasswordStrengthScorer.score(password) == expected


def test_score_is_bounded():
    for password in ["a", "1", "!!!!!!!!", "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaa", "Xy9$" * 50]:
        assert 0 <= PasswordStrengthScorer.score(password) <= 100


def test_longer_runs_never_score_lower():
    scores = [PasswordStrengthScorer.score("a" * n) for n in range(1, 30)]
    assert scores == sorted(scores)


def test_symbols_count_as_middle_bonus_only_inside():
    # '!' at the edges earns the symbol bonus but no middle bonus
    assert PasswordStrengthScorer.score("!abc") < PasswordStrengthScorer.score("a!bc")


@pytest.mark.parametrize("score, label", [
    (0, "weak"), (39, "weak"), (40, "medium"), (69, "medium"), (70, "strong"), (100, "strong"),
])
def test_label(score, label):
    assert PasswordStrengthScorer.label(score) == label
