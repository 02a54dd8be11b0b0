import io
import logging

import pytest
from adcore.config import AppConfig
from adcore.logger import APP_LOGGER_NAME
from main import main


@pytest.fixture(autouse=True)
def cli_env(tmp_path, monkeypatch):
    """Runs the CLI on a clean 'pytest' profile with the log file in tmp_path."""
    AppConfig(profile="pytest").settings.clear()
    monkeypatch.setattr(AppConfig, "get_log_file_path", lambda self: tmp_path / "app.log")
    yield
    AppConfig(profile="pytest").settings.clear()
    # Handlers bound to the captured stderr must not outlive the test
    root = logging.getLogger(APP_LOGGER_NAME)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_batch_with_existing_logins(tmp_path, capsys):
    names = _write(tmp_path, "names.txt", "Іван Петренко\n\nІгор ПЕТРЕНКО\nПетренко\n")
    existing = _write(tmp_path, "existing.txt", "IPetrenko\n")

    rc = main(["-P", "pytest", names, "-e", existing])
    out, err = capsys.readouterr()

    assert rc == 1
    lines = out.splitlines()
    assert lines[0] == "Іван Петренко\tІван Петренко\tipetrenko1"
    assert lines[1] == "Ігор ПЕТРЕНКО\tІгор Петренко\tipetrenko2"
    assert lines[2].startswith("Петренко\t-\t-\tERROR: Invalid name format")
    assert "The following users are invalid" in err


def test_passwords_and_distinguished_names(tmp_path, capsys):
    names = _write(tmp_path, "names.txt", "Тарас Шевченко\n")

    rc = main(["-P", "pytest", names, "--passwords"])
    out, _ = capsys.readouterr()

    assert rc == 0
    fields = out.strip().split("\t")
    assert fields[2] == "tshevchenko"
    assert 12 <= len(fields[3]) <= 16
    assert 0 <= int(fields[4]) <= 100
    assert fields[5] == "CN=tshevchenko,CN=Users,DC=example,DC=local"


def test_generate_only(capsys):
    rc = main(["-P", "pytest", "-g", "3"])
    out, _ = capsys.readouterr()

    assert rc == 0
    rows = [line.split("\t") for line in out.splitlines()]
    assert len(rows) == 3
    for password, score, label in rows:
        assert 12 <= len(password) <= 16
        assert label in ("weak", "medium", "strong")


def test_names_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Анна-Марія Коваль\n"))

    rc = main(["-P", "pytest"])
    out, _ = capsys.readouterr()

    assert rc == 0
    assert out.strip().endswith("amkoval")


def test_log_file_is_written(tmp_path, capsys):
    names = _write(tmp_path, "names.txt", "Іван Петренко\n")
    main(["-P", "pytest", names, "--log-level", "INFO"])
    for handler in logging.getLogger(APP_LOGGER_NAME).handlers:
        handler.flush()

    assert "ADUserManager started (Profile: pytest)" in (tmp_path / "app.log").read_text(encoding="utf-8")
