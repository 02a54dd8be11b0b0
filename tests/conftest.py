import pytest
from PyQt6.QtCore import QSettings

from adcore.config import AppConfig
from adcore.random_source import FallbackRandomSource


@pytest.fixture(autouse=True)
def reset_active_profile():
    """Ensures a profile selected by one test does not leak into the next."""
    AppConfig._active_profile = None
    yield
    AppConfig._active_profile = None


@pytest.fixture
def config():
    """AppConfig backed by a scratch QSettings store."""
    settings = QSettings("ADUserManager", "TestConfig")
    settings.clear()

    app_config = AppConfig()
    app_config.settings = settings
    yield app_config
    settings.clear()


@pytest.fixture
def seeded_source():
    """Deterministic random source so failures can be reproduced."""
    return FallbackRandomSource(seed=20240601)


def pytest_configure(config):
    config.addinivalue_line("markers", "level2: long running statistical tests")

def pytest_addoption(parser):
    parser.addoption(
        "--level2", action="store_true", default=False, help="run level 2 intensive tests"
    )

def pytest_collection_modifyitems(config, items):
    if config.getoption("--level2"):
        # --level2 given in cli: do not skip
        return
    skip_level2 = pytest.mark.skip(reason="need --level2 option to run")
    for item in items:
        if "level2" in item.keywords:
            item.add_marker(skip_level2)
