"""Pytest configuration: real-browser fixtures for the e2e suite."""
import pytest

from core.actions import Actions
from pages.manager import PageObjectManager
from services.config import CURRENT_ENV, config as load_config
from services.logs import setup_logging
from services.test_data import LoginTestData


def pytest_addoption(parser):
    parser.addoption("--run-e2e", action="store_true", default=False,
                     help="run tests that drive a real Chrome against the portal")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-e2e"):
        return
    skip = pytest.mark.skip(reason="needs --run-e2e (Chrome + portal access)")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def settings():
    cfg = load_config()
    setup_logging(cfg["LOG_LEVEL"])
    return cfg


@pytest.fixture(scope="session")
def base_url():
    """Resolved once for the whole run."""
    return CURRENT_ENV


@pytest.fixture(scope="session")
def login_data(settings):
    return LoginTestData.from_file(settings["TEST_DATA_PATH"])


@pytest.fixture
def driver(settings):
    from services.driver import get_driver

    drv = get_driver(headless=settings["HEADLESS"])
    yield drv
    drv.quit()


@pytest.fixture
def pom(driver, settings, base_url, login_data):
    actions = Actions(driver, timeout=settings["EXPLICIT_WAIT_SECONDS"],
                      highlight=settings["HIGHLIGHT"], screenshots_dir=settings["SCREENSHOTS_DIR"])
    return PageObjectManager(driver, base_url=base_url, test_data=login_data,
                             actions=actions, settle_ms=settings["SETTLE_MS"])
