"""
Login scenarios against the live portal.

    pytest --run-e2e -m smoke
    TEST_ENV=UAT pytest --run-e2e tests/e2e
    HEADLESS=true pytest --run-e2e -m "regression and not data_driven"
"""
import logging
from pathlib import Path

import pytest

from pages.Login.selectors import LOGIN_PATH_FRAGMENT
from services.test_data import load_login_data

pytestmark = pytest.mark.e2e

log = logging.getLogger("payportal")

_DATA = Path(__file__).resolve().parents[2] / "testData" / "LoginTestData.json"
CREDENTIALS = load_login_data(_DATA)


@pytest.mark.smoke
def test_login_page_is_displayed(pom):
    pom.login_page.navigate()
    pom.login_page.verify_login_page_displayed()
    log.info("Page title: %s", pom.login_page.base.get_page_title())


@pytest.mark.smoke
@pytest.mark.regression
def test_login_with_valid_credentials(pom):
    pom.login_page.login_as_default_user()
    pom.login_page.base.wait_for_page_load()


@pytest.mark.regression
def test_login_with_invalid_credentials_is_rejected(pom):
    page = pom.login_page
    page.navigate()
    page.login("invaliduser", "invalidpass")
    page.base.wait(2000)

    if page.is_validation_message_visible():
        message = page.get_validation_message_text()
        log.info("Validation message: %s", message)
        assert message.strip()
    else:
        current = page.base.get_current_url()
        log.info("Current URL: %s", current)
        assert LOGIN_PATH_FRAGMENT in current


@pytest.mark.regression
def test_login_with_empty_credentials_stays_on_login(pom):
    page = pom.login_page
    page.navigate()
    page.base.click(page.login_button)
    page.is_validation_message_visible()
    page.verify_login_page_displayed()


@pytest.mark.regression
def test_clear_form(pom):
    page = pom.login_page
    page.navigate()
    page.base.fill(page.username_input, "testuser")
    page.base.fill(page.password_input, "testpass")

    page.clear_form()

    assert page.base.input_value(page.username_input) == ""
    assert page.base.input_value(page.password_input) == ""


@pytest.mark.debug
def test_screenshot_of_login_page(pom):
    pom.login_page.navigate()
    path = pom.common_utils.take_screenshot("login-page")
    assert path.exists()


@pytest.mark.data_driven
@pytest.mark.parametrize("creds", CREDENTIALS, ids=[c.username for c in CREDENTIALS])
def test_login_with_each_test_user(pom, creds):
    pom.login_page.navigate()
    pom.login_page.login(creds.username, creds.password)
    pom.login_page.base.wait_for_page_load()
