from __future__ import annotations
import logging
from typing import Iterable, Optional

from core.base import BasePage, Page
from core.locator import Locator
from services.config import CURRENT_ENV
from services.test_data import LoginTestData
from .elements.Validation.element import ValidationMessage
from .selectors import USERNAME_INPUT_XPATH, PASSWORD_INPUT_XPATH, LOGIN_BUTTON_XPATH

log = logging.getLogger("payportal")

DEFAULT_SETTLE_MS = 2000


class LoginPage(Page):
    """Portal login screen. Stateless: each call drives the UI and returns."""

    def __init__(self, driver, root: Optional[str] = None, base: Optional[BasePage] = None,
                 test_data: Optional[LoginTestData] = None, settle_ms: int = DEFAULT_SETTLE_MS,
                 validation_selectors: Iterable[str] = ()):
        super().__init__(driver, root or CURRENT_ENV, base)
        self.test_data = test_data
        self.settle_ms = settle_ms

        self.username_input = Locator.xpath(USERNAME_INPUT_XPATH)
        self.password_input = Locator.xpath(PASSWORD_INPUT_XPATH)
        self.login_button = Locator.xpath(LOGIN_BUTTON_XPATH)
        self.validation = ValidationMessage(extra=validation_selectors)
        self.validation_message = self.validation.locator

    def navigate(self):
        self.open(self.root)
        self.base.wait_for_page_load()
        # Angular keeps bootstrapping after the load signals settle
        self.base.wait(self.settle_ms)

    def login(self, username: str, password: str):
        log.info("Logging in with username: %s", username)
        self.base.fill(self.username_input, username)
        self.base.fill(self.password_input, password)
        self.base.click(self.login_button)
        self.base.wait_for_page_load()

    def login_with_test_data(self, index: int = 0):
        if self.test_data is None:
            raise RuntimeError("LoginPage was built without test data")
        creds = self.test_data[index]
        self.login(creds.username, creds.password)

    def quick_login(self, username: str, password: str):
        self.navigate()
        self.login(username, password)

    def login_as_default_user(self):
        self.navigate()
        self.login_with_test_data(0)

    def verify_login_page_displayed(self, timeout: Optional[float] = None):
        self.base.wait_for_visible(self.username_input, timeout)
        self.base.wait_for_visible(self.password_input, timeout)
        self.base.wait_for_visible(self.login_button, timeout)

    def get_error_message(self) -> str:
        return self.base.get_text(self.base.error_message)

    def is_error_displayed(self) -> bool:
        return self.base.is_visible(self.base.error_message)

    def is_validation_message_visible(self) -> bool:
        return self.base.is_visible(self.validation_message)

    def get_validation_message_text(self) -> str:
        return self.base.get_text(self.validation_message)

    def clear_form(self):
        self.base.clear(self.username_input)
        self.base.clear(self.password_input)
