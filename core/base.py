from __future__ import annotations
import logging
from typing import List, Optional, Pattern, Union

from selenium.webdriver.remote.webdriver import WebDriver

from core.actions import Actions
from core.locator import Locator

log = logging.getLogger("payportal")

TOAST_TIMEOUT = 15
TOAST_HIDE_TIMEOUT = 10

# Cross-cutting selectors shared by every screen of the portal
LOADING_SPINNER_CSS = '.loading, .spinner, [data-testid="loading"]'
TOAST_CSS = ".toast, .toast-message, .notification"
TOAST_TEXT_XPATH = ("//*[contains(concat(' ',normalize-space(@class),' '),' toast ') or "
                    "contains(concat(' ',normalize-space(@class),' '),' toast-message ')]")
ERROR_BANNER_CSS = ".error-message, .alert-error"
TABLE_ROWS_CSS = "table tbody tr"
ITEMS_PER_PAGE_CSS = "#itemsPerPage, #maxPerPage"
SEARCH_INPUT_CSS = '#searchInput, [placeholder*="Search"]'
SEARCH_BUTTON_XPATH = "//*[@id='searchBtn'] | //button[contains(normalize-space(.),'Search')]"


def _xpath_literal(s: str) -> str:
    if "'" not in s:
        return f"'{s}'"
    if '"' not in s:
        return f'"{s}"'
    return "concat(" + ", \"'\", ".join(f"'{p}'" for p in s.split("'")) + ")"


class BasePage:
    """
    Operations every screen gets: navigation, the re-exported primitives,
    toast/spinner handling and the generic table helpers.

    Concrete pages hold one of these (``page.base``) rather than inherit it,
    so a portal-wide markup change is fixed here once.
    """

    def __init__(self, driver: WebDriver, actions: Optional[Actions] = None):
        self.driver = driver
        self.utils = actions or Actions(driver)

        self.loading_spinner = Locator.css(LOADING_SPINNER_CSS)
        self.toast_message = Locator.css(TOAST_CSS)
        self.error_message = Locator.css(ERROR_BANNER_CSS)

        self.table_rows = Locator.css(TABLE_ROWS_CSS)
        self.items_per_page_dropdown = Locator.css(ITEMS_PER_PAGE_CSS)
        self.search_input = Locator.css(SEARCH_INPUT_CSS)
        self.search_button = Locator.xpath(SEARCH_BUTTON_XPATH)

    # -------- Navigation --------

    def navigate_to(self, url: str) -> None:
        log.info("Navigating to: %s", url)
        self.driver.get(url)
        self.utils.wait_for_dom_load()

    def get_current_url(self) -> str:
        return self.driver.current_url or ""

    def wait_for_url(self, url: Union[str, Pattern[str]], timeout: Optional[float] = None) -> None:
        if isinstance(url, str):
            match = lambda cur: url in cur  # noqa: E731
        else:
            match = lambda cur: bool(url.search(cur))  # noqa: E731
        self.utils.until(lambda d: match(d.current_url or ""), timeout, f"URL matching {url!r}")

    # -------- Interactions --------

    def click(self, locator: Locator) -> None:
        self.utils.click(locator)

    def fill(self, locator: Locator, text: str) -> None:
        self.utils.fill(locator, text)

    def type(self, locator: Locator, text: str, delay: Optional[int] = None) -> None:
        if delay is None:
            self.utils.type(locator, text)
        else:
            self.utils.type(locator, text, delay)

    def select_dropdown(self, locator: Locator, value: str) -> None:
        self.utils.select_option(locator, value)

    def clear(self, locator: Locator) -> None:
        self.utils.clear(locator)

    def check(self, locator: Locator) -> None:
        el = self.utils.wait_for_visible(locator)
        if not el.is_selected():
            el.click()

    def uncheck(self, locator: Locator) -> None:
        el = self.utils.wait_for_visible(locator)
        if el.is_selected():
            el.click()

    # -------- Waits --------

    def wait_for_visible(self, locator: Locator, timeout: Optional[float] = None) -> None:
        self.utils.wait_for_visible(locator, timeout)

    def wait_for_hidden(self, locator: Locator, timeout: Optional[float] = None) -> None:
        self.utils.wait_for_hidden(locator, timeout)

    def wait_for_hidden_best_effort(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        """Like wait_for_hidden, but a timeout is reported as False instead of raised."""
        try:
            self.utils.wait_for_hidden(locator, timeout)
            return True
        except TimeoutError as e:
            log.debug("best-effort wait gave up: %s", e)
            return False

    def wait_for_loading_to_complete(self, timeout: float = 30) -> bool:
        return self.wait_for_hidden_best_effort(self.loading_spinner, timeout)

    def wait_for_page_load(self, timeout: Optional[float] = None) -> None:
        self.utils.wait_for_network_idle(timeout)

    def wait_for_dom_load(self, timeout: Optional[float] = None) -> None:
        self.utils.wait_for_dom_load(timeout)

    # -------- Getters --------

    def get_text(self, locator: Locator) -> str:
        return self.utils.get_text(locator)

    def get_all_texts(self, locator: Locator) -> List[str]:
        return self.utils.get_all_texts(locator)

    def get_count(self, locator: Locator) -> int:
        return self.utils.get_count(locator)

    def is_visible(self, locator: Locator) -> bool:
        return self.utils.is_visible(locator)

    def is_enabled(self, locator: Locator) -> bool:
        return self.utils.is_enabled(locator)

    def is_checked(self, locator: Locator) -> bool:
        els = locator.resolve(self.driver)
        return bool(els) and els[0].is_selected()

    def input_value(self, locator: Locator) -> str:
        return self.utils.input_value(locator)

    # -------- Toasts --------

    def get_toast_message(self) -> str:
        el = self.utils.wait_for_visible(self.toast_message, TOAST_TIMEOUT)
        return el.text or el.get_attribute("textContent") or ""

    def wait_for_toast_message(self, expected_text: str, timeout: float = TOAST_TIMEOUT) -> None:
        # translate() folds ASCII case so the match is case-insensitive
        needle = _xpath_literal(expected_text.lower())
        xp = (f"{TOAST_TEXT_XPATH}[contains(translate(normalize-space(.),"
              f"'ABCDEFGHIJKLMNOPQRSTUVWXYZ','abcdefghijklmnopqrstuvwxyz'),{needle})]")
        self.utils.wait_for_visible(Locator.xpath(xp), timeout)

    def verify_toast_message(self, expected_text: str) -> None:
        message = self.get_toast_message()
        if expected_text not in message:
            raise AssertionError(f"Toast {message!r} does not contain {expected_text!r}")

    def wait_for_toast_to_disappear(self, timeout: float = TOAST_HIDE_TIMEOUT) -> bool:
        return self.wait_for_hidden_best_effort(self.toast_message, timeout)

    # -------- Tables --------

    def get_table_row_count(self) -> int:
        return self.utils.get_count(self.table_rows)

    def wait_for_table_to_load(self, timeout: float = 30) -> None:
        self.utils.wait_for_visible(self.table_rows.first(), timeout)

    def select_items_per_page(self, count: int) -> None:
        self.utils.select_option(self.items_per_page_dropdown.first(), str(count))
        self.wait_for_table_to_load()

    def search(self, search_text: str) -> None:
        self.fill(self.search_input.first(), search_text)
        self.click(self.search_button.first())
        self.wait_for_loading_to_complete()

    def clear_search(self) -> None:
        self.clear(self.search_input.first())
        self.click(self.search_button.first())
        self.wait_for_loading_to_complete()

    # -------- Utilities --------

    def take_screenshot(self, name: str):
        return self.utils.take_screenshot(name)

    def scroll_into_view(self, locator: Locator) -> None:
        self.utils.scroll_into_view(locator)

    def press_key(self, key: str) -> None:
        self.utils.press_key(key)

    def wait(self, milliseconds: int) -> None:
        self.utils.wait(milliseconds)

    def refresh(self) -> None:
        self.driver.refresh()
        self.utils.wait_for_dom_load()

    def go_back(self) -> None:
        self.driver.back()
        self.utils.wait_for_dom_load()

    def get_page_title(self) -> str:
        return self.driver.title or ""


class Page:
    def __init__(self, driver: WebDriver, root: Optional[str] = None, base: Optional[BasePage] = None):
        self.driver = driver
        self.root = root
        self.base = base or BasePage(driver)

    def open(self, url: str) -> None:
        if self.root and not url.lower().startswith(("http://", "https://")):
            url = self.root.rstrip("/") + "/" + url.lstrip("/")
        self.base.navigate_to(url)

