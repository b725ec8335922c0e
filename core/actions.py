from __future__ import annotations
import logging
import re
import time
from pathlib import Path
from typing import Callable, List, Optional, Union

from selenium.common.exceptions import StaleElementReferenceException, TimeoutException
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import Select, WebDriverWait

from core.locator import Locator

log = logging.getLogger("payportal")

DEFAULT_TIMEOUT = 30
HIGHLIGHT_PAUSE_MS = 300
TYPE_DELAY_MS = 100

_HIGHLIGHT_ON_JS = (
    "arguments[0].style.border='3px solid red';"
    "arguments[0].style.backgroundColor='yellow';"
)
_HIGHLIGHT_OFF_JS = (
    "arguments[0].style.border='';"
    "arguments[0].style.backgroundColor='';"
)

# readyState 'complete' plus Angular's own testability hook when the app exposes it
_NETWORK_IDLE_JS = """
try {
  if (document.readyState !== 'complete') return false;
  if (window.getAllAngularTestabilities) {
    var t = window.getAllAngularTestabilities();
    for (var i = 0; i < t.length; i++) {
      if (t[i].isStable && !t[i].isStable()) return false;
    }
  }
  return true;
} catch (e) { return true; }
"""
_DOM_READY_JS = "return document.readyState === 'interactive' || document.readyState === 'complete';"

_MODIFIERS = {"CONTROL", "SHIFT", "ALT", "META", "COMMAND"}


def _key(name: str) -> str:
    """'Enter' / 'ArrowDown' / 'a' -> the matching Selenium key."""
    if len(name) == 1:
        return name
    attr = re.sub(r"(?<!^)(?=[A-Z])", "_", name).upper()
    if attr == "ESC":
        attr = "ESCAPE"
    return getattr(Keys, attr, name)


class Actions:
    """
    Interaction primitives over one WebDriver session.

    click/fill flash a highlight on the target (debug aid), then wait for it to
    be visible, then act. Reads don't wait except get_text/get_all_texts.
    Fatal waits raise the builtin TimeoutError; timeouts are in seconds,
    pauses and delays in milliseconds.
    """

    def __init__(self, driver: WebDriver, timeout: Optional[float] = None,
                 highlight: bool = True, screenshots_dir: Union[str, Path] = "screenshots",
                 poll: float = 0.25):
        self.driver = driver
        self.timeout = DEFAULT_TIMEOUT if timeout is None else timeout
        self.highlight_enabled = highlight
        self.screenshots_dir = Path(screenshots_dir)
        self.poll = poll

    # ---------- waiting ----------

    def until(self, predicate: Callable[[WebDriver], object], timeout: Optional[float], what: str):
        t = self.timeout if timeout is None else timeout
        try:
            return WebDriverWait(self.driver, t, poll_frequency=self.poll,
                                 ignored_exceptions=(StaleElementReferenceException,)).until(predicate)
        except TimeoutException:
            raise TimeoutError(f"Timeout {t}s exceeded waiting for {what}") from None

    def _wait_attached(self, locator: Locator, timeout: Optional[float] = None) -> WebElement:
        return self.until(lambda d: (locator.resolve(d) or [None])[0], timeout,
                           f"{locator} to be attached")

    def wait_for_visible(self, locator: Locator, timeout: Optional[float] = None) -> WebElement:
        return self.until(lambda d: locator.first_visible(d), timeout, f"{locator} to be visible")

    def wait_for_hidden(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        return self.until(lambda d: locator.first_visible(d) is None, timeout, f"{locator} to be hidden")

    def wait_for_network_idle(self, timeout: Optional[float] = None) -> None:
        self.until(lambda d: bool(d.execute_script(_NETWORK_IDLE_JS)), timeout, "network idle")

    def wait_for_dom_load(self, timeout: Optional[float] = None) -> None:
        self.until(lambda d: bool(d.execute_script(_DOM_READY_JS)), timeout, "DOM content loaded")

    # ---------- interactions ----------

    def highlight(self, locator: Locator) -> None:
        el = self._wait_attached(locator)
        try:
            self.driver.execute_script(_HIGHLIGHT_ON_JS, el)
            self.wait(HIGHLIGHT_PAUSE_MS)
            self.driver.execute_script(_HIGHLIGHT_OFF_JS, el)
        except StaleElementReferenceException:
            # element re-rendered mid-flash; the action below re-resolves it
            pass

    def click(self, locator: Locator, highlight: bool = True) -> None:
        if highlight and self.highlight_enabled:
            self.highlight(locator)
        self.wait_for_visible(locator).click()

    def fill(self, locator: Locator, text: str, highlight: bool = True) -> None:
        if highlight and self.highlight_enabled:
            self.highlight(locator)
        el = self.wait_for_visible(locator)
        el.clear()
        el.send_keys(text)

    def clear(self, locator: Locator) -> None:
        # Keystrokes, not WebElement.clear(): Angular only syncs its form model on input events
        el = self.wait_for_visible(locator)
        el.send_keys(Keys.CONTROL, "a")
        el.send_keys(Keys.BACKSPACE)

    def type(self, locator: Locator, text: str, delay: int = TYPE_DELAY_MS) -> None:
        el = self.wait_for_visible(locator)
        for ch in text:
            el.send_keys(ch)
            if delay:
                self.wait(delay)

    def select_option(self, locator: Locator, value: str) -> None:
        el = self.wait_for_visible(locator)
        Select(el).select_by_value(str(value))

    # ---------- reads ----------

    def get_text(self, locator: Locator) -> str:
        el = self.wait_for_visible(locator)
        return el.text or el.get_attribute("textContent") or ""

    def get_all_texts(self, locator: Locator) -> List[str]:
        # Only the first match is awaited; later matches still rendering are not guaranteed.
        self.wait_for_visible(locator.first())
        return [(el.text or el.get_attribute("textContent") or "") for el in locator.resolve(self.driver)]

    def is_visible(self, locator: Locator) -> bool:
        return locator.first_visible(self.driver) is not None

    def is_enabled(self, locator: Locator) -> bool:
        els = locator.resolve(self.driver)
        return bool(els) and els[0].is_enabled()

    def get_count(self, locator: Locator) -> int:
        return len(locator.resolve(self.driver))

    def input_value(self, locator: Locator) -> str:
        return self._wait_attached(locator).get_attribute("value") or ""

    # ---------- page utilities ----------

    def take_screenshot(self, label: str) -> Path:
        self.screenshots_dir.mkdir(parents=True, exist_ok=True)
        path = self.screenshots_dir / f"{label}-{int(time.time() * 1000)}.png"
        self.driver.save_screenshot(str(path))
        log.info("Screenshot saved: %s", path)
        return path

    def scroll_into_view(self, locator: Locator) -> None:
        el = self._wait_attached(locator)
        self.driver.execute_script("arguments[0].scrollIntoView({block:'center'});", el)

    def press_key(self, key: str) -> None:
        """Playwright-style names: 'Enter', 'Escape', 'Control+A'."""
        *mods, last = key.split("+") if len(key) > 1 else [key]
        chain = ActionChains(self.driver)
        held = [_key(m) for m in mods if m.upper() in _MODIFIERS]
        for m in held:
            chain.key_down(m)
        chain.send_keys(_key(last))
        for m in reversed(held):
            chain.key_up(m)
        chain.perform()

    def wait(self, milliseconds: int) -> None:
        time.sleep(milliseconds / 1000.0)
