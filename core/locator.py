from __future__ import annotations
from dataclasses import dataclass, replace
from typing import List, Optional

from selenium.common.exceptions import StaleElementReferenceException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement


@dataclass(frozen=True)
class Locator:
    """
    Re-evaluatable reference to zero-or-more elements.
    Nothing is cached: every call to resolve() asks the driver again.
    """
    by: str
    value: str
    index: Optional[int] = None

    @classmethod
    def css(cls, selector: str) -> "Locator":
        return cls(By.CSS_SELECTOR, selector)

    @classmethod
    def xpath(cls, expr: str) -> "Locator":
        if expr.startswith("xpath="):
            expr = expr[len("xpath="):]
        return cls(By.XPATH, expr)

    @classmethod
    def union(cls, *selectors: str) -> "Locator":
        """One CSS selector list matching any of the given selectors."""
        parts = [s.strip() for s in selectors if s and s.strip()]
        if not parts:
            raise ValueError("union() needs at least one selector")
        return cls.css(", ".join(parts))

    def first(self) -> "Locator":
        return self.nth(0)

    def nth(self, i: int) -> "Locator":
        return replace(self, index=i)

    def resolve(self, driver: WebDriver) -> List[WebElement]:
        found = driver.find_elements(self.by, self.value)
        if self.index is None:
            return list(found)
        try:
            return [found[self.index]]
        except IndexError:
            return []

    def first_visible(self, driver: WebDriver) -> Optional[WebElement]:
        for el in self.resolve(driver):
            try:
                if el.is_displayed():
                    return el
            except StaleElementReferenceException:
                continue
        return None

    def describe(self) -> str:
        s = f"{self.by}={self.value!r}"
        if self.index is not None:
            s += f" [nth={self.index}]"
        return s

    __str__ = describe
