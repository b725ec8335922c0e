# pages/manager.py
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from selenium.webdriver.remote.webdriver import WebDriver

from core.actions import Actions
from core.base import BasePage
from services.config import CURRENT_ENV
from services.test_data import LoginTestData
from pages.Login.page import LoginPage

log = logging.getLogger("payportal")

T = TypeVar("T")


class PageObjectManager:
    """
    One entry point per test session for every page object.

    Each page type is built on first request and the same instance is handed
    back afterwards. Nothing is evicted; drop the manager with the session.

        pom = PageObjectManager(driver, base_url=CURRENT_ENV)
        pom.login_page.navigate()
        pom.login_page.login("user", "pass")
    """

    def __init__(self, driver: WebDriver, base_url: Optional[str] = None,
                 test_data: Optional[LoginTestData] = None,
                 actions: Optional[Actions] = None, settle_ms: Optional[int] = None):
        self.driver = driver
        self.base_url = base_url or CURRENT_ENV
        self.test_data = test_data
        self.settle_ms = settle_ms
        self._actions = actions or Actions(driver)
        self._cache: Dict[type, Any] = {}
        self._factories: Dict[type, Callable[[], Any]] = {
            Actions: lambda: self._actions,
            BasePage: lambda: BasePage(self.driver, self._actions),
            LoginPage: self._build_login_page,
        }

    def _build_login_page(self) -> LoginPage:
        kwargs = {}
        if self.settle_ms is not None:
            kwargs["settle_ms"] = self.settle_ms
        return LoginPage(self.driver, root=self.base_url, base=self.get(BasePage),
                         test_data=self.test_data, **kwargs)

    def register(self, page_cls: Type[T], factory: Callable[[], T]) -> None:
        """Teach the manager how to build a page type it doesn't know yet."""
        if page_cls in self._cache:
            raise ValueError(f"{page_cls.__name__} was already built for this session")
        self._factories[page_cls] = factory

    def get(self, page_cls: Type[T]) -> T:
        if page_cls not in self._cache:
            factory = self._factories.get(page_cls)
            if factory is None:
                raise KeyError(f"No page object registered for {page_cls.__name__}")
            log.debug("building %s", page_cls.__name__)
            self._cache[page_cls] = factory()
        return self._cache[page_cls]

    @property
    def login_page(self) -> LoginPage:
        return self.get(LoginPage)

    @property
    def common_utils(self) -> Actions:
        return self.get(Actions)

    @property
    def base_page(self) -> BasePage:
        return self.get(BasePage)
