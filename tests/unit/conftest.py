import pytest

from core.actions import Actions
from core.base import BasePage
from fakes import FakeDriver


@pytest.fixture
def driver():
    return FakeDriver(url="https://portal.qat.anddone.com/#/login", title="AndDone Portal")


@pytest.fixture
def actions(driver):
    return Actions(driver, timeout=0.3, highlight=False, poll=0.02)


@pytest.fixture
def base(driver, actions):
    return BasePage(driver, actions)
