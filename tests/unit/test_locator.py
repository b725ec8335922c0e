import pytest
from selenium.webdriver.common.by import By

from core.locator import Locator
from fakes import FakeDriver, FakeElement


def test_resolve_is_not_cached():
    d = FakeDriver()
    loc = Locator.css(".row")
    assert loc.resolve(d) == []
    row = d.put(loc, FakeElement("a"))
    assert loc.resolve(d) == [row]
    assert d.lookups == 2


def test_nth_narrows_and_tolerates_missing_index():
    d = FakeDriver()
    loc = Locator.css("li")
    a, b = d.put(loc, FakeElement("a"), FakeElement("b"))
    assert loc.first().resolve(d) == [a]
    assert loc.nth(1).resolve(d) == [b]
    assert loc.nth(5).resolve(d) == []


def test_first_visible_skips_hidden_matches():
    d = FakeDriver()
    loc = Locator.css("li")
    _, shown = d.put(loc, FakeElement(displayed=False), FakeElement())
    assert loc.first_visible(d) is shown
    assert loc.first().first_visible(d) is None


def test_union_builds_selector_list():
    loc = Locator.union(".a", " mat-error ", "")
    assert loc.by == By.CSS_SELECTOR
    assert loc.value == ".a, mat-error"


def test_union_needs_a_selector():
    with pytest.raises(ValueError):
        Locator.union()


def test_xpath_prefix_is_stripped():
    assert Locator.xpath("xpath=//input").value == "//input"


def test_describe_mentions_index():
    assert "nth=0" in Locator.css("#x").first().describe()
