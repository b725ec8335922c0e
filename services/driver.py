# services/driver.py
from __future__ import annotations
import logging
import os
from shutil import which
from typing import Optional

from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from selenium.common.exceptions import SessionNotCreatedException

from services.config import config

log = logging.getLogger("payportal")

CHROMEDRIVER_PATH_ENV = os.getenv("CHROMEDRIVER_PATH", "")
WINDOW_SIZE = "1536,870"


def _create_service() -> Service:
    """
    Pinned chromedriver (CHROMEDRIVER_PATH, then PATH) when present,
    otherwise let Selenium Manager resolve one.
    """
    if CHROMEDRIVER_PATH_ENV and os.path.isfile(CHROMEDRIVER_PATH_ENV):
        return Service(executable_path=CHROMEDRIVER_PATH_ENV)
    found = which("chromedriver")
    if found:
        return Service(executable_path=found)
    log.info("chromedriver not found in env/PATH; using Selenium Manager.")
    return Service()


def _base_options(headless: bool) -> Options:
    opts = Options()
    opts.add_argument(f"--window-size={WINDOW_SIZE}")
    opts.add_argument("--no-sandbox")
    opts.add_argument("--disable-dev-shm-usage")
    opts.add_argument("--disable-extensions")
    opts.add_argument("--lang=en-US")
    opts.add_argument("--no-first-run")
    opts.add_argument("--no-default-browser-check")
    opts.add_experimental_option("excludeSwitches", ["enable-automation", "enable-logging"])
    opts.add_experimental_option("prefs", {
        "credentials_enable_service": False,
        "profile.password_manager_enabled": False,
    })
    if headless:
        opts.add_argument("--headless=new")
    return opts


def get_driver(headless: bool = False, page_load_timeout: Optional[int] = None) -> webdriver.Chrome:
    """One Chrome session = one page session; the caller owns and quits it."""
    cfg = config()
    timeout_s = page_load_timeout or cfg["PAGELOAD_TIMEOUT_SECONDS"]
    opts = _base_options(headless)
    log.info("Launching Chrome | headless=%s | args=%s", headless, opts.arguments)
    try:
        drv = webdriver.Chrome(service=_create_service(), options=opts)
    except SessionNotCreatedException as e:
        raise RuntimeError(
            "Failed to create Chrome session. Check the chromedriver/Chrome version match. "
            f"Original: {type(e).__name__}: {e}"
        ) from e
    drv.set_page_load_timeout(timeout_s)
    return drv
