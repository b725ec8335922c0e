# run_demo.py
from services.config import config
from services.driver import get_driver
from services.logs import setup_logging
from services.test_data import LoginTestData
from pages.manager import PageObjectManager
from core.actions import Actions


def main():
    cfg = config()
    log = setup_logging(cfg["LOG_LEVEL"])
    driver = get_driver(headless=cfg["HEADLESS"])
    try:
        actions = Actions(driver, timeout=cfg["EXPLICIT_WAIT_SECONDS"],
                          highlight=cfg["HIGHLIGHT"], screenshots_dir=cfg["SCREENSHOTS_DIR"])
        pom = PageObjectManager(driver, base_url=cfg["BASE_URL"],
                                test_data=LoginTestData.from_file(cfg["TEST_DATA_PATH"]),
                                actions=actions, settle_ms=cfg["SETTLE_MS"])

        log.info("[1/3] Opening login page at %s", cfg["BASE_URL"])
        pom.login_page.navigate()
        pom.login_page.verify_login_page_displayed()

        log.info("[2/3] Logging in as default user")
        pom.login_page.login_with_test_data(0)

        log.info("[3/3] Landed on %s", pom.login_page.base.get_current_url())
        pom.common_utils.take_screenshot("after-login")
    finally:
        if not cfg["KEEP_BROWSER"]:
            driver.quit()


if __name__ == "__main__":
    main()
