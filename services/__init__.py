from .config import CURRENT_ENV, resolve_environment_url
from .driver import get_driver
from .test_data import LoginTestData

__all__ = ["CURRENT_ENV", "resolve_environment_url", "get_driver", "LoginTestData"]
