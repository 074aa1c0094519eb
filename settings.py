# settings.py
import os

SITE_URL = os.getenv("SAUCE_BASE_URL", "https://www.saucedemo.com").rstrip("/")
INVENTORY_URL_SUFFIX = "/inventory.html"

STANDARD_USER = os.getenv("STANDARD_USER", "standard_user")
LOCKED_OUT_USER = os.getenv("LOCKED_OUT_USER", "locked_out_user")
PASSWORD = os.getenv("PASSWORD", "secret_sauce")
PRODUCT_NAME_TEST = os.getenv("PRODUCT_NAME_TEST", "Sauce Labs Backpack")

HEADLESS = (os.getenv("HEADLESS", "true") or "true").lower() not in ("0", "false", "no")
STORAGE_STATE_PATH = os.getenv("STORAGE_STATE_PATH", "storage/saucedemo.storage.json")

# Suite log harness
TEST_LOG_DIR = os.getenv("TEST_LOG_DIR", "test-logs")
SUITE_LOG_KEEP = int(os.getenv("SUITE_LOG_KEEP", "10"))
SLOW_OPERATION_MS = int(os.getenv("SLOW_OPERATION_MS", "5000"))
SUITE_SUMMARY_MAX_BYTES = int(os.getenv("SUITE_SUMMARY_MAX_BYTES", str(5 * 1024 * 1024)))
SUITE_SUMMARY_BACKUPS = int(os.getenv("SUITE_SUMMARY_BACKUPS", "5"))

PROBE_TIMEOUT = float(os.getenv("PROBE_TIMEOUT", "10"))


def credentials_from_env() -> bool:
    """True when the test users were supplied by the environment rather than defaults."""
    return bool(os.getenv("STANDARD_USER"))
