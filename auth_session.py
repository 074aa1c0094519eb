# auth_session.py
import json
import logging
from pathlib import Path

from playwright.sync_api import Browser, BrowserContext, Page, sync_playwright

import settings
from pages.login_page import LoginPage

log = logging.getLogger(__name__)


def login(page: Page, username: str = settings.STANDARD_USER, password: str = settings.PASSWORD):
    login_page = LoginPage(page)
    login_page.goto()
    login_page.login(username, password)

    # Confirm login by waiting for the inventory page
    page.wait_for_url(f"**{settings.INVENTORY_URL_SUFFIX}", timeout=20_000)
    page.wait_for_load_state("networkidle")


def open_authenticated_context(
    browser: Browser,
    username: str = settings.STANDARD_USER,
    password: str = settings.PASSWORD,
    base_url: str = settings.SITE_URL,
) -> BrowserContext:
    """Log in once; tests then open their own pages inside the returned context."""
    ctx = browser.new_context(base_url=base_url)
    page = ctx.new_page()
    try:
        login(page, username, password)
    except Exception:
        ctx.close()
        raise
    page.close()
    log.info("authenticated context ready for %s at %s", username, base_url)
    return ctx


def summarize_storage_state(path) -> dict:
    data = json.loads(Path(path).read_text())
    origins = data.get("origins", [])
    return {
        "saved_to": str(path),
        "cookies": len(data.get("cookies", [])),
        "origins": len(origins),
        "localStorage_items": sum(len(o.get("localStorage", [])) for o in origins),
    }


def save_storage_state(ctx: BrowserContext, path=settings.STORAGE_STATE_PATH) -> dict:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    # captures cookies + localStorage for the site origin
    ctx.storage_state(path=str(path))
    return summarize_storage_state(path)


def main():
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=settings.HEADLESS)
        ctx = open_authenticated_context(browser)
        summary = save_storage_state(ctx)
        browser.close()

    # Print a tiny summary so you can verify
    for key, value in summary.items():
        print(f"{key}:", value)


if __name__ == "__main__":
    main()
