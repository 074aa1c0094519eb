"""
Browser fixtures for the SauceDemo suite.

One logged-in context per worker (session scope under pytest-xdist), one
fresh page per test, one suite log per feature module.

Parallel runs: pytest -m e2e -n auto. Each worker receives whole test
files (see tests/conftest.py), so a feature has one run log per execution.
"""
import pytest
import requests
from playwright.sync_api import Error as PlaywrightError, sync_playwright

import settings
from auth_session import open_authenticated_context
from pages import CartPage, CheckoutPage, InventoryPage, LoginPage
from site_probe import check_site
from suite_run import SuiteRun


@pytest.fixture(scope="session")
def browser():
    try:
        check_site(settings.SITE_URL)
    except requests.RequestException as e:
        pytest.skip(f"{settings.SITE_URL} is unreachable: {e}")

    with sync_playwright() as p:
        try:
            b = p.chromium.launch(headless=settings.HEADLESS)
        except PlaywrightError as e:
            pytest.skip(f"Chromium could not be launched: {e}")
        yield b
        b.close()


@pytest.fixture(scope="session")
def authenticated_context(browser):
    ctx = open_authenticated_context(browser)
    yield ctx
    ctx.close()


@pytest.fixture
def authenticated_page(authenticated_context):
    page = authenticated_context.new_page()
    page.goto(settings.INVENTORY_URL_SUFFIX, wait_until="networkidle")
    InventoryPage(page).clear_cart()
    yield page
    page.close()


@pytest.fixture
def page(browser):
    ctx = browser.new_context(base_url=settings.SITE_URL)
    page = ctx.new_page()
    yield page
    ctx.close()


@pytest.fixture
def login_page(page):
    return LoginPage(page)


@pytest.fixture
def inventory_page(authenticated_page):
    return InventoryPage(authenticated_page)


@pytest.fixture
def cart_page(authenticated_page):
    return CartPage(authenticated_page)


@pytest.fixture
def checkout_page(authenticated_page):
    return CheckoutPage(authenticated_page)


@pytest.fixture(scope="module")
def suite(request, browser):
    """
    Suite log for the requesting module, named by its FEATURE_NAME / DISPLAY_NAME.

    Needs `browser` so an offline site or a failed launch skips the module
    before any run is logged or old run logs are rotated away.
    """
    module = request.module
    run = SuiteRun(module.FEATURE_NAME, module.DISPLAY_NAME, getattr(module, "COUNTERS", ()))
    run.start()
    yield run
    run.finish()
