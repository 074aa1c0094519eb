# pages/cart_page.py
import re

from playwright.sync_api import Page, expect


class CartPage:
    def __init__(self, page: Page):
        self.page = page
        self.cart_items = page.locator(".cart_item")
        self.checkout_button = page.locator('[data-test="checkout"]')
        self.continue_shopping_button = page.locator('[data-test="continue-shopping"]')

    def is_loaded(self):
        expect(self.page).to_have_url(re.compile(r"cart\.html"), timeout=15_000)
        self.page.wait_for_load_state("networkidle", timeout=10_000)
        expect(self.page.locator(".cart_list")).to_be_visible(timeout=10_000)

    def get_cart_items_count(self) -> int:
        self.page.wait_for_load_state("networkidle", timeout=5_000)
        return self.cart_items.count()

    def remove_item(self, product_name: str):
        remove = self.cart_items.filter(has_text=product_name).locator('[data-test^="remove"]')
        remove.wait_for(state="visible", timeout=10_000)
        remove.click()
        self.page.wait_for_load_state("networkidle", timeout=5_000)
        self.page.wait_for_timeout(1000)

    def verify_item_exists(self, product_name: str):
        expect(self.cart_items.filter(has_text=product_name)).to_be_visible(timeout=10_000)

    def verify_item_does_not_exist(self, product_name: str):
        self.page.wait_for_load_state("networkidle", timeout=5_000)
        expect(self.cart_items.filter(has_text=product_name)).to_have_count(0)

    def proceed_to_checkout(self):
        self.checkout_button.wait_for(state="visible", timeout=10_000)
        self.checkout_button.click()
        self.page.wait_for_load_state("networkidle", timeout=10_000)

    def continue_shopping(self):
        self.continue_shopping_button.wait_for(state="visible", timeout=10_000)
        self.continue_shopping_button.click()
        self.page.wait_for_load_state("networkidle", timeout=10_000)
