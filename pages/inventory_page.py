# pages/inventory_page.py
import re
from typing import List

from playwright.sync_api import Page, TimeoutError as PWTimeout, expect

from pages.parsing import parse_price

SORT_OPTIONS = ("az", "za", "lohi", "hilo")

# SauceDemo keeps the cart in localStorage under this key
CART_STORAGE_KEY = "cart-contents"


class InventoryPage:
    def __init__(self, page: Page):
        self.page = page
        self.product_list = page.locator(".inventory_item")
        self.product_names = page.locator(".inventory_item_name")
        self.product_prices = page.locator(".inventory_item_price")
        self.cart_icon = page.locator(".shopping_cart_link")
        self.sort_dropdown = page.locator('[data-test="product-sort-container"]')
        self.cart_badge = page.locator(".shopping_cart_badge")

    def is_loaded(self):
        expect(self.page).to_have_url(re.compile(r"inventory\.html"), timeout=15_000)
        self.page.wait_for_load_state("networkidle", timeout=10_000)
        expect(self.page.locator(".inventory_list")).to_be_visible(timeout=10_000)

    def get_product_names(self) -> List[str]:
        self.product_names.first.wait_for(state="visible", timeout=10_000)
        return self.product_names.all_text_contents()

    def get_product_prices(self) -> List[float]:
        self.product_prices.first.wait_for(state="visible", timeout=10_000)
        return [parse_price(p) for p in self.product_prices.all_text_contents()]

    def _product(self, product_name: str):
        item = self.product_list.filter(has_text=product_name)
        item.wait_for(state="visible", timeout=10_000)
        return item

    def add_product_to_cart(self, product_name: str):
        self._product(product_name).locator('[data-test^="add-to-cart"]').click()
        # badge update
        self.page.wait_for_timeout(500)

    def remove_product_from_cart(self, product_name: str):
        self._product(product_name).locator('[data-test^="remove"]').click()
        self.page.wait_for_timeout(500)

    def get_cart_count(self) -> int:
        if not self.cart_badge.is_visible():
            return 0
        try:
            text = self.cart_badge.text_content(timeout=5_000)
        except PWTimeout:
            # badge went away between the two calls
            return 0
        return int(text) if text else 0

    def go_to_cart(self):
        self.cart_icon.wait_for(state="visible", timeout=10_000)
        self.cart_icon.click()
        self.page.wait_for_load_state("networkidle", timeout=10_000)
        self.page.wait_for_timeout(1500)

    def sort_by(self, option: str):
        if option not in SORT_OPTIONS:
            raise ValueError(f"Unknown sort option {option!r}; expected one of {SORT_OPTIONS}")
        self.sort_dropdown.wait_for(state="visible", timeout=10_000)
        self.sort_dropdown.select_option(option)
        self.page.wait_for_load_state("networkidle", timeout=5_000)
        self.page.wait_for_timeout(1000)

    def clear_cart(self):
        """Drop the persisted cart so a test sharing the logged-in session starts empty."""
        self.page.evaluate("(k) => window.localStorage.removeItem(k)", CART_STORAGE_KEY)
        self.page.reload(wait_until="networkidle")
