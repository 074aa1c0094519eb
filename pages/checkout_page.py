# pages/checkout_page.py
import re
from typing import NamedTuple

from playwright.sync_api import Page, TimeoutError as PWTimeout, expect

from pages.parsing import parse_price


class OrderSummary(NamedTuple):
    subtotal: float
    tax: float
    total: float


class CheckoutPage:
    def __init__(self, page: Page):
        self.page = page
        self.first_name_input = page.locator('[data-test="firstName"]')
        self.last_name_input = page.locator('[data-test="lastName"]')
        self.postal_code_input = page.locator('[data-test="postalCode"]')
        self.continue_button = page.locator('[data-test="continue"]')
        self.cancel_button = page.locator('[data-test="cancel"]')
        self.finish_button = page.locator('[data-test="finish"]')
        self.error_message = page.locator('[data-test="error"]')
        self.complete_header = page.locator(".complete-header")
        self.back_home_button = page.locator('[data-test="back-to-products"]')
        self.cart_items = page.locator(".cart_item")
        self.subtotal_label = page.locator(".summary_subtotal_label")
        self.tax_label = page.locator(".summary_tax_label")
        self.total_label = page.locator(".summary_total_label")

    def is_step1_loaded(self):
        expect(self.page).to_have_url(re.compile(r"checkout-step-one\.html"), timeout=15_000)
        for field in (self.first_name_input, self.last_name_input, self.postal_code_input):
            expect(field).to_be_visible(timeout=10_000)

    def is_step2_loaded(self):
        expect(self.page).to_have_url(re.compile(r"checkout-step-two\.html"), timeout=15_000)
        self.page.wait_for_load_state("networkidle", timeout=10_000)
        expect(self.finish_button).to_be_visible(timeout=10_000)

    def is_complete_page_loaded(self):
        expect(self.page).to_have_url(re.compile(r"checkout-complete\.html"), timeout=15_000)
        self.page.wait_for_load_state("networkidle", timeout=10_000)
        expect(self.complete_header).to_be_visible(timeout=10_000)

    def fill_shipping_info(self, first_name: str, last_name: str, postal_code: str):
        self.first_name_input.wait_for(state="visible", timeout=10_000)
        self.first_name_input.fill(first_name)
        self.last_name_input.fill(last_name)
        self.postal_code_input.fill(postal_code)

    def _click_and_settle(self, button):
        button.wait_for(state="visible", timeout=10_000)
        button.click()
        self.page.wait_for_load_state("networkidle", timeout=10_000)

    def continue_to_overview(self):
        self._click_and_settle(self.continue_button)

    def cancel_checkout(self):
        self._click_and_settle(self.cancel_button)

    def complete_checkout(self):
        self._click_and_settle(self.finish_button)

    def click_finish_button(self):
        self._click_and_settle(self.finish_button)

    def return_to_products(self):
        self._click_and_settle(self.back_home_button)

    def verify_error_message(self, message: str):
        expect(self.error_message).to_be_visible(timeout=10_000)
        expect(self.error_message).to_contain_text(message)

    def verify_success_message(self):
        expect(self.complete_header).to_be_visible(timeout=10_000)
        expect(self.complete_header).to_contain_text("Thank you for your order")

    def get_cart_items_count(self) -> int:
        try:
            self.cart_items.first.wait_for(state="visible", timeout=10_000)
        except PWTimeout:
            return 0
        return self.cart_items.count()

    def verify_item_in_cart(self, product_name: str):
        expect(self.cart_items.filter(has_text=product_name)).to_be_visible(timeout=10_000)

    def get_order_summary_values(self) -> OrderSummary:
        self.subtotal_label.wait_for(state="visible", timeout=10_000)
        return OrderSummary(
            subtotal=parse_price(self.subtotal_label.text_content()),
            tax=parse_price(self.tax_label.text_content()),
            total=parse_price(self.total_label.text_content()),
        )
