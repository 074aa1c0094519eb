from pages.cart_page import CartPage
from pages.checkout_page import CheckoutPage, OrderSummary
from pages.inventory_page import InventoryPage
from pages.login_page import LoginPage
from pages.parsing import parse_price

__all__ = ["CartPage", "CheckoutPage", "InventoryPage", "LoginPage", "OrderSummary", "parse_price"]
