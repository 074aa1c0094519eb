import pytest

from run_log import Tag

FEATURE_NAME = "cart_feature"
DISPLAY_NAME = "Cart Feature Tests"
COUNTERS = ("cart_add_tests", "cart_remove_tests", "multi_item_tests", "navigation_tests")

pytestmark = pytest.mark.e2e


@pytest.fixture(autouse=True)
def on_inventory(suite, authenticated_page, inventory_page):
    suite.info("[BeforeEach] Starting individual test setup...")
    suite.step(
        "Navigate to inventory page",
        lambda: authenticated_page.goto("/inventory.html", wait_until="networkidle", timeout=10_000),
        "BeforeEach Navigation",
    )
    suite.step("Verify inventory page loaded", inventory_page.is_loaded, "BeforeEach Verification")
    suite.info("[BeforeEach] Individual test setup completed", (Tag.OUTCOME,))


def test_add_item_to_cart(suite, inventory_page):
    product = "Sauce Labs Backpack"
    with suite.case("Add single item to cart functionality", "cart_add_tests"):
        initial = suite.step("Get initial cart count", inventory_page.get_cart_count, "Add Item Test")
        suite.info(f"Initial cart count: {initial}")

        suite.step("Add product to cart", lambda: inventory_page.add_product_to_cart(product), "Add Item Test")

        count = suite.step("Get updated cart count", inventory_page.get_cart_count, "Add Item Test")
        suite.info(f"Updated cart count: {count} (expected {initial + 1})")
        assert count == initial + 1


def test_remove_item_from_inventory_page(suite, inventory_page):
    product = "Sauce Labs Bike Light"
    with suite.case("Remove item from inventory page functionality", "cart_remove_tests"):
        suite.step("Add product to cart (setup)", lambda: inventory_page.add_product_to_cart(product),
                   "Remove Item Test")
        initial = suite.step("Get cart count after adding", inventory_page.get_cart_count, "Remove Item Test")

        suite.step("Remove product from cart", lambda: inventory_page.remove_product_from_cart(product),
                   "Remove Item Test")

        count = suite.step("Get final cart count", inventory_page.get_cart_count, "Remove Item Test")
        suite.info(f"Cart count {initial} -> {count}")
        assert count == initial - 1


def test_add_multiple_items_to_cart(suite, inventory_page, cart_page):
    products = ["Sauce Labs Backpack", "Sauce Labs Bike Light", "Sauce Labs Bolt T-Shirt"]
    with suite.case("Add multiple items to cart functionality", "multi_item_tests"):
        suite.info(f"Testing multiple products: {', '.join(products)}")

        def add_all():
            for product in products:
                suite.info(f"Adding product: {product}")
                inventory_page.add_product_to_cart(product)

        suite.step("Add multiple products to cart", add_all, "Multi-Item Test")

        badge = suite.step("Get cart count after adding all items", inventory_page.get_cart_count, "Multi-Item Test")
        assert badge == len(products)

        suite.step("Navigate to cart page", inventory_page.go_to_cart, "Multi-Item Test")
        suite.step("Verify cart page loaded", cart_page.is_loaded, "Multi-Item Test")

        items = suite.step("Get cart items count", cart_page.get_cart_items_count, "Multi-Item Test")
        assert items == len(products)

        def verify_all():
            for product in products:
                cart_page.verify_item_exists(product)

        suite.step("Verify all products exist in cart", verify_all, "Multi-Item Test")


def test_remove_item_from_cart_page(suite, inventory_page, cart_page):
    product = "Sauce Labs Fleece Jacket"
    with suite.case("Remove item from cart page functionality", "cart_remove_tests"):
        suite.step("Add product to cart (setup)", lambda: inventory_page.add_product_to_cart(product),
                   "Cart Page Remove Test")
        suite.step("Navigate to cart page", inventory_page.go_to_cart, "Cart Page Remove Test")
        suite.step("Verify cart page loaded", cart_page.is_loaded, "Cart Page Remove Test")
        suite.step("Verify product exists in cart", lambda: cart_page.verify_item_exists(product),
                   "Cart Page Remove Test")

        initial = suite.step("Get initial cart items count", cart_page.get_cart_items_count, "Cart Page Remove Test")

        suite.step("Remove item from cart", lambda: cart_page.remove_item(product), "Cart Page Remove Test")

        count = suite.step("Get final cart items count", cart_page.get_cart_items_count, "Cart Page Remove Test")
        assert count == initial - 1

        suite.step("Verify item no longer exists in cart", lambda: cart_page.verify_item_does_not_exist(product),
                   "Cart Page Remove Test")


def test_continue_shopping_from_cart(suite, inventory_page, cart_page):
    with suite.case("Continue shopping navigation functionality", "navigation_tests"):
        suite.step("Navigate to cart page", inventory_page.go_to_cart, "Continue Shopping Test")
        suite.step("Verify cart page loaded", cart_page.is_loaded, "Continue Shopping Test")
        suite.step("Click continue shopping button", cart_page.continue_shopping, "Continue Shopping Test")
        suite.step("Verify returned to inventory page", inventory_page.is_loaded, "Continue Shopping Test")
