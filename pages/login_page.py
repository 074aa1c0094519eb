# pages/login_page.py
from playwright.sync_api import Page, expect

SEL_USERNAME = "#user-name"
SEL_PASSWORD = "#password"
SEL_LOGIN_BTN = "#login-button"
SEL_ERROR = '[data-test="error"]'


class LoginPage:
    def __init__(self, page: Page):
        self.page = page
        self.username_input = page.locator(SEL_USERNAME)
        self.password_input = page.locator(SEL_PASSWORD)
        self.login_button = page.locator(SEL_LOGIN_BTN)
        self.error_message = page.locator(SEL_ERROR)

    def goto(self):
        # relative to the context's base_url
        self.page.goto("/", wait_until="domcontentloaded")
        self.username_input.wait_for(state="visible", timeout=10_000)

    def login(self, username: str, password: str):
        self.username_input.fill(username)
        self.password_input.fill(password)
        self.login_button.click()

    def verify_error_message(self, message: str):
        expect(self.error_message).to_be_visible(timeout=10_000)
        expect(self.error_message).to_contain_text(message)
