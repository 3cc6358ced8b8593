"""Login and registration forms."""
from __future__ import annotations

from typing import Optional

from playwright.async_api import Locator, expect

from axis6_e2e.pages.base import BasePage

# Next.js injects a 1x1 route announcer with role="alert" into every page
ALERT_SELECTOR = '[role="alert"]:not(#__next-route-announcer__)'


class LoginPage(BasePage):
    PATH = "/auth/login"

    @property
    def email_input(self) -> Locator:
        return self.by_testid("email-input")

    @property
    def password_input(self) -> Locator:
        return self.by_testid("password-input")

    @property
    def submit_button(self) -> Locator:
        return self.by_testid("login-submit")

    @property
    def error_alert(self) -> Locator:
        return self.page.locator(ALERT_SELECTOR)

    @property
    def register_link(self) -> Locator:
        return self.page.locator('a[href="/auth/register"]').first

    @property
    def forgot_password_link(self) -> Locator:
        return self.page.locator('a[href="/auth/forgot"]')

    async def verify_login_form(self) -> None:
        await expect(self.email_input).to_be_visible(timeout=self.timeout_ms)
        await expect(self.password_input).to_be_visible(timeout=self.timeout_ms)
        await expect(self.submit_button).to_be_enabled(timeout=self.timeout_ms)

    verify_loaded = verify_login_form

    async def fill_credentials(self, email: str, password: str) -> None:
        await self.email_input.fill(email)
        await self.password_input.fill(password)

    async def login(self, email: str, password: str) -> None:
        """Submit the form. Callers decide how to wait for the outcome."""
        await self.fill_credentials(email, password)
        await self.submit_button.click()

    async def error_text(self) -> str:
        if await self.error_alert.count() == 0:
            return ""
        return (await self.error_alert.first.text_content() or "").strip()

    async def has_visible_error(self) -> bool:
        """True once an alert with text is shown; empty live regions do not count."""
        alert = self.error_alert.first
        if not await alert.is_visible():
            return False
        return bool((await alert.text_content() or "").strip())


class RegisterPage(BasePage):
    PATH = "/auth/register"

    @property
    def name_input(self) -> Locator:
        return self.by_testid("name-input")

    @property
    def email_input(self) -> Locator:
        return self.by_testid("email-input")

    @property
    def password_input(self) -> Locator:
        return self.by_testid("password-input")

    @property
    def confirm_password_input(self) -> Locator:
        return self.by_testid("confirm-password-input")

    @property
    def terms_checkbox(self) -> Locator:
        return self.page.locator('input[type="checkbox"][required]')

    @property
    def newsletter_checkbox(self) -> Locator:
        return self.page.locator('input[type="checkbox"]:not([required])')

    @property
    def submit_button(self) -> Locator:
        return self.by_testid("register-submit")

    @property
    def error_alert(self) -> Locator:
        return self.page.locator(ALERT_SELECTOR)

    async def verify_register_form(self) -> None:
        await expect(self.name_input).to_be_visible(timeout=self.timeout_ms)
        await expect(self.email_input).to_be_visible(timeout=self.timeout_ms)
        await expect(self.password_input).to_be_visible(timeout=self.timeout_ms)
        await expect(self.confirm_password_input).to_be_visible(timeout=self.timeout_ms)
        await expect(self.terms_checkbox).to_be_visible(timeout=self.timeout_ms)
        await expect(self.submit_button).to_be_visible(timeout=self.timeout_ms)

    verify_loaded = verify_register_form

    async def register(
        self,
        email: str,
        password: str,
        name: Optional[str] = None,
        accept_terms: bool = True,
        newsletter: bool = False,
    ) -> None:
        if name is not None:
            await self.name_input.fill(name)
        await self.email_input.fill(email)
        await self.password_input.fill(password)
        await self.confirm_password_input.fill(password)
        if accept_terms:
            await self.terms_checkbox.check()
        if newsletter:
            await self.newsletter_checkbox.check()
        await self.submit_button.click()
