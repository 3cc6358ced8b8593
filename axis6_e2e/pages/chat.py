from __future__ import annotations

import re
from urllib.parse import parse_qs, urlparse

from playwright.async_api import Locator, expect

from axis6_e2e.pages.base import BasePage

ROOM_URL_RE = re.compile(r"/chat\?(?:.*&)?room=[^&#]+")


class ChatPage(BasePage):
    PATH = "/chat"
    HEADING = "Chat"

    def room_button(self, name: str) -> Locator:
        return self.page.get_by_role("button", name=name)

    def composer(self, room_name: str) -> Locator:
        return self.page.get_by_placeholder(f"Message #{room_name}...")

    async def verify_loaded(self) -> None:
        await self.verify_url()
        await expect(self.heading).to_be_visible(timeout=self.timeout_ms)

    async def open_room(self, name: str) -> Locator:
        """Select a room from the sidebar and return its message composer."""
        await self.room_button(name).first.click()
        composer = self.composer(name)
        await expect(composer).to_be_visible(timeout=self.timeout_ms)
        return composer


class NewChatRoomPage(BasePage):
    PATH = "/chat/new"
    HEADING = "Create New Chat Room"

    @property
    def name_input(self) -> Locator:
        return self.page.get_by_placeholder("e.g., Morning Motivation, Fitness Goals")

    @property
    def description_input(self) -> Locator:
        return self.page.get_by_placeholder("What's this room about?")

    @property
    def create_button(self) -> Locator:
        return self.page.get_by_role("button", name="Create Room")

    async def verify_loaded(self) -> None:
        await self.verify_url()
        await expect(self.heading).to_be_visible(timeout=self.timeout_ms)
        await expect(self.name_input).to_be_visible(timeout=self.timeout_ms)
        await expect(self.create_button).to_be_disabled(timeout=self.timeout_ms)

    async def create_room(self, name: str, description: str = "") -> str:
        """Submit the form and return the new room's id from the redirect URL."""
        await self.name_input.fill(name)
        if description:
            await self.description_input.fill(description)
        await expect(self.create_button).to_be_enabled(timeout=self.timeout_ms)
        await self.create_button.click()
        await expect(self.page).to_have_url(ROOM_URL_RE, timeout=self.timeout_ms)
        return parse_qs(urlparse(self.page.url).query)["room"][0]
