"""Testing fakes – FakeDeepLinkPresenter."""
from __future__ import annotations

import dataclasses
from typing import Awaitable, Callable

from gittrends_notifications.application.repositories import Repository


@dataclasses.dataclass(frozen=True)
class DisplayedAlert:
    title: str
    message: str
    accept: str
    decline: str | None


class FakeDeepLinkPresenter:
    """Records prompts and navigation; answers confirm prompts with ``answer``.

    ``on_show_settings`` runs when the settings UI is requested, which lets a
    test simulate the user returning to the app.
    """

    def __init__(self, *, is_interactive: bool = True, answer: bool | None = True) -> None:
        self._is_interactive = is_interactive
        self.answer = answer
        self.alerts: list[DisplayedAlert] = []
        self.navigations: list[Repository] = []
        self.settings_ui_shown = 0
        self.on_show_settings: Callable[[], Awaitable[None]] | None = None

    @property
    def is_interactive(self) -> bool:
        return self._is_interactive

    async def display_alert(
        self,
        title: str,
        message: str,
        accept: str,
        decline: str | None = None,
    ) -> bool | None:
        self.alerts.append(DisplayedAlert(title, message, accept, decline))
        if decline is None:
            return None
        return self.answer

    async def show_settings_ui(self) -> None:
        self.settings_ui_shown += 1
        if self.on_show_settings is not None:
            await self.on_show_settings()

    async def navigate_to_trends_page(self, repository: Repository) -> None:
        self.navigations.append(repository)


__all__ = ["DisplayedAlert", "FakeDeepLinkPresenter"]
