"""SortingService – persisted current sort option and direction."""
from __future__ import annotations

from gittrends_notifications.application.storage import Preferences
from gittrends_notifications.application.sorting.options import DEFAULT_SORTING_OPTION, SortingOption


class SortingService:
    """Current / requested sort order for the repository list.

    Re-selecting the current option flips the direction; choosing a
    different option resets it.
    """

    _CURRENT_OPTION_KEY = "SortingService.CurrentOption"
    _IS_REVERSED_KEY = "SortingService.IsReversed"

    def __init__(self, preferences: Preferences) -> None:
        self._preferences = preferences

    @property
    def current_option(self) -> SortingOption:
        raw = self._preferences.get(self._CURRENT_OPTION_KEY, DEFAULT_SORTING_OPTION.value)
        try:
            return SortingOption(raw)
        except ValueError:
            return DEFAULT_SORTING_OPTION

    @current_option.setter
    def current_option(self, option: SortingOption) -> None:
        self._preferences.set(self._CURRENT_OPTION_KEY, option.value)

    @property
    def is_reversed(self) -> bool:
        return bool(self._preferences.get(self._IS_REVERSED_KEY, False))

    @is_reversed.setter
    def is_reversed(self, value: bool) -> None:
        self._preferences.set(self._IS_REVERSED_KEY, value)

    def apply(self, option: SortingOption) -> None:
        if option is self.current_option:
            self.is_reversed = not self.is_reversed
        else:
            self.is_reversed = False
        self.current_option = option


__all__ = ["SortingService"]
