"""Unit tests – SortingService."""
from __future__ import annotations

from gittrends_notifications.adapters.storage import InMemoryPreferences
from gittrends_notifications.application.sorting import SortingOption, SortingService


class TestSortingService:
    def test_defaults(self):
        service = SortingService(InMemoryPreferences())
        assert service.current_option is SortingOption.STARS
        assert service.is_reversed is False

    def test_reselecting_toggles_direction(self):
        service = SortingService(InMemoryPreferences())
        service.apply(SortingOption.STARS)
        assert service.is_reversed is True
        service.apply(SortingOption.STARS)
        assert service.is_reversed is False

    def test_new_option_resets_direction(self):
        service = SortingService(InMemoryPreferences())
        service.apply(SortingOption.STARS)
        service.apply(SortingOption.CLONES)
        assert service.current_option is SortingOption.CLONES
        assert service.is_reversed is False

    def test_state_is_persisted(self):
        preferences = InMemoryPreferences()
        SortingService(preferences).apply(SortingOption.FORKS)
        assert SortingService(preferences).current_option is SortingOption.FORKS

    def test_unknown_stored_option_falls_back_to_default(self):
        preferences = InMemoryPreferences({"SortingService.CurrentOption": "Bogus"})
        assert SortingService(preferences).current_option is SortingOption.STARS
