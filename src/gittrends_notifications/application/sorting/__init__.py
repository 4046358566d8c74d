"""Application sorting – sort options and the persisted sorting state."""
from gittrends_notifications.application.sorting.options import DEFAULT_SORTING_OPTION, SortingOption
from gittrends_notifications.application.sorting.service import SortingService

__all__ = ["DEFAULT_SORTING_OPTION", "SortingOption", "SortingService"]
