"""User-facing notification and prompt text."""
from __future__ import annotations

TRENDING_REPOSITORIES_NOTIFICATION_TITLE = "Your Repos Are Trending"
SINGLE_REPOSITORY_NOTIFICATION_MESSAGE = "{name} by {owner} is trending"
MULTIPLE_REPOSITORY_NOTIFICATION_MESSAGE = "{count} of your repositories are trending"

NOTIFICATIONS_DISABLED = "Notifications Disabled"
NOTIFICATIONS_NOT_SUPPORTED = "Notifications Are Not Supported"

SINGLE_TRENDING_REPOSITORY_TITLE = "{name} is Trending"
SINGLE_TRENDING_REPOSITORY_MESSAGE = "Let's check out its chart"
SINGLE_TRENDING_REPOSITORY_ACCEPT = "Let's Go"
SINGLE_TRENDING_REPOSITORY_DECLINE = "Not Right Now"

MULTIPLE_TRENDING_REPOSITORIES_SORTED_MESSAGE = "The trending repositories are shown at the top of the list"
MULTIPLE_TRENDING_REPOSITORIES_CANCEL = "Thanks"
MULTIPLE_TRENDING_REPOSITORIES_UNSORTED_MESSAGE = "Let's sort the list to show the trending repositories first"
MULTIPLE_TRENDING_REPOSITORIES_UNSORTED_ACCEPT = "Sort"
MULTIPLE_TRENDING_REPOSITORIES_UNSORTED_DECLINE = "Not Right Now"

DEFAULT_CHANNEL_IDENTIFIER = "GitTrends"
DEFAULT_CHANNEL_DESCRIPTION = "GitTrends Notifications"


def create_single_repository_notification_message(repository_name: str, repository_owner: str) -> str:
    return SINGLE_REPOSITORY_NOTIFICATION_MESSAGE.format(name=repository_name, owner=repository_owner)


def create_multiple_repository_notification_message(count: int) -> str:
    return MULTIPLE_REPOSITORY_NOTIFICATION_MESSAGE.format(count=count)
