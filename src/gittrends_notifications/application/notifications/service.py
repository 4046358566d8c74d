"""NotificationService – coordinates hub registration, permission and trending notifications.

Lifecycle::

    app start  ──► initialize()                 cached hub info or fresh fetch, channel setup
    user opt-in ─► register(show_settings_ui)   permission state machine, may wait on app resume
    background ──► try_send_trending_notification(repositories)
    tap        ──► handle_notification(title, message, badge_count)

Events are owned by the instance; subscribe with e.g.
``service.registration_completed.subscribe(handler)``.
"""
from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Any, Coroutine, Sequence

from gittrends_notifications.application.lifecycle import AppLifecycle
from gittrends_notifications.application.notifications import messages
from gittrends_notifications.application.notifications.hub import (
    NotificationHubInformation,
    deserialize_hub_information,
)
from gittrends_notifications.application.notifications.models import (
    AccessState,
    Channel,
    ChannelImportance,
    Notification,
    RegistrationOutcome,
)
from gittrends_notifications.application.notifications.ports import (
    AnalyticsService,
    DeepLinkPresenter,
    HubInformationService,
    NotificationManager,
    Preferences,
    SecureStorage,
)
from gittrends_notifications.application.notifications.resume import AppResumeListener
from gittrends_notifications.application.notifications.settings_request import PendingSettingsRequest
from gittrends_notifications.application.notifications.throttle import TrendingNotificationThrottle
from gittrends_notifications.application.repositories import Repository
from gittrends_notifications.application.sorting import SortingOption, SortingService
from gittrends_notifications.config import NotificationSettings, ThrottleMode
from gittrends_notifications.kernel.errors import (
    BadgeCountOutOfRangeError,
    PromptResultError,
    RegistrationInProgressError,
)
from gittrends_notifications.kernel.events import EventSource
from gittrends_notifications.kernel.time import Clock, SystemClock
from gittrends_notifications.observability.logging import get_logger

__all__ = ["NotificationService"]

_log = get_logger(__name__)


class NotificationService:
    """Central authority for enabling, sending and handling notifications."""

    NOTIFICATION_HUB_INFORMATION_KEY = "GetNotificationHubInformation"

    _SHOULD_SEND_NOTIFICATIONS_KEY = "ShouldSendNotifications"
    _HAVE_NOTIFICATIONS_BEEN_REQUESTED_KEY = "HaveNotificationsBeenRequested"
    _MOST_RECENT_REPOSITORY_NAME_KEY = "MostRecentTrendingRepositoryName"
    _MOST_RECENT_REPOSITORY_OWNER_KEY = "MostRecentTrendingRepositoryOwner"

    def __init__(
        self,
        *,
        preferences: Preferences,
        secure_storage: SecureStorage,
        notification_manager: NotificationManager,
        presenter: DeepLinkPresenter,
        hub_service: HubInformationService,
        analytics: AnalyticsService,
        sorting_service: SortingService,
        lifecycle: AppLifecycle,
        settings: NotificationSettings | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._preferences = preferences
        self._secure_storage = secure_storage
        self._notification_manager = notification_manager
        self._presenter = presenter
        self._hub_service = hub_service
        self._analytics = analytics
        self._sorting_service = sorting_service
        self._lifecycle = lifecycle
        self._settings = settings or NotificationSettings()
        self._clock: Clock = clock or SystemClock()

        self.initialization_completed: EventSource[NotificationHubInformation] = EventSource(
            "InitializationCompleted"
        )
        self.registration_completed: EventSource[RegistrationOutcome] = EventSource("RegistrationCompleted")
        self.sorting_option_requested: EventSource[SortingOption] = EventSource("SortingOptionRequested")

        self._settings_request = PendingSettingsRequest()
        self._registration_in_progress = False
        self._throttle = TrendingNotificationThrottle(preferences, self._settings.throttle_window)
        self._resume_listener = AppResumeListener(self._settings_request, notification_manager)
        self._resume_listener.attach(lifecycle)
        self._background_tasks: set[asyncio.Task[Any]] = set()

    # ------------------------------------------------------------------
    # Persisted flags
    # ------------------------------------------------------------------

    @property
    def should_send_notifications(self) -> bool:
        return bool(self._preferences.get(self._SHOULD_SEND_NOTIFICATIONS_KEY, False))

    @should_send_notifications.setter
    def should_send_notifications(self, value: bool) -> None:
        self._preferences.set(self._SHOULD_SEND_NOTIFICATIONS_KEY, value)

    @property
    def have_notifications_been_requested(self) -> bool:
        return bool(self._preferences.get(self._HAVE_NOTIFICATIONS_BEEN_REQUESTED_KEY, False))

    @have_notifications_been_requested.setter
    def have_notifications_been_requested(self, value: bool) -> None:
        self._preferences.set(self._HAVE_NOTIFICATIONS_BEEN_REQUESTED_KEY, value)

    @property
    def most_recent_trending_repository_name(self) -> str:
        return str(self._preferences.get(self._MOST_RECENT_REPOSITORY_NAME_KEY, ""))

    @property
    def most_recent_trending_repository_owner(self) -> str:
        return str(self._preferences.get(self._MOST_RECENT_REPOSITORY_OWNER_KEY, ""))

    @property
    def is_awaiting_settings(self) -> bool:
        """``True`` while a ``register`` call waits for the app to resume."""
        return self._settings_request.is_pending

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        """Load hub registration info and make sure a channel exists.

        With an empty cache the fetch blocks the caller; with a populated
        cache the cached value is published at once and the refresh runs in
        the background.
        """
        hub_information = await self.get_notification_hub_information()

        if hub_information.is_empty():
            hub_information = await self._initialize_notification_hub(hub_information)
            await self.initialization_completed.publish(hub_information)
        else:
            await self.initialization_completed.publish(hub_information)
            self._run_in_background(self._refresh_notification_hub(), name="notification-hub-refresh")

        self._ensure_default_channel()

    async def get_notification_hub_information(self) -> NotificationHubInformation:
        """Read the cached hub info; unreadable or malformed values are ``EMPTY``."""
        try:
            serialized = await self._secure_storage.get(self.NOTIFICATION_HUB_INFORMATION_KEY)
        except Exception as exc:
            _log.warning("hub_information.read_failed", error=str(exc))
            return NotificationHubInformation.EMPTY
        return deserialize_hub_information(serialized)

    async def _initialize_notification_hub(
        self, fallback: NotificationHubInformation
    ) -> NotificationHubInformation:
        hub_information = fallback
        try:
            hub_information = await self._hub_service.get_notification_hub_information()
            await self._secure_storage.set(self.NOTIFICATION_HUB_INFORMATION_KEY, hub_information.to_json())
        except Exception as exc:
            _log.warning("hub_information.initialize_failed", error=str(exc))
            self._analytics.report(exc)
        return hub_information

    async def _refresh_notification_hub(self) -> None:
        hub_information = await self._hub_service.get_notification_hub_information()
        await self._secure_storage.set(self.NOTIFICATION_HUB_INFORMATION_KEY, hub_information.to_json())
        _log.debug("hub_information.refreshed")

    def _ensure_default_channel(self) -> None:
        if not self._settings.supports_channels:
            return
        if self._notification_manager.get_channels():
            return
        self._notification_manager.add_channel(
            Channel(
                identifier=messages.DEFAULT_CHANNEL_IDENTIFIER,
                description=messages.DEFAULT_CHANNEL_DESCRIPTION,
                importance=ChannelImportance.HIGH,
            )
        )
        _log.info("notification_channel.created", channel=messages.DEFAULT_CHANNEL_IDENTIFIER)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    async def register(self, should_show_settings_ui: bool) -> AccessState:
        """Ask for notification permission and publish ``registration_completed``.

        Both opt-in flags are persisted before the OS is asked, so the user's
        intent is recorded even when permission ends up denied.

        Raises:
            RegistrationInProgressError: another ``register`` call has not finished yet.
        """
        if self._registration_in_progress or self._settings_request.is_pending:
            raise RegistrationInProgressError()

        self._registration_in_progress = True
        try:
            return await self._register(should_show_settings_ui)
        finally:
            self._registration_in_progress = False

    async def _register(self, should_show_settings_ui: bool) -> AccessState:
        self.have_notifications_been_requested = True
        self.should_send_notifications = True

        try:
            initial_result = await self._notification_manager.request_access()
        except Exception as exc:
            self._analytics.report(exc)
            await self.registration_completed.publish(RegistrationOutcome(None, str(exc)))
            raise

        final_result: AccessState | None = None
        error_message = ""
        settings_future: asyncio.Future[AccessState] | None = None

        try:
            if initial_result in (AccessState.DENIED, AccessState.DISABLED):
                if should_show_settings_ui:
                    settings_future = self._settings_request.open()
                    await self._presenter.show_settings_ui()
                    final_result = await settings_future
                else:
                    error_message = messages.NOTIFICATIONS_DISABLED
            elif initial_result is AccessState.NOT_SETUP:
                final_result = await self._notification_manager.request_access()
            elif initial_result is AccessState.NOT_SUPPORTED:
                error_message = messages.NOTIFICATIONS_NOT_SUPPORTED

            if final_result is None:
                final_result = initial_result
            return final_result
        except RegistrationInProgressError:
            raise
        except Exception as exc:
            self._analytics.report(exc)
            error_message = str(exc)
            return initial_result
        finally:
            if settings_future is not None:
                self._settings_request.clear(settings_future)

            successful = final_result is not None and final_result.is_granted
            outcome = RegistrationOutcome(
                final_result if final_result is not None else initial_result,
                "" if successful else error_message,
            )

            _log.info(
                "registration.completed",
                successful=successful,
                initial=initial_result.value,
                final=final_result.value if final_result is not None else None,
            )
            self._analytics.track(
                "Register For Notifications",
                {
                    "initialNotificationRequestResult": initial_result.value,
                    "finalNotificationRequestResult": final_result.value if final_result is not None else "null",
                },
            )
            await self.registration_completed.publish(outcome)

    def unregister(self) -> None:
        self.should_send_notifications = False

    async def set_app_badge_count(self, count: int) -> None:
        if self.have_notifications_been_requested:
            await self._notification_manager.try_set_badge(count)

    # ------------------------------------------------------------------
    # Outbound trending notifications
    # ------------------------------------------------------------------

    async def try_send_trending_notification(
        self,
        trending_repositories: Sequence[Repository],
        schedule_date: datetime | None = None,
    ) -> None:
        if not self.should_send_notifications:
            return

        repositories = list(trending_repositories)
        if self._settings.throttle_mode is ThrottleMode.THROTTLED:
            repositories = self._throttle.filter_due(repositories, self._clock.now())

        await self._send_trending_notification(repositories, schedule_date)

    async def _send_trending_notification(
        self,
        repositories: list[Repository],
        schedule_date: datetime | None,
    ) -> None:
        if len(repositories) == 1:
            repository = repositories[0]
            notification = Notification(
                id=self._settings.notification_id,
                title=messages.TRENDING_REPOSITORIES_NOTIFICATION_TITLE,
                message=messages.create_single_repository_notification_message(
                    repository.name, repository.owner_login
                ),
                schedule_date=schedule_date,
                badge_count=1,
            )
            self._preferences.set(self._MOST_RECENT_REPOSITORY_NAME_KEY, repository.name)
            self._preferences.set(self._MOST_RECENT_REPOSITORY_OWNER_KEY, repository.owner_login)

            await self._notification_manager.send(notification)

            _log.info("notification.sent", kind="single", repository=repository.name)
            self._analytics.track("Single Trending Repository Notification Sent")
        elif len(repositories) > 1:
            notification = Notification(
                id=self._settings.notification_id,
                title=messages.TRENDING_REPOSITORIES_NOTIFICATION_TITLE,
                message=messages.create_multiple_repository_notification_message(len(repositories)),
                schedule_date=schedule_date,
                badge_count=len(repositories),
            )

            await self._notification_manager.send(notification)

            _log.info("notification.sent", kind="multiple", count=len(repositories))
            self._analytics.track(
                "Multiple Trending Repositories Notification Sent", {"Count": str(len(repositories))}
            )

        self._throttle.stamp(repositories, self._clock.now())

    # ------------------------------------------------------------------
    # Inbound notification taps
    # ------------------------------------------------------------------

    async def handle_notification(self, title: str, message: str, badge_count: int) -> None:
        """Turn a tapped notification's badge count into a prompt.

        Raises:
            BadgeCountOutOfRangeError: *badge_count* is below one.
            PromptResultError: an interactive confirm prompt returned no answer.
        """
        if badge_count < 1:
            raise BadgeCountOutOfRangeError(badge_count)

        _log.debug("notification.tapped", title=title, badge_count=badge_count)
        if badge_count == 1:
            await self._handle_single_trending_repository()
        else:
            await self._handle_multiple_trending_repositories(message)

    async def _handle_single_trending_repository(self) -> None:
        repository_name = self.most_recent_trending_repository_name
        should_navigate_to_chart = await self._presenter.display_alert(
            messages.SINGLE_TRENDING_REPOSITORY_TITLE.format(name=repository_name),
            messages.SINGLE_TRENDING_REPOSITORY_MESSAGE,
            messages.SINGLE_TRENDING_REPOSITORY_ACCEPT,
            messages.SINGLE_TRENDING_REPOSITORY_DECLINE,
        )

        if not self._presenter.is_interactive:
            should_navigate_to_chart = True

        if should_navigate_to_chart is None:
            raise PromptResultError("should_navigate_to_chart cannot be None")

        self._analytics.track(
            "Single Trending Repository Prompt Displayed",
            {"shouldNavigateToChart": str(should_navigate_to_chart)},
        )

        if should_navigate_to_chart:
            repository = Repository.minimal(repository_name, self.most_recent_trending_repository_owner)
            await self._presenter.navigate_to_trends_page(repository)

    async def _handle_multiple_trending_repositories(self, message: str) -> None:
        should_sort_by_trending: bool | None = None

        if not self._sorting_service.is_reversed:
            await self._presenter.display_alert(
                message,
                messages.MULTIPLE_TRENDING_REPOSITORIES_SORTED_MESSAGE,
                messages.MULTIPLE_TRENDING_REPOSITORIES_CANCEL,
            )
        else:
            should_sort_by_trending = await self._presenter.display_alert(
                message,
                messages.MULTIPLE_TRENDING_REPOSITORIES_UNSORTED_MESSAGE,
                messages.MULTIPLE_TRENDING_REPOSITORIES_UNSORTED_ACCEPT,
                messages.MULTIPLE_TRENDING_REPOSITORIES_UNSORTED_DECLINE,
            )

        if not self._presenter.is_interactive or should_sort_by_trending is True:
            await self.sorting_option_requested.publish(self._sorting_service.current_option)

        self._analytics.track(
            "Multiple Trending Repository Prompt Displayed",
            {"shouldSortByTrending": str(should_sort_by_trending) if should_sort_by_trending is not None else "null"},
        )

    # ------------------------------------------------------------------
    # Background work
    # ------------------------------------------------------------------

    def _run_in_background(self, coro: Coroutine[Any, Any, Any], *, name: str) -> None:
        task = asyncio.create_task(coro, name=name)
        self._background_tasks.add(task)
        task.add_done_callback(self._on_background_task_done)

    def _on_background_task_done(self, task: asyncio.Task[Any]) -> None:
        self._background_tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _log.warning("background_task.failed", task=task.get_name(), error=str(exc))
            self._analytics.report(exc)

    async def wait_for_background_tasks(self) -> None:
        """Wait for fire-and-forget work started by :meth:`initialize`."""
        if self._background_tasks:
            await asyncio.gather(*self._background_tasks, return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel background work and stop listening for app resumes."""
        self._resume_listener.detach(self._lifecycle)
        self._settings_request.clear()
        for task in list(self._background_tasks):
            task.cancel()
        await self.wait_for_background_tasks()
