"""
gittrends_notifications – trending-repository notification subsystem.

Import path convention::

    from gittrends_notifications.application.notifications import NotificationService
    from gittrends_notifications.kernel.errors import DomainError
    from gittrends_notifications.adapters.storage import FernetSecureStorage
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
