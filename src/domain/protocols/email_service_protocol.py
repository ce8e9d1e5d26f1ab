"""Email service protocol for authentication notifications.

Notifications are fire-and-forget from the point of view of the token
lifecycle: callers log and swallow any exception an implementation raises,
so a mail outage never blocks registration or a password reset.
"""

from typing import Protocol

from src.domain.entities import User


class EmailServiceProtocol(Protocol):
    """Outbound notification interface.

    Implementations:
        - StubEmailService: logs instead of sending (development/testing)
    """

    async def send_verification_email(self, user: User, token: str) -> None:
        """Send the email verification link containing ``token``."""
        ...

    async def send_password_reset_email(self, user: User, token: str) -> None:
        """Send the password reset link containing ``token``."""
        ...

    async def send_password_changed_notification(self, user: User) -> None:
        """Tell the user their password was changed."""
        ...

    async def send_welcome_email(self, user: User) -> None:
        """Welcome a user whose email address was just verified."""
        ...
