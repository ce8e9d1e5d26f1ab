"""Stub email service (development/testing).

Builds the same links a real sender would put in the message body and keeps
every message in an in-memory outbox instead of delivering it. Only a short
preview of each token reaches the log.
"""

from dataclasses import dataclass, field

from src.core.constants import TOKEN_PREVIEW_LENGTH
from src.domain.entities import User
from src.domain.protocols import LoggerProtocol


@dataclass(frozen=True, slots=True)
class SentEmail:
    """A message captured by the stub.

    Attributes:
        to_email: Recipient address.
        subject: Subject line.
        link: Action link (verification or reset), if any.
    """

    to_email: str
    subject: str
    link: str | None = None


@dataclass
class StubEmailService:
    """EmailServiceProtocol implementation that never sends.

    Attributes:
        logger: Structured logger.
        frontend_url: Base URL of the client application (no trailing slash).
        app_name: Product name used in subject lines.
        outbox: Captured messages, oldest first.

    Example:
        >>> service = StubEmailService(logger=logger, frontend_url="http://localhost:3000")
        >>> await service.send_welcome_email(user)
        >>> service.outbox[-1].subject
        'Welcome to Warden!'
    """

    logger: LoggerProtocol
    frontend_url: str
    app_name: str = "Warden"
    outbox: list[SentEmail] = field(default_factory=list)

    async def send_verification_email(self, user: User, token: str) -> None:
        link = f"{self.frontend_url}/verify-email?token={token}"
        self._record(
            user,
            f"Verify Your Email Address - {self.app_name}",
            link=link,
            token=token,
        )

    async def send_password_reset_email(self, user: User, token: str) -> None:
        link = f"{self.frontend_url}/reset-password?token={token}"
        self._record(
            user,
            f"Password Reset Request - {self.app_name}",
            link=link,
            token=token,
        )

    async def send_password_changed_notification(self, user: User) -> None:
        self._record(user, f"Password Changed Successfully - {self.app_name}")

    async def send_welcome_email(self, user: User) -> None:
        self._record(user, f"Welcome to {self.app_name}!")

    def _record(
        self,
        user: User,
        subject: str,
        *,
        link: str | None = None,
        token: str | None = None,
    ) -> None:
        self.outbox.append(SentEmail(to_email=user.email, subject=subject, link=link))
        self.logger.info(
            "[STUB] Email captured",
            to_email=user.email,
            subject=subject,
            token_preview=token[:TOKEN_PREVIEW_LENGTH] if token else None,
        )
