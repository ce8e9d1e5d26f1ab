"""Fire-and-forget notification helper for command handlers.

A failed email must never undo or block the state change that triggered
it. The failure is logged and the handler carries on.
"""

from collections.abc import Awaitable
from uuid import UUID

from src.domain.protocols import LoggerProtocol


async def send_notification(
    logger: LoggerProtocol,
    notification: Awaitable[None],
    *,
    kind: str,
    user_id: UUID,
) -> bool:
    """Await a notification send, logging and swallowing any failure.

    Args:
        logger: Structured logger.
        notification: Pending send call (e.g. ``email.send_welcome_email(user)``).
        kind: Notification name for the log entry.
        user_id: Recipient, for the log entry.

    Returns:
        True if the send completed, False if it raised.
    """
    try:
        await notification
    except Exception as e:  # noqa: BLE001
        logger.error(
            "Notification failed",
            error=e,
            notification=kind,
            user_id=str(user_id),
        )
        return False
    return True
