"""EmailVerificationTokenRepository - SQLAlchemy implementation."""

from src.domain.protocols.email_verification_token_repository import (
    EmailVerificationTokenData,
)
from src.infrastructure.persistence.models.email_verification_token import (
    EmailVerificationToken,
)
from src.infrastructure.persistence.repositories.single_use_token_repository import (
    SingleUseTokenRepositoryBase,
)


class EmailVerificationTokenRepository(
    SingleUseTokenRepositoryBase[EmailVerificationToken, EmailVerificationTokenData]
):
    """SQLAlchemy implementation for email verification token persistence.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = EmailVerificationTokenRepository(session)
        ...     await repo.delete_for_user(user_id)
        ...     await repo.create(user_id, token, expires_at)
    """

    model = EmailVerificationToken
    data_class = EmailVerificationTokenData
