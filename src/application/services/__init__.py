"""Application services."""

from src.application.services.token_lifecycle_service import (
    CleanupReport,
    TokenLifecycleService,
    TokenPair,
    token_preview,
)

__all__ = [
    "CleanupReport",
    "TokenLifecycleService",
    "TokenPair",
    "token_preview",
]
