"""Command definitions for authentication and token maintenance."""

from src.application.commands.auth_commands import (
    ChangePassword,
    CleanupExpiredTokens,
    ConfirmPasswordReset,
    LoginUser,
    LogoutAllSessions,
    LogoutUser,
    RefreshAccessToken,
    RegisterUser,
    RequestPasswordReset,
    ResendVerification,
    VerifyEmail,
)

__all__ = [
    "ChangePassword",
    "CleanupExpiredTokens",
    "ConfirmPasswordReset",
    "LoginUser",
    "LogoutAllSessions",
    "LogoutUser",
    "RefreshAccessToken",
    "RegisterUser",
    "RequestPasswordReset",
    "ResendVerification",
    "VerifyEmail",
]
