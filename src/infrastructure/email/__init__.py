"""Email service implementations.

This package contains email service adapters:
- StubEmailService: captures messages in memory and logs them (development/testing)
"""

from src.infrastructure.email.stub_email_service import SentEmail, StubEmailService

__all__ = [
    "SentEmail",
    "StubEmailService",
]
