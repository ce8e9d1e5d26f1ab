"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Database repositories for users and the three token kinds
- Token codec, opaque token generator and password hashing
- Email sending and structured logging
- Background jobs

Structure:
- persistence/: SQLAlchemy async models, repositories and Database
- security/: JWT (HS256), opaque tokens, bcrypt
- email/: Email service adapters
- logging/: structlog adapters
- jobs/: Periodic expired-token cleanup

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
