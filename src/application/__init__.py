"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses and handlers (write operations)
- services/: TokenLifecycleService, the token state machine

The application layer orchestrates domain logic through protocols and
never imports infrastructure.
"""
