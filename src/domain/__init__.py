"""Domain layer - Pure business logic.

This layer contains the core business entities, value objects and protocols
(ports) of the token lifecycle. It has NO dependencies on any framework or
infrastructure.

Structure:
- entities/: Domain entities (mutable, have identity)
- enums/: Roles, token states, revocation reasons
- errors/: TokenError and AuthError (values carried in Result)
- value_objects/: Value objects (immutable, no identity)
- protocols/: Repository and service interfaces
"""
