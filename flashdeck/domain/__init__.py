"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Decks and cards, objects with identity and lifecycle
- Value Objects: Immutable, self-validating field groups and identifiers
- Domain Services: The deck quota policy and the study session state machine
"""
