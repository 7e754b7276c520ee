"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors.

This layer contains:
- Use cases: Orchestrate domain logic and repositories
- Protocols: Interfaces for repositories and external services
"""
