"""Services — imperative shell for the housing API.

Invariants:
    - Services depend on core Protocols, never on ORM models or AsyncSession
"""
