"""Campus API Package — course registry and housing lookup services.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
