"""Repositories — shell implementations of the core repository protocols.

Invariants:
    - One class per aggregate, each wrapping a request-scoped AsyncSession
    - Repositories never raise "not found"; they return None / empty lists
"""
