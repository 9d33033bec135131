"""Infrastructure Layer — database sessions, registry data files and logging.

Invariants:
    - Infrastructure never imports from api/ or services/
"""
