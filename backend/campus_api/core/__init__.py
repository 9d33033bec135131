"""Core Layer — pure domain logic, no HTTP, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, repositories/ or db/
    - Entity mutators are the only way registry state changes
"""
