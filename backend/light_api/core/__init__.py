"""Core Layer — errors, repository contracts and input rules. No IO, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
    - Functions here are pure and deterministic
"""
