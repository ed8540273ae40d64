"""Infrastructure Layer — database access, repository implementation, logging.

Invariants:
    - Driver-specific exceptions are translated here and never escape upward
"""
