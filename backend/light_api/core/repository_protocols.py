"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Handlers depend on UserRepository, never on a concrete store
    - find_by_id returns None for absence; it raises only on datastore failure
    - create raises DuplicateKeyError on id collision, StorageError otherwise

Design Decisions:
    - Protocol over ABC: structural subtyping, the in-memory test double needs
      no inheritance
    - Async methods: implementations do IO
"""

from typing import Protocol

from light_api.schemas.user import User


class UserRepository(Protocol):
    """Contract for user persistence — implemented by infrastructure."""
    async def init_table(self) -> None: ...
    async def create(self, user: User) -> None: ...
    async def find_by_id(self, user_id: str) -> User | None: ...
