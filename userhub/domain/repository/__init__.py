"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from userhub.domain.repository.account import AccountRepository

__all__ = ["AccountRepository"]
