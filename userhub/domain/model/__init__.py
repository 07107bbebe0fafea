"""Domain models."""

from userhub.domain.model.account import EXTERNAL_ID_FIELDS, Account
from userhub.domain.model.common import DomainModel

__all__ = ["Account", "DomainModel", "EXTERNAL_ID_FIELDS"]
