"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from userhub.domain.model import Account
from userhub.domain.value import AccountId


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model.

    Args:
        row: Database row as dict

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
        avatar_url=row.get("avatar_url"),
        google_external_id=row.get("google_external_id"),
        facebook_external_id=row.get("facebook_external_id"),
        registration_date=row["registration_date"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict.

    Args:
        account: Account domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return account.model_dump()
