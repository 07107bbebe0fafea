"""SQLAlchemy table definitions.

These table definitions are used for classical Core mapping.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, MetaData, String, Table, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
# Email and each provider external id are unique: two concurrent first
# sign-ins for the same person cannot both create an account.
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("first_name", String(255), nullable=False),
    Column("last_name", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column("google_external_id", String(255), nullable=True),
    Column("facebook_external_id", String(255), nullable=True),
    Column(
        "registration_date",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name="uq_accounts_email"),
    UniqueConstraint("google_external_id", name="uq_accounts_google_external_id"),
    UniqueConstraint("facebook_external_id", name="uq_accounts_facebook_external_id"),
)

# Constraint name -> account field it protects
UNIQUE_CONSTRAINT_FIELDS: dict[str, str] = {
    "uq_accounts_email": "email",
    "uq_accounts_google_external_id": "google_external_id",
    "uq_accounts_facebook_external_id": "facebook_external_id",
}
