"""create accounts table

Accounts signing in with Google or Facebook. Email and each provider's
external id are unique so concurrent first sign-ins cannot duplicate an
account.

Revision ID: 3f6c2a9d1e70
Revises:
Create Date: 2026-10-18 10:12:03.481927

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f6c2a9d1e70"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.create_table(
        "accounts",
        sa.Column(
            "id",
            postgresql.UUID(),
            primary_key=True,
            server_default=sa.text("uuid_generate_v4()"),
        ),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("google_external_id", sa.String(length=255), nullable=True),
        sa.Column("facebook_external_id", sa.String(length=255), nullable=True),
        sa.Column(
            "registration_date",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.UniqueConstraint("email", name="uq_accounts_email"),
        sa.UniqueConstraint(
            "google_external_id", name="uq_accounts_google_external_id"
        ),
        sa.UniqueConstraint(
            "facebook_external_id", name="uq_accounts_facebook_external_id"
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("accounts")
