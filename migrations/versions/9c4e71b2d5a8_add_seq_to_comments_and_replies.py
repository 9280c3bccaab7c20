"""add_seq_to_comments_and_replies

Rows inserted in one transaction share the same NOW() date. An identity
column records insertion order so listings can break those ties.

Revision ID: 9c4e71b2d5a8
Revises: 3f1c2a9d7b40
Create Date: 2026-10-20 09:03:17.552091

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9c4e71b2d5a8"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    for table in ("comments", "replies"):
        op.add_column(
            table,
            sa.Column("seq", sa.BigInteger(), sa.Identity(), nullable=False),
        )


def downgrade() -> None:
    """Downgrade schema."""
    for table in ("replies", "comments"):
        op.drop_column(table, "seq")
