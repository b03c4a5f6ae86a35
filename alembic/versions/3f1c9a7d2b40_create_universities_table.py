"""create_universities_table

Revision ID: 3f1c9a7d2b40
Revises:
Create Date: 2026-10-18 12:04:31.518204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create universities table.

    (country, state_province, name) is unique so concurrent creates of the
    same university cannot both succeed.
    """
    op.create_table(
        'universities',
        sa.Column('id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('country', sa.String(length=255), nullable=False),
        sa.Column('state_province', sa.String(length=255), nullable=True),
        sa.Column('alpha_two_code', sa.String(length=2), nullable=False),
        sa.Column('domains', sa.JSON(), nullable=False),
        sa.Column('web_pages', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_universities'),
        sa.UniqueConstraint('country', 'state_province', 'name', name='uq_universities_country_state_name'),
    )
    op.create_index('ix_universities_country', 'universities', ['country'], unique=False)


def downgrade() -> None:
    """Drop universities table."""
    op.drop_index('ix_universities_country', table_name='universities')
    op.drop_table('universities')
