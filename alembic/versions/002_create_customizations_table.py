"""Create customizations table.

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create customizations table."""
    # Catalog references are plain integers: deleting catalog rows
    # must leave logged customizations untouched
    op.create_table(
        'customizations',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('garment_id', sa.Integer(), nullable=False),
        sa.Column('design_id', sa.Integer(), nullable=False),
        sa.Column('selected_color_id', sa.Integer(), nullable=False),
        sa.Column('selected_size_id', sa.Integer(), nullable=False),
        sa.Column('total_price', sa.Numeric(10, 2), nullable=False),
        sa.Column('customization_data', postgresql.JSONB, nullable=False, server_default='{}'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )
    op.create_index('ix_customizations_garment_id', 'customizations', ['garment_id'])
    op.create_index('ix_customizations_created_at', 'customizations', ['created_at'])


def downgrade() -> None:
    """Drop customizations table."""
    op.drop_index('ix_customizations_created_at', table_name='customizations')
    op.drop_index('ix_customizations_garment_id', table_name='customizations')
    op.drop_table('customizations')
