"""Create garments, colors, sizes, designs and garment_designs tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create catalog tables."""
    op.create_table(
        'garments',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('sku', sa.String(100), nullable=False),
        sa.Column('base_price', sa.Numeric(10, 2), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.UniqueConstraint('sku', name='uq_garments_sku'),
        sa.CheckConstraint('base_price >= 0', name='ck_garments_base_price_non_negative'),
    )

    # Colors and sizes belong to one garment
    op.create_table(
        'colors',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('garment_id', sa.Integer(), sa.ForeignKey('garments.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('hex_code', sa.String(7), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )
    op.create_index('ix_colors_garment_id', 'colors', ['garment_id'])

    op.create_table(
        'sizes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('garment_id', sa.Integer(), sa.ForeignKey('garments.id', ondelete='CASCADE'), nullable=False),
        sa.Column('size', sa.String(50), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )
    op.create_index('ix_sizes_garment_id', 'sizes', ['garment_id'])

    op.create_table(
        'designs',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('thumbnail_url', sa.Text(), nullable=True),
        sa.Column('price_modifier', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )
    op.create_index('ix_designs_is_active', 'designs', ['is_active'])

    # A design attaches to a garment at most once
    op.create_table(
        'garment_designs',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('garment_id', sa.Integer(), sa.ForeignKey('garments.id', ondelete='CASCADE'), nullable=False),
        sa.Column('design_id', sa.Integer(), sa.ForeignKey('designs.id', ondelete='CASCADE'), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.UniqueConstraint('garment_id', 'design_id', name='uq_garment_designs_pair'),
    )
    op.create_index('ix_garment_designs_garment_id', 'garment_designs', ['garment_id'])
    op.create_index('ix_garment_designs_design_id', 'garment_designs', ['design_id'])


def downgrade() -> None:
    """Drop catalog tables."""
    op.drop_index('ix_garment_designs_design_id', table_name='garment_designs')
    op.drop_index('ix_garment_designs_garment_id', table_name='garment_designs')
    op.drop_table('garment_designs')
    op.drop_index('ix_designs_is_active', table_name='designs')
    op.drop_table('designs')
    op.drop_index('ix_sizes_garment_id', table_name='sizes')
    op.drop_table('sizes')
    op.drop_index('ix_colors_garment_id', table_name='colors')
    op.drop_table('colors')
    op.drop_table('garments')
