"""create favorites table

Revision ID: 20261018_1010_create_favorites
Revises: 20261018_1000_create_users
Create Date: 2026-10-18 10:10:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261018_1010_create_favorites'
down_revision = '20261018_1000_create_users'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'favorites',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(255), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('place_id', sa.String(64), nullable=False),
        sa.Column('place_name', sa.String(255), nullable=False),
        sa.Column('place_type', sa.String(32), nullable=False),
        sa.Column('place_lat', sa.Text(), nullable=False),
        sa.Column('place_lon', sa.Text(), nullable=False),
        sa.Column('place_address', sa.String(512), nullable=True),
        sa.Column('visited', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('visited_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('user_id', 'place_id', name='uq_favorites_user_place'),
    )

def downgrade() -> None:
    op.drop_table('favorites')
