"""Create sleep interval, baby profile and app settings tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create sleep_intervals, baby_profile and app_settings."""
    op.create_table('sleep_intervals',
        sa.Column('id', sqlmodel.sql.sqltypes.AutoString(length=36), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_sleep_intervals_start_time'), 'sleep_intervals', ['start_time'], unique=False)

    op.create_table('baby_profile', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('birthday', sa.Date(), nullable=False),
        sa.Column('gender', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('breastfeeding', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False),
        sa.Column('height', sqlmodel.sql.sqltypes.AutoString(length=5), nullable=False),
        sa.Column('weight', sqlmodel.sql.sqltypes.AutoString(length=6), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'))

    op.create_table('app_settings', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('notifications_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('reminder_minutes_before', sa.Integer(), nullable=False, server_default='60'),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'))


def downgrade() -> None:
    """Drop the sleep tracking tables."""
    op.drop_table('app_settings')
    op.drop_table('baby_profile')
    op.drop_index(op.f('ix_sleep_intervals_start_time'), table_name='sleep_intervals')
    op.drop_table('sleep_intervals')
