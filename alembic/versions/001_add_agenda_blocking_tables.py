"""Add agenda blocking tables

Revision ID: 001_agenda_blocking
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_agenda_blocking'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('CURRENT_TIMESTAMP'),
            nullable=False,
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('CURRENT_TIMESTAMP'),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    existing = sa.inspect(op.get_bind()).get_table_names()

    if 'agenda_settings' not in existing:
        op.create_table(
            'agenda_settings',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('national_holidays', sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column('state_holidays', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('city_holidays', sa.Boolean(), nullable=False, server_default=sa.false()),
            *_timestamps(),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_agenda_settings_id'), 'agenda_settings', ['id'], unique=False)

    if 'custom_holidays' not in existing:
        op.create_table(
            'custom_holidays',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('name', sa.String(255), nullable=False),
            sa.Column('enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
            *_timestamps(),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('date', name='uq_custom_holiday_date')
        )
        op.create_index(op.f('ix_custom_holidays_id'), 'custom_holidays', ['id'], unique=False)
        op.create_index(op.f('ix_custom_holidays_date'), 'custom_holidays', ['date'], unique=False)

    if 'holiday_bridges' not in existing:
        op.create_table(
            'holiday_bridges',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(255), nullable=False),
            sa.Column('start_date', sa.Date(), nullable=False),
            sa.Column('end_date', sa.Date(), nullable=False),
            sa.Column('enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
            *_timestamps(),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_holiday_bridges_id'), 'holiday_bridges', ['id'], unique=False)
        op.create_index(op.f('ix_holiday_bridges_start_date'), 'holiday_bridges', ['start_date'], unique=False)
        op.create_index(op.f('ix_holiday_bridges_end_date'), 'holiday_bridges', ['end_date'], unique=False)

    if 'date_blocks' not in existing:
        op.create_table(
            'date_blocks',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(255), nullable=False),
            sa.Column('start_date', sa.Date(), nullable=False),
            sa.Column('end_date', sa.Date(), nullable=False),
            sa.Column('block_type', sa.String(20), nullable=False, server_default='VACATION'),
            sa.Column('all_day', sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column('start_time', sa.Time(), nullable=True),
            sa.Column('end_time', sa.Time(), nullable=True),
            sa.Column('enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
            *_timestamps(),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_date_blocks_id'), 'date_blocks', ['id'], unique=False)
        op.create_index(op.f('ix_date_blocks_start_date'), 'date_blocks', ['start_date'], unique=False)
        op.create_index(op.f('ix_date_blocks_end_date'), 'date_blocks', ['end_date'], unique=False)

    if 'date_unblocks' not in existing:
        op.create_table(
            'date_unblocks',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('reason', sa.String(255), nullable=False),
            sa.Column('enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
            *_timestamps(),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_date_unblocks_id'), 'date_unblocks', ['id'], unique=False)
        op.create_index(op.f('ix_date_unblocks_date'), 'date_unblocks', ['date'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_date_unblocks_date'), table_name='date_unblocks')
    op.drop_index(op.f('ix_date_unblocks_id'), table_name='date_unblocks')
    op.drop_table('date_unblocks')
    op.drop_index(op.f('ix_date_blocks_end_date'), table_name='date_blocks')
    op.drop_index(op.f('ix_date_blocks_start_date'), table_name='date_blocks')
    op.drop_index(op.f('ix_date_blocks_id'), table_name='date_blocks')
    op.drop_table('date_blocks')
    op.drop_index(op.f('ix_holiday_bridges_end_date'), table_name='holiday_bridges')
    op.drop_index(op.f('ix_holiday_bridges_start_date'), table_name='holiday_bridges')
    op.drop_index(op.f('ix_holiday_bridges_id'), table_name='holiday_bridges')
    op.drop_table('holiday_bridges')
    op.drop_index(op.f('ix_custom_holidays_date'), table_name='custom_holidays')
    op.drop_index(op.f('ix_custom_holidays_id'), table_name='custom_holidays')
    op.drop_table('custom_holidays')
    op.drop_index(op.f('ix_agenda_settings_id'), table_name='agenda_settings')
    op.drop_table('agenda_settings')
