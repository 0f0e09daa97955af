"""Initial schema: users, practices, overrides, completions, liturgical days, settings

Revision ID: 001
Revises:
Create Date: 2026-03-01 09:00:00.000000

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
    """Create all tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('full_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('practices', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('key', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('season', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('lane', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=False, server_default=''),
        sa.Column('recurrence', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False),
        sa.Column('scheduled_weekday', sa.Integer(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_practices_key'), 'practices', ['key'], unique=True)
    op.create_index(op.f('ix_practices_season'), 'practices', ['season'], unique=False)
    op.create_index(op.f('ix_practices_is_active'), 'practices', ['is_active'], unique=False)

    op.create_table('user_practice_overrides', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('practice_id', sa.Integer(), nullable=False),
        sa.Column('scheduled_weekday', sa.Integer(), nullable=True),
        sa.Column('is_enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('custom_title', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=True),
        sa.Column('custom_description', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['practice_id'], ['practices.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'practice_id', name='uq_override_user_practice'))
    op.create_index(op.f('ix_user_practice_overrides_user_id'), 'user_practice_overrides', ['user_id'])
    op.create_index(op.f('ix_user_practice_overrides_practice_id'), 'user_practice_overrides', ['practice_id'])

    op.create_table('practice_completions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('practice_id', sa.Integer(), nullable=False),
        sa.Column('date_local', sa.Date(), nullable=False),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['practice_id'], ['practices.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'practice_id', 'date_local', name='uq_completion_user_practice_date'))
    op.create_index(op.f('ix_practice_completions_user_id'), 'practice_completions', ['user_id'])
    op.create_index(op.f('ix_practice_completions_practice_id'), 'practice_completions', ['practice_id'])
    op.create_index(op.f('ix_practice_completions_date_local'), 'practice_completions', ['date_local'])

    op.create_table('liturgical_days', sa.Column('date', sa.Date(), nullable=False),
        sa.Column('season', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('celebration_key', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('celebration_name', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=True),
        sa.Column('celebration_type', sqlmodel.sql.sqltypes.AutoString(length=30), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('date'))

    op.create_table('user_settings', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('wake_time', sa.Time(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_user_settings_user_id'), 'user_settings', ['user_id'], unique=True)


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index(op.f('ix_user_settings_user_id'), table_name='user_settings')
    op.drop_table('user_settings')
    op.drop_table('liturgical_days')
    op.drop_index(op.f('ix_practice_completions_date_local'), table_name='practice_completions')
    op.drop_index(op.f('ix_practice_completions_practice_id'), table_name='practice_completions')
    op.drop_index(op.f('ix_practice_completions_user_id'), table_name='practice_completions')
    op.drop_table('practice_completions')
    op.drop_index(op.f('ix_user_practice_overrides_practice_id'), table_name='user_practice_overrides')
    op.drop_index(op.f('ix_user_practice_overrides_user_id'), table_name='user_practice_overrides')
    op.drop_table('user_practice_overrides')
    op.drop_index(op.f('ix_practices_is_active'), table_name='practices')
    op.drop_index(op.f('ix_practices_season'), table_name='practices')
    op.drop_index(op.f('ix_practices_key'), table_name='practices')
    op.drop_table('practices')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
