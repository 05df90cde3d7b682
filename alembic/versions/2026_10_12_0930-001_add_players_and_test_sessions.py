"""Add players and test_sessions tables

Revision ID: 001
Revises:
Create Date: 2026-10-12 09:30:00.000000

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
    """Create players and test_sessions tables."""
    op.create_table('players', sa.Column('id', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column('first_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('last_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('phone', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('parent_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('club', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('fit_ranking', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column('coach_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=True),
        sa.Column('initial_assessment', sa.JSON(), nullable=True),
        sa.Column('auto_created', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_players_first_name'), 'players', ['first_name'], unique=False)
    op.create_index(op.f('ix_players_last_name'), 'players', ['last_name'], unique=False)

    op.create_table('test_sessions', sa.Column('id', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column('player_id', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column('player_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('category', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('coach', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('note', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('series', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['player_id'], ['players.id'], ),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_test_sessions_player_id'), 'test_sessions', ['player_id'], unique=False)
    op.create_index(op.f('ix_test_sessions_date'), 'test_sessions', ['date'], unique=False)
    op.create_index(op.f('ix_test_sessions_category'), 'test_sessions', ['category'], unique=False)


def downgrade() -> None:
    """Drop test_sessions and players tables."""
    op.drop_index(op.f('ix_test_sessions_category'), table_name='test_sessions')
    op.drop_index(op.f('ix_test_sessions_date'), table_name='test_sessions')
    op.drop_index(op.f('ix_test_sessions_player_id'), table_name='test_sessions')
    op.drop_table('test_sessions')
    op.drop_index(op.f('ix_players_last_name'), table_name='players')
    op.drop_index(op.f('ix_players_first_name'), table_name='players')
    op.drop_table('players')
