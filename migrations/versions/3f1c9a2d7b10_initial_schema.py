"""Initial schema: user, player, model_parameters

Revision ID: 3f1c9a2d7b10
Revises:
Create Date: 2026-10-18 22:10:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c9a2d7b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('password_hash', sa.String(length=200), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('email', sa.String(length=100), nullable=True),
        sa.Column('role', sa.String(length=20), nullable=True),
        sa.Column('is_default_password', sa.Boolean(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
        sa.UniqueConstraint('username')
    )
    op.create_table('player',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('external_id', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('team', sa.String(length=10), nullable=True),
        sa.Column('position', sa.String(length=10), nullable=True),
        sa.Column('mean', sa.Float(), nullable=False),
        sa.Column('stddev', sa.Float(), nullable=False),
        sa.Column('weighted_mean', sa.Float(), nullable=False),
        sa.Column('trend', sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('external_id')
    )
    op.create_table('model_parameters',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('target', sa.String(length=50), nullable=False),
        sa.Column('intercept', sa.Float(), nullable=False),
        sa.Column('coefficients', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', 'version', name='uq_model_parameters_name_version')
    )


def downgrade():
    op.drop_table('model_parameters')
    op.drop_table('player')
    op.drop_table('user')
