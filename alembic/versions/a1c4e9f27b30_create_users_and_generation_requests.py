"""Create users and generation_requests tables

Revision ID: a1c4e9f27b30
Revises:
Create Date: 2025-10-02 18:12:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c4e9f27b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Accounts, and the generation requests they own."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('plan', sa.String(), nullable=False, server_default='free'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'generation_requests',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('owner_id', sa.String(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('business_description', sa.Text(), nullable=False),
        sa.Column('template_category', sa.String(), nullable=False),
        sa.Column('generated_html', sa.Text(), nullable=True),
        sa.Column('generated_css', sa.Text(), nullable=True),
        sa.Column('generated_js', sa.Text(), nullable=True),
        sa.Column('custom_colors', sa.JSON(), nullable=True),
        sa.Column('custom_texts', sa.JSON(), nullable=True),
        sa.Column('custom_images', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_generation_requests_id'), 'generation_requests', ['id'], unique=False)
    op.create_index(op.f('ix_generation_requests_owner_id'), 'generation_requests', ['owner_id'], unique=False)


def downgrade() -> None:
    """Drop both tables."""
    op.drop_index(op.f('ix_generation_requests_owner_id'), table_name='generation_requests')
    op.drop_index(op.f('ix_generation_requests_id'), table_name='generation_requests')
    op.drop_table('generation_requests')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
